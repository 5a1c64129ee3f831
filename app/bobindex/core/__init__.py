"""Core settings and path management for bobindex."""

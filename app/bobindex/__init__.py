"""bobindex - searchable index of release directories on a glftpd site."""

__version__ = "0.1.0"

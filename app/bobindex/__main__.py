"""Allow running bobindex with ``python -m bobindex``."""

from bobindex.cli.main import app

app()

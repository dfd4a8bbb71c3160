"""hostsnap - one-shot host system metrics snapshot."""

__version__ = "0.1.0"

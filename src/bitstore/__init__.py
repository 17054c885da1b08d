"""bitstore: command-line client for the Bitstore storage service."""

__version__ = "0.3.0"

"""Parameter framework selection criteria."""

__version__ = "0.1.0"

"""Polling source that turns spreadsheet rows from a fetch script into JSON records."""

__version__ = "1.0.0"
__all__ = ["common", "source"]
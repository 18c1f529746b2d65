"""Shared definitions for pipeline plugins: protocol version, return codes, errors."""

from __future__ import annotations

from enum import IntEnum

PLUGIN_PROTOCOL_VERSION = 4


class ReturnType(IntEnum):
    """Outcome codes of the common plugin interface."""

    SUCCESS = 0
    RETRY = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


class SourceError(Exception):
    """Raised when a source cannot produce output; carries a return code."""

    def __init__(self, message: str = "", code: ReturnType = ReturnType.ERROR) -> None:
        super().__init__(message)
        self.code = ReturnType(code)

    def __str__(self) -> str:
        message = super().__str__()
        return f"[{self.code.name.lower()}] {message}" if message else self.code.name.lower()
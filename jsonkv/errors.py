"""Public error types for jsonkv."""

from __future__ import annotations


class JSONKVError(Exception):
    """Base class for all jsonkv errors."""


class InvalidPathError(JSONKVError, ValueError):
    """Raised when a path string fails local syntax validation."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid path {path!r}: {reason}")
        self.path = path
        self.reason = reason


class CommandRejectedError(JSONKVError):
    """Raised when the store understood a command and refused it.

    ``message`` is the store's reply text, unchanged.
    """

    def __init__(self, command: str, message: str) -> None:
        super().__init__(message)
        self.command = command
        self.message = message


class UnsupportedTypeError(JSONKVError):
    """Raised when the store reports a type name the client does not know."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unsupported JSON type reported by store: {type_name!r}")
        self.type_name = type_name


class TransportError(JSONKVError):
    """Raised for connection, timeout and reply framing failures."""

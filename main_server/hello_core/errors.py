"""Error types raised by the hello message layers."""

from __future__ import annotations


class HelloError(Exception):
    """Base exception for hello message errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(HelloError):
    """Raised when message content is empty after trimming."""


class StorageError(HelloError):
    """Raised for persistence failures."""


class SchemaMissingError(StorageError):
    """Raised when the messages table does not exist yet."""

    def __init__(self, message: str = "Database table not found. Please run migrations."):
        super().__init__(message)

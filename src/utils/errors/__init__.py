"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FileDownloadError,
    NodeOperationError,
    UnsupportedOperationError,
    ValidationError,
    ZapSignError,
)

__all__ = [
    "FileDownloadError",
    "NodeOperationError",
    "UnsupportedOperationError",
    "ValidationError",
    "ZapSignError",
]

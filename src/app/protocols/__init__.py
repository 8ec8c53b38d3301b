"""Protocolos e contratos do core da aplicação."""

from .models import BinaryData, OperationRequest
from .zapsign_client import FileDownloaderProtocol, ZapSignClientProtocol

__all__ = [
    "BinaryData",
    "FileDownloaderProtocol",
    "OperationRequest",
    "ZapSignClientProtocol",
]

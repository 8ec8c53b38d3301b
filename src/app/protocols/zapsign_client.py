"""Protocolos de IO usados pelos handlers ZapSign.

Evita dependência direta dos handlers na implementação httpx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from api.connectors.zapsign.models import ApiPayload, RequestSpec
    from app.infra.zapsign.file_downloader import FileDownloadResult


class ZapSignClientProtocol(Protocol):
    """Contrato mínimo para executar uma chamada à API ZapSign."""

    async def request_json(self, spec: RequestSpec) -> ApiPayload: ...


class FileDownloaderProtocol(Protocol):
    """Contrato mínimo para baixar um arquivo de URL pública."""

    async def download(self, url: str) -> FileDownloadResult: ...

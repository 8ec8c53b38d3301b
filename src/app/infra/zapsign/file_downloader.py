"""Downloader de arquivos por URL pública (para upload posterior)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from api.payload_builders.zapsign.file_input import (
    file_name_from_url,
    mime_type_from_url,
)

if TYPE_CHECKING:
    from config.settings import ZapSignSettings

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "document.pdf"


@dataclass(frozen=True, slots=True)
class FileDownloadResult:
    """Resultado do download de arquivo."""

    content: bytes | None
    mime_type: str | None
    file_name: str = DEFAULT_FILE_NAME
    error: str | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.content is not None


class HttpFileDownloader:
    """Helper para baixar arquivos de URLs públicas, sem retry."""

    def __init__(
        self,
        settings: ZapSignSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = settings.download_timeout_seconds
        self._max_size_bytes = settings.download_max_size_bytes
        self._user_agent = settings.user_agent
        self._transport = transport

    async def download(self, url: str) -> FileDownloadResult:
        """Baixa bytes do arquivo apontado por `url`."""
        file_name = file_name_from_url(url) or DEFAULT_FILE_NAME
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url, headers={"User-Agent": self._user_agent})
        except httpx.TimeoutException:
            logger.warning("file_download_timeout")
            return FileDownloadResult(content=None, mime_type=None, error="timeout")
        except httpx.HTTPError as exc:
            logger.warning(
                "file_download_failed",
                extra={"error_type": type(exc).__name__},
            )
            return FileDownloadResult(content=None, mime_type=None, error="download_failed")

        if response.status_code >= 400:
            logger.warning(
                "file_download_http_error",
                extra={"status_code": response.status_code},
            )
            return FileDownloadResult(
                content=None,
                mime_type=None,
                error="http_error",
                status_code=response.status_code,
            )

        if len(response.content) > self._max_size_bytes:
            return FileDownloadResult(content=None, mime_type=None, error="file_too_large")

        header_mime = response.headers.get("content-type", "").split(";")[0].strip()
        mime_type = mime_type_from_url(url)
        if mime_type == "application/octet-stream" and header_mime:
            mime_type = header_mime

        return FileDownloadResult(
            content=response.content,
            mime_type=mime_type,
            file_name=file_name,
        )

"""Factories de dependências — criação de implementações concretas.

Centraliza a criação do cliente ZapSign, do downloader de arquivos e do
use case de execução a partir das settings explícitas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.zapsign import ZapSignHttpClient
from app.infra.zapsign import HttpFileDownloader
from app.use_cases.zapsign import ExecuteOperationsUseCase
from config.settings import get_zapsign_settings

if TYPE_CHECKING:
    from app.protocols import FileDownloaderProtocol, ZapSignClientProtocol
    from config.settings import ZapSignSettings

logger = logging.getLogger(__name__)


def create_zapsign_client(settings: ZapSignSettings | None = None) -> ZapSignClientProtocol:
    """Cria cliente da API ZapSign.

    Args:
        settings: ZapSignSettings opcional. Se None, carrega do ambiente.
    """
    resolved = settings or get_zapsign_settings()
    logger.info(
        "zapsign_client_created",
        extra={"environment": resolved.environment, "base_url": resolved.base_url},
    )
    return ZapSignHttpClient(resolved)


def create_file_downloader(
    settings: ZapSignSettings | None = None,
) -> FileDownloaderProtocol:
    """Cria downloader de arquivos por URL pública."""
    return HttpFileDownloader(settings or get_zapsign_settings())


def create_execute_use_case(
    settings: ZapSignSettings | None = None,
) -> ExecuteOperationsUseCase:
    """Monta o use case de execução com cliente e downloader concretos."""
    resolved = settings or get_zapsign_settings()
    return ExecuteOperationsUseCase(
        client=create_zapsign_client(resolved),
        downloader=create_file_downloader(resolved),
    )

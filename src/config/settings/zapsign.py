"""Settings específicas da API ZapSign.

Ambiente (produção ou sandbox), token de API e URLs base.
As URLs podem ser sobrescritas por variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

ZAPSIGN_API_BASE_URL: str = "https://api.zapsign.com.br"
ZAPSIGN_SANDBOX_API_BASE_URL: str = "https://sandbox.api.zapsign.com.br"
DEFAULT_USER_AGENT: str = "zapsign-connector/1.0"

ZapSignEnvironment = Literal["production", "sandbox"]


@dataclass(frozen=True)
class ZapSignSettings:
    """Configurações da integração ZapSign.

    Attributes:
        api_token: Token de API da conta (enviado como Bearer)
        environment: Ambiente da API (production|sandbox)
        api_base_url: URL base de produção
        sandbox_api_base_url: URL base do sandbox
        request_timeout_seconds: Timeout para requisições HTTP
        download_timeout_seconds: Timeout para download de arquivos por URL
        download_max_size_bytes: Tamanho máximo de arquivo baixado
        user_agent: User-Agent enviado em todas as chamadas
    """

    # Credenciais
    api_token: str = ""
    environment: ZapSignEnvironment = "production"

    # API
    api_base_url: str = ZAPSIGN_API_BASE_URL
    sandbox_api_base_url: str = ZAPSIGN_SANDBOX_API_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT

    # Timeouts
    request_timeout_seconds: float = 30.0
    download_timeout_seconds: float = 60.0
    download_max_size_bytes: int = 25 * 1024 * 1024  # 25MB

    @property
    def is_sandbox(self) -> bool:
        """Retorna True se as chamadas vão para o sandbox."""
        return self.environment == "sandbox"

    @property
    def base_url(self) -> str:
        """URL base efetiva, sem barra final."""
        url = self.sandbox_api_base_url if self.is_sandbox else self.api_base_url
        return url.rstrip("/")

    def validate(self) -> list[str]:
        """Valida configurações mínimas da ZapSign.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_token:
            errors.append("ZAPSIGN_API_TOKEN não configurado")

        if self.environment not in ("production", "sandbox"):
            errors.append("ZAPSIGN_ENVIRONMENT deve ser 'production' ou 'sandbox'")

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("URL base da ZapSign deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("ZAPSIGN_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.download_max_size_bytes <= 0:
            errors.append("ZAPSIGN_DOWNLOAD_MAX_SIZE_BYTES deve ser > 0")

        return errors


def _parse_environment(env_str: str) -> ZapSignEnvironment:
    """Converte string de ambiente para ZapSignEnvironment."""
    if env_str.strip().lower() in ("sandbox", "sbx", "test"):
        return "sandbox"
    return "production"


def _load_from_env() -> ZapSignSettings:
    """Carrega ZapSignSettings a partir de variáveis de ambiente."""
    return ZapSignSettings(
        api_token=os.getenv("ZAPSIGN_API_TOKEN", ""),
        environment=_parse_environment(os.getenv("ZAPSIGN_ENVIRONMENT", "production")),
        api_base_url=os.getenv("ZAPSIGN_API_BASE_URL", ZAPSIGN_API_BASE_URL),
        sandbox_api_base_url=os.getenv(
            "ZAPSIGN_API_BASE_URL_SANDBOX", ZAPSIGN_SANDBOX_API_BASE_URL
        ),
        user_agent=os.getenv("ZAPSIGN_USER_AGENT", DEFAULT_USER_AGENT),
        request_timeout_seconds=float(
            os.getenv("ZAPSIGN_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        download_timeout_seconds=float(
            os.getenv("ZAPSIGN_DOWNLOAD_TIMEOUT_SECONDS", "60")
        ),
        download_max_size_bytes=int(
            os.getenv("ZAPSIGN_DOWNLOAD_MAX_SIZE_BYTES", str(25 * 1024 * 1024))
        ),
    )


@lru_cache(maxsize=1)
def get_zapsign_settings() -> ZapSignSettings:
    """Retorna instância cacheada de ZapSignSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()

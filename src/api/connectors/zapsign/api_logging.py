"""Helpers de logging para a API ZapSign (sem tokens nem conteúdo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .api_errors import ApiError

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = frozenset({"api_token", "apitoken", "password", "secret"})
REDACTED = "***"


def sanitize_response(value: Any) -> Any:
    """Retorna cópia da resposta com chaves sensíveis mascaradas."""
    if isinstance(value, dict):
        return {
            key: REDACTED if str(key).lower() in SENSITIVE_KEYS else sanitize_response(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [sanitize_response(item) for item in value]
    return value


def log_api_error(
    api_error: ApiError,
    method: str,
    endpoint: str,
) -> None:
    """Loga erro da ZapSign sem expor dados sensíveis."""
    logger.warning(
        "zapsign_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": api_error.status,
            "vendor_code": api_error.vendor_code,
            "transport_error": api_error.transport_message is not None,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
    body: Any = None,
) -> None:
    """Loga sucesso; o corpo só aparece em DEBUG e sanitizado."""
    extra: dict[str, Any] = {
        "method": method,
        "endpoint": endpoint,
        "status_code": status_code,
    }
    if body is not None and logger.isEnabledFor(logging.DEBUG):
        extra["response"] = sanitize_response(body)
    logger.debug("zapsign_api_success", extra=extra)

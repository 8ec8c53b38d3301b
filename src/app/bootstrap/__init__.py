"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_execute_use_case

    # Na inicialização do serviço
    initialize_app()

    # Obter o use case de execução
    use_case = get_execute_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, get_item_context
from config.logging import configure_logging
from config.settings import get_base_settings, get_zapsign_settings

if TYPE_CHECKING:
    from app.use_cases.zapsign import ExecuteOperationsUseCase

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura logging estruturado JSON com correlation_id e contexto do item.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
        item_context_getter=get_item_context,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
        item_context_getter=get_item_context,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.

    Returns:
        Lista de problemas encontrados (vazia se tudo OK).

    Raises:
        RuntimeError: Se houver problemas em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"zapsign: {error}" for error in get_zapsign_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Invalid configuration for {base.environment}:\n{details}")
    return errors


@lru_cache(maxsize=1)
def get_execute_use_case() -> ExecuteOperationsUseCase:
    """Obtém o use case de execução (singleton).

    Usado como dependência FastAPI; testes podem sobrescrever via
    `app.dependency_overrides`.
    """
    from app.bootstrap.dependencies import create_execute_use_case

    return create_execute_use_case()

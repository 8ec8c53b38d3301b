"""Filters de logging para injeção de contexto.

Filters são responsáveis por adicionar campos contextuais
aos logs sem que o chamador precise informá-los manualmente.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: zapsign-connector)
- item_index, resource, operation: item em execução, quando houver

Logs estruturados, sem tokens nem conteúdo de documentos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Importante: nunca adicionar payloads brutos ou tokens nos logs.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class ItemContextFilter(logging.Filter):
    """Injeta o contexto do item em execução (índice, recurso, operação).

    O getter retorna um objeto com `item_index`, `resource` e `operation`,
    ou None fora de uma execução. Valores passados via `extra` prevalecem.
    """

    _FIELDS = ("item_index", "resource", "operation")

    def __init__(self, context_getter: Callable[[], Any] | None = None) -> None:
        super().__init__()
        self._get_context = context_getter or (lambda: None)

    def filter(self, record: logging.LogRecord) -> bool:
        context = self._get_context()
        if context is None:
            return True
        for name in self._FIELDS:
            if getattr(record, name, None) is None:
                setattr(record, name, getattr(context, name))
        return True

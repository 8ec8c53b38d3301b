"""Observabilidade — logs estruturados, contexto de item, métricas.

Re-exporta funções de correlation_id, contexto e métricas.

Uso:
    from app.observability import get_correlation_id, item_context
    from app.observability import record_latency, record_item_outcome
"""

from app.observability.context import ItemContext, get_item_context, item_context
from app.observability.correlation import (
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_item_outcome, record_latency

__all__ = [
    "ItemContext",
    "correlation_scope",
    "get_correlation_id",
    "get_item_context",
    "item_context",
    "record_item_outcome",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]

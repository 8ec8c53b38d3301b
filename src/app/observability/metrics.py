"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente por sistemas como BigQuery, CloudWatch Insights, etc.

Métricas suportadas:
- Latência: tempos de execução por componente/operação
- Itens: contador de itens processados por resultado (ok/error)

Uso:
    from app.observability.metrics import record_latency, record_item_outcome

    start = time.perf_counter()
    # ... operação ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("zapsign_api", "post", latency_ms)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "zapsign_api", "execute_operations")
        operation: Nome da operação (ex: "post", "document.create")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_item_outcome(
    resource: str,
    operation: str,
    outcome: str,
    record_count: int = 0,
) -> None:
    """Registra o resultado de um item da execução.

    Args:
        resource: Recurso ZapSign (ex: "document")
        operation: Operação (ex: "create")
        outcome: "ok" ou "error"
        record_count: Quantidade de registros de saída gerados
    """
    logger.info(
        "metric_item_outcome",
        extra={
            "metric_type": "item_outcome",
            "component": "execute_operations",
            "resource_name": resource,
            "operation_name": operation,
            "outcome": outcome,
            "record_count": record_count,
        },
    )

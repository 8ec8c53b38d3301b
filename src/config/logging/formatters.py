"""Formatters de logging estruturado.

Define formatters para logs JSON com campos obrigatórios:
- correlation_id
- service
- timestamp (asctime)
- level
- logger (name)
- message

Campos do item em execução (item_index, resource, operation) entram
como extras quando presentes.

Logs estruturados, sem tokens nem conteúdo de documentos.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem de saída)
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Campos de contexto opcionais injetados pelo ItemContextFilter
CONTEXT_LOG_FIELDS: tuple[str, ...] = ("item_index", "resource", "operation")

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "timestamp": "2026-02-02T10:30:00",
            "level": "INFO",
            "logger": "app.use_cases.zapsign.execute_operations",
            "message": "zapsign_item_completed",
            "correlation_id": "abc-123",
            "service": "zapsign-connector",
            "item_index": 0,
            "resource": "document",
            "operation": "create"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

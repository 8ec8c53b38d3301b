"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
ItemContextFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from app.observability import get_item_context, item_context
from config.logging import (
    CONTEXT_LOG_FIELDS,
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    ItemContextFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg="zapsign_event",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_both_filters(self) -> None:
        configure_logging(
            correlation_id_getter=lambda: "corr-1",
            item_context_getter=get_item_context,
        )
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, ItemContextFilter) for f in filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "zapsign-connector"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestFilters:
    """Testes dos filters de contexto."""

    def test_correlation_filter_injects_fields(self) -> None:
        record = _record()
        CorrelationIdFilter("svc", lambda: "corr-1").filter(record)
        assert record.correlation_id == "corr-1"
        assert record.service == "svc"

    def test_correlation_filter_preserves_extra(self) -> None:
        record = _record(correlation_id="from-extra")
        CorrelationIdFilter("svc", lambda: "corr-1").filter(record)
        assert record.correlation_id == "from-extra"

    def test_item_context_filter_outside_execution(self) -> None:
        record = _record()
        assert ItemContextFilter(get_item_context).filter(record) is True
        assert not hasattr(record, "item_index")

    def test_item_context_filter_inside_execution(self) -> None:
        record = _record(operation="post")
        with item_context(3, "document", "create"):
            ItemContextFilter(get_item_context).filter(record)
        assert record.item_index == 3
        assert record.resource == "document"
        assert record.operation == "post"


class TestJsonFormatter:
    """Testes para create_json_formatter."""

    def test_output_uses_renamed_fields(self) -> None:
        record = _record(correlation_id="corr-1", service="svc", item_index=0)
        payload = json.loads(create_json_formatter().format(record))

        for original, renamed in FIELD_RENAME_MAP.items():
            assert original not in payload
            assert renamed in payload
        assert payload["message"] == "zapsign_event"
        assert payload["correlation_id"] == "corr-1"
        assert payload["item_index"] == 0

    def test_field_constants(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert CONTEXT_LOG_FIELDS == ("item_index", "resource", "operation")

"""Tabela (resource, operation) -> handler."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.zapsign import Resource
from app.use_cases.zapsign import (
    background_check,
    document,
    partnership,
    signer,
    template,
    timestamp,
    webhook,
)
from utils.errors import UnsupportedOperationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.use_cases.zapsign.params import OperationHandler

HandlerKey = tuple[str, str]

_RESOURCE_HANDLERS: dict[str, Mapping[str, OperationHandler]] = {
    Resource.DOCUMENT: document.HANDLERS,
    Resource.SIGNER: signer.HANDLERS,
    Resource.TEMPLATE: template.HANDLERS,
    Resource.BACKGROUND_CHECK: background_check.HANDLERS,
    Resource.PARTNERSHIP: partnership.HANDLERS,
    Resource.TIMESTAMP: timestamp.HANDLERS,
    Resource.WEBHOOK: webhook.HANDLERS,
}


def build_handler_table() -> dict[HandlerKey, OperationHandler]:
    """Achata os handlers por recurso em uma única tabela."""
    return {
        (str(resource), str(operation)): handler
        for resource, handlers in _RESOURCE_HANDLERS.items()
        for operation, handler in handlers.items()
    }


DEFAULT_HANDLERS: dict[HandlerKey, OperationHandler] = build_handler_table()


def get_handler(
    resource: str,
    operation: str,
    handlers: Mapping[HandlerKey, OperationHandler] | None = None,
) -> OperationHandler:
    """Resolve o handler do par informado.

    Raises:
        UnsupportedOperationError: Se o par não existir na tabela.
    """
    table = DEFAULT_HANDLERS if handlers is None else handlers
    handler = table.get((resource, operation))
    if handler is None:
        raise UnsupportedOperationError(resource, operation)
    return handler

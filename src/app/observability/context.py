"""Contexto do item em execução para enriquecer logs.

Usa ContextVar para ser async-safe. O filter de logging lê este
contexto e injeta item_index, resource e operation em cada record.

Uso:
    from app.observability.context import item_context

    with item_context(0, "document", "create"):
        ...  # logs aqui carregam o contexto do item
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class ItemContext:
    """Identificação do item em processamento."""

    item_index: int
    resource: str
    operation: str


_item_context: ContextVar[ItemContext | None] = ContextVar("item_context", default=None)


def get_item_context() -> ItemContext | None:
    """Retorna o contexto do item atual, ou None fora de uma execução."""
    return _item_context.get()


@contextmanager
def item_context(item_index: int, resource: str, operation: str) -> Iterator[ItemContext]:
    """Define o contexto do item durante o bloco e restaura ao sair."""
    context = ItemContext(item_index=item_index, resource=resource, operation=operation)
    token = _item_context.set(context)
    try:
        yield context
    finally:
        _item_context.reset(token)

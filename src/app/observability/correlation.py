"""Correlation id de uma execução do endpoint ZapSign.

Cada chamada a POST /zapsign/execute roda sob um correlation_id, recebido
no header `x-correlation-id` ou gerado aqui. Todos os logs emitidos durante
a execução dos itens carregam o mesmo valor.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id atual ou string vazia fora de uma execução."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; valores vazios geram um UUID v4."""
    value = (correlation_id or "").strip() or str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Executa um bloco sob um correlation_id e restaura o anterior ao sair.

    Uso:
        with correlation_scope(request.headers.get("x-correlation-id")) as cid:
            ...
    """
    token = set_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)

"""Conversões tolerantes para valores vindos de formulários de workflow."""

from __future__ import annotations

from typing import Any

_TRUE_STRINGS = frozenset({"true", "1", "yes", "sim"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "nao", "não"})


def clean_str(value: Any) -> str | None:
    """Retorna a string sem espaços nas bordas, ou None se vazia/ausente."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def to_optional_bool(value: Any) -> bool | None:
    """Converte para bool preservando a ausência (None).

    Aceita bool nativo e strings comuns ("true"/"false"/"1"/"0").
    Strings vazias ou não reconhecidas contam como ausência.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return None


def to_optional_int(value: Any) -> int | None:
    """Converte para int; None, vazio ou inválido retornam None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(float(str(value).strip()))
    except (ValueError, OverflowError):
        return None

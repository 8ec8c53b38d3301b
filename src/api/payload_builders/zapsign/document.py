"""Builders de corpo para operações de documento."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from api.payload_builders.zapsign.coercion import clean_str

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Defaults de posicionamento de rubrica (percentuais da página)
RUBRIC_DEFAULTS: dict[str, Any] = {
    "type": "signature",
    "page": 0,
    "relative_size_x": 19.55,
    "relative_size_y": 9.42,
    "relative_position_bottom": 0,
    "relative_position_left": 0,
}

DOCUMENT_UPDATE_FIELDS: tuple[str, ...] = (
    "name",
    "date_limit_to_sign",
    "folder_path",
    "folder_token",
)

_RUBRIC_NUMERIC_FIELDS: tuple[str, ...] = (
    "page",
    "relative_size_x",
    "relative_size_y",
    "relative_position_bottom",
    "relative_position_left",
)


def _number(value: Any, default: int | float) -> int | float:
    if value is None or value == "" or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        parsed = float(str(value).strip())
    except ValueError:
        return default
    if not math.isfinite(parsed):
        return default
    return int(parsed) if parsed.is_integer() and isinstance(default, int) else parsed


def build_rubricas(entries: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Converte posicionamentos em `rubricas`; entradas sem signer_token saem."""
    rubricas: list[dict[str, Any]] = []
    for entry in entries:
        signer_token = clean_str(entry.get("signer_token"))
        if not signer_token:
            continue
        rubric: dict[str, Any] = {
            "type": clean_str(entry.get("type")) or RUBRIC_DEFAULTS["type"],
        }
        for field in _RUBRIC_NUMERIC_FIELDS:
            rubric[field] = _number(entry.get(field), RUBRIC_DEFAULTS[field])
        rubric["signer_token"] = signer_token
        rubricas.append(rubric)
    return rubricas


def build_document_update(
    fields: Mapping[str, Any],
    extra_docs: Iterable[Mapping[str, Any]] = (),
) -> dict[str, Any]:
    """Corpo do PUT /docs/{token}/: só campos informados são alterados.

    `extra_docs` renomeia documentos extras ({token, name}); pares
    incompletos são descartados.
    """
    body: dict[str, Any] = {}
    for field in DOCUMENT_UPDATE_FIELDS:
        value = clean_str(fields.get(field))
        if value:
            body[field] = value

    renamed = []
    for entry in extra_docs:
        token = clean_str(entry.get("token"))
        name = clean_str(entry.get("name"))
        if token and name:
            renamed.append({"token": token, "name": name})
    if renamed:
        body["extra_docs"] = renamed
    return body


def build_display_order(tokens: Iterable[Any]) -> list[str]:
    """Lista de tokens da ordem de exibição, sem vazios.

    Aceita strings ou registros {"token": ...}.
    """
    order: list[str] = []
    for entry in tokens:
        raw = entry.get("token") if isinstance(entry, dict) else entry
        token = clean_str(raw)
        if token:
            order.append(token)
    return order


def build_extra_document(
    name: str,
    *,
    url: str | None = None,
    base64_content: str | None = None,
) -> dict[str, Any]:
    """Corpo do upload de documento extra (sempre PDF)."""
    body: dict[str, Any] = {"name": name}
    if url:
        body["url_pdf"] = url
    elif base64_content:
        body["base64_pdf"] = base64_content
    return body

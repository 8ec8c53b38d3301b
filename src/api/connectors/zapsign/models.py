"""Modelos de requisição e resposta da API ZapSign.

RequestSpec descreve uma única chamada HTTP; ApiPayload é a união
RawText | JsonObject | JsonArray decodificada na borda do transporte.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Literal

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass(frozen=True)
class FormPart:
    """Parte de um corpo multipart/form-data.

    Sem filename a parte é enviada como campo de texto.
    """

    name: str
    content: bytes | str
    filename: str | None = None
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class RequestSpec:
    """Especificação de uma chamada HTTP (vale por um único round trip)."""

    method: HttpMethod
    url: str
    body: dict[str, Any] | list[Any] | None = None
    query: dict[str, str] | None = None
    multipart: tuple[FormPart, ...] | None = None

    @property
    def is_multipart(self) -> bool:
        return bool(self.multipart)


@dataclass(frozen=True)
class RawText:
    """Resposta em texto que não é JSON."""

    text: str


@dataclass(frozen=True)
class JsonObject:
    """Resposta JSON com objeto na raiz."""

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class JsonArray:
    """Resposta JSON com lista na raiz."""

    items: list[Any] = field(default_factory=list)


ApiPayload = RawText | JsonObject | JsonArray


def decode_payload(text: str) -> ApiPayload:
    """Decodifica o corpo de uma resposta de sucesso.

    Corpo vazio vira objeto vazio; texto não-JSON vira RawText.
    Escalares JSON (string, número) também viram RawText.
    """
    if not text or not text.strip():
        return JsonObject({})
    try:
        parsed = json.loads(text)
    except ValueError:
        return RawText(text)
    if isinstance(parsed, dict):
        return JsonObject(parsed)
    if isinstance(parsed, list):
        return JsonArray(parsed)
    if isinstance(parsed, str):
        return RawText(parsed)
    return RawText(text)


def payload_to_records(payload: ApiPayload) -> list[dict[str, Any]]:
    """Converte um payload em registros de saída.

    Listas são achatadas em um registro por item; texto vira {"raw": ...}.
    """
    if isinstance(payload, JsonObject):
        return [payload.data]
    if isinstance(payload, JsonArray):
        return [
            item if isinstance(item, dict) else {"value": item}
            for item in payload.items
        ]
    return [{"raw": payload.text}]

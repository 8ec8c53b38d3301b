"""Conector ZapSign - adapter de borda para a API de assinatura eletrônica.

Este módulo é o único ponto de IO com a ZapSign.
Responsabilidades:
- HTTP client autenticado (Bearer)
- Decodificação de respostas (RawText | JsonObject | JsonArray)
- Normalização e classificação de erros da API
"""

from .api_errors import ApiError, ZapSignApiError, classify_api_error, normalize_api_error
from .http_client import ZapSignHttpClient
from .models import (
    ApiPayload,
    FormPart,
    JsonArray,
    JsonObject,
    RawText,
    RequestSpec,
    decode_payload,
    payload_to_records,
)

__all__ = [
    "ApiError",
    "ApiPayload",
    "FormPart",
    "JsonArray",
    "JsonObject",
    "RawText",
    "RequestSpec",
    "ZapSignApiError",
    "ZapSignHttpClient",
    "classify_api_error",
    "decode_payload",
    "normalize_api_error",
    "payload_to_records",
]

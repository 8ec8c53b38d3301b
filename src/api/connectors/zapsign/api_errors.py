"""Normalização e classificação de erros da API ZapSign.

Os corpos de erro do fornecedor são inconsistentes ({"error": ...},
{"message": ...}, {"detail": ...} ou texto puro). A normalização produz
um único ApiError; a classificação lê apenas esse valor.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from utils.errors import ZapSignError

GENERIC_UNEXPECTED_MESSAGE = "An unexpected error occurred while calling the ZapSign API."

_MESSAGE_KEYS = ("message", "error", "detail", "errors")

# Mensagens fixas para códigos conhecidos em 403
FIXED_FORBIDDEN_MESSAGES: dict[str, str] = {
    "document_already_signed": (
        "Forbidden (403): this document has already been signed by all signers "
        "and can no longer be changed or refused."
    ),
    "document_already_refused": (
        "Forbidden (403): this document has already been refused and cannot be "
        "refused again."
    ),
    "refuse_not_allowed": (
        "Forbidden (403): refusing this document is not allowed. Check the "
        "document status and whether refusal is enabled for the account."
    ),
    "insufficient_permissions": (
        "Forbidden (403): the API token does not have permission for this "
        "operation. Check the token permissions in the ZapSign account settings."
    ),
    "permission_denied": (
        "Forbidden (403): the API token does not have permission for this "
        "operation. Check the token permissions in the ZapSign account settings."
    ),
}

ATTEMPTS_EXHAUSTED_MARKER = "signatário tem tentativas"

# (substrings, orientação) para mensagens 400
_BAD_REQUEST_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("template", "modelo"),
        "Check that the template token is correct and the template is active.",
    ),
    (
        ("signer", "signatário", "signatario"),
        "Check the signer fields (name, email, phone and authentication mode).",
    ),
    (
        ("data", "variável", "variavel"),
        "Check that the template variables match the fields defined in the template.",
    ),
)


@dataclass(frozen=True)
class ApiError:
    """Erro da API normalizado na borda do transporte.

    Attributes:
        status: Status HTTP (None em falha de transporte)
        vendor_code: Campo `code` do corpo de erro, quando houver
        vendor_message: Mensagem extraída do corpo, quando houver
        raw: Corpo de erro decodificado (dict, list, str ou None)
        transport_message: Mensagem da falha de transporte, quando houver
    """

    status: int | None
    vendor_code: str | None = None
    vendor_message: str | None = None
    raw: Any = None
    transport_message: str | None = None

    @property
    def has_fixed_message(self) -> bool:
        """True se o erro tem mensagem fixa por código do fornecedor."""
        return self.status == 403 and self.vendor_code in FIXED_FORBIDDEN_MESSAGES


class ZapSignApiError(ZapSignError):
    """Falha de chamada à API com mensagem já classificada."""

    def __init__(self, message: str, api_error: ApiError) -> None:
        super().__init__(message)
        self.api_error = api_error

    @property
    def status(self) -> int | None:
        return self.api_error.status


def parse_error_body(body: str | None) -> Any:
    """Decodifica o corpo de erro; texto não-JSON é mantido como string."""
    if body is None:
        return None
    stripped = body.strip()
    if not stripped:
        return None
    try:
        return json.loads(stripped)
    except ValueError:
        return stripped


def _message_from_value(value: Any) -> str | None:
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        return _message_from_value(value.get("message") or value.get("detail"))
    if isinstance(value, list) and value:
        return _message_from_value(value[0])
    return None


def extract_vendor_message(raw: Any) -> str | None:
    """Extrai a mensagem do fornecedor; a primeira chave presente vence."""
    if isinstance(raw, str):
        return raw.strip() or None
    if isinstance(raw, list):
        return _message_from_value(raw)
    if not isinstance(raw, dict):
        return None
    for key in _MESSAGE_KEYS:
        message = _message_from_value(raw.get(key))
        if message:
            return message
    return None


def extract_vendor_code(raw: Any) -> str | None:
    """Extrai o código do fornecedor (`code` na raiz ou dentro de `error`)."""
    if not isinstance(raw, dict):
        return None
    code = raw.get("code")
    if code is None and isinstance(raw.get("error"), dict):
        code = raw["error"].get("code")
    if code is None:
        return None
    return str(code).strip() or None


def normalize_api_error(
    status: int | None,
    body: str | None = None,
    transport_message: str | None = None,
) -> ApiError:
    """Produz o ApiError único a partir de status e corpo brutos."""
    raw = parse_error_body(body)
    return ApiError(
        status=status,
        vendor_code=extract_vendor_code(raw),
        vendor_message=extract_vendor_message(raw),
        raw=raw,
        transport_message=transport_message,
    )


def _raw_response(raw: Any) -> str:
    if raw is None:
        return "empty response"
    return raw if isinstance(raw, str) else json.dumps(raw, ensure_ascii=False)


def _classify_bad_request(error: ApiError) -> str:
    message = error.vendor_message
    if not message:
        return (
            "Bad Request (400): the request was rejected by ZapSign. "
            f"Raw response: {_raw_response(error.raw)}"
        )
    lowered = message.lower()
    if ATTEMPTS_EXHAUSTED_MARKER in lowered:
        return (
            "Bad Request (400): the signer has exhausted all validation attempts "
            "and is blocked. Reset the signer authentication attempts and try again. "
            f"ZapSign response: {message}"
        )
    hints = [
        hint
        for patterns, hint in _BAD_REQUEST_HINTS
        if any(pattern in lowered for pattern in patterns)
    ]
    if hints:
        return f"Bad Request (400): {message}. " + " ".join(hints)
    return f"Bad Request (400): {message}. Raw response: {_raw_response(error.raw)}"


def classify_api_error(error: ApiError) -> str:
    """Traduz um ApiError em mensagem legível para o usuário final."""
    status = error.status
    message = error.vendor_message

    if status == 401:
        if message:
            return f"Unauthorized (401): {message}"
        return (
            "Unauthorized (401): the API token was rejected. Check that the token "
            "is valid, belongs to the selected environment and has the required permissions."
        )

    if status == 403:
        if error.vendor_code in FIXED_FORBIDDEN_MESSAGES:
            return FIXED_FORBIDDEN_MESSAGES[error.vendor_code]
        if message:
            return f"Forbidden (403): {message}"
        return (
            "Forbidden (403): access to this resource was denied. "
            f"Raw response: {_raw_response(error.raw)}"
        )

    if status == 404:
        if message:
            return f"Not Found (404): {message}"
        return (
            "Not Found (404): the requested resource was not found. "
            "Verify that the token provided is correct."
        )

    if status == 400:
        return _classify_bad_request(error)

    if message:
        return message
    if error.transport_message:
        return error.transport_message
    return GENERIC_UNEXPECTED_MESSAGE

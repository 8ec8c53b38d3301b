"""Validadores genéricos de campos (token, e-mail, URL, data, base64)."""

from __future__ import annotations

import base64
import binascii
import re
from datetime import datetime
from typing import Any
from urllib.parse import urlparse

from utils.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(
    r"^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$",
    re.IGNORECASE,
)
PHONE_PATTERN = re.compile(r"^[\d\s\-+()]+$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email.strip()))


def is_uuid_like(token: str) -> bool:
    return bool(UUID_PATTERN.match(token.strip()))


def is_valid_phone(phone: str) -> bool:
    return bool(PHONE_PATTERN.match(phone.strip()))


def is_valid_url(url: str) -> bool:
    """True para URL absoluta http(s) com host."""
    parsed = urlparse(url.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_valid_iso_date(value: str) -> bool:
    """Aceita data (AAAA-MM-DD) ou data-hora ISO 8601."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def is_valid_base64(value: str) -> bool:
    try:
        base64.b64decode("".join(value.split()), validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def require_text(value: Any, message: str, field: str | None = None) -> str:
    """Retorna o texto sem espaços nas bordas ou falha se vazio.

    Raises:
        ValidationError: Se o valor estiver ausente ou vazio.
    """
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValidationError(message, field=field)
    return text


def require_url(value: Any, label: str, field: str | None = None) -> str:
    """Exige URL absoluta http(s)."""
    url = require_text(value, f"{label} is required.", field)
    if not is_valid_url(url):
        raise ValidationError(
            f"{label} must be a valid http(s) URL. Got: {url}",
            field=field,
        )
    return url


def require_choice(
    value: Any,
    choices: tuple[str, ...],
    label: str,
    field: str | None = None,
) -> str:
    """Exige que o valor esteja entre as opções permitidas."""
    text = require_text(value, f"{label} is required.", field)
    if text not in choices:
        allowed = ", ".join(f'"{choice}"' for choice in choices)
        raise ValidationError(f"{label} must be one of {allowed}. Got: {text}", field=field)
    return text

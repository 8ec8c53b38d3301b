"""Validadores de signatário (regras que o formulário não garante)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.zapsign.coercion import clean_str, to_optional_bool
from api.validators.zapsign.common import is_valid_email, is_valid_phone
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def validate_signer(entry: Mapping[str, Any], position: int | None = None) -> None:
    """Valida um signatário antes do envio.

    Regras:
    - nome obrigatório
    - e-mail obrigatório, exceto com blank_email=True ou telefone informado
    - e-mail e telefone informados precisam ser válidos

    Raises:
        ValidationError: Se alguma regra falhar.
    """
    label = f"Signer {position}" if position is not None else "Signer"

    if not clean_str(entry.get("name")):
        raise ValidationError(f"{label}: name is required.", field="name")

    phone = clean_str(entry.get("phone_number"))
    if phone is not None and not is_valid_phone(phone):
        raise ValidationError(
            f"{label}: invalid phone number: {phone}", field="phone_number"
        )

    email = clean_str(entry.get("email"))
    if email is None:
        blank_email = to_optional_bool(entry.get("blank_email")) is True
        has_phone = phone is not None
        if not (blank_email or has_phone):
            raise ValidationError(
                f"{label}: email is required unless blank_email is enabled "
                "or a phone number is provided.",
                field="email",
            )
        return

    if not is_valid_email(email):
        raise ValidationError(f"{label}: invalid email address: {email}", field="email")


def validate_signer_entries(entries: Sequence[Mapping[str, Any]]) -> None:
    """Exige ao menos um signatário e valida cada um.

    Raises:
        ValidationError: Se a lista estiver vazia ou algum signatário for inválido.
    """
    if not entries:
        raise ValidationError(
            "At least one signer is required. Add one or more signers.",
            field="signers",
        )
    for position, entry in enumerate(entries, start=1):
        validate_signer(entry, position)

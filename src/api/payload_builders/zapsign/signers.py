"""Mapeadores de signatário: registro do formulário -> corpo da API ZapSign.

Regras:
- `name` sempre presente (vazio se ausente), exceto no modo update
- strings opcionais só entram se não vazias após strip
- booleanos opcionais entram sempre que informados, inclusive False
- `phone_country` assume "55" quando ausente (fora do modo update)

Os mapeadores nunca alteram o registro de entrada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.zapsign.coercion import (
    clean_str,
    to_optional_bool,
    to_optional_int,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

DEFAULT_PHONE_COUNTRY = "55"

SIGNER_STRING_FIELDS: tuple[str, ...] = (
    "email",
    "phone_number",
    "cpf",
    "qualification",
    "external_id",
    "redirect_link",
    "custom_message",
    "auth_mode",
    "signature_placement",
    "rubrica_placement",
    "selfie_validation_type",
)

SIGNER_BOOLEAN_FIELDS: tuple[str, ...] = (
    "lock_name",
    "lock_email",
    "lock_phone",
    "require_cpf",
    "validate_cpf",
    "send_automatic_email",
    "send_automatic_whatsapp",
    "send_automatic_whatsapp_signed_file",
    "blank_email",
    "hide_email",
    "blank_phone",
    "require_selfie_photo",
    "require_document_photo",
)


def map_signer(entry: Mapping[str, Any], *, for_update: bool = False) -> dict[str, Any]:
    """Converte um registro de signatário no formato da API.

    Args:
        entry: Registro vindo do formulário (não é modificado)
        for_update: Se True, omissão significa "não alterar": sem defaults

    Returns:
        Novo dict com apenas os campos informados.
    """
    signer: dict[str, Any] = {}

    name = clean_str(entry.get("name"))
    if name is not None:
        signer["name"] = name
    elif not for_update:
        signer["name"] = ""

    for field in SIGNER_STRING_FIELDS:
        value = clean_str(entry.get(field))
        if value is not None:
            signer[field] = value

    phone_country = clean_str(entry.get("phone_country"))
    if phone_country is not None:
        signer["phone_country"] = phone_country
    elif not for_update:
        signer["phone_country"] = DEFAULT_PHONE_COUNTRY

    for field in SIGNER_BOOLEAN_FIELDS:
        flag = to_optional_bool(entry.get(field))
        if flag is not None:
            signer[field] = flag

    order_group = to_optional_int(entry.get("order_group"))
    if order_group is not None:
        signer["order_group"] = order_group

    return signer


def map_signer_entries(entries: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Mapeia uma lista de signatários para criação de documento."""
    return [map_signer(entry) for entry in entries]


def map_one_click_signer_entries(
    entries: Iterable[Mapping[str, Any]],
) -> list[dict[str, Any]]:
    """Mapeia signatários para o fluxo OneClick (aceite simples).

    Conjunto reduzido: sem autenticação, posicionamento ou CPF.
    Os campos lock_* são sempre False.
    """
    mapped: list[dict[str, Any]] = []
    for entry in entries:
        signer: dict[str, Any] = {"name": clean_str(entry.get("name")) or ""}
        for field in ("email", "phone_number"):
            value = clean_str(entry.get(field))
            if value is not None:
                signer[field] = value
        signer["phone_country"] = (
            clean_str(entry.get("phone_country")) or DEFAULT_PHONE_COUNTRY
        )
        signer["lock_name"] = False
        signer["lock_email"] = False
        signer["lock_phone"] = False
        mapped.append(signer)
    return mapped

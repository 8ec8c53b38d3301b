"""Builders de corpo para operações baseadas em modelo (template)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.zapsign.coercion import (
    clean_str,
    to_optional_bool,
    to_optional_int,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

DEFAULT_LANG = "pt-br"
ROOT_FOLDER = "/"

TEMPLATE_DOCUMENT_FLAGS: tuple[str, ...] = (
    "disable_signer_emails",
    "disable_signers_get_original_file",
    "send_automatic_whatsapp",
    "send_automatic_whatsapp_signed_file",
    "signature_order_active",
)

TEMPLATE_DOCUMENT_STRINGS: tuple[str, ...] = (
    "brand_logo",
    "brand_primary_color",
    "brand_name",
    "external_id",
    "created_by",
    "folder_token",
)


def build_template_variables(entries: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Converte variáveis do formulário em pares {de, para}.

    Aceita chaves `variable_name`/`variable_value` ou `de`/`para`.
    Só entram pares com os dois lados não vazios.
    """
    data: list[dict[str, str]] = []
    for entry in entries:
        name = clean_str(entry.get("variable_name", entry.get("de")))
        value = clean_str(entry.get("variable_value", entry.get("para")))
        if name and value:
            data.append({"de": name, "para": value})
    return data


def build_metadata_entries(entries: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Converte metadados em [{key, value}], descartando pares incompletos."""
    metadata: list[dict[str, str]] = []
    for entry in entries:
        key = clean_str(entry.get("key"))
        value = clean_str(entry.get("value"))
        if key and value:
            metadata.append({"key": key, "value": value})
    return metadata


def build_form_inputs(entries: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Converte campos de formulário do modelo; entradas sem `variable` saem."""
    inputs: list[dict[str, Any]] = []
    for entry in entries:
        variable = clean_str(entry.get("variable"))
        if not variable:
            continue
        order = to_optional_int(entry.get("order"))
        inputs.append(
            {
                "variable": variable,
                "label": clean_str(entry.get("label")) or "",
                "help_text": clean_str(entry.get("help_text")) or "",
                "input_type": clean_str(entry.get("input_type")) or "input",
                "options": clean_str(entry.get("options")) or "",
                "required": bool(to_optional_bool(entry.get("required"))),
                "order": 1 if order is None else order,
            }
        )
    return inputs


class TemplateDocumentBuilder:
    """Builder do corpo de criação de documento a partir de modelo.

    Para documentos de modelo só os campos básicos do signatário são aceitos;
    autenticação e posicionamento vêm do próprio modelo.
    """

    def build(
        self,
        template_id: str,
        signer_name: str,
        options: Mapping[str, Any],
        variables: Iterable[Mapping[str, Any]] = (),
        metadata: Iterable[Mapping[str, Any]] = (),
    ) -> dict[str, Any]:
        """Constrói o corpo para POST /api/v1/models/create-doc/.

        Args:
            template_id: Token do modelo (já validado)
            signer_name: Nome do signatário (já validado)
            options: Demais parâmetros opcionais do item
            variables: Variáveis {variable_name, variable_value}
            metadata: Metadados {key, value}

        Returns:
            Corpo JSON conforme API ZapSign
        """
        body: dict[str, Any] = {
            "template_id": template_id.strip(),
            "signer_name": signer_name.strip(),
        }

        name = clean_str(options.get("name"))
        if name:
            body["name"] = name

        for field in ("signer_email", "signer_phone_country", "signer_phone_number"):
            value = clean_str(options.get(field))
            if value:
                body[field] = value

        lang = clean_str(options.get("lang"))
        if lang and lang.lower() != DEFAULT_LANG:
            body["lang"] = lang

        for field in TEMPLATE_DOCUMENT_FLAGS:
            if to_optional_bool(options.get(field)):
                body[field] = True

        for field in TEMPLATE_DOCUMENT_STRINGS:
            value = clean_str(options.get(field))
            if value:
                body[field] = value

        folder_path = clean_str(options.get("folder_path"))
        if folder_path and folder_path != ROOT_FOLDER:
            body["folder_path"] = folder_path

        data = build_template_variables(variables)
        if data:
            body["data"] = data

        metadata_entries = build_metadata_entries(metadata)
        if metadata_entries:
            body["metadata"] = metadata_entries

        return body

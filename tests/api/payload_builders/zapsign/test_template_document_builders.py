"""Testes dos builders de modelo e de documento."""

from __future__ import annotations

import pytest

from api.payload_builders.zapsign import (
    TemplateDocumentBuilder,
    build_display_order,
    build_document_update,
    build_extra_document,
    build_form_inputs,
    build_metadata_entries,
    build_rubricas,
    build_template_variables,
)
from api.payload_builders.zapsign.document import RUBRIC_DEFAULTS


class TestTemplateVariables:
    """Testes para build_template_variables e metadados."""

    def test_keeps_only_complete_pairs(self) -> None:
        data = build_template_variables(
            [
                {"variable_name": "{{NOME}}", "variable_value": "Ana"},
                {"variable_name": "{{CPF}}", "variable_value": "  "},
                {"variable_name": "", "variable_value": "x"},
                {"de": "{{CIDADE}}", "para": "Curitiba"},
            ]
        )
        assert data == [
            {"de": "{{NOME}}", "para": "Ana"},
            {"de": "{{CIDADE}}", "para": "Curitiba"},
        ]

    def test_metadata_entries(self) -> None:
        metadata = build_metadata_entries([{"key": "crm", "value": "42"}, {"key": "x"}])
        assert metadata == [{"key": "crm", "value": "42"}]

    def test_form_inputs_defaults(self) -> None:
        inputs = build_form_inputs([{"variable": "{{NOME}}"}, {"label": "sem variável"}])
        assert inputs == [
            {
                "variable": "{{NOME}}",
                "label": "",
                "help_text": "",
                "input_type": "input",
                "options": "",
                "required": False,
                "order": 1,
            }
        ]


class TestTemplateDocumentBuilder:
    """Testes para TemplateDocumentBuilder."""

    def test_minimal_body(self) -> None:
        body = TemplateDocumentBuilder().build(" tpl-1 ", " Ana ", {})
        assert body == {"template_id": "tpl-1", "signer_name": "Ana"}

    def test_defaults_are_not_sent(self) -> None:
        body = TemplateDocumentBuilder().build(
            "tpl-1",
            "Ana",
            {
                "lang": "pt-br",
                "folder_path": "/",
                "disable_signer_emails": False,
                "send_automatic_whatsapp": True,
                "external_id": "  ",
                "brand_name": "Acme",
            },
        )
        assert "lang" not in body
        assert "folder_path" not in body
        assert "disable_signer_emails" not in body
        assert "external_id" not in body
        assert body["send_automatic_whatsapp"] is True
        assert body["brand_name"] == "Acme"

    def test_variables_and_metadata(self) -> None:
        body = TemplateDocumentBuilder().build(
            "tpl-1",
            "Ana",
            {"lang": "en", "folder_path": "/contratos/"},
            variables=[{"variable_name": "{{NOME}}", "variable_value": "Ana"}],
            metadata=[{"key": "origem", "value": "crm"}],
        )
        assert body["lang"] == "en"
        assert body["folder_path"] == "/contratos/"
        assert body["data"] == [{"de": "{{NOME}}", "para": "Ana"}]
        assert body["metadata"] == [{"key": "origem", "value": "crm"}]


class TestDocumentBuilders:
    """Testes dos builders de documento."""

    def test_rubricas_defaults_and_filter(self) -> None:
        rubricas = build_rubricas(
            [{"signer_token": "s-1", "page": "2"}, {"page": 1}]
        )
        assert rubricas == [
            {
                "type": RUBRIC_DEFAULTS["type"],
                "page": 2,
                "relative_size_x": RUBRIC_DEFAULTS["relative_size_x"],
                "relative_size_y": RUBRIC_DEFAULTS["relative_size_y"],
                "relative_position_bottom": RUBRIC_DEFAULTS["relative_position_bottom"],
                "relative_position_left": RUBRIC_DEFAULTS["relative_position_left"],
                "signer_token": "s-1",
            }
        ]

    @pytest.mark.parametrize("value", ["nan", "inf", "-1e999", float("nan")])
    def test_rubricas_non_finite_numbers_fall_back_to_default(self, value) -> None:
        rubricas = build_rubricas(
            [{"signer_token": "s-1", "page": value, "relative_size_x": value}]
        )
        assert rubricas[0]["page"] == RUBRIC_DEFAULTS["page"]
        assert rubricas[0]["relative_size_x"] == RUBRIC_DEFAULTS["relative_size_x"]

    def test_document_update_only_sends_given_fields(self) -> None:
        body = build_document_update(
            {"name": "Novo", "folder_path": " ", "document_token": "ignored"},
            [{"token": "x-1", "name": "Anexo"}, {"token": "x-2"}],
        )
        assert body == {"name": "Novo", "extra_docs": [{"token": "x-1", "name": "Anexo"}]}

    def test_display_order_accepts_strings_and_records(self) -> None:
        assert build_display_order(["a", {"token": "b"}, " ", {"token": ""}]) == ["a", "b"]

    def test_extra_document_prefers_url(self) -> None:
        assert build_extra_document("Anexo", url="https://x.com/a.pdf") == {
            "name": "Anexo",
            "url_pdf": "https://x.com/a.pdf",
        }
        assert build_extra_document("Anexo", base64_content="JVBE") == {
            "name": "Anexo",
            "base64_pdf": "JVBE",
        }

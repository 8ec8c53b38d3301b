"""Testes dos handlers de documento."""

from __future__ import annotations

import pytest

from api.connectors.zapsign.models import JsonObject
from app.infra.zapsign.file_downloader import FileDownloadResult
from app.protocols import BinaryData, OperationRequest
from app.use_cases.zapsign import OperationContext, get_handler
from tests.fakes.fake_zapsign_client import FakeFileDownloader, FakeZapSignClient
from utils.errors import FileDownloadError, ValidationError


def _context(
    operation: str,
    parameters: dict,
    *,
    client: FakeZapSignClient | None = None,
    binary: dict | None = None,
    downloader: FakeFileDownloader | None = None,
) -> OperationContext:
    return OperationContext(
        request=OperationRequest("document", operation, parameters, binary or {}),
        client=client or FakeZapSignClient(),
        downloader=downloader,
    )


async def _run(ctx: OperationContext):
    return await get_handler(ctx.request.resource, ctx.request.operation)(ctx)


def _create_params(**overrides) -> dict:
    params = {
        "name": "Contrato",
        "file_input_type": "url",
        "file_url": "https://files.example.com/contrato.pdf",
        "signers": {"signer": [{"name": "Ana", "email": "ana@acme.com.br"}]},
    }
    params.update(overrides)
    return params


class TestCreateDocument:
    """Testes de create e createOneClick."""

    @pytest.mark.asyncio
    async def test_blank_email_signer_omits_email(self) -> None:
        client = FakeZapSignClient()
        params = _create_params(
            signers=[{"name": "Ana", "email": "", "blank_email": True}]
        )

        await _run(_context("create", params, client=client))

        body = client.last.body
        assert client.last.method == "POST"
        assert client.last.url == "/api/v1/docs/"
        assert "email" not in body["signers"][0]
        assert body["signers"][0]["blank_email"] is True

    @pytest.mark.asyncio
    async def test_zero_signers_fails_before_network(self) -> None:
        client = FakeZapSignClient()

        with pytest.raises(ValidationError, match="At least one signer is required"):
            await _run(_context("create", _create_params(signers=[]), client=client))

        assert client.requests == []

    @pytest.mark.asyncio
    async def test_url_docx_sets_url_docx(self) -> None:
        client = FakeZapSignClient()
        params = _create_params(file_url="https://files.example.com/contrato.docx")

        await _run(_context("create", params, client=client))

        assert client.last.body["url_docx"] == "https://files.example.com/contrato.docx"
        assert "url_pdf" not in client.last.body

    @pytest.mark.asyncio
    async def test_binary_file_input(self) -> None:
        client = FakeZapSignClient()
        params = _create_params(file_input_type="file")
        binary = {"data": BinaryData("JVBERi0xLjQ=", "c.pdf", "application/pdf")}

        await _run(_context("create", params, client=client, binary=binary))

        assert client.last.body["base64_pdf"] == "JVBERi0xLjQ="

    @pytest.mark.asyncio
    async def test_missing_binary_property(self) -> None:
        params = _create_params(file_input_type="file", binary_property_name="anexo")
        with pytest.raises(ValidationError, match='property "anexo"'):
            await _run(_context("create", params))

    @pytest.mark.asyncio
    async def test_markdown_and_metadata_string(self) -> None:
        client = FakeZapSignClient()
        params = _create_params(
            file_input_type="markdown",
            markdown_text="# Termo",
            additional_fields={"metadata": '{"crm": 42}', "lang": "en"},
        )

        await _run(_context("create", params, client=client))

        body = client.last.body
        assert body["markdown_text"] == "# Termo"
        assert body["metadata"] == {"crm": 42}
        assert body["lang"] == "en"

    @pytest.mark.asyncio
    async def test_invalid_metadata_json(self) -> None:
        params = _create_params(additional_fields={"metadata": "{quebrado"})
        with pytest.raises(ValidationError, match="Invalid JSON in Metadata"):
            await _run(_context("create", params))

    @pytest.mark.asyncio
    async def test_one_click_rejects_markdown(self) -> None:
        client = FakeZapSignClient()
        params = _create_params(file_input_type="markdown", markdown_text="# Termo")

        with pytest.raises(ValidationError, match="Markdown input is not supported"):
            await _run(_context("createOneClick", params, client=client))

        assert client.requests == []

    @pytest.mark.asyncio
    async def test_one_click_body(self) -> None:
        client = FakeZapSignClient()
        params = _create_params(require_signature=True)

        await _run(_context("createOneClick", params, client=client))

        body = client.last.body
        assert body["one_click_active"] is True
        assert body["require_signature"] is True
        assert body["signers"][0]["lock_email"] is False


class TestDocumentQueries:
    """Testes de get, getAll, update e refuse."""

    @pytest.mark.asyncio
    async def test_get_encodes_token(self) -> None:
        client = FakeZapSignClient()
        await _run(_context("get", {"document_token": "a b/c"}, client=client))
        assert client.last.url == "/api/v1/docs/a%20b%2Fc/"

    @pytest.mark.asyncio
    async def test_get_requires_token(self) -> None:
        with pytest.raises(ValidationError, match="Document token is required"):
            await _run(_context("get", {"document_token": " "}))

    @pytest.mark.asyncio
    async def test_get_all_query(self) -> None:
        client = FakeZapSignClient()
        await _run(
            _context(
                "getAll",
                {"page": 3, "status": "pending", "created_from": "2024-01-01"},
                client=client,
            )
        )
        assert client.last.query == {
            "page": "3",
            "status": "pending",
            "created_from": "2024-01-01",
        }

    @pytest.mark.asyncio
    async def test_get_all_rejects_bad_date(self) -> None:
        with pytest.raises(ValidationError, match="ISO 8601"):
            await _run(_context("getAll", {"created_to": "31/12/2024"}))

    @pytest.mark.asyncio
    async def test_update_requires_some_field(self) -> None:
        client = FakeZapSignClient()
        with pytest.raises(ValidationError, match="at least one field"):
            await _run(_context("update", {"document_token": "d-1"}, client=client))
        assert client.requests == []

    @pytest.mark.asyncio
    async def test_update_body(self) -> None:
        client = FakeZapSignClient()
        await _run(
            _context(
                "update",
                {"document_token": "d-1", "name": "Novo", "date_limit_to_sign": "2030-01-01"},
                client=client,
            )
        )
        assert client.last.method == "PUT"
        assert client.last.body == {"name": "Novo", "date_limit_to_sign": "2030-01-01"}

    @pytest.mark.parametrize("operation", ["cancel", "refuse"])
    @pytest.mark.asyncio
    async def test_cancel_and_refuse_share_endpoint(self, operation: str) -> None:
        client = FakeZapSignClient()
        await _run(
            _context(
                operation,
                {"document_token": "d-1", "rejected_reason": "Desistência"},
                client=client,
            )
        )
        assert client.last.url == "/api/v1/refuse/"
        assert client.last.body == {"doc_token": "d-1", "rejected_reason": "Desistência"}

    @pytest.mark.parametrize("operation", ["activityHistory", "getActivityHistory"])
    @pytest.mark.asyncio
    async def test_activity_history(self, operation: str) -> None:
        client = FakeZapSignClient()
        await _run(_context(operation, {"document_token": "d-1", "download_pdf": True}, client=client))
        assert client.last.url == "/api/v1/docs/signer-log/d-1"
        assert client.last.query == {"download_pdf": "true"}


class TestEnvelopeOperations:
    """Testes de assinaturas, documentos extras e reordenação."""

    @pytest.mark.asyncio
    async def test_place_signatures(self) -> None:
        client = FakeZapSignClient()
        await _run(
            _context(
                "placeSignatures",
                {"document_token": "d-1", "rubrics": {"rubric": [{"signer_token": "s-1"}]}},
                client=client,
            )
        )
        assert client.last.url == "/api/v1/docs/d-1/place-signatures/"
        assert client.last.body["rubricas"][0]["signer_token"] == "s-1"

    @pytest.mark.asyncio
    async def test_place_signatures_without_signer_token(self) -> None:
        with pytest.raises(ValidationError, match="signature placement"):
            await _run(_context("placeSignatures", {"document_token": "d-1", "rubrics": [{}]}))

    @pytest.mark.asyncio
    async def test_validate_signatures_from_url_downloads_then_uploads(self) -> None:
        client = FakeZapSignClient()
        downloader = FakeFileDownloader()

        await _run(
            _context(
                "validateSignatures",
                {"file_input_type": "url", "file_url": "https://x.com/contract.pdf"},
                client=client,
                downloader=downloader,
            )
        )

        assert downloader.urls == ["https://x.com/contract.pdf"]
        part = client.last.multipart[0]
        assert client.last.url == "/api/v1/validate-pdf-signature"
        assert part.name == "file"
        assert part.content == b"%PDF-1.4 fake"
        assert part.filename == "contract.pdf"

    @pytest.mark.asyncio
    async def test_validate_signatures_download_failure(self) -> None:
        client = FakeZapSignClient()
        downloader = FakeFileDownloader(
            FileDownloadResult(content=None, mime_type=None, error="http_error", status_code=404)
        )

        with pytest.raises(FileDownloadError, match="Failed to download file from URL"):
            await _run(
                _context(
                    "validateSignatures",
                    {"file_input_type": "url", "file_url": "https://x.com/missing.pdf"},
                    client=client,
                    downloader=downloader,
                )
            )
        assert client.requests == []

    @pytest.mark.asyncio
    async def test_validate_signatures_from_binary(self) -> None:
        client = FakeZapSignClient()
        binary = {"data": BinaryData("JVBERi0xLjQ=", "assinado.pdf", "application/pdf")}

        await _run(_context("validateSignatures", {}, client=client, binary=binary))

        part = client.last.multipart[0]
        assert part.content == b"%PDF-1.4"
        assert part.filename == "assinado.pdf"

    @pytest.mark.asyncio
    async def test_add_extra_document_from_url(self) -> None:
        client = FakeZapSignClient()
        await _run(
            _context(
                "addExtraDocument",
                {
                    "document_token": "d-1",
                    "extra_document_name": "Anexo",
                    "extra_document_url": "https://x.com/anexo.pdf",
                },
                client=client,
            )
        )
        assert client.last.url == "/api/v1/docs/d-1/upload-extra-doc/"
        assert client.last.body == {"name": "Anexo", "url_pdf": "https://x.com/anexo.pdf"}

    @pytest.mark.asyncio
    async def test_add_extra_document_from_template(self) -> None:
        client = FakeZapSignClient()
        await _run(
            _context(
                "addExtraDocumentFromTemplate",
                {
                    "document_token": "d-1",
                    "template_token": "tpl-1",
                    "template_data": [{"variable_name": "{{NOME}}", "variable_value": "Ana"}],
                },
                client=client,
            )
        )
        assert client.last.url == "/api/v1/docs/d-1/extra-docs/"
        assert client.last.body == {
            "template_id": "tpl-1",
            "data": [{"de": "{{NOME}}", "para": "Ana"}],
        }

    @pytest.mark.asyncio
    async def test_reorder_empty_list_fails_without_network(self) -> None:
        client = FakeZapSignClient()

        with pytest.raises(ValidationError, match="At least one document token"):
            await _run(
                _context(
                    "reorderEnvelope",
                    {"document_token": "d-1", "document_display_order": []},
                    client=client,
                )
            )

        assert client.requests == []

    @pytest.mark.asyncio
    async def test_reorder_empty_response_becomes_success_record(self) -> None:
        client = FakeZapSignClient(JsonObject({}))

        payload = await _run(
            _context(
                "reorderEnvelope",
                {"document_token": "d-1", "document_display_order": ["x-2", {"token": "x-1"}]},
                client=client,
            )
        )

        assert client.last.method == "PUT"
        assert client.last.body == {"document_display_order": ["x-2", "x-1"]}
        assert payload.data["success"] is True
        assert payload.data["document_display_order"] == ["x-2", "x-1"]

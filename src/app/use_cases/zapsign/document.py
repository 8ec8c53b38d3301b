"""Handlers de documento (criação, consulta, envelope, assinaturas)."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.zapsign.models import FormPart, JsonObject, RequestSpec
from api.payload_builders.zapsign.document import (
    build_display_order,
    build_document_update,
    build_extra_document,
    build_rubricas,
)
from api.payload_builders.zapsign.file_input import (
    PDF_MIME_TYPE,
    FileSource,
    build_file_fields,
    file_name_from_url,
    mime_type_from_url,
)
from api.payload_builders.zapsign.signers import (
    map_one_click_signer_entries,
    map_signer_entries,
)
from api.payload_builders.zapsign.template import build_template_variables
from api.validators.zapsign import (
    is_uuid_like,
    is_valid_base64,
    is_valid_iso_date,
    require_text,
    require_url,
    validate_signer_entries,
)
from app.constants.zapsign import DocumentOperation, FileInputType
from app.use_cases.zapsign.params import OperationHandler, Parameters, path_token
from utils.errors import FileDownloadError, ValidationError

if TYPE_CHECKING:
    from api.connectors.zapsign.models import ApiPayload
    from app.use_cases.zapsign.params import OperationContext

logger = logging.getLogger(__name__)

DEFAULT_BINARY_PROPERTY = "data"
DEFAULT_FILE_NAME = "document.pdf"
INVALID_METADATA_MESSAGE = (
    "Invalid JSON in Metadata field. Please provide a valid JSON object string."
)


def require_document_token(params: Parameters, purpose: str | None = None) -> str:
    message = "Document token is required"
    message += f" for {purpose}." if purpose else "."
    return require_text(params.raw("document_token"), message, "document_token")


def _additional_fields(params: Parameters) -> dict[str, Any]:
    """Campos adicionais do documento; `metadata` em string vira objeto."""
    fields = params.get_mapping("additional_fields")
    metadata = fields.get("metadata")
    if isinstance(metadata, str):
        if metadata.strip():
            try:
                fields["metadata"] = json.loads(metadata)
            except ValueError as exc:
                raise ValidationError(INVALID_METADATA_MESSAGE, field="metadata") from exc
        else:
            del fields["metadata"]
    return fields


def resolve_file_source(
    ctx: OperationContext,
    *,
    allow_markdown: bool = True,
) -> FileSource:
    """Resolve a origem do arquivo a partir dos parâmetros do item.

    Raises:
        ValidationError: Tipo de origem inválido ou conteúdo ausente.
    """
    params = ctx.params
    raw_type = params.get_str("file_input_type", FileInputType.FILE)
    try:
        input_type = FileInputType(raw_type)
    except ValueError as exc:
        raise ValidationError(
            f'Invalid file input type "{raw_type}". Use file, base64, url or markdown.',
            field="file_input_type",
        ) from exc

    if input_type == FileInputType.MARKDOWN:
        if not allow_markdown:
            raise ValidationError(
                "Markdown input is not supported for OneClick. Use file, base64 or url.",
                field="file_input_type",
            )
        return FileSource(input_type, str(params.raw("markdown_text") or ""), mime_type="")

    if input_type == FileInputType.URL:
        url = require_url(params.raw("file_url"), "File URL", "file_url")
        return FileSource(
            input_type,
            url,
            mime_type=mime_type_from_url(url),
            file_name=file_name_from_url(url),
        )

    if input_type == FileInputType.BASE64:
        content = params.get_str("base64_content")
        if content and not is_valid_base64(content):
            raise ValidationError(
                "The base64 content is not valid base64 data.", field="base64_content"
            )
        return FileSource(
            input_type,
            content,
            mime_type=params.get_str("file_mime_type", PDF_MIME_TYPE),
            file_name=params.get_str("file_name") or None,
        )

    binary = ctx.binary(params.get_str("binary_property_name", DEFAULT_BINARY_PROPERTY))
    return FileSource(
        input_type,
        binary.data,
        mime_type=binary.mime_type or PDF_MIME_TYPE,
        file_name=binary.file_name or DEFAULT_FILE_NAME,
    )


async def create_document(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    signers = params.get_collection("signers", "signer")
    validate_signer_entries(signers)
    name = require_text(params.raw("name"), "Document name is required.", "name")

    body: dict[str, Any] = {"name": name, **_additional_fields(params)}
    body.update(build_file_fields(resolve_file_source(ctx)))
    body["signers"] = map_signer_entries(signers)

    logger.debug("zapsign_document_create", extra={"signer_count": len(signers)})
    return await ctx.client.request_json(RequestSpec("POST", "/api/v1/docs/", body=body))


async def create_one_click_document(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    signers = params.get_collection("signers", "signer")
    validate_signer_entries(signers)
    name = require_text(params.raw("name"), "Document name is required.", "name")

    body: dict[str, Any] = {"name": name, **_additional_fields(params)}
    body["one_click_active"] = True
    if params.get_bool("require_signature"):
        body["require_signature"] = True
    body.update(build_file_fields(resolve_file_source(ctx, allow_markdown=False)))
    body["signers"] = map_one_click_signer_entries(signers)

    return await ctx.client.request_json(RequestSpec("POST", "/api/v1/docs/", body=body))


async def get_document(ctx: OperationContext) -> ApiPayload:
    token = require_document_token(ctx.params)
    return await ctx.client.request_json(
        RequestSpec("GET", f"/api/v1/docs/{path_token(token)}/")
    )


async def list_documents(ctx: OperationContext) -> ApiPayload:
    """Lista uma página de documentos; a resposta paginada sai como está."""
    params = ctx.params
    query: dict[str, str] = {"page": str(params.get_int("page", 1))}
    for field in ("folder_path", "deleted", "status", "sort_order"):
        value = params.get_str(field)
        if value:
            query[field] = value
    for field in ("created_from", "created_to"):
        value = params.get_str(field)
        if not value:
            continue
        if not is_valid_iso_date(value):
            raise ValidationError(
                f"{field} must be an ISO 8601 date (YYYY-MM-DD). Got: {value}",
                field=field,
            )
        query[field] = value
    return await ctx.client.request_json(RequestSpec("GET", "/api/v1/docs/", query=query))


async def update_document(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    token = require_document_token(params)
    date_limit = params.get_str("date_limit_to_sign")
    if date_limit and not is_valid_iso_date(date_limit):
        raise ValidationError(
            f"date_limit_to_sign must be an ISO 8601 date. Got: {date_limit}",
            field="date_limit_to_sign",
        )
    body = build_document_update(
        ctx.request.parameters,
        params.get_collection("extra_docs", "extra_doc"),
    )
    if not body:
        raise ValidationError(
            "Provide at least one field to update (name, date_limit_to_sign, "
            "folder_path, folder_token or extra_docs).",
        )
    return await ctx.client.request_json(
        RequestSpec("PUT", f"/api/v1/docs/{path_token(token)}/", body=body)
    )


async def delete_document(ctx: OperationContext) -> ApiPayload:
    token = require_document_token(ctx.params)
    return await ctx.client.request_json(
        RequestSpec("DELETE", f"/api/v1/docs/{path_token(token)}/")
    )


async def refuse_document(ctx: OperationContext) -> ApiPayload:
    """Recusa (cancela) um documento em andamento."""
    params = ctx.params
    token = require_document_token(params, "refusing a document")
    body = {"doc_token": token, "rejected_reason": params.get_str("rejected_reason")}
    return await ctx.client.request_json(RequestSpec("POST", "/api/v1/refuse/", body=body))


async def get_activity_history(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    token = require_document_token(params, "getting activity history")
    download_pdf = "true" if params.get_bool("download_pdf") else "false"
    return await ctx.client.request_json(
        RequestSpec(
            "GET",
            f"/api/v1/docs/signer-log/{path_token(token)}",
            query={"download_pdf": download_pdf},
        )
    )


async def place_signatures(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    token = require_document_token(params, "placing signatures")
    rubricas = build_rubricas(params.get_collection("rubrics", "rubric"))
    if not rubricas:
        raise ValidationError(
            "At least one signature placement with a signer_token is required.",
            field="rubrics",
        )
    return await ctx.client.request_json(
        RequestSpec(
            "POST",
            f"/api/v1/docs/{path_token(token)}/place-signatures/",
            body={"rubricas": rubricas},
        )
    )


async def validate_signatures(ctx: OperationContext) -> ApiPayload:
    """Valida assinaturas de um PDF via upload multipart.

    Com origem `url` o arquivo é baixado e depois enviado.
    """
    params = ctx.params
    if params.get_str("file_input_type", FileInputType.FILE) == FileInputType.URL:
        url = require_url(params.raw("file_url"), "File URL", "file_url")
        if ctx.downloader is None:
            raise ValidationError("Downloading files from a URL is not available.")
        result = await ctx.downloader.download(url)
        if not result.ok or result.content is None:
            raise FileDownloadError(
                f"Failed to download file from URL: {result.error or 'download_failed'}",
                status_code=result.status_code,
            )
        content = result.content
        file_name = result.file_name
        content_type = result.mime_type or PDF_MIME_TYPE
    else:
        binary = ctx.binary(
            params.get_str("binary_property_name", DEFAULT_BINARY_PROPERTY)
        )
        content = binary.content_bytes()
        file_name = binary.file_name or DEFAULT_FILE_NAME
        content_type = binary.mime_type or PDF_MIME_TYPE

    return await ctx.client.request_json(
        RequestSpec(
            "POST",
            "/api/v1/validate-pdf-signature",
            multipart=(FormPart("file", content, file_name, content_type),),
        )
    )


async def add_extra_document(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    token = require_document_token(params)
    name = require_text(
        params.raw("extra_document_name"), "Extra document name is required.",
        "extra_document_name",
    )
    if params.get_str("extra_document_file_input_type", FileInputType.URL) == FileInputType.URL:
        url = require_url(params.raw("extra_document_url"), "Extra document URL",
                          "extra_document_url")
        body = build_extra_document(name, url=url)
    else:
        content = require_text(
            params.raw("extra_document_base64"),
            "Extra document base64 content is required.",
            "extra_document_base64",
        )
        if not is_valid_base64(content):
            raise ValidationError(
                "The extra document content is not valid base64 data.",
                field="extra_document_base64",
            )
        body = build_extra_document(name, base64_content=content)
    return await ctx.client.request_json(
        RequestSpec("POST", f"/api/v1/docs/{path_token(token)}/upload-extra-doc/", body=body)
    )


async def add_extra_document_from_template(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    token = require_document_token(params)
    template_id = require_text(
        params.raw("template_token"),
        "Template token is required for extra document creation.",
        "template_token",
    )
    if not is_uuid_like(template_id):
        logger.warning("zapsign_template_token_not_uuid")

    body: dict[str, Any] = {"template_id": template_id}
    data = build_template_variables(params.get_collection("template_data", "variable"))
    if data:
        body["data"] = data
    else:
        logger.warning("zapsign_template_variables_empty")
    return await ctx.client.request_json(
        RequestSpec("POST", f"/api/v1/docs/{path_token(token)}/extra-docs/", body=body)
    )


async def reorder_envelope(ctx: OperationContext) -> ApiPayload:
    """Reordena os documentos do envelope.

    Resposta vazia vira um registro de sucesso com a ordem enviada.
    """
    params = ctx.params
    token = require_document_token(params)
    raw_order = params.raw("document_display_order")
    if isinstance(raw_order, dict):
        raw_order = raw_order.get("document_token", [])
    if raw_order is None:
        raw_order = []
    elif not isinstance(raw_order, list | tuple):
        raw_order = [raw_order]
    order = build_display_order(raw_order)
    if not order:
        raise ValidationError(
            "At least one document token is required for reordering. Please add "
            "document tokens to the Document Display Order field.",
            field="document_display_order",
        )

    payload = await ctx.client.request_json(
        RequestSpec(
            "PUT",
            f"/api/v1/docs/{path_token(token)}/document-display-order/",
            body={"document_display_order": order},
        )
    )
    if payload == JsonObject({}):
        return JsonObject(
            {
                "success": True,
                "message": "Documents reordered successfully",
                "document_token": token,
                "document_display_order": order,
            }
        )
    return payload


HANDLERS: dict[str, OperationHandler] = {
    DocumentOperation.CREATE: create_document,
    DocumentOperation.CREATE_ONE_CLICK: create_one_click_document,
    DocumentOperation.GET: get_document,
    DocumentOperation.GET_ALL: list_documents,
    DocumentOperation.UPDATE: update_document,
    DocumentOperation.DELETE: delete_document,
    DocumentOperation.CANCEL: refuse_document,
    DocumentOperation.REFUSE: refuse_document,
    DocumentOperation.ACTIVITY_HISTORY: get_activity_history,
    DocumentOperation.GET_ACTIVITY_HISTORY: get_activity_history,
    DocumentOperation.PLACE_SIGNATURES: place_signatures,
    DocumentOperation.VALIDATE_SIGNATURES: validate_signatures,
    DocumentOperation.ADD_EXTRA_DOCUMENT: add_extra_document,
    DocumentOperation.ADD_EXTRA_DOCUMENT_FROM_TEMPLATE: add_extra_document_from_template,
    DocumentOperation.REORDER_ENVELOPE: reorder_envelope,
}

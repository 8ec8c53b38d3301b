"""Handlers de modelo (template)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.zapsign.models import RequestSpec
from api.payload_builders.zapsign.template import (
    TemplateDocumentBuilder,
    build_form_inputs,
)
from api.validators.zapsign import is_uuid_like, require_text, require_url
from app.constants.zapsign import TemplateOperation
from app.use_cases.zapsign.params import OperationHandler, Parameters, path_token
from utils.errors import ValidationError

if TYPE_CHECKING:
    from api.connectors.zapsign.models import ApiPayload
    from app.use_cases.zapsign.params import OperationContext

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_LIMIT = 50


def _template_token(params: Parameters, purpose: str | None = None) -> str:
    message = "Template token is required"
    message += f" for {purpose}." if purpose else "."
    return require_text(params.raw("template_token"), message, "template_token")


async def list_templates(ctx: OperationContext) -> ApiPayload:
    limit = ctx.params.get_int("limit", DEFAULT_TEMPLATE_LIMIT)
    return await ctx.client.request_json(
        RequestSpec("GET", "/api/v1/templates", query={"limit": str(limit)})
    )


async def create_document_from_template(ctx: OperationContext) -> ApiPayload:
    """Cria documento a partir de um modelo preenchendo suas variáveis."""
    params = ctx.params
    template_id = _template_token(params, "template document creation")
    if not is_uuid_like(template_id):
        logger.warning(
            "zapsign_template_token_not_uuid",
            extra={"token_length": len(template_id)},
        )
    signer_name = require_text(
        params.raw("signer_name"),
        "Signer name is required for template document creation.",
        "signer_name",
    )

    body = TemplateDocumentBuilder().build(
        template_id,
        signer_name,
        ctx.request.parameters,
        variables=params.get_collection("variables", "variable"),
        metadata=params.get_collection("metadata", "metadata_entry"),
    )
    if "data" not in body:
        logger.warning("zapsign_template_variables_empty")
    return await ctx.client.request_json(
        RequestSpec("POST", "/api/v1/models/create-doc/", body=body)
    )


async def create_template_docx(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    name = require_text(params.raw("name"), "Template name is required.", "name")
    body: dict[str, Any] = {"name": name}
    if params.get_str("docx_source", "url") == "url":
        body["docx_url"] = require_url(params.raw("docx_url"), "DOCX URL", "docx_url")
    else:
        body["base64_docx"] = require_text(
            params.raw("docx_base64"),
            "DOCX base64 content is required.",
            "docx_base64",
        )
    body.update(params.get_mapping("additional_fields"))
    return await ctx.client.request_json(
        RequestSpec("POST", "/api/v1/templates/create/", body=body)
    )


async def get_template(ctx: OperationContext) -> ApiPayload:
    token = _template_token(ctx.params)
    return await ctx.client.request_json(
        RequestSpec("GET", f"/api/v1/templates/{path_token(token)}/")
    )


async def update_template(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    token = _template_token(params)
    body: dict[str, Any] = {}
    name = params.get_str("name")
    if name:
        body["name"] = name
    body.update(params.get_mapping("additional_fields"))
    if not body:
        raise ValidationError("Provide at least one template field to update.")
    return await ctx.client.request_json(
        RequestSpec("PUT", f"/api/v1/templates/{path_token(token)}/", body=body)
    )


async def delete_template(ctx: OperationContext) -> ApiPayload:
    token = _template_token(ctx.params)
    return await ctx.client.request_json(
        RequestSpec("DELETE", f"/api/v1/templates/{path_token(token)}/")
    )


async def update_template_form(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    token = _template_token(params, "updating the template form")
    body: dict[str, Any] = {"template_id": token}
    inputs = build_form_inputs(params.get_collection("inputs", "input"))
    if inputs:
        body["inputs"] = inputs
    return await ctx.client.request_json(
        RequestSpec("POST", "/api/v1/templates/update-form/", body=body)
    )


HANDLERS: dict[str, OperationHandler] = {
    TemplateOperation.GET_ALL: list_templates,
    TemplateOperation.GET: get_template,
    TemplateOperation.CREATE_DOCUMENT: create_document_from_template,
    TemplateOperation.CREATE_TEMPLATE_DOCX: create_template_docx,
    TemplateOperation.UPDATE: update_template,
    TemplateOperation.DELETE: delete_template,
    TemplateOperation.UPDATE_TEMPLATE_FORM: update_template_form,
}

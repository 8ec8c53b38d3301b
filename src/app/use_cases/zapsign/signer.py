"""Handlers de signatário."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.zapsign.models import RequestSpec
from api.payload_builders.zapsign.signers import map_signer
from api.validators.zapsign import is_valid_email, require_text, validate_signer
from app.constants.zapsign import SignerOperation
from app.use_cases.zapsign.document import require_document_token
from app.use_cases.zapsign.params import OperationHandler, Parameters, path_token
from utils.errors import ValidationError

if TYPE_CHECKING:
    from api.connectors.zapsign.models import ApiPayload
    from app.use_cases.zapsign.params import OperationContext


def _signer_token(params: Parameters, purpose: str | None = None) -> str:
    message = "Signer token is required"
    message += f" for {purpose}." if purpose else "."
    return require_text(params.raw("signer_token"), message, "signer_token")


async def add_signer(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    token = require_document_token(params, "adding a signer")
    validate_signer(ctx.request.parameters)
    body = map_signer(ctx.request.parameters)
    return await ctx.client.request_json(
        RequestSpec("POST", f"/api/v1/docs/{path_token(token)}/add-signer/", body=body)
    )


async def update_signer(ctx: OperationContext) -> ApiPayload:
    """Atualiza só os campos informados; booleanos False são enviados."""
    params = ctx.params
    token = _signer_token(params)
    email = params.get_str("email")
    if email and not is_valid_email(email):
        raise ValidationError(f"Invalid email address: {email}", field="email")

    body = map_signer(ctx.request.parameters, for_update=True)
    if not body:
        raise ValidationError("Provide at least one signer field to update.")
    return await ctx.client.request_json(
        RequestSpec("POST", f"/api/v1/signers/{path_token(token)}/", body=body)
    )


async def get_signer(ctx: OperationContext) -> ApiPayload:
    token = _signer_token(ctx.params)
    return await ctx.client.request_json(
        RequestSpec("GET", f"/api/v1/signers/{path_token(token)}/")
    )


async def remove_signer(ctx: OperationContext) -> ApiPayload:
    token = _signer_token(ctx.params)
    return await ctx.client.request_json(
        RequestSpec("DELETE", f"/api/v1/signer/{path_token(token)}/remove/")
    )


async def reset_attempts(ctx: OperationContext) -> ApiPayload:
    token = _signer_token(ctx.params, "resetting validation attempts")
    return await ctx.client.request_json(
        RequestSpec("PUT", f"/api/v1/reset-auth-attempts/{path_token(token)}")
    )


HANDLERS: dict[str, OperationHandler] = {
    SignerOperation.ADD: add_signer,
    SignerOperation.UPDATE: update_signer,
    SignerOperation.GET: get_signer,
    SignerOperation.REMOVE: remove_signer,
    SignerOperation.RESET_ATTEMPTS: reset_attempts,
}

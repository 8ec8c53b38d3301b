"""Handlers de parceria (contas de clientes de parceiros)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.zapsign.models import RequestSpec
from api.payload_builders.zapsign.signers import DEFAULT_PHONE_COUNTRY
from api.validators.zapsign import is_valid_email, require_choice, require_text
from app.constants.zapsign import PartnershipOperation, PaymentStatus
from app.use_cases.zapsign.params import OperationHandler
from utils.errors import ValidationError

if TYPE_CHECKING:
    from api.connectors.zapsign.models import ApiPayload
    from app.use_cases.zapsign.params import OperationContext


async def create_account(ctx: OperationContext) -> ApiPayload:
    """Cria conta de cliente; e-mail e telefone são opcionais."""
    params = ctx.params
    body: dict[str, Any] = {
        "country": require_text(params.raw("country"), "Country is required.", "country"),
        "lang": require_text(params.raw("lang"), "Language is required.", "lang"),
        "company_name": require_text(
            params.raw("company_name"), "Company name is required.", "company_name"
        ),
    }
    email = params.get_str("email")
    if email:
        if not is_valid_email(email):
            raise ValidationError(f"Invalid email address: {email}", field="email")
        body["email"] = email
    phone_number = params.get_str("phone_number")
    if phone_number:
        body["phone_number"] = phone_number
        body["phone_country"] = params.get_str("phone_country", DEFAULT_PHONE_COUNTRY)
    return await ctx.client.request_json(
        RequestSpec("POST", "/api/v1/partner/company/", body=body)
    )


async def update_payment_status(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    body = {
        "client_api_token": require_text(
            params.raw("client_api_token"),
            "Client API token is required.",
            "client_api_token",
        ),
        "payment_status": require_choice(
            params.raw("payment_status"),
            tuple(PaymentStatus),
            "Payment status",
            "payment_status",
        ),
    }
    return await ctx.client.request_json(
        RequestSpec("POST", "/api/v1/partner/update-payment-status/", body=body)
    )


HANDLERS: dict[str, OperationHandler] = {
    PartnershipOperation.CREATE_ACCOUNT: create_account,
    PartnershipOperation.UPDATE_PAYMENT_STATUS: update_payment_status,
}

"""Handlers de background check (pessoa física e jurídica)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.zapsign.models import RequestSpec
from api.validators.zapsign import require_text
from app.constants.zapsign import BackgroundCheckOperation
from app.use_cases.zapsign.params import OperationHandler, Parameters, path_token

if TYPE_CHECKING:
    from api.connectors.zapsign.models import ApiPayload
    from app.use_cases.zapsign.params import OperationContext

CHECK_COUNTRY = "BR"


def _check_body(params: Parameters, check_type: str) -> dict[str, Any]:
    body: dict[str, Any] = {
        "user_authorized": True,
        "force_creation": params.get_bool("force_creation", True),
        "type": check_type,
        "country": CHECK_COUNTRY,
    }
    external_id = params.get_str("external_id")
    if external_id:
        body["custom_input"] = external_id
    return body


def split_person_name(name: str) -> dict[str, str]:
    """Separa o nome em first_name e last_name (resto do nome)."""
    parts = name.split()
    if not parts:
        return {}
    names = {"first_name": parts[0]}
    if len(parts) > 1:
        names["last_name"] = " ".join(parts[1:])
    return names


async def create_person_check(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    cpf = require_text(
        params.raw("cpf"), "CPF is required for a person background check.", "cpf"
    )
    body = _check_body(params, "person")
    body["national_id"] = cpf
    body.update(split_person_name(params.get_str("name")))
    return await ctx.client.request_json(RequestSpec("POST", "/api/v1/checks/", body=body))


async def create_company_check(ctx: OperationContext) -> ApiPayload:
    params = ctx.params
    cnpj = require_text(
        params.raw("cnpj"), "CNPJ is required for a company background check.", "cnpj"
    )
    body = _check_body(params, "company")
    body["tax_id"] = cnpj
    company_name = params.get_str("company_name")
    if company_name:
        body["company_name"] = company_name
    return await ctx.client.request_json(RequestSpec("POST", "/api/v1/checks/", body=body))


def _check_token(params: Parameters) -> str:
    return require_text(
        params.raw("check_token"), "Background check token is required.", "check_token"
    )


async def get_check(ctx: OperationContext) -> ApiPayload:
    token = _check_token(ctx.params)
    return await ctx.client.request_json(
        RequestSpec("GET", f"/api/v1/checks/{path_token(token)}/")
    )


async def get_check_details(ctx: OperationContext) -> ApiPayload:
    token = _check_token(ctx.params)
    return await ctx.client.request_json(
        RequestSpec("GET", f"/api/v1/checks/{path_token(token)}/details/")
    )


HANDLERS: dict[str, OperationHandler] = {
    BackgroundCheckOperation.CREATE_PERSON: create_person_check,
    BackgroundCheckOperation.CREATE_COMPANY: create_company_check,
    BackgroundCheckOperation.GET: get_check,
    BackgroundCheckOperation.DETAILS: get_check_details,
}

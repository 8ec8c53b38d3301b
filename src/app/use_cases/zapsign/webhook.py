"""Handlers de webhook da conta."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.zapsign.models import RequestSpec
from api.validators.zapsign import require_text, require_url
from app.constants.zapsign import WebhookEventType, WebhookOperation
from app.use_cases.zapsign.params import OperationHandler
from utils.errors import ValidationError

if TYPE_CHECKING:
    from api.connectors.zapsign.models import ApiPayload
    from app.use_cases.zapsign.params import OperationContext


async def create_webhook(ctx: OperationContext) -> ApiPayload:
    """Cadastra webhook; tipo vazio recebe todos os eventos."""
    params = ctx.params
    url = require_url(params.raw("url"), "Webhook URL", "url")
    event_type = params.get_str("event_type", WebhookEventType.ALL)
    if event_type not in tuple(WebhookEventType):
        raise ValidationError(
            f'Unknown webhook event type "{event_type}".', field="event_type"
        )
    return await ctx.client.request_json(
        RequestSpec(
            "POST",
            "/api/v1/user/company/webhook/",
            body={"url": url, "type": str(event_type)},
        )
    )


async def delete_webhook(ctx: OperationContext) -> ApiPayload:
    webhook_id = require_text(
        ctx.params.raw("webhook_id"), "Webhook ID is required.", "webhook_id"
    )
    return await ctx.client.request_json(
        RequestSpec(
            "DELETE",
            "/api/v1/user/company/webhook/delete/",
            body={"id": webhook_id},
        )
    )


HANDLERS: dict[str, OperationHandler] = {
    WebhookOperation.CREATE: create_webhook,
    WebhookOperation.DELETE: delete_webhook,
}

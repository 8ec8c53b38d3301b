"""Handler de carimbo do tempo."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.zapsign.models import RequestSpec
from api.validators.zapsign import require_url
from app.constants.zapsign import TimestampOperation
from app.use_cases.zapsign.params import OperationHandler

if TYPE_CHECKING:
    from api.connectors.zapsign.models import ApiPayload
    from app.use_cases.zapsign.params import OperationContext


async def add_timestamp(ctx: OperationContext) -> ApiPayload:
    url = require_url(ctx.params.raw("url"), "Document URL", "url")
    return await ctx.client.request_json(
        RequestSpec("POST", "/api/v1/timestamp/", body={"url": url})
    )


HANDLERS: dict[str, OperationHandler] = {
    TimestampOperation.ADD: add_timestamp,
}

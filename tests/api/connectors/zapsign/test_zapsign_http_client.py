"""Testes do ZapSignHttpClient com httpx.MockTransport."""

from __future__ import annotations

import json
from dataclasses import replace

import httpx
import pytest

from api.connectors.zapsign import ZapSignApiError, ZapSignHttpClient
from api.connectors.zapsign.models import (
    FormPart,
    JsonArray,
    JsonObject,
    RawText,
    RequestSpec,
)
from utils.errors import ValidationError


def _client(settings, handler) -> tuple[ZapSignHttpClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return ZapSignHttpClient(settings, transport=httpx.MockTransport(_record)), seen


@pytest.mark.asyncio
async def test_sends_bearer_token_and_resolves_sandbox_url(zapsign_settings) -> None:
    client, seen = _client(
        zapsign_settings, lambda request: httpx.Response(200, json={"token": "doc-1"})
    )

    payload = await client.request_json(RequestSpec("GET", "/api/v1/docs/doc-1/"))

    assert payload == JsonObject({"token": "doc-1"})
    request = seen[0]
    assert str(request.url) == "https://sandbox.api.zapsign.com.br/api/v1/docs/doc-1/"
    assert request.headers["Authorization"] == "Bearer test-token"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"] == zapsign_settings.user_agent


@pytest.mark.asyncio
async def test_production_environment_uses_production_url(zapsign_settings) -> None:
    settings = replace(zapsign_settings, environment="production")
    client, seen = _client(settings, lambda request: httpx.Response(200, json={}))

    await client.request_json(RequestSpec("GET", "/api/v1/templates"))

    assert str(seen[0].url).startswith("https://api.zapsign.com.br/api/v1/templates")


@pytest.mark.asyncio
async def test_json_body_and_query(zapsign_settings) -> None:
    client, seen = _client(zapsign_settings, lambda request: httpx.Response(200, json=[]))

    payload = await client.request_json(
        RequestSpec("POST", "/api/v1/docs/", body={"name": "Contrato"}, query={"page": "2"})
    )

    assert payload == JsonArray([])
    assert json.loads(seen[0].content) == {"name": "Contrato"}
    assert seen[0].url.params["page"] == "2"


@pytest.mark.asyncio
async def test_empty_body_decodes_to_empty_object(zapsign_settings) -> None:
    client, _ = _client(zapsign_settings, lambda request: httpx.Response(204))
    assert await client.request_json(RequestSpec("DELETE", "/api/v1/docs/x/")) == JsonObject({})


@pytest.mark.asyncio
async def test_non_json_body_becomes_raw_text(zapsign_settings) -> None:
    client, _ = _client(zapsign_settings, lambda request: httpx.Response(200, text="OK"))
    assert await client.request_json(RequestSpec("GET", "/api/v1/x")) == RawText("OK")


@pytest.mark.asyncio
async def test_multipart_upload(zapsign_settings) -> None:
    client, seen = _client(zapsign_settings, lambda request: httpx.Response(200, json={}))

    await client.request_json(
        RequestSpec(
            "POST",
            "/api/v1/validate-pdf-signature",
            multipart=(FormPart("file", b"%PDF", "a.pdf", "application/pdf"),),
        )
    )

    request = seen[0]
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'filename="a.pdf"' in request.content
    assert b"%PDF" in request.content


@pytest.mark.asyncio
async def test_http_error_is_classified(zapsign_settings) -> None:
    client, _ = _client(
        zapsign_settings,
        lambda request: httpx.Response(404, json={"detail": "Not found."}),
    )

    with pytest.raises(ZapSignApiError) as exc_info:
        await client.request_json(RequestSpec("GET", "/api/v1/docs/missing/"))

    assert str(exc_info.value) == "Not Found (404): Not found."
    assert exc_info.value.status == 404


@pytest.mark.asyncio
async def test_forbidden_vendor_code_message_is_deterministic(zapsign_settings) -> None:
    client, _ = _client(
        zapsign_settings,
        lambda request: httpx.Response(
            403, json={"code": "document_already_signed", "message": "ignored"}
        ),
    )

    with pytest.raises(ZapSignApiError) as exc_info:
        await client.request_json(RequestSpec("POST", "/api/v1/refuse/", body={}))

    assert "already been signed" in str(exc_info.value)
    assert "ignored" not in str(exc_info.value)


@pytest.mark.asyncio
async def test_transport_failure_becomes_api_error(zapsign_settings) -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client, _ = _client(zapsign_settings, _fail)

    with pytest.raises(ZapSignApiError) as exc_info:
        await client.request_json(RequestSpec("GET", "/api/v1/docs/"))

    assert exc_info.value.status is None
    assert "Could not connect" in str(exc_info.value)


@pytest.mark.asyncio
async def test_missing_token_fails_before_any_call(zapsign_settings) -> None:
    client, seen = _client(
        replace(zapsign_settings, api_token="  "),
        lambda request: httpx.Response(200, json={}),
    )

    with pytest.raises(ValidationError, match="ZAPSIGN_API_TOKEN"):
        await client.request_json(RequestSpec("GET", "/api/v1/docs/"))

    assert seen == []


@pytest.mark.asyncio
async def test_token_never_logged(zapsign_settings, caplog: pytest.LogCaptureFixture) -> None:
    client, _ = _client(
        zapsign_settings,
        lambda request: httpx.Response(200, json={"api_token": "secret-value", "ok": True}),
    )

    with caplog.at_level("DEBUG"):
        await client.request_json(RequestSpec("GET", "/api/v1/x"))

    for record in caplog.records:
        assert "test-token" not in record.getMessage()
        assert "secret-value" not in json.dumps(record.__dict__, default=str)


@pytest.mark.asyncio
async def test_exhausted_attempts_message(zapsign_settings) -> None:
    client, _ = _client(
        zapsign_settings,
        lambda request: httpx.Response(400, json={"error": "Signatário tem tentativas"}),
    )

    with pytest.raises(ZapSignApiError) as exc_info:
        await client.request_json(RequestSpec("PUT", "/api/v1/reset-auth-attempts/s-1"))

    assert "exhausted all validation attempts" in str(exc_info.value)

"""Testes do endpoint POST /zapsign/execute."""

from __future__ import annotations

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.connectors.zapsign.models import JsonObject
from api.routes import create_api_router
from app.bootstrap import get_execute_use_case
from app.use_cases.zapsign import ExecuteOperationsUseCase
from tests.fakes.fake_zapsign_client import FakeZapSignClient


def _client(fake: FakeZapSignClient) -> TestClient:
    app = FastAPI()
    app.include_router(create_api_router())
    app.dependency_overrides[get_execute_use_case] = lambda: ExecuteOperationsUseCase(fake)
    return TestClient(app)


@pytest.fixture
def fake_client() -> FakeZapSignClient:
    return FakeZapSignClient(JsonObject({"token": "d-1", "status": "pending"}))


def test_execute_returns_results(fake_client: FakeZapSignClient) -> None:
    response = _client(fake_client).post(
        "/zapsign/execute",
        json={
            "items": [
                {
                    "resource": "document",
                    "operation": "get",
                    "parameters": {"document_token": "d-1"},
                }
            ]
        },
    )

    assert response.status_code == 200
    assert response.json() == {"results": [{"token": "d-1", "status": "pending"}]}
    assert fake_client.last.url == "/api/v1/docs/d-1/"


def test_execute_binary_attachment(fake_client: FakeZapSignClient) -> None:
    response = _client(fake_client).post(
        "/zapsign/execute",
        json={
            "items": [
                {
                    "resource": "document",
                    "operation": "validateSignatures",
                    "binary": {
                        "data": {
                            "data": "JVBERi0xLjQ=",
                            "file_name": "assinado.pdf",
                            "mime_type": "application/pdf",
                        }
                    },
                }
            ]
        },
    )

    assert response.status_code == 200
    assert fake_client.last.multipart[0].filename == "assinado.pdf"


def test_fail_fast_returns_400_with_item_index(fake_client: FakeZapSignClient) -> None:
    response = _client(fake_client).post(
        "/zapsign/execute",
        json={
            "items": [
                {"resource": "document", "operation": "get", "parameters": {"document_token": "d-1"}},
                {"resource": "document", "operation": "reorderEnvelope",
                 "parameters": {"document_token": "d-1", "document_display_order": []}},
            ]
        },
    )

    assert response.status_code == 400
    body = response.json()
    assert body["item_index"] == 1
    assert body["error"].startswith("At least one document token is required")


def test_continue_on_fail_returns_error_records() -> None:
    fake = FakeZapSignClient((404, json.dumps({"detail": "Not found."})))

    response = _client(fake).post(
        "/zapsign/execute",
        json={
            "continue_on_fail": True,
            "items": [
                {"resource": "signer", "operation": "get", "parameters": {"signer_token": "s-1"}},
                {"resource": "document", "operation": "download"},
            ],
        },
    )

    assert response.status_code == 200
    assert response.json()["results"] == [
        {"error": "Not Found (404): Not found.", "item_index": 0},
        {
            "error": 'The operation "download" is not supported for resource "document".',
            "item_index": 1,
        },
    ]


def test_invalid_body_is_rejected(fake_client: FakeZapSignClient) -> None:
    response = _client(fake_client).post("/zapsign/execute", json={"items": [{"resource": "document"}]})
    assert response.status_code == 422

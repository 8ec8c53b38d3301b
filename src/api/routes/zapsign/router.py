"""Endpoint de execução de operações ZapSign.

Endpoints:
- POST /zapsign/execute: executa itens (resource, operation, parâmetros)

Respostas:
- 200 {"results": [...]} com registros na ordem dos itens
- 400 {"error", "item_index"} quando um item falha em modo fail-fast
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.bootstrap import get_execute_use_case
from app.observability import correlation_scope
from app.protocols import BinaryData, OperationRequest
from app.use_cases.zapsign import ExecuteOperationsUseCase
from utils.errors import NodeOperationError

logger = logging.getLogger(__name__)

router = APIRouter()


class BinaryPayload(BaseModel):
    """Anexo binário de um item (conteúdo em base64)."""

    data: str
    file_name: str | None = None
    mime_type: str | None = None


class ExecuteItem(BaseModel):
    """Item de entrada da execução."""

    resource: str
    operation: str
    parameters: dict[str, Any] = Field(default_factory=dict)
    binary: dict[str, BinaryPayload] = Field(default_factory=dict)

    def to_request(self) -> OperationRequest:
        return OperationRequest(
            resource=self.resource,
            operation=self.operation,
            parameters=self.parameters,
            binary={
                name: BinaryData(
                    data=payload.data,
                    file_name=payload.file_name,
                    mime_type=payload.mime_type,
                )
                for name, payload in self.binary.items()
            },
        )


class ExecuteRequest(BaseModel):
    """Corpo do POST /zapsign/execute."""

    items: list[ExecuteItem]
    continue_on_fail: bool = False


class ExecuteResponse(BaseModel):
    """Registros de saída na ordem dos itens."""

    results: list[dict[str, Any]]


@router.post("/execute", response_model=None)
async def execute_operations(
    payload: ExecuteRequest,
    request: Request,
    use_case: ExecuteOperationsUseCase = Depends(get_execute_use_case),
) -> ExecuteResponse | JSONResponse:
    """Executa os itens em sequência.

    Returns:
        ExecuteResponse com os registros ou 400 com o item que falhou.
    """
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        logger.info(
            "zapsign_execute_received",
            extra={
                "item_count": len(payload.items),
                "continue_on_fail": payload.continue_on_fail,
            },
        )
        try:
            results = await use_case.execute(
                [item.to_request() for item in payload.items],
                continue_on_fail=payload.continue_on_fail,
            )
        except NodeOperationError as exc:
            logger.warning(
                "zapsign_execute_failed",
                extra={
                    "item_index": exc.item_index,
                    "correlation_id": correlation_id,
                },
            )
            return JSONResponse(
                content={"error": exc.message, "item_index": exc.item_index},
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        return ExecuteResponse(results=results)

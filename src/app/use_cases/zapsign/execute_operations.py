"""Use case de execução sequencial dos itens de um workflow ZapSign.

Fluxo por item:
1. Resolve o handler de (resource, operation)
2. Executa o handler sob o contexto de log do item
3. Enriquece erros da API com orientação específica da operação
4. Converte o payload em registros de saída, na ordem de entrada

Qualquer exceção do item conta como falha. Em modo continue-on-fail, um
item com falha gera exatamente um registro {"error", "item_index"} na sua
posição; senão a primeira falha interrompe a execução com NodeOperationError.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.zapsign.api_errors import ZapSignApiError
from api.connectors.zapsign.models import payload_to_records
from app.observability import item_context, record_item_outcome, record_latency
from app.use_cases.zapsign.params import OperationContext
from app.use_cases.zapsign.registry import get_handler
from app.use_cases.zapsign.remediation import apply_remediation
from utils.errors import NodeOperationError, ZapSignError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from app.protocols import (
        FileDownloaderProtocol,
        OperationRequest,
        ZapSignClientProtocol,
    )
    from app.use_cases.zapsign.params import OperationHandler
    from app.use_cases.zapsign.registry import HandlerKey

logger = logging.getLogger(__name__)

UNEXPECTED_ITEM_ERROR = (
    "Unexpected error while executing {resource}.{operation}: {error}"
)


class ExecuteOperationsUseCase:
    """Executa itens em ordem e acumula os registros de saída."""

    def __init__(
        self,
        client: ZapSignClientProtocol,
        downloader: FileDownloaderProtocol | None = None,
        handlers: Mapping[HandlerKey, OperationHandler] | None = None,
    ) -> None:
        self._client = client
        self._downloader = downloader
        self._handlers = handlers

    async def execute(
        self,
        items: Iterable[OperationRequest],
        continue_on_fail: bool = False,
    ) -> list[dict[str, Any]]:
        """Executa todos os itens estritamente em sequência.

        Args:
            items: Itens de entrada já resolvidos
            continue_on_fail: Se True, falhas viram registros de erro

        Returns:
            Registros de saída na ordem dos itens.

        Raises:
            NodeOperationError: Na primeira falha, se continue_on_fail=False.
        """
        results: list[dict[str, Any]] = []
        for index, request in enumerate(items):
            with item_context(index, request.resource, request.operation):
                start = time.perf_counter()
                try:
                    records = await self._execute_item(index, request)
                except ZapSignError as exc:
                    results.append(
                        self._handle_failure(index, request, str(exc), exc, continue_on_fail)
                    )
                    continue
                except Exception as exc:
                    logger.exception("zapsign_item_unexpected_error")
                    message = UNEXPECTED_ITEM_ERROR.format(
                        resource=request.resource, operation=request.operation, error=exc
                    )
                    results.append(
                        self._handle_failure(index, request, message, exc, continue_on_fail)
                    )
                    continue
                finally:
                    record_latency(
                        "execute_operations",
                        f"{request.resource}.{request.operation}",
                        (time.perf_counter() - start) * 1000,
                    )

                record_item_outcome(
                    request.resource, request.operation, "ok", len(records)
                )
                results.extend(records)

        logger.info("zapsign_execution_completed", extra={"record_count": len(results)})
        return results

    @staticmethod
    def _handle_failure(
        index: int,
        request: OperationRequest,
        message: str,
        exc: Exception,
        continue_on_fail: bool,
    ) -> dict[str, Any]:
        """Registra a falha e devolve o registro de erro, ou interrompe a execução."""
        record_item_outcome(request.resource, request.operation, "error")
        if not continue_on_fail:
            logger.warning("zapsign_item_failed", extra={"fail_fast": True})
            raise NodeOperationError(message, index) from exc
        logger.info("zapsign_item_failed", extra={"fail_fast": False})
        return {"error": message, "item_index": index}

    async def _execute_item(
        self,
        index: int,
        request: OperationRequest,
    ) -> list[dict[str, Any]]:
        handler = get_handler(request.resource, request.operation, self._handlers)
        ctx = OperationContext(
            request=request,
            client=self._client,
            item_index=index,
            downloader=self._downloader,
        )
        try:
            payload = await handler(ctx)
        except ZapSignApiError as exc:
            enriched = apply_remediation(request.resource, request.operation, exc)
            if enriched is exc:
                raise
            raise enriched from exc
        return payload_to_records(payload)

"""Use cases ZapSign: handlers por operação e loop de execução."""

from .execute_operations import ExecuteOperationsUseCase
from .params import OperationContext, OperationHandler, Parameters
from .registry import DEFAULT_HANDLERS, get_handler

__all__ = [
    "DEFAULT_HANDLERS",
    # Execução
    "ExecuteOperationsUseCase",
    # Contrato dos handlers
    "OperationContext",
    "OperationHandler",
    "Parameters",
    "get_handler",
]

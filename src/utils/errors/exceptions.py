"""Exceções de domínio do conector ZapSign.

Toda mensagem é escrita para o usuário final que configura o workflow:
nunca stack traces nem detalhes internos.
"""

from __future__ import annotations


class ZapSignError(Exception):
    """Base para todos os erros do conector."""


class ValidationError(ZapSignError):
    """Pré-condição local violada antes de qualquer chamada de rede."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class UnsupportedOperationError(ZapSignError):
    """Combinação (resource, operation) sem handler registrado."""

    def __init__(self, resource: str, operation: str) -> None:
        super().__init__(
            f'The operation "{operation}" is not supported for resource "{resource}".'
        )
        self.resource = resource
        self.operation = operation


class FileDownloadError(ZapSignError):
    """Falha ao baixar arquivo de uma URL pública."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NodeOperationError(ZapSignError):
    """Falha de um item em modo fail-fast, com índice do item."""

    def __init__(self, message: str, item_index: int) -> None:
        super().__init__(message)
        self.item_index = item_index

    @property
    def message(self) -> str:
        return str(self)

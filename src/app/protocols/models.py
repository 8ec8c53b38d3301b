"""Modelos de entrada da execução (itens, binários)."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class BinaryData:
    """Anexo binário de um item (conteúdo em base64).

    Attributes:
        data: Conteúdo codificado em base64
        file_name: Nome original do arquivo
        mime_type: MIME informado pela origem
    """

    data: str
    file_name: str | None = None
    mime_type: str | None = None

    def content_bytes(self) -> bytes:
        """Decodifica o conteúdo.

        Raises:
            ValidationError: Se o base64 for inválido.
        """
        try:
            return base64.b64decode(self.data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(
                "The binary attachment does not contain valid base64 data."
            ) from exc


@dataclass(frozen=True)
class OperationRequest:
    """Item de entrada: seletor (resource, operation) e parâmetros.

    Parâmetros e binários ficam congelados enquanto o handler executa.
    """

    resource: str
    operation: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    binary: Mapping[str, BinaryData] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))
        object.__setattr__(self, "binary", MappingProxyType(dict(self.binary)))

"""Leitura tipada de parâmetros de um item e contexto do handler."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from api.payload_builders.zapsign.coercion import (
    clean_str,
    to_optional_bool,
    to_optional_int,
)
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.connectors.zapsign.models import ApiPayload
    from app.protocols.models import BinaryData, OperationRequest
    from app.protocols.zapsign_client import (
        FileDownloaderProtocol,
        ZapSignClientProtocol,
    )


class Parameters:
    """Acesso tolerante aos parâmetros de formulário de um item."""

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = values

    def raw(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def get_str(self, name: str, default: str = "") -> str:
        """Texto sem espaços nas bordas; ausente ou vazio retorna default."""
        return clean_str(self._values.get(name)) or default

    def get_bool(self, name: str, default: bool | None = None) -> bool | None:
        """Booleano informado; ausente retorna default (None preserva "não informado")."""
        value = to_optional_bool(self._values.get(name))
        return default if value is None else value

    def get_int(self, name: str, default: int | None = None) -> int | None:
        value = to_optional_int(self._values.get(name))
        return default if value is None else value

    def get_collection(self, name: str, key: str | None = None) -> list[dict[str, Any]]:
        """Lista de registros de uma coleção de formulário.

        Aceita lista direta, `{key: [...]}` (coleção fixa) ou um único dict.
        """
        value = self._values.get(name)
        if isinstance(value, dict) and key is not None and key in value:
            value = value[key]
        if value is None:
            return []
        if isinstance(value, dict):
            return [value]
        if isinstance(value, list | tuple):
            return [entry for entry in value if isinstance(entry, dict)]
        raise ValidationError(f'"{name}" must be a list of entries.', field=name)

    def get_mapping(self, name: str) -> dict[str, Any]:
        """Campos adicionais como dict (cópia); string JSON é decodificada.

        Raises:
            ValidationError: Se a string não for um objeto JSON válido.
        """
        value = self._values.get(name)
        if value is None or value == "":
            return {}
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError as exc:
                raise ValidationError(
                    f'"{name}" must be a valid JSON object.', field=name
                ) from exc
        if not isinstance(value, dict):
            raise ValidationError(f'"{name}" must be an object.', field=name)
        return dict(value)


def path_token(token: str) -> str:
    """Codifica um token para uso seguro em path de URL."""
    return quote(token.strip(), safe="")


@dataclass(frozen=True)
class OperationContext:
    """Tudo que um handler precisa para executar um item.

    Attributes:
        request: Item (resource, operation, parâmetros, binários)
        client: Cliente da API ZapSign
        item_index: Posição do item na execução
        downloader: Downloader de arquivos por URL (opcional)
    """

    request: OperationRequest
    client: ZapSignClientProtocol
    item_index: int = 0
    downloader: FileDownloaderProtocol | None = None

    @property
    def params(self) -> Parameters:
        return Parameters(self.request.parameters)

    def binary(self, property_name: str) -> BinaryData:
        """Retorna o anexo binário do item.

        Raises:
            ValidationError: Se o anexo não existir.
        """
        data = self.request.binary.get(property_name)
        if data is None:
            raise ValidationError(
                f'No binary data found in property "{property_name}" of item '
                f"{self.item_index}.",
                field="binary_property_name",
            )
        return data


OperationHandler = Callable[[OperationContext], Awaitable["ApiPayload"]]

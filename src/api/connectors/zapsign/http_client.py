"""Cliente HTTP especializado para a API ZapSign.

Estende HttpClient genérico com comportamentos específicos:
- Autenticação Bearer com token vindo de ZapSignSettings
- Resolução de paths contra a URL base (produção ou sandbox)
- Decodificação explícita da resposta em RawText | JsonObject | JsonArray
- Normalização de qualquer falha em ApiError e mensagem classificada
- Logging estruturado sem token
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, NoReturn

from api.connectors.zapsign.api_errors import (
    ApiError,
    ZapSignApiError,
    classify_api_error,
    normalize_api_error,
)
from api.connectors.zapsign.api_logging import log_api_error, log_success
from api.connectors.zapsign.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.zapsign.models import (
    ApiPayload,
    JsonArray,
    JsonObject,
    RequestSpec,
    decode_payload,
)
from app.observability.metrics import record_latency
from utils.errors import ValidationError

if TYPE_CHECKING:
    import httpx

    from config.settings import ZapSignSettings

logger: logging.Logger = logging.getLogger(__name__)


class ZapSignHttpClient(HttpClient):
    """Cliente HTTP da ZapSign: uma chamada autenticada por RequestSpec.

    Falhas HTTP (status >= 400) e de transporte viram ZapSignApiError com
    mensagem legível; o ApiError normalizado fica em `exc.api_error`.
    """

    def __init__(
        self,
        settings: ZapSignSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente ZapSign.

        Args:
            settings: Configuração explícita (token, ambiente, URLs)
            config: Configuração HTTP base; derivada das settings se None
            transport: Transporte httpx opcional (testes)
        """
        super().__init__(
            config
            or HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                default_headers={"User-Agent": settings.user_agent},
            ),
            transport,
        )
        self._settings = settings

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    async def request_json(self, spec: RequestSpec) -> ApiPayload:
        """Executa a chamada descrita em `spec` e decodifica a resposta.

        Raises:
            ValidationError: Se o token de API não está configurado.
            ZapSignApiError: Em status >= 400 ou falha de transporte.
        """
        url = self.build_url(spec.url)
        headers = self._build_headers()
        start = time.perf_counter()
        try:
            response = await self._send(spec, url, headers)
        except HttpError as exc:
            self._raise_api_error(
                normalize_api_error(None, transport_message=str(exc)),
                spec,
            )
        finally:
            record_latency(
                "zapsign_api",
                spec.method.lower(),
                (time.perf_counter() - start) * 1000,
            )

        if response.status_code >= 400:
            self._raise_api_error(
                normalize_api_error(response.status_code, response.text),
                spec,
            )

        payload = decode_payload(response.text)
        log_success(spec.method, spec.url, response.status_code, _loggable(payload))
        return payload

    def build_url(self, path: str) -> str:
        """Resolve um path da API contra a URL base configurada."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _build_headers(self) -> dict[str, str]:
        token = self._settings.api_token
        if not token or not token.strip():
            logger.error("zapsign_api_token_missing")
            raise ValidationError(
                "The ZapSign API token is not configured. "
                "Set ZAPSIGN_API_TOKEN with a valid token.",
                field="api_token",
            )
        return {
            "Authorization": f"Bearer {token.strip()}",
            "Accept": "application/json",
        }

    async def _send(
        self,
        spec: RequestSpec,
        url: str,
        headers: dict[str, str],
    ) -> httpx.Response:
        if spec.is_multipart:
            data: dict[str, str] = {}
            files: list[tuple[str, tuple[str, bytes, str]]] = []
            for part in spec.multipart or ():
                if part.filename is None:
                    data[part.name] = (
                        part.content.decode()
                        if isinstance(part.content, bytes)
                        else part.content
                    )
                    continue
                content = (
                    part.content.encode()
                    if isinstance(part.content, str)
                    else part.content
                )
                files.append((part.name, (part.filename, content, part.content_type)))
            return await self.request(
                spec.method,
                url,
                params=spec.query,
                data=data or None,
                files=files or None,
                headers=headers,
            )
        return await self.request(
            spec.method,
            url,
            json=spec.body,
            params=spec.query,
            headers=headers,
        )

    def _raise_api_error(self, api_error: ApiError, spec: RequestSpec) -> NoReturn:
        log_api_error(api_error, spec.method, spec.url)
        raise ZapSignApiError(classify_api_error(api_error), api_error)


def _loggable(payload: ApiPayload) -> object:
    if isinstance(payload, JsonObject):
        return payload.data
    if isinstance(payload, JsonArray):
        return payload.items
    return None


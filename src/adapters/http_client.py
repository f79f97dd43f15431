"""Wrapper de httpx (adaptador de transporte).

- `build_async_client` estandariza timeouts y headers para todo el proyecto.
- `HttpxTransport` implementa `core.interfaces.transport.Transport`: un round
  trip por llamada, sin reintentos, y traduce excepciones de httpx a la
  taxonomía del Core.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from core.config import AppSettings
from core.domain.errors import BadUrlError, TransportError
from core.interfaces.transport import TransportResponse

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults del proyecto.

    `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Transporte basado en `httpx.AsyncClient`.

    Si recibe un `client`, el ciclo de vida es del caller. Si no, crea uno con
    `build_async_client` y lo cierra en `aclose()`.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or build_async_client(settings)

    async def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        try:
            response = await self._client.request(
                method,
                url,
                headers=dict(headers),
                content=body,
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise BadUrlError(url) from exc
        except httpx.HTTPError as exc:
            logger.debug("%s %s failed: %r", method, url, exc)
            raise TransportError(exc) from exc

        return TransportResponse(status_code=response.status_code, content=response.content)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

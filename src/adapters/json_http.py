"""Utilidad HTTP JSON tipada.

Cuatro operaciones (`get`, `post`, `put`, `delete`) sobre un `Transport`:
serializan el payload, ejecutan un único round trip, validan el status (solo
2xx es éxito) y deserializan la respuesta al tipo pedido.

Orden de fallos por operación:
1) URL inválida      -> `BadUrlError` (sin tocar la red)
2) payload no JSON   -> `JsonEncodeError` (sin tocar la red)
3) fallo de conexión -> `TransportError`
4) status fuera 2xx  -> `BadStatusError(status)` (el body no se parsea)
5) body no encaja    -> `JsonDecodeError`

No hay reintentos ni estado compartido entre llamadas.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx

from core.domain.codec import decode_json, encode_json
from core.domain.errors import BadStatusError, BadUrlError
from core.interfaces.transport import Transport, TransportResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


def build_item_url(base: str, item_id: object) -> str:
    """Une `base` y un identificador como segmento de path: `base/id`."""

    return f"{base.rstrip('/')}/{item_id}"


def parse_url(url: str) -> str:
    """Valida que `url` sea un destino http(s) con host; si no, `BadUrlError`."""

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise BadUrlError(url) from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise BadUrlError(url)
    return url


class JsonHttp:
    """Fachada JSON sobre un `Transport`.

    Uso:
        async with HttpxTransport() as transport:
            http = JsonHttp(transport)
            dogs = await http.get("http://localhost:8001/dog", list[Dog])
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def _send(
        self,
        method: str,
        url: str,
        *,
        body: bytes | None = None,
    ) -> TransportResponse:
        headers = JSON_HEADERS if body is not None else {}
        response = await self._transport.request(method, url, headers, body)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        if not response.ok:
            logger.warning("%s %s returned status %s", method, url, response.status_code)
            raise BadStatusError(response.status_code)
        return response

    async def get(self, url: str, response_type: type[T]) -> T:
        response = await self._send("GET", parse_url(url))
        return decode_json(response.content, response_type)

    async def post(self, url: str, payload: object, response_type: type[T]) -> T:
        target = parse_url(url)
        body = encode_json(payload)
        response = await self._send("POST", target, body=body)
        return decode_json(response.content, response_type)

    async def put(self, url: str, payload: object, response_type: type[T]) -> T:
        """Igual que `post` pero con PUT. `url` ya debe incluir el id del recurso."""

        target = parse_url(url)
        body = encode_json(payload)
        response = await self._send("PUT", target, body=body)
        return decode_json(response.content, response_type)

    async def delete(self, url: str, item_id: object) -> None:
        """DELETE sobre `url/item_id`. Sin body; solo 2xx es éxito."""

        await self._send("DELETE", parse_url(build_item_url(url, item_id)))

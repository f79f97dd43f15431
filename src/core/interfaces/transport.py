"""Contrato del transporte HTTP.

El transporte hace un único round trip y devuelve status + bytes. No interpreta
el status: la validación 2xx vive en la utilidad HTTP. Los fallos de conexión
se reportan como `TransportError`, distintos de los fallos por status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Respuesta cruda de un round trip."""

    status_code: int
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code <= 299


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo de un transporte HTTP asíncrono."""

    async def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        """Ejecuta la request y devuelve la respuesta sin validar el status."""

        ...

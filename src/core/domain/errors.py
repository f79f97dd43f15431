"""Taxonomía cerrada de errores HTTP.

Ningún error es reintentable en esta capa: el caller decide qué hacer.
Cada error expone `kind` (máquina) y `description` (humano, una línea).
"""

from __future__ import annotations

from enum import Enum


class HttpErrorKind(str, Enum):
    """Tipos de fallo que puede producir la utilidad HTTP."""

    BAD_STATUS = "bad_status"
    BAD_URL = "bad_url"
    JSON_ENCODE = "json_encode"
    JSON_DECODE = "json_decode"
    TRANSPORT = "transport"


class HttpError(Exception):
    """Base de la taxonomía. `str(err)` devuelve `err.description`."""

    kind: HttpErrorKind

    @property
    def description(self) -> str:
        return "HTTP request failed"

    def __str__(self) -> str:
        return self.description


class BadStatusError(HttpError):
    """Respuesta con status fuera del rango 2xx (4xx y 5xx no se distinguen)."""

    kind = HttpErrorKind.BAD_STATUS

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status

    @property
    def description(self) -> str:
        return f"bad status {self.status}"

    def __repr__(self) -> str:
        return f"BadStatusError(status={self.status})"


class BadUrlError(HttpError):
    """La URL no puede convertirse en un destino de request válido."""

    kind = HttpErrorKind.BAD_URL

    def __init__(self, url: str | None = None) -> None:
        super().__init__(url)
        self.url = url

    @property
    def description(self) -> str:
        return "bad URL"


class JsonEncodeError(HttpError):
    """El payload no se pudo serializar a JSON (antes de tocar la red)."""

    kind = HttpErrorKind.JSON_ENCODE

    @property
    def description(self) -> str:
        return "JSON encoding failed"


class JsonDecodeError(HttpError):
    """El body de una respuesta 2xx no encaja con el tipo esperado."""

    kind = HttpErrorKind.JSON_DECODE

    def __init__(self, cause: Exception) -> None:
        super().__init__(cause)
        self.cause = cause

    @property
    def description(self) -> str:
        return "JSON decoding failed"


class TransportError(HttpError):
    """Fallo a nivel conexión (refused, timeout, DNS...)."""

    kind = HttpErrorKind.TRANSPORT

    def __init__(self, cause: Exception) -> None:
        super().__init__(cause)
        self.cause = cause

    @property
    def description(self) -> str:
        detail = str(self.cause) or type(self.cause).__name__
        return f"transport failed: {detail}"

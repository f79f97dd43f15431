"""Codec JSON del cliente.

JSON es el único formato de cable. Los errores de codificación y decodificación
se traducen a la taxonomía (`JsonEncodeError` / `JsonDecodeError`) para poder
distinguirlos de los fallos HTTP.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from core.domain.errors import JsonDecodeError, JsonEncodeError

T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def encode_json(payload: object) -> bytes:
    """Serializa `payload` (modelos pydantic, dataclasses, listas, dicts...) a bytes UTF-8.

    Valores no representables en JSON (objetos arbitrarios, NaN, infinito)
    producen `JsonEncodeError`.
    """

    try:
        jsonable = to_jsonable_python(payload)
        text = json.dumps(jsonable, ensure_ascii=False, allow_nan=False)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise JsonEncodeError() from exc
    return text.encode("utf-8")


def decode_json(content: bytes, response_type: type[T]) -> T:
    """Parsea y valida `content` como `response_type` (p.ej. `Dog`, `list[Dog]`)."""

    try:
        return _adapter(response_type).validate_json(content)
    except ValidationError as exc:
        raise JsonDecodeError(exc) from exc

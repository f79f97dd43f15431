"""Contrato del observador de resultados (capa UI).

El Core no conoce ningún framework de UI: tras un listado exitoso llama a
`on_dogs_loaded` y es el receptor quien decide dónde y cómo aplicar el cambio.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Dog


@runtime_checkable
class DogsSink(Protocol):
    def on_dogs_loaded(self, dogs: list[Dog]) -> None:
        """Recibe la colección completa tras un bulk fetch."""

        ...

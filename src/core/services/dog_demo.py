"""Flujo de demostración CRUD.

Secuencia (cada paso se espera antes del siguiente):
create -> read -> update -> delete -> list -> `sink.on_dogs_loaded(...)`.

Cualquier `HttpError` aborta el resto de la secuencia. Lo ya hecho queda hecho
(no hay rollback) y el error se reporta como texto legible en `DemoResult`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from core.domain.errors import HttpError
from core.domain.models import Dog, NewDog
from core.interfaces.observer import DogsSink

if TYPE_CHECKING:
    from adapters.dog_api import DogApi

logger = logging.getLogger(__name__)


@dataclass
class DemoHooks:
    """Callbacks opcionales para la capa UI (progreso)."""

    step: Callable[[str], None] | None = None


@dataclass
class DemoResult:
    """Salida de una ejecución del flujo."""

    created: Dog | None = None
    fetched: Dog | None = None
    updated: Dog | None = None
    deleted_id: int | None = None
    dogs: list[Dog] | None = None
    error: str | None = None
    steps: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


async def run_demo(
    api: DogApi,
    sink: DogsSink,
    *,
    new_dog: NewDog | None = None,
    read_id: int = 1,
    update: tuple[str, str] = ("Moo", "Cow"),
    delete_id: int = 2,
    hooks: DemoHooks | None = None,
) -> DemoResult:
    hooks = hooks or DemoHooks()
    new_dog = new_dog or NewDog(name="Clarice", breed="Whippet")
    result = DemoResult()

    def report(message: str) -> None:
        result.steps.append(message)
        logger.info(message)
        if hooks.step:
            hooks.step(message)

    try:
        result.created = await api.post_dog(new_dog)
        report(f"created dog with id {result.created.id}")

        result.fetched = await api.get_dog(read_id)
        report(f"dog {read_id} = {result.fetched}")

        name, breed = update
        changed = result.fetched.model_copy(update={"name": name, "breed": breed})
        result.updated = await api.put_dog(changed)
        report(f"updated dog {result.updated.id}: {result.updated}")

        await api.delete_dog(delete_id)
        result.deleted_id = delete_id
        report(f"deleted dog {delete_id}")

        result.dogs = await api.get_dogs()
        for dog in result.dogs:
            report(str(dog))
    except HttpError as exc:
        result.error = exc.description
        logger.error("demo aborted: %s", exc.description)
        return result

    sink.on_dogs_loaded(result.dogs)
    return result

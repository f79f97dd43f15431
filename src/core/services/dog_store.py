"""Colección observable de perros (lado UI).

`ObservableDogs` es la lista que observa la UI. Solo se escribe tras un bulk
fetch exitoso, y `MainContextSink` garantiza que esa escritura ocurra en el
event loop designado como "main".
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from core.domain.models import Dog
from core.interfaces.observer import DogsSink

logger = logging.getLogger(__name__)

DogsListener = Callable[[list[Dog]], None]


class ObservableDogs:
    """Lista mutable de `Dog` con suscriptores."""

    def __init__(self) -> None:
        self._dogs: list[Dog] = []
        self._listeners: list[DogsListener] = []

    @property
    def dogs(self) -> list[Dog]:
        return list(self._dogs)

    def subscribe(self, listener: DogsListener) -> Callable[[], None]:
        """Registra `listener`; devuelve una función para desuscribirlo."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_dogs_loaded(self, dogs: list[Dog]) -> None:
        self._dogs = list(dogs)
        logger.debug("observable collection updated with %d dogs", len(self._dogs))
        snapshot = self.dogs
        for listener in list(self._listeners):
            listener(snapshot)


class MainContextSink:
    """Reenvía `on_dogs_loaded` al event loop designado como "main".

    La llamada puede hacerse desde cualquier hilo; `target` siempre se ejecuta
    dentro de `loop`.
    """

    def __init__(self, target: DogsSink, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._target = target
        self._loop = loop or asyncio.get_running_loop()

    def on_dogs_loaded(self, dogs: list[Dog]) -> None:
        self._loop.call_soon_threadsafe(self._target.on_dogs_loaded, list(dogs))

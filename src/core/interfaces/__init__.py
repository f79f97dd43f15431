"""Interfaces/abstracciones del Core.

- Contratos (Protocol) que implementan adaptadores concretos (transporte HTTP)
  y la capa que observa los resultados (UI/CLI).
"""

from core.interfaces.observer import DogsSink
from core.interfaces.transport import Transport, TransportResponse

__all__ = [
    "DogsSink",
    "Transport",
    "TransportResponse",
]

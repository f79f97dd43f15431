"""Modelos del dominio (Pydantic v2).

- `Dog`: registro tal como lo devuelve el servidor (con `id` asignado).
- `NewDog`: payload de creación; idéntico a `Dog` pero sin `id`.

El cliente no guarda copia autoritativa: cada operación envía o recibe una
representación nueva.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class NewDog(BaseModel):
    """Payload de creación (POST). Nunca lleva `id`."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(
        ...,
        description="Nombre del perro.",
    )
    breed: str = Field(
        ...,
        description="Raza del perro.",
    )

    def with_id(self, dog_id: int) -> Dog:
        return Dog(id=dog_id, name=self.name, breed=self.breed)

    def __str__(self) -> str:
        return f"{self.name} is a {self.breed}"


class Dog(BaseModel):
    """Registro de perro con identificador asignado por el servidor."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    id: int = Field(
        ...,
        description="Identificador asignado por el servidor.",
    )
    name: str = Field(
        ...,
        description="Nombre del perro.",
    )
    breed: str = Field(
        ...,
        description="Raza del perro.",
    )

    def without_id(self) -> NewDog:
        return NewDog(name=self.name, breed=self.breed)

    def __str__(self) -> str:
        return f"{self.name} is a {self.breed}"

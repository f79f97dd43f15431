"""Cliente del recurso REST `dog`.

Convenciones del servidor:
- `BASE`       -> GET (listado), POST (alta)
- `BASE/{id}`  -> GET (uno), PUT (actualización), DELETE (baja)

Se asume (sin forzarlo) que POST y PUT devuelven el registro completo con `id`.
"""

from __future__ import annotations

from adapters.json_http import JsonHttp, build_item_url
from core.config import AppSettings
from core.domain.models import Dog, NewDog
from core.interfaces.transport import Transport


class DogApi:
    """Operaciones CRUD tipadas sobre el recurso `dog`."""

    def __init__(
        self,
        transport: Transport,
        *,
        base_url: str | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        if base_url is None:
            base_url = (settings or AppSettings()).base_url
        self.base_url = base_url
        self._http = JsonHttp(transport)

    async def get_dogs(self) -> list[Dog]:
        return await self._http.get(self.base_url, list[Dog])

    async def get_dog(self, dog_id: int) -> Dog:
        return await self._http.get(build_item_url(self.base_url, dog_id), Dog)

    async def post_dog(self, dog: NewDog) -> Dog:
        return await self._http.post(self.base_url, dog, Dog)

    async def put_dog(self, dog: Dog) -> Dog:
        return await self._http.put(build_item_url(self.base_url, dog.id), dog, Dog)

    async def delete_dog(self, dog_id: int) -> None:
        await self._http.delete(self.base_url, dog_id)

"""In-memory test doubles: a REST dog backend and a recording transport."""

from __future__ import annotations

import json
import re
from typing import Mapping

import httpx

from core.interfaces.transport import TransportResponse

BASE_URL = "http://dogs.test/dog"

SEED_DOGS: list[dict[str, object]] = [
    {"id": 1, "name": "Comet", "breed": "Whippet"},
    {"id": 2, "name": "Oscar", "breed": "German Shorthaired Pointer"},
    {"id": 3, "name": "Maisey", "breed": "Treeing Walker Coonhound"},
]

_ITEM_PATH = re.compile(r"^/dog/(?P<id>[^/]+)$")


class FakeDogServer:
    """Minimal REST backend: `/dog` (GET, POST) and `/dog/{id}` (GET, PUT, DELETE)."""

    def __init__(self) -> None:
        self.dogs: dict[int, dict[str, object]] = {int(d["id"]): dict(d) for d in SEED_DOGS}
        self.next_id = max(self.dogs) + 1
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/dog":
            if request.method == "GET":
                return httpx.Response(200, json=[self.dogs[k] for k in sorted(self.dogs)])
            if request.method == "POST":
                data = json.loads(request.content)
                if "id" in data:
                    return httpx.Response(400, json={"detail": "id not allowed"})
                dog = {"id": self.next_id, **data}
                self.dogs[self.next_id] = dog
                self.next_id += 1
                return httpx.Response(201, json=dog)
            return httpx.Response(405)

        match = _ITEM_PATH.match(path)
        if match is None or not match["id"].isdigit():
            return httpx.Response(404, json={"detail": "not found"})
        dog_id = int(match["id"])
        if dog_id not in self.dogs:
            return httpx.Response(404, json={"detail": "not found"})

        if request.method == "GET":
            return httpx.Response(200, json=self.dogs[dog_id])
        if request.method == "PUT":
            data = json.loads(request.content)
            dog = {**data, "id": dog_id}
            self.dogs[dog_id] = dog
            return httpx.Response(200, json=dog)
        if request.method == "DELETE":
            del self.dogs[dog_id]
            return httpx.Response(204)
        return httpx.Response(405)


class RecordingTransport:
    """Transport fake that returns canned responses and records each call."""

    def __init__(self, *responses: TransportResponse) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[str, str, dict[str, str], bytes | None]] = []

    async def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        self.calls.append((method, url, dict(headers), body))
        return self._responses.pop(0)


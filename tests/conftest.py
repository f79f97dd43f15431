"""Shared fixtures: an in-memory dog server mounted on `httpx.MockTransport`."""

from __future__ import annotations

from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from adapters.dog_api import DogApi
from adapters.http_client import HttpxTransport, build_async_client
from core.config import AppSettings

from fakes import BASE_URL, FakeDogServer


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings(base_url=BASE_URL, http_timeout_seconds=5.0)


@pytest.fixture()
def server() -> FakeDogServer:
    return FakeDogServer()


@pytest_asyncio.fixture()
async def transport(server: FakeDogServer, settings: AppSettings) -> AsyncIterator[HttpxTransport]:
    async with build_async_client(settings, transport=httpx.MockTransport(server.handler)) as client:
        yield HttpxTransport(client)


@pytest.fixture()
def api(transport: HttpxTransport) -> DogApi:
    return DogApi(transport, base_url=BASE_URL)


@pytest.fixture()
def base_url() -> str:
    return BASE_URL

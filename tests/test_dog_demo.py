"""Tests for the demo flow and the observable dog collection."""

from __future__ import annotations

import asyncio
import threading

import pytest

from adapters.dog_api import DogApi
from core.domain.models import Dog
from core.services.dog_demo import DemoHooks, run_demo
from core.services.dog_store import MainContextSink, ObservableDogs


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[list[Dog]] = []

    def on_dogs_loaded(self, dogs: list[Dog]) -> None:
        self.calls.append(dogs)


@pytest.mark.unit
class TestRunDemo:
    @pytest.mark.asyncio
    async def test_full_sequence(self, api: DogApi, server) -> None:
        sink = RecordingSink()
        steps: list[str] = []

        result = await run_demo(api, sink, hooks=DemoHooks(step=steps.append))

        assert result.ok
        assert result.created == Dog(id=4, name="Clarice", breed="Whippet")
        assert result.fetched == Dog(id=1, name="Comet", breed="Whippet")
        assert result.updated == Dog(id=1, name="Moo", breed="Cow")
        assert result.deleted_id == 2
        assert [d.id for d in result.dogs] == [1, 3, 4]
        assert sink.calls == [result.dogs]
        assert steps[0] == "created dog with id 4"
        assert "Moo is a Cow" in steps
        assert [r.method for r in server.requests] == ["POST", "GET", "PUT", "DELETE", "GET"]

    @pytest.mark.asyncio
    async def test_failure_aborts_remaining_steps(self, api: DogApi, server) -> None:
        sink = RecordingSink()

        result = await run_demo(api, sink, delete_id=99)

        assert not result.ok
        assert result.error == "bad status 404"
        # Partial completion is kept: create and update already happened.
        assert result.created is not None
        assert server.dogs[1]["name"] == "Moo"
        assert result.deleted_id is None
        assert result.dogs is None
        assert sink.calls == []
        assert [r.method for r in server.requests] == ["POST", "GET", "PUT", "DELETE"]

    @pytest.mark.asyncio
    async def test_read_of_missing_dog_stops_before_update(self, api: DogApi, server) -> None:
        result = await run_demo(api, RecordingSink(), read_id=42)
        assert result.error == "bad status 404"
        assert result.updated is None
        assert [r.method for r in server.requests] == ["POST", "GET"]


@pytest.mark.unit
class TestObservableDogs:
    def test_notifies_subscribers(self) -> None:
        store = ObservableDogs()
        seen: list[list[Dog]] = []
        unsubscribe = store.subscribe(seen.append)

        dogs = [Dog(id=1, name="Comet", breed="Whippet")]
        store.on_dogs_loaded(dogs)
        assert store.dogs == dogs
        assert seen == [dogs]

        unsubscribe()
        store.on_dogs_loaded([])
        assert store.dogs == []
        assert len(seen) == 1

    def test_snapshot_is_a_copy(self) -> None:
        store = ObservableDogs()
        store.on_dogs_loaded([Dog(id=1, name="Comet", breed="Whippet")])
        store.dogs.clear()
        assert len(store.dogs) == 1


@pytest.mark.unit
class TestMainContextSink:
    @pytest.mark.asyncio
    async def test_delivers_on_designated_loop(self) -> None:
        loop = asyncio.get_running_loop()
        store = ObservableDogs()
        delivered_on: list[int] = []
        store.subscribe(lambda _: delivered_on.append(threading.get_ident()))
        sink = MainContextSink(store, loop)
        dogs = [Dog(id=3, name="Maisey", breed="Treeing Walker Coonhound")]

        worker = threading.Thread(target=sink.on_dogs_loaded, args=(dogs,))
        worker.start()
        worker.join()
        assert store.dogs == []

        await asyncio.sleep(0)
        assert store.dogs == dogs
        assert delivered_on == [threading.get_ident()]

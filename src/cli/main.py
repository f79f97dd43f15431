"""CLI principal (Typer).

Comandos CRUD sobre el recurso `dog` más el flujo `demo` y el sub-app `doctor`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.dog_api import DogApi
from adapters.http_client import HttpxTransport
from adapters.json_exporter import export_dogs_json
from cli import doctor
from cli.ui_components import build_demo_panel, build_dogs_table, print_banner
from core.config import AppSettings
from core.domain.errors import HttpError
from core.domain.models import Dog, NewDog
from core.logging import configure_logging
from core.services.dog_demo import DemoHooks, DemoResult, run_demo
from core.services.dog_store import MainContextSink, ObservableDogs

T = TypeVar("T")

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Typed CRUD client for a REST `dog` resource.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@dataclass
class CliState:
    settings: AppSettings


def build_transport(settings: AppSettings) -> HttpxTransport:
    return HttpxTransport(settings=settings)


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    where = f"{exc.title}.{loc}" if loc else exc.title
    return f"invalid {where}: {first['msg']}"


def _run_with_api(ctx: typer.Context, action: Callable[[DogApi], Awaitable[T]]) -> T:
    state: CliState = ctx.obj

    async def runner() -> T:
        async with build_transport(state.settings) as transport:
            api = DogApi(transport, settings=state.settings)
            return await action(api)

    try:
        return asyncio.run(runner())
    except HttpError as exc:
        logger.debug("command failed", exc_info=exc)
        _console.print(f"[red]error =[/red] {exc.description}")
        raise typer.Exit(code=1) from exc
    except ValidationError as exc:
        logger.debug("invalid model input", exc_info=exc)
        _console.print(f"[red]error =[/red] {_describe_validation_error(exc)}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        help="Resource collection URL (overrides DOG_CLIENT_BASE_URL).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    overrides: dict[str, Any] = {}
    if base_url:
        overrides["base_url"] = base_url
    settings = AppSettings(**overrides)
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = CliState(settings=settings)


@app.command("list")
def list_dogs(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the list to a JSON file."),
) -> None:
    """Fetch every dog."""

    dogs = _run_with_api(ctx, lambda api: api.get_dogs())
    if output is not None:
        path = export_dogs_json(dogs=dogs, output_path=output)
        _console.print(f"[green]Saved {len(dogs)} dogs to:[/green] {path}")
    if as_json:
        typer.echo(json.dumps([d.model_dump(mode="json") for d in dogs], indent=2))
        return
    _console.print(build_dogs_table(dogs))


@app.command("get")
def get_dog(ctx: typer.Context, dog_id: int = typer.Argument(..., help="Dog id.")) -> None:
    """Fetch a single dog by id."""

    dog = _run_with_api(ctx, lambda api: api.get_dog(dog_id))
    _console.print(build_dogs_table([dog], title=str(dog)))


@app.command("create")
def create_dog(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Dog name."),
    breed: str = typer.Option(..., "--breed", help="Dog breed."),
) -> None:
    """Create a dog; the server assigns its id."""

    dog = _run_with_api(ctx, lambda api: api.post_dog(NewDog(name=name, breed=breed)))
    _console.print(f"created dog with id {dog.id}")


@app.command("update")
def update_dog(
    ctx: typer.Context,
    dog_id: int = typer.Argument(..., help="Dog id."),
    name: str | None = typer.Option(None, "--name", help="New name."),
    breed: str | None = typer.Option(None, "--breed", help="New breed."),
) -> None:
    """Update the name and/or breed of an existing dog."""

    if name is None and breed is None:
        raise typer.BadParameter("pass --name and/or --breed")

    async def action(api: DogApi) -> Dog:
        current = await api.get_dog(dog_id)
        changes = {k: v for k, v in {"name": name, "breed": breed}.items() if v is not None}
        return await api.put_dog(current.model_copy(update=changes))

    dog = _run_with_api(ctx, action)
    _console.print(f"updated dog {dog.id}: {dog}")


@app.command("delete")
def delete_dog(ctx: typer.Context, dog_id: int = typer.Argument(..., help="Dog id.")) -> None:
    """Delete a dog by id."""

    _run_with_api(ctx, lambda api: api.delete_dog(dog_id))
    _console.print(f"deleted dog {dog_id}")


@app.command("demo")
def demo(ctx: typer.Context) -> None:
    """Run create -> read -> update -> delete -> list against the server."""

    print_banner(_console)
    store = ObservableDogs()

    async def action(api: DogApi) -> DemoResult:
        sink = MainContextSink(store, asyncio.get_running_loop())
        result = await run_demo(api, sink, hooks=DemoHooks(step=_console.print))
        # Deja que el loop aplique la actualización encolada por el sink.
        await asyncio.sleep(0)
        return result

    result = _run_with_api(ctx, action)
    _console.print(build_demo_panel(result))
    if store.dogs:
        _console.print(build_dogs_table(store.dogs))
    if not result.ok:
        raise typer.Exit(code=1)


def run() -> None:
    app()

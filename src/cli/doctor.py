"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.json_http import parse_url
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import BadUrlError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except Exception as exc:
        return False, str(exc) or type(exc).__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the effective configuration and check the resource endpoint."""

    settings: AppSettings = ctx.obj.settings if ctx.obj is not None else AppSettings()

    table = Table(title="dog-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("User .env", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Log level", "OK", settings.log_level.upper())

    try:
        parse_url(settings.base_url)
    except BadUrlError as exc:
        table.add_row("Base URL", "FAIL", f"{exc.description}: {settings.base_url}")
        _console.print(table)
        raise typer.Exit(code=1) from exc
    table.add_row("Base URL", "OK", settings.base_url)

    ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Start the dog server or point the client elsewhere with "
            "`dog-client doctor set-url <url>`."
        )
        raise typer.Exit(code=1)


@app.command(name="set-url")
def set_url(url: str = typer.Argument(..., help="Resource collection URL, e.g. http://localhost:8001/dog")) -> None:
    """Persist the base URL in the user config .env."""

    try:
        parse_url(url)
    except BadUrlError as exc:
        raise typer.BadParameter(exc.description) from exc

    env_path = write_user_env_vars({"DOG_CLIENT_BASE_URL": url})
    _console.print(f"[green]Saved base URL to:[/green] {env_path}")

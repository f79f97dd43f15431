"""Componentes de UI para CLI (Rich).

Tablas/paneles reutilizables por varios comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Dog
from core.services.dog_demo import DemoResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("dog-client", style="bold cyan")
    subtitle = Text("Typed REST client • CRUD • JSON", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_dogs_table(dogs: list[Dog], *, title: str = "Dogs") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Name", style="white")
    table.add_column("Breed", style="magenta")
    for dog in dogs:
        table.add_row(str(dog.id), dog.name, dog.breed)
    return table


def build_demo_panel(result: DemoResult) -> Panel:
    """Panel con el resumen de `run_demo`."""

    body = Text()
    for line in result.steps:
        body.append(f"- {line}\n")
    if result.error:
        body.append(f"\nerror = {result.error}", style="bold red")
        border = "red"
    else:
        body.append("\nOK", style="bold green")
        border = "green"
    return Panel(body, title=Text("Demo", style="bold yellow"), border_style=border)

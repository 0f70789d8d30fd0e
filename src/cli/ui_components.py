"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `list` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import BreedListResponse, ErrorResponse


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite en modo `--json` para no ensuciar la salida en pipelines.
    """

    title = Text("DOG BREEDS", style="bold cyan")
    subtitle = Text("dog.ceo • listado aplanado de razas", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_breeds_table(response: BreedListResponse) -> Table:
    """Tabla Rich con la lista aplanada, en el orden recibido."""

    table = Table(title="Dog Breeds", caption=f"{len(response.body)} entries")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    for index, name in enumerate(response.body, start=1):
        table.add_row(str(index), name)
    return table


def build_error_panel(error: ErrorResponse) -> Panel:
    """Panel para presentar un `ErrorResponse`."""

    body = Text()
    body.append(f"{error.message}\n", style="bold")
    body.append(f"statusCode: {error.status_code}", style="dim")
    return Panel(body, title=Text("Error", style="bold red"), border_style="red")

"""CLI principal (Typer).

Por qué una CLI:
- Permite invocar localmente el mismo flujo que ejecuta la función serverless.
- `--json` imprime exactamente el dict que devolvería la plataforma.
"""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.lambda_handler import list_breeds
from cli import doctor
from cli.ui_components import build_breeds_table, build_error_panel, print_banner
from core.config import AppSettings
from core.domain.models import ErrorResponse, to_platform_dict
from core.logging_config import configure_logging

app = typer.Typer(no_args_is_help=True, help="Flattened dog breed list from dog.ceo.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command(name="list")
def list_command(
    as_json: bool = typer.Option(False, "--json", help="Print the raw response dict as JSON."),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Override DOG_BREEDS_REQUEST_TIMEOUT_SECONDS.",
    ),
    no_timeout: bool = typer.Option(False, "--no-timeout", help="Wait for the upstream without a deadline."),
    url: Optional[str] = typer.Option(None, "--url", help="Override DOG_BREEDS_BREEDS_API_URL."),
) -> None:
    """Fetch, flatten and print the dog breed list."""

    overrides: dict[str, object] = {}
    if url:
        overrides["breeds_api_url"] = url
    if timeout is not None:
        overrides["request_timeout_seconds"] = timeout
    if no_timeout:
        overrides["timeout_enabled"] = False

    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(settings.log_level)
    result = asyncio.run(list_breeds(settings))

    if as_json:
        typer.echo(json.dumps(to_platform_dict(result), ensure_ascii=False, indent=2))
    elif isinstance(result, ErrorResponse):
        _console.print(build_error_panel(result))
    else:
        print_banner(_console)
        _console.print(build_breeds_table(result))

    if isinstance(result, ErrorResponse):
        raise typer.Exit(code=1)


def run() -> None:
    app()

"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.lambda_handler import list_breeds
from core.config import AppSettings
from core.domain.models import ErrorResponse

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


def _check_payload(settings: AppSettings) -> tuple[bool, str]:
    """Run the real flow once and summarise the result."""

    result = asyncio.run(list_breeds(settings))
    if isinstance(result, ErrorResponse):
        return False, f"{result.status_code} {result.message}"
    return True, f"{len(result.body)} flattened breeds"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured endpoint."""

    settings = _load_settings()

    table = Table(title="Dog Breeds Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Endpoint", "OK", settings.breeds_api_url)
    if settings.timeout_enabled:
        table.add_row("Timeout", "OK", f"{settings.request_timeout_seconds:g}s")
    else:
        table.add_row("Timeout", "WARN", "Disabled -> waits for upstream (httpx limit only)")

    ok_http, detail_http = asyncio.run(_check_http(settings.breeds_api_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    ok_payload, detail_payload = _check_payload(settings)
    table.add_row("Breed list", "OK" if ok_payload else "FAIL", detail_payload)

    _console.print(table)

    if not (ok_http and ok_payload):
        raise typer.Exit(code=1)


@app.command(name="show-config")
def show_config() -> None:
    """Print the effective DOG_BREEDS_* settings."""

    settings = _load_settings()
    table = Table(title="Effective configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in settings.model_dump().items():
        table.add_row(f"DOG_BREEDS_{key.upper()}", str(value))
    _console.print(table)

# src/inciscope/cli/app.py
"""Command-line interface for inciscope.

This module provides a thin Typer wrapper around the session layer.
Each command:
1. Parses args (via Typer)
2. Drives a session through an InciClient
3. Derives the view model
4. Renders it with Rich
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console

from inciscope import __version__
from inciscope.client import InciClient
from inciscope.config import load_settings
from inciscope.exceptions import ConfigError
from inciscope.logging_config import setup_logging
from inciscope.rendering import (
    render_error,
    render_health,
    render_search_table,
    render_validation,
)
from inciscope.settings import Settings
from inciscope.view import SearchView, ValidationView, compose_health, compose_progress

app = typer.Typer(
    name="inciscope",
    help="inciscope - search INCI ingredients and validate formulations.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"inciscope {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    backend_url: str = typer.Option(
        None,
        "--backend-url",
        "-b",
        help="Backend address (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """inciscope - INCI search and compliance client."""
    try:
        settings = load_settings(config_file, backend_url=backend_url)
    except ConfigError as e:
        console.print(render_error(str(e)))
        raise typer.Exit(1) from None

    setup_logging(settings.log_level, settings.log_file)
    ctx.obj = settings


@app.command()
def health(ctx: typer.Context) -> None:
    """Check whether the backend is reachable."""
    settings: Settings = ctx.obj
    healthy = asyncio.run(_probe(settings))
    console.print(render_health(compose_health(healthy), settings.backend_url))
    if not healthy:
        raise typer.Exit(1)


async def _probe(settings: Settings) -> bool:
    async with InciClient(settings) as client:
        return await client.health.probe()


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Free-text ingredient query"),
    details: bool = typer.Option(
        False,
        "--details",
        "-d",
        help="Show source IDs, functions, and all scores",
    ),
) -> None:
    """Search the ingredient database."""
    if not query.strip():
        console.print(render_error("Please enter a query."))
        raise typer.Exit(1)

    view = asyncio.run(_search(ctx.obj, query))

    if view.error:
        console.print(render_error(view.error))
        raise typer.Exit(1)
    if not view.rows:
        console.print(f"[dim]{view.empty_message}[/dim]")
        return
    console.print(render_search_table(view, show_details=details))


async def _search(settings: Settings, query: str) -> SearchView:
    async with InciClient(settings) as client:
        with console.status("Searching..."):
            await client.search.run_search(query)
        return client.view().search


@app.command()
def validate(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Formulation name"),
    ingredients: str = typer.Option(
        None,
        "--ingredients",
        "-i",
        help='JSON object of ingredient -> concentration, e.g. \'{"Aqua": "40%"}\'',
    ),
    file: Path = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read the ingredients JSON from a file",
    ),
) -> None:
    """Validate a formulation for regulatory compliance."""
    if (ingredients is None) == (file is None):
        console.print(render_error("Provide exactly one of --ingredients or --file."))
        raise typer.Exit(2)

    raw = ingredients if ingredients is not None else file.read_text(encoding="utf-8")
    if not raw.strip():
        console.print(render_error("No ingredients given."))
        raise typer.Exit(1)

    view = asyncio.run(_validate(ctx.obj, name, raw))
    console.print(render_validation(view))
    if view.error:
        raise typer.Exit(1)


async def _validate(settings: Settings, name: str, raw: str) -> ValidationView:
    async with InciClient(settings) as client:
        with console.status("Submitting formulation...") as status:

            def on_progress() -> None:
                progress = compose_progress(client.narrator)
                if progress.phases:
                    status.update(progress.phases[-1])

            unsubscribe = client.narrator.subscribe(on_progress)
            try:
                await client.validation.run_validate(name, raw)
            finally:
                unsubscribe()
        return client.view().validation


@app.command()
def tui(ctx: typer.Context) -> None:
    """Launch the interactive terminal UI."""
    from inciscope.tui import main as tui_main

    tui_main(ctx.obj)

# wayfinder/cli.py
"""Typer-based CLI for inspecting and resolving deep links."""

from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import FactoryImportError, InvalidFactoryError, SettingsError
from .log import configure_logging
from .resolver import DestinationResolver
from .settings import load_settings
from .url_router import URLRouter

app = typer.Typer(help="Resolve deep links into navigation destinations")
console = Console()


def load_factory(reference: str):
    """Import ``package.module:attribute`` and return the attribute.

    The working directory is importable, so uninstalled local modules work.
    """

    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise FactoryImportError(f"Expected 'module:attribute', got {reference!r}")
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        target = importlib.import_module(module_name)
    except ImportError as exc:
        raise FactoryImportError(f"Cannot import module {module_name!r}: {exc}") from exc
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as exc:
            raise FactoryImportError(f"{module_name!r} has no attribute {attr_path!r}") from exc
    return target


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Settings JSON file (default: ~/.config/wayfinder/config.json)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    try:
        settings = load_settings(config)
    except SettingsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc
    configure_logging("DEBUG" if verbose else settings["logging"]["level"])
    ctx.obj = URLRouter.from_settings(settings)


@app.command()
def inspect(ctx: typer.Context, url: str) -> None:
    """Show how a link splits into segments and parameters."""

    router: URLRouter = ctx.obj
    route = router.parse(url)
    if route is None:
        typer.echo(f"Error: cannot parse {url!r} as a URL", err=True)
        raise typer.Exit(1)

    table = Table(title=escape(url))
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("scheme", escape(route.scheme))
    table.add_row("host", escape(route.host or "-"))
    for index, segment in enumerate(route.segments):
        table.add_row(f"segment[{index}]", escape(segment))
    for key, value in route.query.items():
        table.add_row(f"param {escape(key)}", escape(value))
    console.print(table)
    if not router.supports(route.scheme):
        console.print(f"[yellow]Scheme {escape(route.scheme)} is not in the allowed list")


@app.command()
def resolve(
    ctx: typer.Context,
    url: str,
    factory: str = typer.Option(..., "--factory", "-f", help="Destination factory as module:attribute"),
) -> None:
    """Resolve a link with a destination factory and print each destination."""

    try:
        build = load_factory(factory)
    except FactoryImportError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc

    try:
        resolution = DestinationResolver(ctx.obj).resolve_detailed(url, build)
    except InvalidFactoryError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc
    if not resolution:
        typer.echo(f"Unresolved: {resolution.reason.value}", err=True)
        raise typer.Exit(1)
    for destination in resolution.destinations:
        typer.echo(repr(destination))


if __name__ == "__main__":  # pragma: no cover
    app()

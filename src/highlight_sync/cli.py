"""CLI for highlight-sync."""

from pathlib import Path
from typing import Annotated

import requests
import typer
from loguru import logger

from highlight_sync.api import SiteleafApi
from highlight_sync.config import load_config
from highlight_sync.core.cache import CollectionCache
from highlight_sync.logging_config import configure_logging
from highlight_sync.parsers import DEFAULT_PARSERS
from highlight_sync.sync import Synchronizer, ingest

app = typer.Typer(help="Sync e-book highlight exports into Siteleaf.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _read_input(path: Path) -> bytes:
    if not path.is_file():
        logger.error("Input file not found: {}", path)
        raise typer.Exit(1)
    return path.read_bytes()


@app.command()
def sync(
    path: Path = typer.Argument(..., help="Export file to sync"),
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="JSON config with Siteleaf key, secret and collections"),
    ] = None,
) -> None:
    """Sync the highlights in an export file to Siteleaf."""
    raw = _read_input(path)

    if not any(parser.parseable(raw) for parser in DEFAULT_PARSERS):
        logger.error("No parser understood {}", path)
        raise typer.Exit(1)

    try:
        config = load_config(config_path)
    except RuntimeError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    api = SiteleafApi(config.api_key, config.api_secret, timeout=config.timeout)
    cache = CollectionCache(api, limit=config.list_limit)
    synchronizer = Synchronizer(
        api,
        cache,
        books_collection=config.books_collection,
        highlights_collection=config.highlights_collection,
    )

    try:
        created = ingest(raw, DEFAULT_PARSERS, synchronizer)
    except (requests.RequestException, RuntimeError) as e:
        logger.exception("Sync aborted")
        raise typer.Exit(1) from e

    typer.echo(f"Created {created} highlights from {path.name}")


@app.command()
def check(
    path: Path = typer.Argument(..., help="Export file to inspect"),
) -> None:
    """Show which parsers accept a file, without contacting Siteleaf."""
    raw = _read_input(path)

    matched = False
    for parser in DEFAULT_PARSERS:
        if not parser.parseable(raw):
            continue
        matched = True
        exports = parser.parse(raw)
        total = sum(len(e.highlights) for e in exports)
        typer.echo(f"{type(parser).__name__}: {len(exports)} books, {total} highlights")
        for export in exports:
            typer.echo(f"  {export.book.title} ({len(export.highlights)})")

    if not matched:
        typer.echo(f"No parser understood {path}")
        raise typer.Exit(1)

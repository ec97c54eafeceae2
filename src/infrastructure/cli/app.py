"""NextSound CLI - Main application entry point and app structure."""

from enum import StrEnum
from importlib.metadata import version
from pathlib import Path
from typing import Annotated

from rich.console import Console
import typer

from src.application.services.quick_find import QuickFindSession
from src.application.use_cases.search_catalog import (
    SearchCatalogCommand,
    SearchCatalogUseCase,
)
from src.config import get_logger, log_startup_info, settings, setup_loguru_logger
from src.domain.entities import HistoryEntry
from src.infrastructure.catalog import load_catalog
from src.infrastructure.cli import history_commands
from src.infrastructure.cli.ui import command_error_handler, display_search_results
from src.infrastructure.persistence.search_history_store import SearchHistoryStore

VERSION = version("nextsound-search")

console = Console(width=100)
logger = get_logger(__name__)


class OutputFormat(StrEnum):
    TABLE = "table"
    JSON = "json"


app = typer.Typer(
    help=f"🎵 NextSound v{VERSION} - Catalog search and quick-find",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

app.add_typer(
    history_commands.app,
    name="history",
    help="Inspect or clear quick-find history",
    rich_help_panel="🔎 Search",
)


@app.command(name="search", rich_help_panel="🔎 Search")
@command_error_handler
def search_command(
    query: Annotated[str, typer.Argument(help="Free-text query")],
    catalog: Annotated[
        Path | None,
        typer.Option("--catalog", "-c", help="Catalog JSON file (defaults to settings)"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", help="Maximum results (0 returns nothing)"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format (table, json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """Rank catalog tracks against a query, exact matches first."""
    tracks = load_catalog(catalog or settings.search.catalog_path)
    effective_limit = limit if limit is not None else settings.search.default_limit

    result = SearchCatalogUseCase().execute(
        SearchCatalogCommand(tracks=tracks, query=query, limit=effective_limit)
    )
    display_search_results(result, output_format.value)


@app.command(name="find", rich_help_panel="🔎 Search")
@command_error_handler
def find_command(
    query: Annotated[str, typer.Argument(help="Quick-find query")],
    select: Annotated[
        int | None,
        typer.Option("--select", "-s", help="Record result N (1-based) in history"),
    ] = None,
    catalog: Annotated[
        Path | None,
        typer.Option("--catalog", "-c", help="Catalog JSON file (defaults to settings)"),
    ] = None,
    history_path: Annotated[
        Path | None,
        typer.Option("--history", help="History file (defaults to settings)"),
    ] = None,
) -> None:
    """Quick-find with the palette limit, optionally remembering a selection."""
    store = SearchHistoryStore(history_path or settings.search.history_path)
    session = QuickFindSession(
        tracks=load_catalog(catalog or settings.search.catalog_path),
        history=store.load(),
    )

    response = session.search(query)
    if response is None:
        return
    display_search_results(response.result)

    if select is None:
        return

    picks = response.all_results
    if not 1 <= select <= len(picks):
        console.print(f"[red]No result #{select} to select[/red]")
        raise typer.Exit(code=1)

    store.save(session.select(HistoryEntry.from_track(picks[select - 1])))
    console.print(f"[green]✓ Saved '{picks[select - 1].display_title}' to history[/green]")


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(
        f"[bold bright_blue]🎵 NextSound[/bold bright_blue] [dim]v{VERSION}[/dim]"
    )


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize NextSound CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    setup_loguru_logger(verbose)
    log_startup_info()


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1

"""UI helpers for CLI interaction.

Reusable rendering and error-handling helpers, keeping presentation logic
separate from search logic.
"""

from collections.abc import Callable
import functools
import json
from typing import ParamSpec, TypeVar

from rich.console import Console
from rich.table import Table
import typer

from src.application.use_cases.search_catalog import SearchCatalogResult
from src.config import get_logger
from src.domain.entities import SearchHistory
from src.domain.entities.shared import coerce_text, read_field
from src.domain.search import SearchResult

console = Console()
logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    Logs the failure with Loguru, prints a short message with Rich and
    converts it into a non-zero exit through typer.Exit.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except typer.Exit:
                raise

            except typer.Abort:
                logger.info(f"Operation {operation} aborted by user")
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def _label(result: SearchResult) -> tuple[str, str, str]:
    track = result.track
    title = (
        coerce_text(read_field(track, "title"))
        or coerce_text(read_field(track, "name"))
        or "Unknown Track"
    )
    artist = coerce_text(read_field(track, "artist")) or "Unknown Artist"
    album = coerce_text(read_field(track, "album")) or "Unknown Album"
    return title, artist, album


def _results_table(title: str, results: list[SearchResult], start: int) -> Table:
    table = Table(title=title, title_justify="left", expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Track", style="bold")
    table.add_column("Artist", style="cyan")
    table.add_column("Album")
    table.add_column("Score", justify="right", style="green")

    for offset, result in enumerate(results):
        track_title, artist, album = _label(result)
        table.add_row(str(start + offset), track_title, artist, album, str(result.score))
    return table


def display_search_results(
    result: SearchCatalogResult, output_format: str = "table"
) -> None:
    """Render search results as exact/related tables or JSON."""
    if output_format == "json":
        console.print_json(json.dumps(result.to_dict()))
        return

    if not result.results:
        console.print(f"[yellow]No tracks match '{result.query.strip()}'[/yellow]")
        return

    if result.exact_matches:
        console.print(_results_table("Exact matches", result.exact_matches, 1))
    if result.related:
        console.print(
            _results_table("Related", result.related, len(result.exact_matches) + 1)
        )

    console.print(
        f"[dim]{len(result.results)} of {result.candidate_count} tracks "
        f"in {result.execution_time_ms}ms[/dim]"
    )


def display_history(history: SearchHistory) -> None:
    """Render recent queries and selections."""
    if not history.queries and not history.items:
        console.print("[dim]No search history yet[/dim]")
        return

    if history.queries:
        console.print("[bold blue]Recent searches[/bold blue]")
        for query in history.queries:
            console.print(f"  • {query}")

    if history.items:
        table = Table(title="Recently selected", title_justify="left")
        table.add_column("Track", style="bold")
        table.add_column("Details", style="cyan")
        for entry in history.items:
            table.add_row(entry.label, entry.subtitle)
        console.print(table)

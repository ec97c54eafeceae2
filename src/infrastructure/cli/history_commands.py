"""Search history commands for the NextSound CLI."""

from pathlib import Path
from typing import Annotated

import typer

from src.config import settings
from src.infrastructure.cli.ui import command_error_handler, console, display_history
from src.infrastructure.persistence.search_history_store import SearchHistoryStore

app = typer.Typer(help="Inspect or clear quick-find history")

HistoryPathOption = Annotated[
    Path | None,
    typer.Option("--history", help="History file (defaults to settings)"),
]


@app.command(name="show")
@command_error_handler
def show_history(history_path: HistoryPathOption = None) -> None:
    """Show recent searches and selected tracks."""
    store = SearchHistoryStore(history_path or settings.search.history_path)
    display_history(store.load())


@app.command(name="clear")
@command_error_handler
def clear_history(history_path: HistoryPathOption = None) -> None:
    """Forget all recent searches and selections."""
    store = SearchHistoryStore(history_path or settings.search.history_path)
    store.clear()
    console.print("[green]✓ Search history cleared[/green]")

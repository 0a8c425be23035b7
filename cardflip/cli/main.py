"""
CLI entry point for cardflip.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

# Local application imports
from cardflip.cli.study_ui import start_study_flow
from cardflip.config import Settings, get_settings
from cardflip.deck_catalog import DeckCatalog
from cardflip.exceptions import (
    CardflipError,
    DeckCatalogError,
    DeckLoadError,
    DeckReadError,
    NoUsableCardsError,
)
from cardflip.parser import load_cards
from cardflip.viewer import FlashcardViewer


console = Console()

app = typer.Typer(
    name="cardflip",
    help="Cardflip: flip through question/answer decks stored as CSV files.",
    add_completion=False,
    rich_markup_mode="markdown",
)


# ---------------------------------------------------------------------------
# Shared options and helpers
# ---------------------------------------------------------------------------


_deck_dir_option = typer.Option(  # noqa: B008
    None,
    "--deck-dir",
    "-d",
    help="Directory containing deck CSV files. "
    "Falls back to CARDFLIP_DECK_DIRECTORY or ./decks.",
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
):
    """Configure logging for every command."""
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[bold red]Invalid settings: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_settings(deck_dir: Optional[Path]) -> Settings:
    settings = get_settings()
    if deck_dir is not None:
        return settings.model_copy(update={"deck_directory": deck_dir})
    return settings


def _open_catalog(settings: Settings) -> DeckCatalog:
    """Build the deck catalog or exit with code 1."""
    try:
        return DeckCatalog(
            settings.deck_directory, extension=settings.deck_extension
        )
    except DeckCatalogError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e


def _find_deck(catalog: DeckCatalog, deck: str) -> int:
    try:
        return catalog.index_of(deck)
    except KeyError:
        console.print(
            f"[bold red]Error: deck '{escape(deck)}' not found in "
            f"{escape(str(catalog.base_directory))}.[/bold red]"
        )
        raise typer.Exit(code=1) from None


# ---------------------------------------------------------------------------
# Decks
# ---------------------------------------------------------------------------


@app.command()
def decks(deck_dir: Optional[Path] = _deck_dir_option):
    """List the decks found in the deck directory."""
    settings = _resolve_settings(deck_dir)
    catalog = _open_catalog(settings)

    table = Table(title=f"Decks in {escape(str(catalog.base_directory))}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("File", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Cards", justify="right")

    for index, entry in enumerate(catalog.entries, start=1):
        try:
            card_count = str(
                len(load_cards(catalog.base_directory / entry.filename))
            )
        except NoUsableCardsError:
            card_count = "[red]no usable cards[/red]"
        except DeckReadError:
            card_count = "[red]unreadable[/red]"
        table.add_row(
            str(index),
            escape(entry.filename),
            escape(entry.formatted_name),
            card_count,
        )

    console.print(table)


@app.command()
def cards(
    deck: str = typer.Argument(  # noqa: B008
        ..., help="Deck file name, bare name or formatted name."
    ),
    deck_dir: Optional[Path] = _deck_dir_option,
):
    """Print every card of a deck."""
    settings = _resolve_settings(deck_dir)
    catalog = _open_catalog(settings)
    catalog.select(_find_deck(catalog, deck))

    try:
        deck_cards = load_cards(catalog.current_path())
    except DeckLoadError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    table = Table(title=escape(catalog.formatted_display_name()))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Question", style="green")
    table.add_column("Answer", style="blue")
    for index, card in enumerate(deck_cards, start=1):
        table.add_row(str(index), escape(card.question), escape(card.answer))
    console.print(table)


# ---------------------------------------------------------------------------
# Study
# ---------------------------------------------------------------------------


@app.command()
def study(
    deck_dir: Optional[Path] = _deck_dir_option,
    deck: Optional[str] = typer.Option(
        None,
        "--deck",
        help="Deck to start with (file name, bare name or formatted name).",
    ),
):
    """Flip through cards interactively, one card at a time."""
    settings = _resolve_settings(deck_dir)
    try:
        viewer = FlashcardViewer.open(settings, deck=deck)
    except DeckCatalogError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e
    except KeyError as e:
        console.print(
            f"[bold red]Error: deck '{escape(str(deck))}' not found.[/bold red]"
        )
        raise typer.Exit(code=1) from e
    except DeckLoadError as e:
        console.print(
            f"[bold red]Error loading {escape(e.path.name)}: "
            f"{escape(str(e))}[/bold red]"
        )
        raise typer.Exit(code=1) from e

    start_study_flow(viewer)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    Unexpected cardflip errors are reported in bold red and exit with status 1.
    """
    try:
        app()
    except CardflipError as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {escape(str(e))}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()

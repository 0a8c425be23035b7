"""
Interactive terminal front end for flipping through flashcards.
"""

import logging
from typing import Dict, Optional

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from cardflip.viewer import FlashcardViewer, Frame, ViewerAction

logger = logging.getLogger(__name__)
console = Console()

QUIT_KEYS = {"q", "quit", "exit"}

KEY_BINDINGS: Dict[str, ViewerAction] = {
    "": ViewerAction.FLIP,
    "f": ViewerAction.FLIP,
    "n": ViewerAction.NEXT_CARD,
    "l": ViewerAction.NEXT_CARD,
    "p": ViewerAction.PREVIOUS_CARD,
    "h": ViewerAction.PREVIOUS_CARD,
    "]": ViewerAction.NEXT_DECK,
    "[": ViewerAction.PREVIOUS_DECK,
}

KEY_HINTS = "ENTER/f: Flip  |  p/n: Navigate  |  [/]: Switch deck  |  q: Quit"


def parse_command(raw: str) -> Optional[ViewerAction]:
    """
    Map one line of user input to a viewer action.

    Input is trimmed and lowercased, so a bare space or empty line flips the
    card. Returns None for anything unbound (including quit keys).
    """
    return KEY_BINDINGS.get(raw.strip().lower())


def panel_columns(viewer: FlashcardViewer) -> int:
    """Terminal columns matching the card width, one column per estimated glyph."""
    glyph = max(1, viewer.measurer.measure("x", viewer.settings.font_size))
    # border and horizontal padding
    return viewer.settings.card_width // glyph + 6


def build_card_panel(frame: Frame, viewer: FlashcardViewer) -> Panel:
    """
    Render a frame as a rich panel: wrapped card text in the middle, deck
    name and deck counter as the title, card status underneath.
    """
    body = Text("\n".join(frame.text_lines), justify="center")
    body.stylize("bold white" if frame.is_flipped else "bold")
    title = f"[bold]{escape(frame.deck_name)}[/bold]"
    if frame.has_multiple_decks:
        title = f"{title} ({frame.deck_counter})"
    return Panel(
        Align.center(body, vertical="middle"),
        title=title,
        subtitle=f"{frame.status} - {frame.card_counter}",
        border_style="blue" if frame.is_flipped else "green",
        width=panel_columns(viewer),
        padding=(1, 2),
    )


def start_study_flow(viewer: FlashcardViewer) -> None:
    """
    Run the study loop until the user quits.

    Args:
        viewer: A FlashcardViewer with a deck already loaded.
    """
    console.print(
        f"[bold cyan]Studying "
        f"{escape(viewer.catalog.formatted_display_name())}[/bold cyan]"
    )
    console.print(f"[dim]{escape(KEY_HINTS)}[/dim]")

    while True:
        console.print(build_card_panel(viewer.render(), viewer))
        raw = console.input("[bold]> [/bold]")
        if raw.strip().lower() in QUIT_KEYS:
            break

        action = parse_command(raw)
        if action is None:
            console.print(
                f"[bold red]Unknown command '{escape(raw.strip())}'.[/bold red] "
                f"{escape(KEY_HINTS)}"
            )
            continue

        error = viewer.handle(action)
        if error is not None:
            console.print(
                f"[bold red]Could not open deck: {escape(str(error))}[/bold red] "
                "Staying on the current deck."
            )

    console.print("[bold cyan]Study session finished.[/bold cyan]")

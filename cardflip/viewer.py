"""
Glue between the deck catalog, the card loader and the study session.

A host (terminal loop, graphics window, test) drives the viewer with
discrete ``ViewerAction`` events and asks it for a ``Frame`` to draw.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from .config import Settings
from .deck_catalog import DeckCatalog
from .exceptions import DeckLoadError
from .parser import load_cards
from .session import StudySession
from .text_layout import (
    DEFAULT_MEASURER,
    TextMeasurer,
    block_top,
    center_offset,
    wrap_text,
)

logger = logging.getLogger(__name__)


class ViewerAction(Enum):
    FLIP = "flip"
    NEXT_CARD = "next_card"
    PREVIOUS_CARD = "previous_card"
    NEXT_DECK = "next_deck"
    PREVIOUS_DECK = "previous_deck"


@dataclass(frozen=True)
class FrameLine:
    """One wrapped line with its offsets relative to the card's top-left
    corner (x) and vertical center (y)."""

    text: str
    x: int
    y: int


@dataclass(frozen=True)
class Frame:
    """Everything a host needs to draw the current card."""

    lines: List[FrameLine] = field(default_factory=list)
    status: str = ""
    card_counter: str = ""
    deck_name: str = ""
    deck_counter: str = ""
    is_flipped: bool = False
    has_multiple_decks: bool = False

    @property
    def text_lines(self) -> List[str]:
        return [line.text for line in self.lines]


class FlashcardViewer:
    """
    Owns one catalog and one study session and keeps them consistent.

    Deck switches are all-or-nothing: if the target deck cannot be loaded,
    the catalog goes back to the previous deck and the session keeps its
    cards, position and flip state.
    """

    def __init__(
        self,
        catalog: DeckCatalog,
        session: StudySession,
        settings: Settings,
        measurer: Optional[TextMeasurer] = None,
    ):
        self.catalog = catalog
        self.session = session
        self.settings = settings
        self.measurer = measurer or DEFAULT_MEASURER

    @classmethod
    def open(
        cls,
        settings: Settings,
        directory: Optional[Union[str, Path]] = None,
        deck: Optional[str] = None,
        measurer: Optional[TextMeasurer] = None,
    ) -> "FlashcardViewer":
        """
        Scan the deck directory and load the starting deck.

        Parameters:
            settings (Settings): Layout and discovery settings.
            directory (Optional[Union[str, Path]]): Deck directory; falls back
                to ``settings.deck_directory``.
            deck (Optional[str]): Deck to start on (file name, bare name or
                formatted name); defaults to the first deck.
            measurer (Optional[TextMeasurer]): Width estimator used for both
                wrapping and centering.

        Raises:
            DeckCatalogError: If no catalog can be built from the directory.
            KeyError: If ``deck`` matches no deck in the catalog.
            DeckLoadError: If the first deck cannot be loaded.
        """
        catalog = DeckCatalog(
            directory if directory is not None else settings.deck_directory,
            extension=settings.deck_extension,
        )
        if deck is not None:
            catalog.select(catalog.index_of(deck))
        path = catalog.current_path()
        session = StudySession(load_cards(path), source=path)
        return cls(catalog, session, settings, measurer)

    def handle(self, action: ViewerAction) -> Optional[DeckLoadError]:
        """
        Apply one input event.

        Returns:
            Optional[DeckLoadError]: The load failure when a deck switch was
            refused, otherwise None.
        """
        if action is ViewerAction.FLIP:
            self.session.flip()
        elif action is ViewerAction.NEXT_CARD:
            self.session.next_card()
        elif action is ViewerAction.PREVIOUS_CARD:
            self.session.previous_card()
        elif action is ViewerAction.NEXT_DECK:
            return self.switch_deck(forward=True)
        elif action is ViewerAction.PREVIOUS_DECK:
            return self.switch_deck(forward=False)
        return None

    def switch_deck(self, forward: bool = True) -> Optional[DeckLoadError]:
        """Move to the next (or previous) deck and load its cards."""
        if not self.catalog.has_multiple_decks:
            return None
        previous_index = self.catalog.active_index
        if forward:
            self.catalog.next_deck()
        else:
            self.catalog.previous_deck()
        return self._load_active_deck(previous_index)

    def select_deck(self, index: int) -> Optional[DeckLoadError]:
        """Jump to the deck at ``index`` and load its cards."""
        previous_index = self.catalog.active_index
        self.catalog.select(index)
        return self._load_active_deck(previous_index)

    def _load_active_deck(self, previous_index: int) -> Optional[DeckLoadError]:
        path = self.catalog.current_path()
        try:
            self.session.reload(load_cards(path), source=path)
        except DeckLoadError as e:
            self.catalog.select(previous_index)
            logger.warning("Keeping current deck, could not switch: %s", e)
            return e
        logger.info(
            "Switched to deck '%s' (%s cards)",
            self.catalog.current_display_name(),
            self.session.total,
        )
        return None

    def wrapped_text(self) -> List[str]:
        return wrap_text(
            self.session.current_text(),
            self.settings.wrap_width,
            self.settings.font_size,
            self.measurer,
        )

    def render(self) -> Frame:
        """Lay out the current card side for drawing."""
        wrapped = self.wrapped_text()
        line_height = self.settings.line_height
        top = block_top(len(wrapped), line_height, 0)
        lines = [
            FrameLine(
                text=text,
                x=center_offset(
                    text,
                    self.settings.card_width,
                    self.settings.font_size,
                    self.measurer,
                ),
                y=top + index * line_height,
            )
            for index, text in enumerate(wrapped)
        ]
        return Frame(
            lines=lines,
            status=self.session.status_label(),
            card_counter=self.session.counter(),
            deck_name=self.catalog.formatted_display_name(),
            deck_counter=self.catalog.counter(),
            is_flipped=self.session.is_flipped,
            has_multiple_decks=self.catalog.has_multiple_decks,
        )

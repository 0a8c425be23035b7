"""
Navigation state for studying one deck: which card is shown and which side.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import STATUS_ANSWER, STATUS_QUESTION
from .exceptions import NoUsableCardsError
from .models import Card

logger = logging.getLogger(__name__)


class StudySession:
    """
    Holds the loaded cards, the current position and the flip flag.

    Card navigation saturates at both ends of the deck instead of wrapping.
    A session always points at an existing card: it cannot be created or
    reloaded with an empty collection.
    """

    def __init__(self, cards: Sequence[Card], source: Optional[Path] = None):
        """
        Start a session on the first card, question side up.

        Parameters:
            cards (Sequence[Card]): Cards to study, in display order.
            source (Optional[Path]): Deck file the cards came from, used for
                error reporting only.

        Raises:
            NoUsableCardsError: If ``cards`` is empty.
        """
        self._cards: List[Card] = self._validated(cards, source)
        self._position = 0
        self._is_flipped = False

    @staticmethod
    def _validated(
        cards: Sequence[Card], source: Optional[Path]
    ) -> List[Card]:
        new_cards = list(cards)
        if not new_cards:
            raise NoUsableCardsError(
                source or Path(), "Cannot study an empty card collection."
            )
        return new_cards

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    @property
    def position(self) -> int:
        return self._position

    @property
    def total(self) -> int:
        return len(self._cards)

    @property
    def is_flipped(self) -> bool:
        return self._is_flipped

    @property
    def is_first(self) -> bool:
        return self._position == 0

    @property
    def is_last(self) -> bool:
        return self._position == len(self._cards) - 1

    @property
    def current_card(self) -> Card:
        return self._cards[self._position]

    def flip(self) -> None:
        """Turn the current card over."""
        self._is_flipped = not self._is_flipped

    def next_card(self) -> None:
        """Advance one card; stays on the last card. Always shows the question."""
        if self._position < len(self._cards) - 1:
            self._position += 1
        self._is_flipped = False

    def previous_card(self) -> None:
        """Go back one card; stays on the first card. Always shows the question."""
        if self._position > 0:
            self._position -= 1
        self._is_flipped = False

    def reload(
        self, new_cards: Sequence[Card], source: Optional[Path] = None
    ) -> None:
        """
        Replace the whole card collection and return to the first question.

        The new collection is validated before anything is touched, so a
        failed reload leaves cards, position and flip state as they were.

        Raises:
            NoUsableCardsError: If ``new_cards`` is empty.
        """
        validated = self._validated(new_cards, source)
        self._cards = validated
        self._position = 0
        self._is_flipped = False
        logger.debug("Session reloaded with %s cards", len(validated))

    def current_text(self) -> str:
        """Question of the current card, or its answer once flipped."""
        card = self.current_card
        return card.answer if self._is_flipped else card.question

    def status_label(self) -> str:
        return STATUS_ANSWER if self._is_flipped else STATUS_QUESTION

    def counter(self) -> str:
        return f"Card {self._position + 1} / {len(self._cards)}"

    def __repr__(self) -> str:
        return (
            f"StudySession(position={self._position}, total={len(self._cards)}, "
            f"is_flipped={self._is_flipped})"
        )

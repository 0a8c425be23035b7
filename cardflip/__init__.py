"""Cardflip - flip through question/answer flashcard decks stored as CSV files."""

from .models import Card, DeckEntry
from .deck_catalog import DeckCatalog
from .parser import load_cards, parse_record
from .session import StudySession
from .text_layout import HeuristicTextMeasurer, TextMeasurer, wrap_text
from .viewer import FlashcardViewer, Frame, ViewerAction

__all__ = [
    "Card",
    "DeckEntry",
    "DeckCatalog",
    "load_cards",
    "parse_record",
    "StudySession",
    "HeuristicTextMeasurer",
    "TextMeasurer",
    "wrap_text",
    "FlashcardViewer",
    "Frame",
    "ViewerAction",
]

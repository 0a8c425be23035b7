"""
Pydantic models for cards and deck catalog entries.
"""

from pydantic import BaseModel, ConfigDict, Field

from .constants import DECK_EXTENSION


class Card(BaseModel):
    """
    A single question/answer flashcard parsed from a deck file.

    Cards are immutable once constructed; both sides must be non-empty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    question: str = Field(
        ...,
        min_length=1,
        description="Text shown on the front of the card (first field).",
    )
    answer: str = Field(
        ...,
        min_length=1,
        description="Text shown on the back of the card (second field).",
    )


def strip_deck_extension(filename: str, extension: str = DECK_EXTENSION) -> str:
    """Return ``filename`` without ``extension`` if it ends with it exactly."""
    if extension and filename.endswith(extension):
        return filename[: -len(extension)]
    return filename


def format_deck_name(name: str) -> str:
    """
    Turn a raw deck name such as ``basic_math`` into ``Basic Math``.

    Underscores become spaces, the result is split on whitespace, the first
    character of each word is uppercased (the rest is left alone) and words
    are joined with single spaces.
    """
    words = name.replace("_", " ").split()
    return " ".join(word[0].upper() + word[1:] for word in words)


class DeckEntry(BaseModel):
    """A deck file discovered in the deck directory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    filename: str = Field(
        ...,
        min_length=1,
        description="File name inside the deck directory (e.g. 'basic_math.csv').",
    )
    extension: str = Field(
        default=DECK_EXTENSION,
        description="Deck file extension stripped to build display names.",
    )

    @property
    def display_name(self) -> str:
        return strip_deck_extension(self.filename, self.extension)

    @property
    def formatted_name(self) -> str:
        return format_deck_name(self.display_name)

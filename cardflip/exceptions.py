from pathlib import Path
from typing import Optional


class CardflipError(Exception):
    """Base exception for flashcard viewer errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class DeckCatalogError(CardflipError):
    """Raised when the deck directory cannot be turned into a catalog."""

    pass


class DirectoryNotFoundError(DeckCatalogError):
    """Raised when the deck directory does not exist."""

    pass


class NotADeckDirectoryError(DeckCatalogError):
    """Raised when the deck path exists but is not a directory."""

    pass


class NoDecksFoundError(DeckCatalogError):
    """Raised when the deck directory holds no deck files."""

    pass


class DeckLoadError(CardflipError):
    """Base exception for failures while loading a single deck file."""

    def __init__(
        self,
        path: Path,
        message: str,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message, original_exception)
        self.path = Path(path)


class DeckReadError(DeckLoadError):
    """Indicates the deck file could not be opened, read or decoded."""

    pass


class NoUsableCardsError(DeckLoadError):
    """Indicates a deck produced zero valid question/answer records."""

    pass

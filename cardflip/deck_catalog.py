"""
Discovery and cyclic navigation of deck files in a directory.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from .constants import DECK_EXTENSION
from .exceptions import (
    DeckCatalogError,
    DirectoryNotFoundError,
    NoDecksFoundError,
    NotADeckDirectoryError,
)
from .models import DeckEntry

logger = logging.getLogger(__name__)


def discover_deck_files(directory: Path, extension: str) -> List[str]:
    """
    List the deck file names directly inside ``directory``.

    Only regular files whose name ends with ``extension`` (case-sensitive)
    are kept. Names are sorted by code point so the order is the same on
    every run and every platform.
    """
    try:
        filenames = [
            child.name
            for child in directory.iterdir()
            if child.is_file()
            and child.name.endswith(extension)
            and len(child.name) > len(extension)
        ]
    except OSError as e:
        raise DeckCatalogError(
            f"Could not list deck directory '{directory}': {e}", e
        ) from e
    return sorted(filenames)


class DeckCatalog:
    """
    Ordered, wrap-around collection of the decks found in one directory.

    The directory is scanned once at construction; files added or removed
    later are not picked up.
    """

    def __init__(
        self, directory: Union[str, Path], extension: str = DECK_EXTENSION
    ):
        """
        Scan ``directory`` for deck files and select the first one.

        Raises:
            DirectoryNotFoundError: If ``directory`` does not exist.
            NotADeckDirectoryError: If ``directory`` is not a directory.
            NoDecksFoundError: If no file with ``extension`` was found.
            DeckCatalogError: If the directory could not be listed.
        """
        self.base_directory = Path(directory)
        self.extension = extension

        if not self.base_directory.exists():
            raise DirectoryNotFoundError(
                f"Folder '{self.base_directory}' does not exist"
            )
        if not self.base_directory.is_dir():
            raise NotADeckDirectoryError(
                f"'{self.base_directory}' is not a directory"
            )

        filenames = discover_deck_files(self.base_directory, extension)
        if not filenames:
            raise NoDecksFoundError(
                f"No {extension} files found in '{self.base_directory}'"
            )

        self._entries: Tuple[DeckEntry, ...] = tuple(
            DeckEntry(filename=name, extension=extension) for name in filenames
        )
        self._active_index = 0
        logger.info(
            "Found %s deck files in %s", len(self._entries), self.base_directory
        )

    @property
    def entries(self) -> Tuple[DeckEntry, ...]:
        return self._entries

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def total_decks(self) -> int:
        return len(self._entries)

    @property
    def has_multiple_decks(self) -> bool:
        return len(self._entries) > 1

    @property
    def current_entry(self) -> DeckEntry:
        return self._entries[self._active_index]

    def current_path(self) -> Path:
        """Full path of the active deck file."""
        return self.base_directory / self.current_entry.filename

    def next_deck(self) -> None:
        """Move to the next deck, wrapping around to the first."""
        self._active_index = (self._active_index + 1) % len(self._entries)

    def previous_deck(self) -> None:
        """Move to the previous deck, wrapping around to the last."""
        self._active_index = (self._active_index - 1) % len(self._entries)

    def select(self, index: int) -> None:
        """Make the deck at ``index`` active."""
        if not 0 <= index < len(self._entries):
            raise IndexError(
                f"Deck index {index} out of range "
                f"(catalog has {len(self._entries)} decks)"
            )
        self._active_index = index

    def index_of(self, name: str) -> int:
        """
        Find a deck by file name, bare name or formatted name.

        Returns:
            int: Index of the first matching entry.

        Raises:
            KeyError: If no entry matches ``name``.
        """
        for index, entry in enumerate(self._entries):
            if name in (entry.filename, entry.display_name, entry.formatted_name):
                return index
        raise KeyError(name)

    def current_display_name(self) -> str:
        return self.current_entry.display_name

    def formatted_display_name(self) -> str:
        return self.current_entry.formatted_name

    def counter(self) -> str:
        return f"Deck {self._active_index + 1} / {len(self._entries)}"

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"DeckCatalog(directory={str(self.base_directory)!r}, "
            f"decks={len(self._entries)}, active={self._active_index})"
        )

import os

import pytest
from pathlib import Path
from typing import Dict

from cardflip.config import Settings, get_settings
from cardflip.models import Card


def write_deck(base_path: Path, filename: str, content: str) -> Path:
    """Write ``content`` to ``base_path/filename`` as UTF-8 and return the path."""
    file_path = base_path / filename
    file_path.write_text(content, encoding="utf-8")
    return file_path


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path: Path):
    """
    Keep tests independent of the caller's environment and .env file.

    Clears any CARDFLIP_* variables, runs the test from its tmp_path and
    resets the cached settings before and after.
    """
    for key in list(os.environ):
        if key.startswith("CARDFLIP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def sample_decks() -> Dict[str, str]:
    """Deck file contents keyed by file name."""
    return {
        "basic_math.csv": "1 + 1,2\n2 * 3,6\n\"10, halved\",5\n",
        "capitals.csv": (
            "Capital of France?,Paris\n"
            "Capital of Japan?,Tokyo\n"
            "Capital of Peru?,Lima\n"
        ),
        "notes.txt": "not,a deck\n",
    }


@pytest.fixture
def deck_dir(tmp_path: Path, sample_decks: Dict[str, str]) -> Path:
    """A deck directory with two .csv decks, a .txt file and a subdirectory."""
    directory = tmp_path / "decks"
    directory.mkdir()
    for filename, content in sample_decks.items():
        write_deck(directory, filename, content)
    (directory / "archive.csv").mkdir()
    return directory


@pytest.fixture
def three_cards() -> list:
    return [
        Card(question="Q1", answer="A1"),
        Card(question="Q2", answer="A2"),
        Card(question="Q3", answer="A3"),
    ]

"""
Unit tests for the cardflip.cli.study_ui module.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cardflip.cli.study_ui import (
    build_card_panel,
    panel_columns,
    parse_command,
    start_study_flow,
)
from cardflip.config import Settings
from cardflip.exceptions import NoUsableCardsError
from cardflip.viewer import FlashcardViewer, ViewerAction


@pytest.fixture
def viewer(deck_dir: Path, settings: Settings) -> FlashcardViewer:
    return FlashcardViewer.open(settings, directory=deck_dir)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ViewerAction.FLIP),
        (" ", ViewerAction.FLIP),
        ("F", ViewerAction.FLIP),
        ("n", ViewerAction.NEXT_CARD),
        ("l", ViewerAction.NEXT_CARD),
        ("p", ViewerAction.PREVIOUS_CARD),
        ("h", ViewerAction.PREVIOUS_CARD),
        ("]", ViewerAction.NEXT_DECK),
        ("[", ViewerAction.PREVIOUS_DECK),
        ("x", None),
        ("q", None),
    ],
)
def test_parse_command(raw, expected):
    assert parse_command(raw) is expected


def test_panel_columns(viewer: FlashcardViewer):
    # 600px card at 20px per glyph
    assert panel_columns(viewer) == 36


def test_build_card_panel(viewer: FlashcardViewer):
    panel = build_card_panel(viewer.render(), viewer)
    assert "Basic Math" in panel.title
    assert "QUESTION" in panel.subtitle
    assert "Card 1 / 3" in panel.subtitle
    assert "Deck 1 / 2" in panel.title
    assert panel.border_style == "green"


def test_build_card_panel_flipped(viewer: FlashcardViewer):
    viewer.handle(ViewerAction.FLIP)
    panel = build_card_panel(viewer.render(), viewer)
    assert "ANSWER" in panel.subtitle
    assert panel.border_style == "blue"


def test_study_flow_quits_immediately(viewer: FlashcardViewer, capsys):
    with patch("rich.console.Console.input", side_effect=["q"]):
        start_study_flow(viewer)

    captured = capsys.readouterr()
    assert "Studying Basic Math" in captured.out
    assert "1 + 1" in captured.out
    assert "Study session finished." in captured.out


def test_study_flow_flip_next_and_switch_deck(viewer: FlashcardViewer, capsys):
    with patch(
        "rich.console.Console.input", side_effect=["", "n", "]", "quit"]
    ):
        start_study_flow(viewer)

    captured = capsys.readouterr()
    assert "ANSWER" in captured.out
    assert "2 * 3" in captured.out
    assert "Capital of France?" in captured.out
    assert viewer.catalog.current_display_name() == "capitals"


def test_study_flow_unknown_command(viewer: FlashcardViewer, capsys):
    with patch("rich.console.Console.input", side_effect=["zzz", "q"]):
        start_study_flow(viewer)

    captured = capsys.readouterr()
    assert "Unknown command 'zzz'" in captured.out
    assert viewer.session.position == 0


def test_study_flow_reports_failed_deck_switch(capsys):
    mock_viewer = MagicMock(spec=FlashcardViewer)
    mock_viewer.settings = Settings()
    mock_viewer.measurer = MagicMock()
    mock_viewer.measurer.measure.return_value = 20
    mock_viewer.catalog = MagicMock()
    mock_viewer.catalog.formatted_display_name.return_value = "Good Deck"
    mock_viewer.render.return_value = MagicMock(
        text_lines=["q"],
        is_flipped=False,
        status="QUESTION",
        card_counter="Card 1 / 1",
        deck_counter="Deck 1 / 2",
        deck_name="Good Deck",
        has_multiple_decks=True,
    )
    mock_viewer.handle.return_value = NoUsableCardsError(
        Path("bad.csv"), "Deck file contains no valid flashcards: bad.csv"
    )

    with patch("rich.console.Console.input", side_effect=["]", "q"]):
        start_study_flow(mock_viewer)

    output = " ".join(capsys.readouterr().out.split())
    assert "Could not open deck" in output
    assert "Staying on the current deck." in output
    mock_viewer.handle.assert_called_once_with(ViewerAction.NEXT_DECK)


def test_study_flow_prints_key_hints_literally(viewer: FlashcardViewer, capsys):
    with patch("rich.console.Console.input", side_effect=["?", "q"]):
        start_study_flow(viewer)

    output = " ".join(capsys.readouterr().out.split())
    assert output.count("[/]: Switch deck") == 2
    assert "Unknown command '?'" in output

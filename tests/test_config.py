from pathlib import Path

import pytest
from pydantic import ValidationError

from cardflip.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.deck_directory == Path("decks")
    assert settings.deck_extension == ".csv"
    assert settings.font_size == 40
    assert settings.wrap_width == 550
    assert settings.card_width == 600
    assert settings.line_height == 45


def test_environment_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("CARDFLIP_DECK_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("CARDFLIP_FONT_SIZE", "20")
    settings = Settings()
    assert settings.deck_directory == tmp_path
    assert settings.font_size == 20
    assert settings.line_height == 25


def test_dotenv_file(tmp_path: Path):
    (tmp_path / ".env").write_text("CARDFLIP_WRAP_WIDTH=300\n", encoding="utf-8")
    assert Settings().wrap_width == 300


def test_rejects_non_positive_font_size():
    with pytest.raises(ValidationError):
        Settings(font_size=0)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("CARDFLIP_LOG_LEVEL", " info ")
    assert Settings().log_level == "INFO"


@pytest.mark.parametrize("level", ["loud", "", "5"])
def test_rejects_unknown_log_level(level):
    with pytest.raises(ValidationError):
        Settings(log_level=level)

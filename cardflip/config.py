"""
Runtime configuration for the cardflip viewer.
"""
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DECK_EXTENSION,
    DEFAULT_CARD_WIDTH,
    DEFAULT_DECK_DIRECTORY,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_SPACING,
    DEFAULT_WRAP_WIDTH,
)


class Settings(BaseSettings):
    """
    Viewer settings, loaded from CARDFLIP_* environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CARDFLIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Decks ---
    # Overridden by CARDFLIP_DECK_DIRECTORY or the --deck-dir option.
    deck_directory: Path = Path(DEFAULT_DECK_DIRECTORY)
    deck_extension: str = Field(default=DECK_EXTENSION, min_length=1)

    # --- Layout ---
    font_size: int = Field(default=DEFAULT_FONT_SIZE, gt=0)
    wrap_width: int = Field(default=DEFAULT_WRAP_WIDTH, gt=0)
    card_width: int = Field(default=DEFAULT_CARD_WIDTH, gt=0)
    line_spacing: int = Field(default=DEFAULT_LINE_SPACING, ge=0)

    # --- Logging ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        "WARNING"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def line_height(self) -> int:
        return self.font_size + self.line_spacing


@lru_cache
def get_settings() -> Settings:
    return Settings()

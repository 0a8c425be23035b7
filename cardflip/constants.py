"""
Static defaults for deck discovery, record parsing and card layout.

No runtime configuration here - see ``cardflip.config`` for settings that
can be overridden from the environment.
"""

# Deck discovery
DECK_EXTENSION: str = ".csv"
DEFAULT_DECK_DIRECTORY: str = "decks"

# Record format
FIELD_SEPARATOR: str = ","
QUOTE_CHAR: str = '"'

# Card layout (pixels)
DEFAULT_FONT_SIZE: int = 40
DEFAULT_WRAP_WIDTH: int = 550
DEFAULT_CARD_WIDTH: int = 600
DEFAULT_LINE_SPACING: int = 5

STATUS_QUESTION: str = "QUESTION"
STATUS_ANSWER: str = "ANSWER"

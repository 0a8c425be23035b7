import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .constants import FIELD_SEPARATOR, QUOTE_CHAR
from .exceptions import DeckReadError, NoUsableCardsError
from .models import Card

logger = logging.getLogger(__name__)


def split_fields(line: str) -> List[str]:
    """
    Split one line of comma-separated text into whitespace-trimmed fields.

    Double quotes group text containing separators, and a doubled quote
    inside a quoted field stands for one literal quote character. Malformed
    quoting is never an error: an unterminated quote simply runs to the end
    of the line.

    Parameters:
        line (str): A single line of text without its line terminator.

    Returns:
        List[str]: Every field on the line, in order. A line always yields at
        least one (possibly empty) field.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if char == QUOTE_CHAR:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE_CHAR:
                current.append(QUOTE_CHAR)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == FIELD_SEPARATOR and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def parse_record(line: str) -> Optional[Tuple[str, str]]:
    """
    Parse a deck line into a ``(question, answer)`` record.

    Fields past the second are ignored. Returns None when the line has fewer
    than two fields. Empty fields are returned as-is; filtering them out is
    the loader's job.
    """
    fields = split_fields(line)
    if len(fields) < 2:
        return None
    return fields[0], fields[1]


def load_cards(file_path: Union[str, Path]) -> List[Card]:
    """
    Read a deck file and build its cards in file order.

    Each line goes through ``parse_record``; lines without two fields, or
    with an empty question or answer, are skipped.

    Parameters:
        file_path (Union[str, Path]): Path of the deck file to read as UTF-8 text.

    Returns:
        List[Card]: The deck's cards. Never empty.

    Raises:
        DeckReadError: If the file is missing, unreadable or not valid UTF-8.
            No partial result is returned.
        NoUsableCardsError: If the file was read but produced no valid card.
    """
    path = Path(file_path)
    cards: List[Card] = []
    skipped = 0

    try:
        with path.open("r", encoding="utf-8-sig", newline="\n") as handle:
            for line_number, raw_line in enumerate(handle, start=1):
                record = parse_record(raw_line.rstrip("\r\n"))
                if record is None or not record[0] or not record[1]:
                    skipped += 1
                    logger.debug(
                        "Skipping line %s of %s: no usable record",
                        line_number,
                        path.name,
                    )
                    continue
                question, answer = record
                cards.append(Card(question=question, answer=answer))
    except FileNotFoundError as e:
        raise DeckReadError(path, f"Deck file not found: {path}", e) from e
    except UnicodeDecodeError as e:
        raise DeckReadError(
            path, f"Deck file is not valid UTF-8: {path}", e
        ) from e
    except OSError as e:
        raise DeckReadError(
            path, f"Could not read deck file {path}: {e}", e
        ) from e

    if not cards:
        raise NoUsableCardsError(
            path, f"Deck file contains no valid flashcards: {path}"
        )

    logger.info(
        "Loaded %s cards from %s (%s lines skipped).",
        len(cards),
        path.name,
        skipped,
    )
    return cards

"""
Word wrapping and centering of card text against a pixel width budget.

Layout never looks at real glyph metrics directly. It goes through a
``TextMeasurer``, so a backend with access to a font can plug in exact
measurements without changing how lines are packed.
"""

from typing import List, Optional, Protocol, runtime_checkable


@runtime_checkable
class TextMeasurer(Protocol):
    """Anything that can estimate the rendered width of a string."""

    def measure(self, text: str, font_size: int) -> int:
        ...


class HeuristicTextMeasurer:
    """
    Estimates width as character count times half the font size.

    Good enough for roughly monospaced Latin text; it ignores kerning and
    wide glyphs.
    """

    def char_width(self, font_size: int) -> int:
        return font_size // 2

    def measure(self, text: str, font_size: int) -> int:
        return len(text) * self.char_width(font_size)


DEFAULT_MEASURER = HeuristicTextMeasurer()


def wrap_text(
    text: str,
    max_width: int,
    font_size: int,
    measurer: Optional[TextMeasurer] = None,
) -> List[str]:
    """
    Greedily pack whitespace-separated words into lines no wider than ``max_width``.

    Runs of whitespace collapse to a single space and leading/trailing
    whitespace is dropped. A word that is wider than ``max_width`` on its
    own gets a line to itself and is never split.

    Parameters:
        text (str): Text to wrap.
        max_width (int): Width budget of a line, in pixels.
        font_size (int): Nominal font size passed to the measurer.
        measurer (Optional[TextMeasurer]): Width estimator; defaults to
            ``HeuristicTextMeasurer``.

    Returns:
        List[str]: The wrapped lines; empty when ``text`` has no words.
    """
    measurer = measurer or DEFAULT_MEASURER
    lines: List[str] = []
    current_line = ""

    for word in text.split():
        candidate = f"{current_line} {word}" if current_line else word

        if measurer.measure(candidate, font_size) > max_width:
            if current_line:
                lines.append(current_line)
                current_line = word
            else:
                lines.append(word)
        else:
            current_line = candidate

    if current_line:
        lines.append(current_line)

    return lines


def center_offset(
    line: str,
    container_width: int,
    font_size: int,
    measurer: Optional[TextMeasurer] = None,
) -> int:
    """Left offset that horizontally centers ``line`` inside ``container_width``."""
    measurer = measurer or DEFAULT_MEASURER
    return (container_width - measurer.measure(line, font_size)) // 2


def block_top(line_count: int, line_height: int, center_y: int) -> int:
    """Top coordinate of a block of ``line_count`` lines centered on ``center_y``."""
    return center_y - (line_count * line_height) // 2

"""Parsing of floor and ceiling colour lines."""

from __future__ import annotations

from cubscene.scene import ParseError
from cubscene.split import split_words

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _atoi(text: str) -> int:
    """Read a leading decimal integer the way C's atoi does; 0 if none."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def parse_rgb_values(text: str) -> int:
    """Parse ``"R,G,B"`` into a packed 0xRRGGBB integer."""
    parts = split_words(text, ",")
    error = ParseError(f"Invalid RGB values: {text.rstrip(chr(10))}")
    if len(parts) != 3:
        raise error
    red, green, blue = (_atoi(part) for part in parts)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise error
    return (red << 16) + (green << 8) + blue


def parse_color_line(line: str) -> int:
    """Parse an ``F R,G,B`` or ``C R,G,B`` line and return the colour."""
    tokens = split_words(line, " ")
    if len(tokens) != 2:
        raise ParseError("Invalid color line format")
    identifier, values = tokens
    if identifier[0] not in ("F", "C"):
        raise ParseError(f"Unknown color identifier: {identifier}")
    return parse_rgb_values(values)
"""Word splitting on a single separator character."""

from __future__ import annotations


def split_words(s: str | None, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words.

    Runs of separators count as one, and leading or trailing separators
    produce no words.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    if not s:
        return []
    return [word for word in s.split(sep) if word]
"""Parsing of wall texture lines."""

from __future__ import annotations

from cubscene.scene import TEXTURE_IDS, ParseError, Scene
from cubscene.split import split_words


def texture_index(identifier: str) -> int | None:
    """Return the texture slot for an identifier such as ``NO``, or None."""
    for index, texture_id in enumerate(TEXTURE_IDS):
        if identifier.startswith(texture_id):
            return index
    return None


def parse_texture_line(scene: Scene, line: str) -> int:
    """Record the path from a ``NO path`` style line; return its slot."""
    tokens = split_words(line, " ")
    if len(tokens) != 2:
        raise ParseError("Invalid texture line format")
    identifier, path = tokens
    index = texture_index(identifier)
    if index is None:
        raise ParseError(f"Unknown texture identifier: {identifier}")
    texture = scene.textures[index]
    if texture.path is not None:
        raise ParseError(f"Duplicate texture identifier: {identifier}")
    if path.endswith("\n"):
        path = path[:-1]
    texture.path = path
    return index
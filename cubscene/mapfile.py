"""Reading of the header section of a .cub scene file."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from cubscene.colors import parse_color_line
from cubscene.scene import ParseError, Scene
from cubscene.textures import parse_texture_line

_TEXTURE_PREFIXES = ("NO ", "SO ", "EA ", "WE ")
_COLOR_PREFIXES = ("F ", "C ")


def is_texture_line(line: str) -> bool:
    """True if the line declares a wall texture."""
    return line.startswith(_TEXTURE_PREFIXES)


def is_color_line(line: str) -> bool:
    """True if the line declares the floor or ceiling colour."""
    return line.startswith(_COLOR_PREFIXES)


def parse_lines(lines: Iterable[str]) -> Scene:
    """Build a scene from header lines, stopping at the first other line.

    Lines keep their trailing newline; a line that is only a newline is
    skipped.
    """
    scene = Scene()
    for line in lines:
        if line.startswith("\n"):
            continue
        if is_texture_line(line):
            parse_texture_line(scene, line)
        elif is_color_line(line):
            color = parse_color_line(line)
            if line[0] == "F":
                scene.floor_color = color
            else:
                scene.ceiling_color = color
        else:
            break
    return scene


def _read_lines(handle) -> Iterator[str]:
    for raw in handle:
        yield raw.decode("utf-8", errors="replace")


def parse_map_file(filename: str | os.PathLike) -> Scene:
    """Read the scene header from the file at ``filename``."""
    try:
        handle = open(filename, "rb")
    except OSError as exc:
        raise ParseError(f"Cannot open file: {os.fspath(filename)}") from exc
    with handle:
        return parse_lines(_read_lines(handle))
"""Command line entry point: parse a scene file and report its header."""

from __future__ import annotations

import sys

from cubscene.mapfile import parse_map_file
from cubscene.scene import TEXTURE_IDS, ParseError, Scene


def _format_color(value: int) -> str:
    # An alternate-form hex of zero carries no 0x prefix.
    if value == 0:
        return f"{value:06x}"
    return format(value, "#06x")


def format_scene(scene: Scene) -> str:
    """Render the report printed after a successful parse."""
    lines = ["Textures loaded:"]
    for index, texture_id in enumerate(TEXTURE_IDS):
        path = scene.texture_path(index)
        lines.append(f"{texture_id}: {'(null)' if path is None else path}")
    lines.append(f"Floor color: {_format_color(scene.floor_color)}")
    lines.append(f"Ceiling color: {_format_color(scene.ceiling_color)}")
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Run the command; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: cubscene <file.cub>")
        return 1
    try:
        scene = parse_map_file(args[0])
    except ParseError as exc:
        print(f"Error\n{exc}")
        return 1
    sys.stdout.write(format_scene(scene))
    return 0


if __name__ == "__main__":
    sys.exit(main())
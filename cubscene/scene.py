"""Scene description read from a .cub file."""

from __future__ import annotations

from dataclasses import dataclass, field

WIN_WIDTH = 800
WIN_HEIGHT = 600

# Order of the wall textures in Scene.textures.
TEXTURE_IDS = ("NO", "SO", "EA", "WE")


class ParseError(ValueError):
    """Raised when a scene file is malformed."""


@dataclass
class Texture:
    """A wall texture; only its file path is known after parsing."""

    path: str | None = None


def _empty_textures() -> list[Texture]:
    return [Texture() for _ in TEXTURE_IDS]


@dataclass
class Scene:
    """Textures and colours declared in the header of a .cub file."""

    textures: list[Texture] = field(default_factory=_empty_textures)
    floor_color: int = 0
    ceiling_color: int = 0

    def texture_path(self, index: int) -> str | None:
        """Return the path of the texture at ``index`` (0:N 1:S 2:E 3:W)."""
        return self.textures[index].path
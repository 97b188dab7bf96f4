import pytest

from cubscene.scene import TEXTURE_IDS, ParseError, Scene
from cubscene.textures import parse_texture_line, texture_index


@pytest.mark.parametrize("position", range(4))
def test_index_follows_identifier_order(position):
    assert texture_index(TEXTURE_IDS[position]) == position


def test_index_matches_prefix():
    assert texture_index("WEST") == texture_index("WE")


def test_unknown_index():
    assert texture_index("XX") is None
    assert texture_index("N") is None


def test_parse_sets_path_and_strips_newline():
    scene = Scene()
    index = parse_texture_line(scene, "SO ./south.xpm\n")
    assert index == TEXTURE_IDS.index("SO")
    assert scene.texture_path(index) == "./south.xpm"


def test_parse_without_newline():
    scene = Scene()
    parse_texture_line(scene, "EA ./east.xpm")
    assert scene.texture_path(TEXTURE_IDS.index("EA")) == "./east.xpm"


def test_duplicate_identifier():
    scene = Scene()
    parse_texture_line(scene, "NO ./a.xpm\n")
    with pytest.raises(ParseError, match="Duplicate texture identifier: NO"):
        parse_texture_line(scene, "NO ./b.xpm\n")
    assert scene.texture_path(0) == "./a.xpm"


@pytest.mark.parametrize("line", ["NO\n", "NO ./a.xpm extra\n", "NO ./a.xpm \n"])
def test_bad_format(line):
    with pytest.raises(ParseError, match="Invalid texture line format"):
        parse_texture_line(Scene(), line)


def test_unknown_identifier():
    with pytest.raises(ParseError, match="Unknown texture identifier: XX"):
        parse_texture_line(Scene(), "XX ./a.xpm\n")
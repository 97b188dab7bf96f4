from cubscene.cli import format_scene, main
from cubscene.scene import Scene, Texture


def test_format_empty_scene():
    text = format_scene(Scene())
    assert text.splitlines()[0] == "Textures loaded:"
    assert "NO: (null)" in text
    assert "Floor color: 000000" in text


def test_format_colors_have_prefix():
    scene = Scene(floor_color=0xDC6400, ceiling_color=0x10)
    lines = format_scene(scene).splitlines()
    assert lines[-2] == "Floor color: 0xdc6400"
    assert lines[-1] == "Ceiling color: 0x0010"


def test_format_texture_order():
    scene = Scene(textures=[Texture(p) for p in ("n", "s", "e", "w")])
    lines = format_scene(scene).splitlines()
    assert lines[1:5] == ["NO: n", "SO: s", "EA: e", "WE: w"]


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_success(tmp_path, capsys):
    path = tmp_path / "scene.cub"
    path.write_text("NO ./north.xpm\nF 0,0,0\n\n1111\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "NO: ./north.xpm\n" in out
    assert "SO: (null)\n" in out


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "scene.cub"
    path.write_text("F 300,0,0\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.startswith("Error\nInvalid RGB values")


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "none.cub"
    assert main([str(missing)]) == 1
    assert f"Cannot open file: {missing}" in capsys.readouterr().out
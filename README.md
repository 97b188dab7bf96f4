# cubscene

`cubscene` reads the header of a `.cub` scene file. The header holds the four
wall texture paths and the floor and ceiling colours.

## Scene header format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
EA ./textures/east.xpm
WE ./textures/west.xpm

F 220,100,0
C 225,30,0
```

- Lines that are only a newline are skipped.
- A line starting with `NO `, `SO `, `EA ` or `WE ` names one texture path.
  Words are separated by spaces, and the line must hold exactly two words.
  An identifier given twice is an error.
- A line starting with `F ` (floor) or `C ` (ceiling) takes three
  comma-separated values from 0 to 255. These are packed as `0xRRGGBB`.
- Reading stops at the first line that is neither a texture nor a colour line.
  That line is where the map grid begins.
- A texture that is not declared has no path (`None`). A colour that is not
  declared stays 0.

## Command line

```
cubscene scene.cub
```

The command prints the texture paths and the colours:

```
Textures loaded:
NO: ./textures/north.xpm
SO: ./textures/south.xpm
EA: ./textures/east.xpm
WE: ./textures/west.xpm
Floor color: 0xdc6400
Ceiling color: 0xe11e00
```

A texture with no path prints as `(null)`. A colour of zero prints as `000000`.

If the command gets the wrong number of arguments, it prints
`Usage: cubscene <file.cub>` and exits with status 1. If the file cannot be
opened or its header is malformed, it prints `Error` and then the reason on
the next line, and exits with status 1.

## Library use

```python
from cubscene.mapfile import parse_map_file
from cubscene.scene import ParseError

try:
    scene = parse_map_file("scene.cub")
except ParseError as exc:
    print(exc)
else:
    print(scene.texture_path(0), hex(scene.floor_color))
```

- `cubscene.scene.Scene` holds `textures` (a list of four `Texture` objects,
  each with a `path`), `floor_color` and `ceiling_color`.
  `Scene.texture_path(index)` returns a path by index: 0 is north, 1 is south,
  2 is east and 3 is west.
- `cubscene.mapfile.parse_map_file(filename)` reads a file.
  `cubscene.mapfile.parse_lines(lines)` works on any iterable of lines that
  keep their trailing newline.
- `cubscene.colors.parse_color_line(line)` and
  `cubscene.colors.parse_rgb_values(text)` return a packed colour.
- `cubscene.textures.parse_texture_line(scene, line)` stores a path in the
  scene and returns its slot. `cubscene.textures.texture_index(identifier)`
  maps `NO`/`SO`/`EA`/`WE` to a slot, or returns `None`.
- `cubscene.split.split_words(s, sep)` splits on one character and drops
  empty words.
- `cubscene.cli.format_scene(scene)` returns the text that the command prints.

All parsing errors raise `cubscene.scene.ParseError`, which is a subclass of
`ValueError`.

## What it does not do

`cubscene` reads only the header. It does not read or validate the map grid,
and it does not check that a player start exists. It does not load texture
images or check that the texture files exist. It does not open a window or
render anything.

## Tests

```
pip install -e ".[test]"
pytest
```
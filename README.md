# cubray

`cubray` is a small first-person raycasting engine. It reads a `.cub` scene
file that describes the resolution, the wall and sprite textures (XPM
images), the floor and ceiling colours, and a grid map. It shows the scene
in a pygame window, or renders a single frame into a BMP image.

## Installing

```
pip install .
```

This installs the `cubray` command. The window is drawn with pygame.

## Running

```
cubray maps/level.cub
```

The scene file name must have an extension starting with `cub`.

| Key           | Action         |
|---------------|----------------|
| `W`           | move forward   |
| `S`           | move back      |
| `A` / `D`     | strafe         |
| Left / Right  | turn           |
| `Esc`         | quit           |

Closing the window also quits. The player cannot step into any cell that is
not `0` (walls and sprites block movement).

To render one frame into `image.bmp` in the current directory, without
opening a window:

```
cubray maps/level.cub --save
```

The screenshot is a 32-bit uncompressed BMP at the resolution given in the
scene file.

If the arguments are wrong, or the scene file or a texture has an error,
the command prints `Error` on one line and a short description on the next,
and exits with status 1.

## Scene file format

```
R 640 480
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
S ./textures/sprite.xpm
F 220,100,0
C 225,30,0

111111
100201
1000N1
111111
```

* `R` gives the width and height, separated by spaces. It must come before
  any texture line and may appear only once. In a window it is reduced to
  the screen size if larger; `--save` uses it as given.
* `NO`, `SO`, `WE` and `EA` are the wall textures and `S` is the sprite
  texture. Only spaces may stand between the identifier and the path; the
  path runs from its first `.` to the end of the line and the line must
  contain a `/`. Each texture may appear only once.
* `F` and `C` are the floor and ceiling colours: three components from 0 to
  255 separated by exactly two commas. Each must appear once.
* The map comes after all identifiers. `1` is a wall, `0` empty floor, `2`
  a sprite, and exactly one of `N`, `S`, `E`, `W` marks the player start and
  the direction faced. Spaces count as walls, and short rows are padded with
  walls. The first and last rows and columns must all be walls, and the map
  must not contain blank lines.

Sprite pixels that are black or transparent are not drawn.

## Using it as a library

```python
from cubray.scene import parse_scene_file
from cubray.game import load_textures, render_frame
from cubray.raycaster import start_player, cast_ray
from cubray.bmp import write_bmp

config = parse_scene_file("maps/level.cub")
textures = load_textures(config)
player = start_player(config)
hit = cast_ray(config.grid, player, 0.0, config.height)
frame = render_frame(config, textures, player)
write_bmp("frame.bmp", frame, config.width, config.height)
```

* `cubray.config`: `SceneConfig`, `CubError`, and the line checks
  `parse_resolution`, `parse_color`, `parse_texture_path`, `is_map_line`,
  `is_blank_line` and `check_walls`.
* `cubray.scene`: `read_lines`, `parse_scene`, `parse_scene_file` and
  `check_cub_name`.
* `cubray.xpm`: `read_xpm` and `parse_xpm` return an `XpmImage` with
  `pixel(x, y)`; errors raise `XpmError`.
* `cubray.colors`: `lookup_color` for X11 colour names and
  `color_from_spec` for XPM colour values.
* `cubray.bmp`: `bmp_header`, `encode_bmp`, `write_bmp` and `is_save_flag`.
* `cubray.raycaster`: `Player`, `Controls`, `RayHit`, `Renderer`,
  `start_player`, `cast_ray` and `sprite_positions`.
* `cubray.game`: `load_textures`, `render_frame`, `run` and `main`.

Frames are lists of `0xRRGGBB` integers, row by row.

## What it does not do

Textures are read only from XPM files, using the `c` colour of each entry
(hexadecimal `#rrggbb` or an X11 colour name). Screenshots are written only
as BMP. There is no mouse control, no sound and no minimap.
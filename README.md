# cubcaster

cubcaster is a grid-based raycaster. It reads a `.cub` scene file, checks that the map is closed, and opens a window with a first-person view that you can walk around in. The window is drawn with pygame.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
cubcaster maps/map1.cub
```

The command takes exactly one argument, the path to a scene file whose name ends in `.cub`. If the argument is missing or extra, the file cannot be read, the scene is invalid, a texture cannot be loaded, or the window cannot be opened, a message is written in red to standard error and the command exits with status 22 (`EINVAL`). It exits with 0 when the game is closed normally.

### Controls

| Key         | Action                 |
|-------------|------------------------|
| `W` / `S`   | forward / back         |
| `A` / `D`   | strafe left / right    |
| `←` / `→`   | turn left / right      |
| `Esc`       | quit                   |

Holding two movement keys together (for example `W` and `A`) moves diagonally; opposite keys cancel each other out. Closing the window also quits.

## Scene files

A scene file lists four wall textures, two colours, and then the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE` and `EA` give the path to an XPM texture for each side. Each file must exist and be readable as XPM.
- `F` and `C` give the floor and ceiling colours as three comma-separated numbers from 0 to 255.
- These six elements may appear in any order, separated by empty lines.
- The map starts at the first other line that contains a `0` or `1` and runs to the end of the file. It may contain only `1` (wall), `0` or a space (floor), and exactly one player start, `N`, `S`, `E` or `W`, which also sets the direction the player faces. Empty lines inside or after the map are rejected.
- Shorter rows are padded with floor up to the widest row, and every floor cell the player can reach must be closed in by walls.

## What it does not do

- The walls are drawn in a flat colour for each side the ray hits (orange, pink, purple, yellow), and the sky and ground in fixed colours. The XPM textures are read and must be valid, and the `F` and `C` colours are parsed and checked, but neither is used when drawing.
- There is no minimap, no sound and no mouse look.

## Using it as a library

The parts can be used on their own:

- `cubcaster.parsing.load_scene(path)` reads and parses a `.cub` file into a `cubcaster.model.Scene`; `parse_scene(lines)` does the same from a list of lines.
- `cubcaster.validation.validate_scene(scene)` finds the player, pads the map and checks that the walls are closed.
- `cubcaster.xpm.read_xpm_file(path)` loads an XPM file into a `cubcaster.image.Image`; `parse_xpm(lines)` builds one from the quoted strings of an XPM. Named colours come from `cubcaster.colornames.lookup_color(name)`.
- `cubcaster.image.Image` is a 32-bit pixel buffer with `put_pixel`, `get_pixel`, `fill` and `to_rgb_bytes`.
- `cubcaster.raycast.cast_frame(image, grid, player, c_angle, rayspacing, d_screen)` renders one frame into an image and returns each column's distance and wall colour.
- `cubcaster.game.Game(scene)` holds the player state; `key_press`, `key_release` and `render` drive it.
- `cubcaster.window.Window(width, height, title, headless=True)` draws to an off-screen surface; events reach its hooks through `dispatch`.
- `cubcaster.describe.describe_scene(scene)` and `describe_game(game)` give readable summaries.

Failures in loading, validating or setting up a scene raise `cubcaster.errors.CubError`; XPM problems raise `cubcaster.xpm.XpmError`.
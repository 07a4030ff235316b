"""Game state: player position, key handling and frame rendering."""

from __future__ import annotations

import enum
import errno
import math

from .errors import CubError
from .image import Image
from .model import FOV, S_HEIGHT, S_WIDTH, Cardinal, Moves, Point, Scene
from .raycast import cast_frame, normalise_angle, radian
from .xpm import XpmError, read_xpm_file

_STEP = 0.2


class Key(enum.IntEnum):
    """Key symbols the game reacts to."""

    ESCAPE = 0xFF1B
    W = 0x77
    S = 0x73
    A = 0x61
    D = 0x64
    LEFT = 0xFF51
    RIGHT = 0xFF53


_START_ANGLES = {
    Cardinal.EA: 0.0,
    Cardinal.NO: 90.0,
    Cardinal.WE: 180.0,
    Cardinal.SO: 270.0,
}

_KEY_FLAGS = {
    Key.W: "up",
    Key.S: "down",
    Key.A: "left",
    Key.D: "right",
    Key.LEFT: "lturn",
    Key.RIGHT: "rturn",
}

_TEXTURE_ORDER = (Cardinal.EA, Cardinal.SO, Cardinal.WE, Cardinal.NO)


def starting_angle(cardinal: Cardinal) -> float:
    """Return the view angle in degrees for a starting direction."""
    return _START_ANGLES[cardinal]


class Game:
    """A running game over a validated scene."""

    def __init__(self, scene: Scene) -> None:
        if scene.player is None or scene.cardinal is None:
            raise CubError("Error: invalid player start position")
        self.scene = scene
        i, j = scene.player
        self.player = Point(j + 0.5, i + 0.5)
        self.c_angle = starting_angle(scene.cardinal)
        self.rayspacing = FOV / (S_WIDTH - 1.0)
        self.d_screen = (S_WIDTH * 0.5) / math.tan(radian(FOV * 0.5))
        self.moves = Moves()
        self.image = Image(int(S_WIDTH), int(S_HEIGHT))
        self.color = 0
        self.running = True

    def load_textures(self) -> None:
        """Read the four wall textures from their XPM files."""
        for cardinal in _TEXTURE_ORDER:
            try:
                texture = self.scene.texture(cardinal)
                texture.image = read_xpm_file(texture.path)
            except (OSError, XpmError, KeyError) as exc:
                raise CubError("invalid texture", errno.EINVAL) from exc

    def key_press(self, key: int) -> None:
        """Start a movement, or stop the game on Escape."""
        if key == Key.ESCAPE:
            self.close()
            return
        flag = _KEY_FLAGS.get(key)
        if flag is not None:
            setattr(self.moves, flag, True)

    def key_release(self, key: int) -> None:
        """Stop the movement bound to a key."""
        flag = _KEY_FLAGS.get(key)
        if flag is not None:
            setattr(self.moves, flag, False)

    def _cell(self, i: int, j: int) -> str | None:
        grid = self.scene.grid
        if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
            return grid[i][j]
        return None

    def new_position(self, angle: float) -> None:
        """Step the player towards ``angle`` unless a wall is in the way."""
        r = radian(angle)
        x = self.player.x + math.cos(r) * _STEP
        y = self.player.y - math.sin(r) * _STEP
        cell = self._cell(int(y), int(x))
        if cell is not None and cell != "1":
            self.player.x = x
            self.player.y = y

    def move(self) -> None:
        """Apply the held keys: turn, then walk."""
        moves = self.moves
        if moves.lturn:
            self.c_angle += 30.0 * self.rayspacing
        if moves.rturn:
            self.c_angle -= 30.0 * self.rayspacing
        angle = self.c_angle
        if moves.down:
            angle += 180
        if moves.left:
            if moves.down:
                angle -= 45
            elif moves.up:
                angle += 45
            else:
                angle += 90
        if moves.right:
            if moves.down:
                angle += 45
            elif moves.up:
                angle -= 45
            else:
                angle -= 90
        self.c_angle = normalise_angle(self.c_angle)
        if (moves.down and moves.up) or (moves.right and moves.left):
            return
        if moves.down or moves.up or moves.right or moves.left:
            self.new_position(angle)

    def render(self) -> Image:
        """Move the player and draw a new frame into the game image."""
        self.move()
        columns = cast_frame(
            self.image,
            self.scene.grid,
            self.player,
            self.c_angle,
            self.rayspacing,
            self.d_screen,
        )
        if columns:
            self.color = columns[-1][1]
        return self.image

    def close(self) -> None:
        """Ask the main loop to stop."""
        self.running = False
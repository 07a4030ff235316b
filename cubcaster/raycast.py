"""Ray casting against a grid of walls and drawing the resulting columns."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .image import Image
from .model import EP, GROUND, PI, S_WIDTH, SKY, WALL_E, WALL_N, WALL_S, WALL_W, Point

_MAX_HEIGHT = 2**31 - 1


def radian(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * (PI / 180.0)


def normalise_angle(angle: float) -> float:
    """Bring an angle that went one turn past 0 or 360 degrees back into range."""
    if angle > 360:
        return angle - 360
    if angle < 0:
        return angle + 360
    return angle


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def check_collision(grid: Sequence[str], x: float, y: float) -> int:
    """Return 1 on a wall, 0 on open floor and -1 outside the map."""
    if not (math.isfinite(x) and math.isfinite(y)):
        return -1
    i = int(y)
    j = int(x)
    if i < 0 or j < 0 or i >= len(grid) or j >= len(grid[i]):
        return -1
    return 1 if grid[i][j] == "1" else 0


def find_wall(grid: Sequence[str], point: Point, step: Point) -> tuple[int, Point]:
    """Step from ``point`` until a wall or the map edge is reached.

    Returns the collision result (1 or -1) and the point where stepping stopped.
    """
    x, y = point.x, point.y
    hit = check_collision(grid, x, y)
    while hit == 0:
        x += step.x
        y += step.y
        hit = check_collision(grid, x, y)
    return hit, Point(x, y)


def vertical_intersection(grid: Sequence[str], player: Point, angle: float) -> float:
    """Distance to the first wall met on a vertical grid line, or -1."""
    r = radian(angle)
    if math.cos(r) == 0:
        return -1.0
    tangent = math.tan(r)
    step = Point(1.0, tangent)
    x = float(int(player.x))
    if 90.0 < angle < 270.0:
        step.x = -1.0
        x -= EP
    else:
        step.y = -step.y
        x += 1
    y = player.y + tangent * (player.x - x)
    hit, point = find_wall(grid, Point(x, y), step)
    if hit == -1:
        return -1.0
    return distance(player, point)


def horizontal_intersection(grid: Sequence[str], player: Point, angle: float) -> float:
    """Distance to the first wall met on a horizontal grid line, or -1."""
    r = radian(angle)
    if math.sin(r) == 0:
        return -1.0
    has_cos = math.cos(r) != 0
    tangent = math.tan(r)
    step = Point(1.0 / tangent if has_cos else 0.0, 1.0)
    y = float(int(player.y))
    if 0.0 < angle < 180.0:
        step.y = -1.0
        y -= EP
    else:
        step.x = -step.x
        y += 1
    x = player.x + (player.y - y) / tangent if has_cos else player.x
    hit, point = find_wall(grid, Point(x, y), step)
    if hit == -1:
        return -1.0
    return distance(player, point)


def smallest_distance(
    horizontal: float, vertical: float, angle: float
) -> tuple[float, int | None]:
    """Choose the nearer hit and the wall colour it shows.

    The colour is None when neither distance is usable.
    """
    if vertical == -1 or (0 < horizontal < vertical):
        return horizontal, WALL_N if 0.0 < angle < 180.0 else WALL_S
    if vertical > 0:
        return vertical, WALL_W if 90.0 < angle < 270.0 else WALL_E
    return 0.0, None


def fish_eye(dist: float, column: int, rayspacing: float) -> float:
    """Correct a ray length for its angle from the screen centre."""
    angle = (column - S_WIDTH * 0.5) * rayspacing
    return dist * math.cos(radian(angle))


def _wall_height(d_screen: float, dist: float) -> int:
    if dist == 0:
        return _MAX_HEIGHT
    value = d_screen / dist
    if not math.isfinite(value):
        return _MAX_HEIGHT if value > 0 else -_MAX_HEIGHT
    return int(max(-_MAX_HEIGHT, min(_MAX_HEIGHT, value)))


def _paint_span(image: Image, column: int, start: int, stop: int, color: int) -> None:
    if stop <= start or not 0 <= column < image.width:
        return
    count = stop - start
    pixel = (color & 0xFFFFFFFF).to_bytes(4, "big" if image.endian else "little")
    base = start * image.size_line + column * (image.bpp // 8)
    end = base + count * image.size_line
    for k, byte in enumerate(pixel):
        image.data[base + k:end + k:image.size_line] = bytes([byte]) * count


def draw_column(image: Image, column: int, dist: float, d_screen: float, color: int) -> None:
    """Draw sky, a wall slice of height d_screen / dist, and ground in one column."""
    height = image.height
    hp = _wall_height(d_screen, dist)
    half_hp = int(hp * 0.5)
    half_screen = int(height * 0.5)
    sky_end = max(0, min(height, half_screen - half_hp))
    wall_end = min(height, sky_end + max(hp, 0))
    _paint_span(image, column, 0, sky_end, SKY)
    _paint_span(image, column, sky_end, wall_end, color)
    _paint_span(image, column, wall_end, height, GROUND)


def cast_frame(
    image: Image,
    grid: Sequence[str],
    player: Point,
    c_angle: float,
    rayspacing: float,
    d_screen: float,
) -> list[tuple[float, int]]:
    """Cast one ray per image column and draw the view.

    Returns the corrected distance and wall colour of every column.
    """
    color = 0
    r_angle = normalise_angle(c_angle + 30.0)
    columns: list[tuple[float, int]] = []
    for column in range(image.width):
        horizontal = horizontal_intersection(grid, player, r_angle)
        vertical = vertical_intersection(grid, player, r_angle)
        dist, wall = smallest_distance(horizontal, vertical, r_angle)
        if wall is not None:
            color = wall
        dist = fish_eye(dist, column, rayspacing)
        draw_column(image, column, dist, d_screen, color)
        columns.append((dist, color))
        r_angle = normalise_angle(r_angle - rayspacing)
    return columns
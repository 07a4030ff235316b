"""Checking that a parsed scene is playable."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .errors import CubError
from .model import Cardinal, Scene
from .parsing import max_width, square_map

_PLAYER_CHARS = frozenset("NSEW")
_BAD_START = "Error: invalid player start position"


def find_player(scene: Scene) -> tuple[tuple[int, int], Cardinal]:
    """Return the single player start as ((row, column), direction)."""
    found: tuple[tuple[int, int], Cardinal] | None = None
    for i, row in enumerate(scene.grid):
        for j, char in enumerate(row):
            if char in _PLAYER_CHARS:
                if found is not None:
                    raise CubError(_BAD_START)
                found = ((i, j), Cardinal.from_char(char))
    if found is None:
        raise CubError(_BAD_START)
    return found


def walls_closed(grid: Sequence[str], start: tuple[int, int]) -> bool:
    """Return False if a floor cell on the map border is reachable from start."""
    rows = len(grid)
    cols = max_width(grid)

    def cell(i: int, j: int) -> str:
        if 0 <= i < rows and 0 <= j < len(grid[i]):
            return grid[i][j]
        return ""

    visited: set[tuple[int, int]] = set()
    queue = deque([start])
    while queue:
        i, j = queue.popleft()
        if (i, j) in visited or cell(i, j) != "0":
            continue
        if i in (0, rows - 1) or j in (0, cols - 1):
            return False
        visited.add((i, j))
        for neighbour in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
            if neighbour not in visited and cell(*neighbour) == "0":
                queue.append(neighbour)
    return True


def validate_scene(scene: Scene) -> Scene:
    """Locate the player, square the map and check that it is closed.

    On success the scene's grid is rectangular, holds the player character
    at its start and the player position and direction are set.
    """
    (i, j), cardinal = find_player(scene)
    grid = list(scene.grid)
    grid[i] = grid[i][:j] + "0" + grid[i][j + 1:]
    grid = square_map(grid)
    if not walls_closed(grid, (i, j)):
        raise CubError("Error: invalid map")
    grid = [row.replace(" ", "0") for row in grid]
    grid[i] = grid[i][:j] + cardinal.to_char() + grid[i][j + 1:]
    scene.grid = grid
    scene.player = (i, j)
    scene.cardinal = cardinal
    return scene
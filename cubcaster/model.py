"""Core data types and display constants."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

EP = 0.00001
PI = 3.14159265359
CUB = 64
FOV = 60
S_WIDTH = 1050.0
S_HEIGHT = 550.0
SKY = 0x112ACD
GROUND = 0x070E3F
WALL_N = 0xFF9933
WALL_S = 0xFF3399
WALL_W = 0x4C0099
WALL_E = 0xFFFF00


class Cardinal(enum.Enum):
    """Direction the player faces at the start."""

    NO = "N"
    SO = "S"
    WE = "W"
    EA = "E"

    @classmethod
    def from_char(cls, char: str) -> "Cardinal":
        """Return the direction for a map character N, S, W or E."""
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"not a player start character: {char!r}") from None

    def to_char(self) -> str:
        """Return the map character for this direction."""
        return self.value


@dataclass
class Point:
    x: float
    y: float


@dataclass
class Texture:
    """A wall texture: the file it comes from and, once loaded, its image."""

    path: str
    image: Any = None


@dataclass
class Moves:
    """Which movement keys are currently held."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    lturn: bool = False
    rturn: bool = False


@dataclass
class Scene:
    """Everything read from a scene description file."""

    grid: list[str] = field(default_factory=list)
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    textures: dict[Cardinal, Texture] = field(default_factory=dict)
    player: tuple[int, int] | None = None
    cardinal: Cardinal | None = None
    elements_found: int = 0

    @property
    def size(self) -> tuple[int, int]:
        """(rows, columns) of the grid; columns is the longest row."""
        return len(self.grid), max((len(row) for row in self.grid), default=0)

    def texture(self, cardinal: Cardinal) -> Texture:
        """Return the texture for a wall direction."""
        try:
            return self.textures[cardinal]
        except KeyError:
            raise KeyError(f"no texture for {cardinal.name}") from None
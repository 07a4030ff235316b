"""Off-screen 32-bit pixel buffers."""

from __future__ import annotations

from collections.abc import Sequence


def color_value(color: int, depth: int = 24, shifts: Sequence[int] | None = None) -> int:
    """Convert 0xRRGGBB to the pixel value of a visual of the given depth.

    For depths of 24 bits and more the colour is returned unchanged. Below,
    ``shifts`` holds (red offset, red bits, green offset, green bits,
    blue offset, blue bits).
    """
    if depth >= 24:
        return color
    if shifts is None or len(shifts) != 6:
        raise ValueError("six channel shifts are needed below 24-bit depth")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )


class Image:
    """A width x height buffer of 32-bit pixels stored as raw bytes."""

    __slots__ = ("width", "height", "bpp", "size_line", "endian", "data")

    def __init__(self, width: int, height: int, endian: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = 32
        self.size_line = width * (self.bpp // 8)
        self.endian = endian
        self.data = bytearray(self.size_line * height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        return y * self.size_line + x * (self.bpp // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        offset = self._offset(x, y)
        self.data[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return one pixel as an unsigned 32-bit value."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + 4], self._byteorder)

    def fill(self, color: int) -> None:
        """Set every pixel to one colour."""
        pixel = (color & 0xFFFFFFFF).to_bytes(4, self._byteorder)
        self.data[:] = pixel * (self.width * self.height)

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed R, G, B bytes, row by row."""
        out = bytearray(self.width * self.height * 3)
        r, g, b = (1, 2, 3) if self.endian else (2, 1, 0)
        out[0::3] = self.data[r::4]
        out[1::3] = self.data[g::4]
        out[2::3] = self.data[b::4]
        return bytes(out)
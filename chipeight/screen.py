"""The 64x32 monochrome frame buffer."""

from __future__ import annotations

from typing import Iterator

WIDTH = 64
HEIGHT = 32


class Screen:
    """A 64x32 grid of pixels that are either lit or dark."""

    width = WIDTH
    height = HEIGHT

    def __init__(self) -> None:
        self.pixels = bytearray(WIDTH * HEIGHT)
        self.draw_flag = False

    def clear(self) -> None:
        """Turn every pixel off."""
        self.pixels[:] = bytes(len(self.pixels))

    def toggle(self, x: int, y: int) -> bool:
        """Flip the pixel at (x, y), wrapping around the edges.

        Returns True if the pixel was lit before the flip.
        """
        offset = (y % HEIGHT) * WIDTH + (x % WIDTH)
        was_lit = self.pixels[offset] == 1
        self.pixels[offset] ^= 1
        return was_lit

    def is_lit(self, x: int, y: int) -> bool:
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is off the screen")
        return self.pixels[y * WIDTH + x] == 1

    def lit_pixels(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) of every lit pixel, row by row."""
        for offset, value in enumerate(self.pixels):
            if value:
                yield offset % WIDTH, offset // WIDTH
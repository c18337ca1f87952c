"""A window that shows the frame buffer as scaled white-on-black pixels."""

from __future__ import annotations

from typing import Optional

import pygame

from .screen import HEIGHT, WIDTH, Screen

DEFAULT_SCALE = 10
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
WINDOW_TITLE = "chip8"


class Display:
    """A window sized to the frame buffer times ``scale``."""

    def __init__(self, scale: int = DEFAULT_SCALE) -> None:
        if scale < 1:
            raise ValueError(f"scale must be at least 1, got {scale}")
        self.scale = scale
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((WIDTH * scale, HEIGHT * scale))
        except pygame.error:
            pygame.quit()
            raise
        pygame.display.set_caption(WINDOW_TITLE)
        self.surface.fill(BLACK)
        pygame.display.flip()
        self._open = True

    @property
    def is_open(self) -> bool:
        return self._open

    def render(self, screen: Screen) -> None:
        """Redraw the window from the frame buffer."""
        if not self._open:
            raise RuntimeError("display is closed")
        self.surface.fill(BLACK)
        size = self.scale
        for x, y in screen.lit_pixels():
            pygame.draw.rect(self.surface, WHITE, (x * size, y * size, size, size))
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and shut the media layer down."""
        if self._open:
            self._open = False
            pygame.quit()

    def __enter__(self) -> "Display":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None
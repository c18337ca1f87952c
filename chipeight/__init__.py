"""CHIP-8 interpreter core, keypad, frame buffer and timers, with a pygame window."""

__version__ = "0.1.0"
__all__ = ["app", "cpu", "display", "keypad", "screen", "timer"]
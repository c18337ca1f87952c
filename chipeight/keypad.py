"""The 16-key hexadecimal keypad and its keyboard layout."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class Key(IntEnum):
    """Keypad slots, numbered in the 4x4 layout order of the keypad."""

    ONE = 0
    TWO = 1
    THREE = 2
    C = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    D = 7
    SEVEN = 8
    EIGHT = 9
    NINE = 10
    E = 11
    A = 12
    ZERO = 13
    B = 14
    F = 15

    @property
    def code(self) -> int:
        """The hexadecimal value this key stands for."""
        return _KEY_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "Key":
        """Return the key for a hexadecimal value 0x0-0xF."""
        try:
            return _CODE_TO_KEY[code]
        except KeyError:
            raise ValueError(f"no keypad key for value {code!r}") from None


_KEY_CODES = {
    Key.ONE: 0x1,
    Key.TWO: 0x2,
    Key.THREE: 0x3,
    Key.C: 0xC,
    Key.FOUR: 0x4,
    Key.FIVE: 0x5,
    Key.SIX: 0x6,
    Key.D: 0xD,
    Key.SEVEN: 0x7,
    Key.EIGHT: 0x8,
    Key.NINE: 0x9,
    Key.E: 0xE,
    Key.A: 0xA,
    Key.ZERO: 0x0,
    Key.B: 0xB,
    Key.F: 0xF,
}

_CODE_TO_KEY = {code: key for key, code in _KEY_CODES.items()}

KEYBOARD_LAYOUT = {
    "1": Key.ONE,
    "2": Key.TWO,
    "3": Key.THREE,
    "4": Key.C,
    "q": Key.FOUR,
    "w": Key.FIVE,
    "e": Key.SIX,
    "r": Key.D,
    "a": Key.SEVEN,
    "s": Key.EIGHT,
    "d": Key.NINE,
    "f": Key.E,
    "z": Key.A,
    "x": Key.ZERO,
    "c": Key.B,
    "v": Key.F,
}


class Keypad:
    """Which keypad keys are currently held down."""

    def __init__(self) -> None:
        self._down: set[Key] = set()

    def is_pressed(self, key: int) -> bool:
        """Whether the key with hexadecimal value ``key`` is held.

        Values outside 0x0-0xF have no key and always report as pressed.
        """
        try:
            slot = Key.from_code(key)
        except ValueError:
            return True
        return slot in self._down

    def press(self, key_name: str) -> Optional[Key]:
        """Mark the keypad key mapped to keyboard key ``key_name`` as held."""
        key = KEYBOARD_LAYOUT.get(key_name.lower())
        if key is not None:
            self._down.add(key)
        return key

    def release(self, key_name: str) -> Optional[Key]:
        """Mark the keypad key mapped to keyboard key ``key_name`` as released."""
        key = KEYBOARD_LAYOUT.get(key_name.lower())
        if key is not None:
            self._down.discard(key)
        return key

    def pressed_keys(self) -> list[Key]:
        """Held keys in slot order."""
        return sorted(self._down)
"""The CHIP-8 interpreter core: memory, registers and instruction decoding."""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import Optional, Union

from .keypad import Keypad
from .screen import Screen
from .timer import Timers

logger = logging.getLogger(__name__)

MEMORY_SIZE = 4096
PROGRAM_START = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - PROGRAM_START
REGISTER_COUNT = 16
STACK_DEPTH = 16
FONT_GLYPH_SIZE = 5


class RomTooLargeError(ValueError):
    """A program does not fit in the memory above the program start."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"ROM of {size} bytes does not fit in {MAX_ROM_SIZE} bytes of program memory"
        )
        self.size = size


class Chip8:
    """Memory, registers and stack, and the fetch-decode-execute step."""

    def __init__(
        self, vy_shift_quirk: bool = False, rng: Optional[random.Random] = None
    ) -> None:
        self.memory = bytearray(MEMORY_SIZE)
        self.v = bytearray(REGISTER_COUNT)
        self.index = 0
        self.pc = PROGRAM_START
        self.stack: list[int] = []
        self.opcode = 0
        self.vy_shift_quirk = vy_shift_quirk
        self._rng = rng if rng is not None else random.Random()

    @property
    def sp(self) -> int:
        return len(self.stack)

    def load_bytes(self, data: bytes) -> None:
        """Copy a program into memory at the program start."""
        if len(data) > MAX_ROM_SIZE:
            raise RomTooLargeError(len(data))
        self.memory[PROGRAM_START : PROGRAM_START + len(data)] = data
        logger.info("rom loaded successfully")

    def load_rom(self, path: Union[str, os.PathLike]) -> None:
        """Read a program file into memory at the program start."""
        self.load_bytes(Path(path).read_bytes())

    def step(self, screen: Screen, keypad: Keypad, timers: Timers) -> None:
        """Fetch, decode and execute one instruction."""
        self._check_span(self.pc, 2)
        op = self.memory[self.pc] << 8 | self.memory[self.pc + 1]
        self.opcode = op
        self.pc = (self.pc + 2) & 0xFFFF

        n = op & 0x000F
        nn = op & 0x00FF
        nnn = op & 0x0FFF
        x = (op & 0x0F00) >> 8
        y = (op & 0x00F0) >> 4
        v = self.v

        match op >> 12:
            case 0x0:
                if op == 0x00E0:
                    screen.clear()
                    screen.draw_flag = True
                elif op == 0x00EE:
                    if not self.stack:
                        raise IndexError("return with an empty call stack")
                    self.pc = self.stack.pop()
            case 0x1:
                self.pc = nnn
            case 0x2:
                if len(self.stack) >= STACK_DEPTH:
                    raise IndexError("call stack overflow")
                self.stack.append(self.pc)
                self.pc = nnn
            case 0x3:
                if v[x] == nn:
                    self._skip()
            case 0x4:
                if v[x] != nn:
                    self._skip()
            case 0x5:
                if v[x] == v[y]:
                    self._skip()
            case 0x6:
                v[x] = nn
            case 0x7:
                v[x] = (v[x] + nn) & 0xFF
            case 0x8:
                self._arithmetic(op, x, y, n)
            case 0x9:
                if v[x] != v[y]:
                    self._skip()
            case 0xA:
                self.index = nnn
            case 0xB:
                self.pc = nnn + v[0]
            case 0xC:
                v[x] = self._rng.randrange(256) & nn
            case 0xD:
                self._draw(screen, v[x], v[y], n)
            case 0xE:
                if nn == 0x9E and keypad.is_pressed(v[x]):
                    self._skip()
                elif nn == 0xA1 and not keypad.is_pressed(v[x]):
                    self._skip()
            case 0xF:
                self._misc(x, nn, keypad, timers)

    def _skip(self) -> None:
        self.pc = (self.pc + 2) & 0xFFFF

    def _check_span(self, start: int, count: int) -> None:
        if start + count > MEMORY_SIZE:
            raise IndexError(
                f"memory access {start:#06x}+{count} is beyond {MEMORY_SIZE} bytes"
            )

    def _arithmetic(self, op: int, x: int, y: int, n: int) -> None:
        v = self.v
        match n:
            case 0x0:
                v[x] = v[y]
            case 0x1:
                v[x] |= v[y]
            case 0x2:
                v[x] &= v[y]
            case 0x3:
                v[x] ^= v[y]
            case 0x4:
                v[x] = (v[x] + v[y]) & 0xFF
            case 0x5:
                vx, vy = v[x], v[y]
                # The no-borrow flag goes to the register named by the low nibble.
                v[n] = int(vx >= vy)
                v[x] = (vx - vy) & 0xFF
            case 0x6:
                last_bit = v[x] & 1
                source = v[x] if self.vy_shift_quirk else v[y]
                v[x] = source >> 1
                v[0xF] = last_bit
            case 0x7:
                vx, vy = v[x], v[y]
                v[n] = int(vx >= vy)
                v[x] = (vy - vx) & 0xFF
            case 0xE:
                first_bit = (v[x] & 0x80) >> 7
                source = v[x] if self.vy_shift_quirk else v[y]
                v[x] = (source << 1) & 0xFF
                v[0xF] = first_bit
            case _:
                logger.warning("unhandled arithmetic opcode %#06x", op)

    def _draw(self, screen: Screen, x0: int, y0: int, height: int) -> None:
        self._check_span(self.index, height)
        self.v[0xF] = 0
        sprite_rows = self.memory[self.index : self.index + height]
        for row, sprite in enumerate(sprite_rows):
            for col in range(8):
                if (sprite >> (7 - col)) & 1 and screen.toggle(x0 + col, y0 + row):
                    self.v[0xF] = 1
        screen.draw_flag = True

    def _misc(self, x: int, nn: int, keypad: Keypad, timers: Timers) -> None:
        v = self.v
        match nn:
            case 0x07:
                v[x] = timers.delay
            case 0x0A:
                # Never blocks: the last held slot wins, otherwise VX is kept.
                for key in keypad.pressed_keys():
                    v[x] = int(key)
            case 0x15:
                timers.delay = v[x]
            case 0x18:
                timers.sound = v[x]
            case 0x1E:
                self.index = (self.index + v[x]) & 0xFFFF
            case 0x29:
                self.index = v[x] * FONT_GLYPH_SIZE
            case 0x33:
                self._check_span(self.index, 3)
                value = v[x]
                self.memory[self.index : self.index + 3] = bytes(
                    (value // 100, value // 10 % 10, value % 10)
                )
            case 0x55:
                self._check_span(self.index, x + 1)
                self.memory[self.index : self.index + x + 1] = v[: x + 1]
                self.index = (self.index + v[x]) & 0xFFFF
            case 0x65:
                self._check_span(self.index, x + 1)
                v[: x + 1] = self.memory[self.index : self.index + x + 1]
                self.index = (self.index + v[x] + 1) & 0xFFFF
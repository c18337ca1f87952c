"""Command-line entry point: load a ROM and run it in a window."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, Union

import pygame

from .cpu import Chip8, RomTooLargeError
from .display import Display
from .keypad import Keypad
from .screen import Screen
from .timer import Timers

PROGRAM_NAME = "chipeight"
USAGE = f"Usage: {PROGRAM_NAME} <Shift Flag> <ROM file>"
MODERN_FLAG = "--shift-quirk=modern"
ORIGINAL_FLAG = "--shift-quirk=original"


def parse_args(argv: Sequence[str]) -> tuple[str, bool]:
    """Return the ROM path and whether the modern shift quirk is on.

    Accepts either ``ROM`` or ``FLAG ROM``. The modern shift behaviour is
    the default; ``--shift-quirk=original`` turns it off. Raises ValueError
    with the usage line for any other number of arguments.
    """
    args = list(argv)
    if not 1 <= len(args) <= 2:
        raise ValueError(USAGE)
    vy_shift_quirk = True
    for arg in args[:-1]:
        if arg == MODERN_FLAG:
            vy_shift_quirk = True
        elif arg == ORIGINAL_FLAG:
            vy_shift_quirk = False
    return args[-1], vy_shift_quirk


def run(rom_path: Union[str, os.PathLike], vy_shift_quirk: bool = True) -> Chip8:
    """Run the ROM until the window is closed; return the final machine state."""
    chip8 = Chip8(vy_shift_quirk=vy_shift_quirk)
    chip8.load_rom(rom_path)
    screen = Screen()
    keypad = Keypad()

    with Display() as display:
        timers = Timers(pygame.time.get_ticks)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    keypad.press(pygame.key.name(event.key))
                elif event.type == pygame.KEYUP:
                    keypad.release(pygame.key.name(event.key))

            chip8.step(screen, keypad, timers)

            if screen.draw_flag:
                display.render(screen)
                screen.draw_flag = False

            timers.tick()
    return chip8


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and run the emulator; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        rom_path, vy_shift_quirk = parse_args(argv)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    try:
        run(rom_path, vy_shift_quirk)
    except (OSError, RomTooLargeError) as error:
        print(f"couldn't load rom: {error}", file=sys.stderr)
        return 1
    return 0
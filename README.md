# chipeight

A CHIP-8 interpreter. It loads a ROM at address `0x200` and runs it in a pygame window. The 64×32 screen is drawn at ten times its size, in white on black.

## Installation

```
pip install .
```

## Running a ROM

```
chipeight path/to/game.ch8
```

The interpreter runs one instruction on each pass of its main loop. The window is redrawn only after an instruction has changed the screen. Closing the window stops the interpreter. The command exits with status 1 and a message on standard error in three cases: the arguments are wrong, the ROM cannot be read, or the ROM is larger than the 3584 bytes above `0x200`.

Two instructions, `8XY6` (shift right) and `8XYE` (shift left), behave differently on different CHIP-8 systems. To choose the behaviour, put a flag before the ROM path:

```
chipeight --shift-quirk=modern path/to/game.ch8
chipeight --shift-quirk=original path/to/game.ch8
```

- `modern` is the default. VX is shifted in place.
- `original` shifts VY and stores the result in VX.

In both modes VF receives the bit that was shifted out of VX. If the first argument is not one of these two flags, it is ignored.

## Keypad

The hexadecimal keypad is mapped to the left-hand block of a QWERTY keyboard:

```
Keyboard        CHIP-8
1 2 3 4         1 2 3 C
Q W E R         4 5 6 D
A S D F         7 8 9 E
Z X C V         A 0 B F
```

## Using the library

The interpreter core runs without a window:

```python
from chipeight.cpu import Chip8
from chipeight.keypad import Keypad
from chipeight.screen import Screen
from chipeight.timer import Timers

chip = Chip8(vy_shift_quirk=False)
chip.load_bytes(bytes([0x60, 0x2A, 0x12, 0x02]))  # V0 = 0x2A, then loop forever

screen, keypad = Screen(), Keypad()
timers = Timers(clock=lambda: 0)

for _ in range(4):
    chip.step(screen, keypad, timers)

assert chip.v[0] == 0x2A
```

### `chipeight.cpu`

- `Chip8.load_bytes(data)` copies a program into memory at `0x200`.
- `Chip8.load_rom(path)` reads a program from a file and copies it into memory at `0x200`.
- Both raise `RomTooLargeError`, a subclass of `ValueError`, if the program does not fit.
- `Chip8.step(screen, keypad, timers)` executes one instruction.
- The machine state is held in the attributes `memory`, `v`, `index`, `pc`, `stack` and `opcode`.
- `step` raises `IndexError` in these cases:
  - a return is made with an empty stack
  - a call would exceed 16 nested calls
  - an instruction reads or writes past the end of memory

### `chipeight.screen`

`Screen` is the 64×32 pixel grid.

- `toggle(x, y)` flips a pixel. Coordinates wrap around the edges. It returns whether the pixel was lit before the flip.
- `is_lit(x, y)` checks one pixel.
- `lit_pixels()` yields the coordinates of every lit pixel.
- `clear()` turns every pixel off.
- `draw_flag` is set whenever an instruction changes the screen.

### `chipeight.keypad`

`Keypad` records which keys are held.

- `press(name)` and `release(name)` take keyboard key names such as `"q"`. They return the `Key` that the name is mapped to, or `None` if it is not mapped.
- `is_pressed(value)` takes a hexadecimal key value 0x0–0xF.
- `pressed_keys()` lists the held keys.

### `chipeight.timer`

`Timers` holds the `delay` and `sound` timers. It reads the clock you give it, which must return milliseconds. `tick()` counts both timers down by one and returns `True`; it does this on each call in which the clock has moved forward.

### `chipeight.display`

`Display(scale)` opens the pygame window. `render(screen)` redraws it. The window closes through `close()` or when `Display` is used as a context manager.

## What it does not do

- **No font sprites.** No hexadecimal font is loaded into memory. `FX29` sets the index register to `VX * 5`, but nothing is stored at that address.
- **No sound.** The sound timer counts down, but nothing is ever played.
- **`FX0A` does not wait for a key.** It stores the highest-numbered held key in VX. If no key is held, VX is left unchanged and execution moves on.
- **No speed control.** Instructions run as fast as the loop allows.

## Development

```
pip install .[test]
pytest
```
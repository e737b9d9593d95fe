# eposlib

A small collection of runtime helpers in pure Python. It has no dependencies outside the standard library.

## Modules

- `eposlib.charclass`: ASCII character classification and case conversion: `islower`, `isupper`, `isalpha`, `isdigit`, `isalnum`, `isxdigit`, `isspace`, `isblank`, `isgraph`, `isprint`, `iscntrl`, `isascii`, `ispunct`, `tolower`, `toupper`. Each function takes an integer code or a one-character string. `tolower` and `toupper` give back the same kind of value they were given.
- `eposlib.byteorder`: `htons`, `ntohs`, `htonl`, `ntohl` for 16- and 32-bit values.
- `eposlib.fixedpt`: `FixedFormat(bits=32, wbits=24)`, signed fixed-point arithmetic in 32 or 64 bits.
  - Methods: `rconst`, `fromint`, `toint`, `mul`, `div`, `fracpart` and `to_str`.
  - Constants as properties: `one`, `one_half`, `two`, `pi`, `two_pi`, `half_pi` and `e`.
  - For `to_str`, a `max_dec` of `-1` selects the default number of digits (2 for 32 bits, 10 for 64) and `-2` selects 15.
- `eposlib.sysconf`: `sysconf(name)`. It returns 4096 for `SC_PAGESIZE` and raises `ValueError` for any other name.
- `eposlib.mathlib`: `fabs`, `floor`, `ceil`, `sin`, `cos`, `sqrt`, `log2(x, y)` (which returns `y * log2(x)`), `atan2`, `tan`, `cot`, `pow`, `exp`, `log` and `atan`.
  - `floor` truncates and then subtracts one for every negative input, so `floor(-2.0) == -3.0`.
  - `atan` uses argument reduction followed by a polynomial.
- `eposlib.stdlib`: `div` and `ldiv` return a `DivResult` with `quot` and `rem`, and truncate towards zero.
  - `strtol`, `strtoul` and `atol` parse integers with 32-bit saturation. Base 0 accepts the `0x`, `0b` and leading-zero octal prefixes.
  - `strtol` and `strtoul` return `(value, end)`. `end` is the index just past the digits, or 0 if no digits were found.
  - Park–Miller random numbers: `ParkMillerRandom` with `seed()` and `rand()`, and `rand_r(seed)`, which returns `(value, next_seed)`.
- `eposlib.qsort`: `qsort(items, cmp)` sorts a mutable sequence in place with a three-way comparison and returns it. The algorithm is Bentley–McIlroy quicksort, and the sort is not stable.
- `eposlib.graphics`: colour helpers `rgb`, `rgba`, `get_r`, `get_g`, `get_b` and `get_a`.
  - `GraphicDevice` is an in-memory frame buffer with `set_pixel` and a Bresenham `line`.
  - Supported depths are 2, 8, 15, 16, 24 and 32 bits per pixel. Depths 1 and 4 draw nothing.
  - A banked device takes `linear=False` and a `switch_bank` callback.
- `eposlib.sortviz`: `generate_arrays`, `draw_array`, `BubbleSortAnimation` (`step`, `run`, `done`, `swaps`, `rounds`) and `main`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Examples

```python
from eposlib.stdlib import strtol, div
from eposlib.qsort import qsort
from eposlib.fixedpt import FixedFormat

value, end = strtol("  0x1fz", 0)       # (31, 6)
result = div(-7, 2)                     # DivResult(quot=-3, rem=-1)

data = [5, 3, 9, 1]
qsort(data, lambda a, b: (a > b) - (a < b))   # data == [1, 3, 5, 9]

fmt = FixedFormat()
fmt.to_str(fmt.rconst(3.14159), -1)     # "3.14"
```

```python
from eposlib.graphics import GraphicDevice, rgb

device = GraphicDevice(x_resolution=64, y_resolution=48, bits_per_pixel=32)
device.line(0, 0, 63, 47, rgb(255, 0, 0))
pixels = device.frame_buffer            # bytearray holding the drawn image
```

## Command

```
eposlib-sortviz [--width 800] [--height 600] [--bpp 32] [--sections 4] [--size 100] [--seed 123456]
```

The command bubble-sorts several pseudo-random arrays side by side on an in-memory frame buffer. It then prints each sorted array, followed by the total number of swaps and rounds.

## What it does not do

`GraphicDevice` only writes bytes into a `bytearray`. The package does not:

- open a window or show anything on screen;
- detect or switch video modes;
- talk to display hardware.

The sorting animation therefore cannot be watched. Its result is the final frame buffer and the printed summary.

## Tests

```
pytest
```
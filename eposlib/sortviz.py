"""Animated bubble sort drawn as bar charts on a graphics device.

The screen is split into horizontal sections, one per array. Each array
is drawn as vertical bars, and all arrays are bubble-sorted side by side,
one comparison per section per round. A section is redrawn after every
swap and once more when it finishes.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .graphics import GraphicDevice, rgb

MAX_SECTIONS = 10
ARRAY_SIZE = 100
DEFAULT_SEED = 123456

_SEPARATOR = rgb(128, 128, 128)
_BACKGROUND = rgb(0, 0, 0)
_SECTION_COLOURS = (
    rgb(255, 0, 0),
    rgb(0, 255, 0),
    rgb(0, 0, 255),
    rgb(255, 255, 0),
    rgb(0, 255, 255),
    rgb(255, 0, 255),
)


def _trunc_div(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def generate_arrays(
    num_sections: int, size: int = ARRAY_SIZE, seed: int = DEFAULT_SEED
) -> list[list[int]]:
    """Fill up to MAX_SECTIONS arrays with pseudo-random values from 1 to ``size``.

    One linear congruential sequence runs through all arrays in order.
    """
    if size <= 0:
        raise ValueError("size must be positive")
    num_sections = max(0, min(num_sections, MAX_SECTIONS))
    state = seed & 0xFFFFFFFF
    arrays = []
    for _ in range(num_sections):
        values = []
        for _ in range(size):
            state = (state * 1103515245 + 12345) & 0xFFFFFFFF
            values.append(((state // 65536) % 32768) % size + 1)
        arrays.append(values)
    return arrays


def draw_array(
    device: GraphicDevice, array: Sequence[int], section_id: int, total_sections: int
) -> None:
    """Draw ``array`` as bars in section ``section_id`` of ``total_sections``."""
    if not array:
        raise ValueError("cannot draw an empty array")
    if total_sections <= 0:
        raise ValueError("total_sections must be positive")

    size = len(array)
    screen_width = device.x_resolution
    section_height = device.y_resolution // total_sections
    y_start = section_id * section_height
    y_end = y_start + section_height - 1
    bar_width = screen_width // size

    device.line(0, y_start, screen_width, y_start, _SEPARATOR)

    for x in range(screen_width):
        for y in range(y_start + 1, y_end):
            device.set_pixel(x, y, _BACKGROUND)

    colour = _SECTION_COLOURS[section_id % len(_SECTION_COLOURS)]
    usable = section_height - 2
    for index, value in enumerate(array):
        bar_height = min(_trunc_div(usable * value, size), usable)
        x_start = index * bar_width
        for x in range(x_start, min(x_start + bar_width, screen_width)):
            for y in range(bar_height):
                device.set_pixel(x, y_end - y, colour)


class BubbleSortAnimation:
    """Bubble-sorts several arrays in lock step, drawing each on its own section."""

    def __init__(self, device: GraphicDevice, arrays: Sequence[Sequence[int]]) -> None:
        if not arrays:
            raise ValueError("at least one array is needed")
        if any(not array for array in arrays):
            raise ValueError("arrays must not be empty")
        self.device = device
        self.arrays = [list(array) for array in arrays]
        self._passes = [0] * len(self.arrays)
        self._positions = [0] * len(self.arrays)
        self._complete = [False] * len(self.arrays)
        self.swaps = 0
        self.rounds = 0

    @property
    def done(self) -> bool:
        """True once every array is sorted."""
        return all(self._complete)

    def _redraw(self, section: int) -> None:
        draw_array(self.device, self.arrays[section], section, len(self.arrays))

    def step(self) -> bool:
        """Advance each unfinished section by one comparison.

        Returns False when there was nothing left to do.
        """
        active = False
        for section, array in enumerate(self.arrays):
            if self._complete[section]:
                continue
            active = True
            size = len(array)
            j = self._positions[section]
            if j < size - self._passes[section] - 1:
                if array[j] > array[j + 1]:
                    array[j], array[j + 1] = array[j + 1], array[j]
                    self.swaps += 1
                    self._redraw(section)
                self._positions[section] = j + 1
            else:
                self._positions[section] = 0
                self._passes[section] += 1
                if self._passes[section] >= size - 1:
                    self._complete[section] = True
                    self._redraw(section)
        if active:
            self.rounds += 1
        return active

    def run(self) -> list[list[int]]:
        """Clear the screen, draw every array, sort to the end and return the arrays."""
        for y in range(self.device.y_resolution):
            for x in range(self.device.x_resolution):
                self.device.set_pixel(x, y, _BACKGROUND)
        for section in range(len(self.arrays)):
            self._redraw(section)
        while self.step():
            pass
        return self.arrays


def main(argv: Sequence[str] | None = None) -> int:
    """Run the animation on an in-memory frame buffer and report the result."""
    parser = argparse.ArgumentParser(description="Animated bubble sort on a frame buffer.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--bpp", type=int, default=32)
    parser.add_argument("--sections", type=int, default=4)
    parser.add_argument("--size", type=int, default=ARRAY_SIZE)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    args = parser.parse_args(argv)

    if args.sections <= 0:
        parser.error("--sections must be positive")
    if args.size <= 0:
        parser.error("--size must be positive")

    device = GraphicDevice(
        x_resolution=args.width, y_resolution=args.height, bits_per_pixel=args.bpp
    )
    arrays = generate_arrays(args.sections, args.size, args.seed)
    animation = BubbleSortAnimation(device, arrays)
    animation.run()
    for section, array in enumerate(animation.arrays):
        print(f"section {section}: {' '.join(map(str, array))}")
    print(f"{animation.swaps} swaps in {animation.rounds} rounds")
    return 0
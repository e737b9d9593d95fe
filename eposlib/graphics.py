"""Colour values and pixel drawing on an in-memory frame buffer.

A :class:`GraphicDevice` describes a video mode (resolution, pixel depth,
scan-line pitch) and owns the bytes of its frame buffer. Linear devices
address the whole buffer directly. Banked devices see a window of the
buffer and switch banks through a callback, the way VESA windowed modes do.
"""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass, field

COLORREF_MASK = 0xFFFFFFFF

_CGA_ODD_FIELD_OFFSET = 0x2000


def rgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue bytes into a colour value."""
    return (r & 0xFF) | ((g & 0xFF) << 8) | ((b & 0xFF) << 16)


def rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack red, green, blue and alpha bytes into a colour value."""
    return ((a & 0xFF) << 24) | rgb(r, g, b)


def get_r(cr: int) -> int:
    """Red byte of a colour value."""
    return cr & 0xFF


def get_g(cr: int) -> int:
    """Green byte of a colour value."""
    return (cr >> 8) & 0xFF


def get_b(cr: int) -> int:
    """Blue byte of a colour value."""
    return (cr >> 16) & 0xFF


def get_a(cr: int) -> int:
    """Alpha byte of a colour value."""
    return (cr >> 24) & 0xFF


def _low_word(value: int) -> int:
    return value & 0xFFFF


def _high_word(value: int) -> int:
    return (value >> 16) & 0xFFFF


@dataclass
class GraphicDevice:
    """A graphics mode together with its frame buffer.

    ``bytes_per_scan_line`` defaults to the tightest pitch for the depth and
    ``frame_buffer_size`` to one full screen for linear modes. A banked
    device (``linear=False``) needs ``switch_bank``, which is called with a
    bank number whenever drawing moves to a different bank.
    """

    x_resolution: int
    y_resolution: int
    bits_per_pixel: int
    bytes_per_scan_line: int | None = None
    number_of_planes: int = 1
    linear: bool = True
    frame_buffer_size: int | None = None
    frame_buffer: bytearray | None = None
    switch_bank: Callable[[int], object] | None = None
    current_bank: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        if self.x_resolution < 0 or self.y_resolution < 0:
            raise ValueError("resolution must not be negative")
        if not self.linear and self.switch_bank is None:
            raise ValueError("a banked device needs a switch_bank callback")

        if self.bytes_per_scan_line is None:
            bits = self._addressing_bits()
            self.bytes_per_scan_line = (self.x_resolution * bits + 7) // 8

        if self.frame_buffer_size is None:
            if self.frame_buffer is not None:
                self.frame_buffer_size = len(self.frame_buffer)
            elif self.bits_per_pixel == 2:
                rows = (self.y_resolution + 1) // 2
                self.frame_buffer_size = (
                    _CGA_ODD_FIELD_OFFSET + rows * self.bytes_per_scan_line
                )
            else:
                self.frame_buffer_size = self.bytes_per_scan_line * self.y_resolution

        if self.frame_buffer is None:
            self.frame_buffer = bytearray(self.frame_buffer_size)

    def _addressing_bits(self) -> int:
        return 16 if self.bits_per_pixel == 15 else self.bits_per_pixel

    def _select_bank(self, bank: int) -> None:
        if bank == self.current_bank:
            return
        assert self.switch_bank is not None
        self.switch_bank(bank)
        self.current_bank = bank

    def _locate(self, addr: int) -> int:
        """Offset into the buffer for a linear address, switching bank if needed."""
        if self.linear:
            return addr
        self._select_bank(_high_word(addr))
        return _low_word(addr)

    def _store(self, offset: int, data: bytes) -> None:
        buf = self.frame_buffer
        assert buf is not None
        if offset < 0 or offset + len(data) > len(buf):
            raise IndexError(f"write at offset {offset} runs past the frame buffer")
        buf[offset : offset + len(data)] = data

    def set_pixel(self, x: int, y: int, cr: int) -> None:
        """Plot one pixel; points outside the screen are ignored.

        Depths 1 and 4 and unknown depths draw nothing.
        """
        if not (0 <= x < self.x_resolution and 0 <= y < self.y_resolution):
            return

        bpp = self.bits_per_pixel
        pitch = self.bytes_per_scan_line
        assert pitch is not None
        addr = y * pitch + (x * self._addressing_bits()) // 8

        if bpp == 2:
            offset = (_CGA_ODD_FIELD_OFFSET if y & 1 else 0) + (y // 2) * pitch + (x * 2) // 8
            shift = 6 - 2 * (x & 3)
            buf = self.frame_buffer
            assert buf is not None
            byte = buf[offset] & ~(3 << shift) & 0xFF
            buf[offset] = byte | ((cr & 3) << shift)
        elif bpp == 8:
            self._store(self._locate(addr), bytes((get_r(cr),)))
        elif bpp == 15:
            value = (
                ((get_r(cr) & 0x1F) << 10)
                | ((get_g(cr) & 0x1F) << 5)
                | (get_b(cr) & 0x1F)
            )
            self._store(self._locate(addr), struct.pack("<H", value))
        elif bpp == 16:
            value = (
                ((get_r(cr) & 0x1F) << 11)
                | ((get_g(cr) & 0x3F) << 5)
                | (get_b(cr) & 0x1F)
            )
            self._store(self._locate(addr), struct.pack("<H", value))
        elif bpp == 24:
            self._store_24(addr, cr)
        elif bpp == 32:
            value = (
                (get_a(cr) << 24) | (get_r(cr) << 16) | (get_g(cr) << 8) | get_b(cr)
            )
            self._store(self._locate(addr), struct.pack("<I", value))

    def _store_24(self, addr: int, cr: int) -> None:
        components = (get_b(cr), get_g(cr), get_r(cr))
        if self.linear:
            self._store(addr, bytes(components))
            return

        bank = _high_word(addr)
        offset = _low_word(addr)
        self._select_bank(bank)
        size = self.frame_buffer_size
        assert size is not None
        for index, component in enumerate(components):
            if index and offset >= size:
                offset = 0
                bank += 1
                self._select_bank(bank)
            self._store(offset, bytes((component,)))
            offset += 1

    def line(self, x1: int, y1: int, x2: int, y2: int, cr: int) -> None:
        """Draw a straight line between two points with Bresenham's method.

        The same pixels are drawn whichever end the line starts from.
        """
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)

        if dy <= dx:
            if x2 < x1:
                x1, x2 = x2, x1
                y1, y2 = y2, y1
            step = 1 if y2 > y1 else -1
            d = 2 * dy - dx
            e_incr = 2 * dy
            ne_incr = 2 * (dy - dx)
            self.set_pixel(x1, y1, cr)
            y = y1
            for x in range(x1 + 1, x2 + 1):
                if d < 0:
                    d += e_incr
                else:
                    d += ne_incr
                    y += step
                self.set_pixel(x, y, cr)
        else:
            if y2 < y1:
                x1, x2 = x2, x1
                y1, y2 = y2, y1
            step = 1 if x2 > x1 else -1
            d = 2 * dx - dy
            e_incr = 2 * dx
            ne_incr = 2 * (dx - dy)
            self.set_pixel(x1, y1, cr)
            x = x1
            for y in range(y1 + 1, y2 + 1):
                if d < 0:
                    d += e_incr
                else:
                    d += ne_incr
                    x += step
                self.set_pixel(x, y, cr)
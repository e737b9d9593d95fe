"""Signed fixed-point arithmetic in 32- or 64-bit integers."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _wrap(value: int, bits: int) -> int:
    """Reduce an integer to a signed two's-complement value of the given width."""
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _trunc_div(n: int, d: int) -> int:
    if d == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


@dataclass(frozen=True)
class FixedFormat:
    """A fixed-point format with ``bits`` total bits, ``wbits`` of them whole."""

    bits: int = 32
    wbits: int = 24

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError("bits must be 32 or 64")
        if not 0 <= self.wbits < self.bits:
            raise ValueError("wbits must be less than bits")

    @property
    def fbits(self) -> int:
        return self.bits - self.wbits

    @property
    def fmask(self) -> int:
        return (1 << self.fbits) - 1

    @property
    def one(self) -> int:
        return _wrap(1 << self.fbits, self.bits)

    @property
    def one_half(self) -> int:
        return self.one >> 1

    @property
    def two(self) -> int:
        return self.one + self.one

    @property
    def pi(self) -> int:
        return self.rconst(math.pi)

    @property
    def two_pi(self) -> int:
        return self.rconst(2 * math.pi)

    @property
    def half_pi(self) -> int:
        return self.rconst(math.pi / 2)

    @property
    def e(self) -> int:
        return self.rconst(math.e)

    def rconst(self, value: float) -> int:
        """Round a real number to the nearest fixed-point value."""
        scaled = value * self.one + (0.5 if value >= 0 else -0.5)
        return _wrap(int(scaled), self.bits)

    def fromint(self, value: int) -> int:
        """Convert an integer to fixed point (in the double-width type)."""
        return _wrap(value << self.fbits, 2 * self.bits)

    def toint(self, value: int) -> int:
        """Drop the fraction, rounding towards negative infinity."""
        return value >> self.fbits

    def mul(self, a: int, b: int) -> int:
        """Multiply two fixed-point numbers."""
        a = _wrap(a, self.bits)
        b = _wrap(b, self.bits)
        return _wrap((a * b) >> self.fbits, self.bits)

    def div(self, a: int, b: int) -> int:
        """Divide two fixed-point numbers, truncating towards zero."""
        a = _wrap(a, self.bits)
        b = _wrap(b, self.bits)
        return _wrap(_trunc_div(a << self.fbits, b), self.bits)

    def fracpart(self, value: int) -> int:
        """The fraction bits of a fixed-point number."""
        return _wrap(value, self.bits) & self.fmask

    def to_str(self, value: int, max_dec: int = -1) -> str:
        """Render as a decimal string.

        ``max_dec`` is the number of fraction digits to produce; -1 picks the
        default for the width (2 or 10) and -2 asks for 15 digits.
        """
        if max_dec == -1:
            max_dec = 2 if self.bits == 32 else 10
        elif max_dec == -2:
            max_dec = 15

        value = _wrap(value, self.bits)
        out = []
        if value < 0:
            out.append("-")
            value = _wrap(-value, self.bits)

        mask = (1 << self.bits) - 1
        out.append(str(self.toint(value) & ((1 << (2 * self.bits)) - 1)))
        out.append(".")

        frac = (self.fracpart(value) << self.wbits) & mask
        ndec = 0
        while True:
            frac = (frac & mask) * 10
            out.append(str((frac >> self.bits) % 10))
            ndec += 1
            if frac == 0 or ndec >= max_dec:
                break

        if ndec > 1 and out[-1] == "0":
            out.pop()
        return "".join(out)
"""Integer division, a Park-Miller random generator and string-to-integer parsing.

``long`` is 32 bits wide here, so the parsers saturate at the 32-bit limits.
"""

from __future__ import annotations

from dataclasses import dataclass

RAND_MAX = 0x7FFFFFFD

LONG_MAX = 2147483647
LONG_MIN = -LONG_MAX - 1
ULONG_MAX = 4294967295

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

_DEFAULT_NONZERO_SEED = 123459876
_SPACES = frozenset(" \t\n")


@dataclass(frozen=True)
class DivResult:
    """Quotient and remainder of a truncating division."""

    quot: int
    rem: int


def _truncating_divmod(numer: int, denom: int) -> DivResult:
    if denom == 0:
        raise ZeroDivisionError("integer division by zero")
    quot = abs(numer) // abs(denom)
    if (numer < 0) != (denom < 0):
        quot = -quot
    rem = numer - quot * denom
    if numer >= 0 and rem < 0:
        quot += 1
        rem -= denom
    return DivResult(quot, rem)


def div(numer: int, denom: int) -> DivResult:
    """Divide ``int`` values, truncating the quotient towards zero."""
    return _truncating_divmod(numer, denom)


def ldiv(numer: int, denom: int) -> DivResult:
    """Divide ``long`` values, truncating the quotient towards zero."""
    return _truncating_divmod(numer, denom)


def _next_state(state: int) -> int:
    """Advance the state by x = 16807 * x mod (2**31 - 1)."""
    state &= 0xFFFFFFFF
    if state == 0:
        state = _DEFAULT_NONZERO_SEED
    hi, lo = divmod(state, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x


def rand_r(seed: int) -> tuple[int, int]:
    """Draw one value from ``seed``; return ``(value, next_seed)``."""
    state = _next_state(seed)
    return state % (RAND_MAX + 1), state


class ParkMillerRandom:
    """Minimal-standard random generator with a seedable state."""

    def __init__(self, seed: int = 1) -> None:
        self._state = seed & 0xFFFFFFFF

    def seed(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        self._state = seed & 0xFFFFFFFF

    def rand(self) -> int:
        """Next value in the range 0 to RAND_MAX."""
        value, self._state = rand_r(self._state)
        return value


def _digit_value(c: str) -> int | None:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    if "a" <= c <= "z":
        return ord(c) - ord("a") + 10
    return None


def _scan(text: str, base: int, signed: bool) -> tuple[int, int]:
    if not 0 <= base <= 36:
        raise ValueError(f"base must be between 0 and 36, got {base}")

    def at(i: int) -> str:
        return text[i] if i < len(text) else ""

    pos = 0
    c = at(pos)
    pos += 1
    while c in _SPACES:
        c = at(pos)
        pos += 1

    neg = False
    if c == "-":
        neg = True
        c = at(pos)
        pos += 1
    elif c == "+":
        c = at(pos)
        pos += 1

    if base in (0, 16) and c == "0" and at(pos) in ("x", "X"):
        c = at(pos + 1)
        pos += 2
        base = 16
    elif base in (0, 2) and c == "0" and at(pos) in ("b", "B"):
        c = at(pos + 1)
        pos += 2
        base = 2
    if base == 0:
        base = 8 if c == "0" else 10

    if signed:
        limit = -LONG_MIN if neg else LONG_MAX
    else:
        limit = ULONG_MAX
    cutoff, cutlim = divmod(limit, base)

    acc = 0
    state = 0  # 0: no digits, 1: digits, -1: overflow
    while c:
        digit = _digit_value(c)
        if digit is None or digit >= base:
            break
        if state < 0 or acc > cutoff or (acc == cutoff and digit > cutlim):
            state = -1
        else:
            state = 1
            acc = acc * base + digit
        c = at(pos)
        pos += 1
    else:
        pos += 0

    if state < 0:
        if signed:
            acc = LONG_MIN if neg else LONG_MAX
        else:
            acc = ULONG_MAX
    elif neg:
        acc = -acc if signed else (-acc) & ULONG_MAX

    end = pos - 1 if state else 0
    return acc, end


def strtol(text: str, base: int = 10) -> tuple[int, int]:
    """Parse a signed integer at the start of ``text``.

    Returns ``(value, end)`` where ``end`` is the index just past the digits,
    or 0 if no digits were found. Out-of-range values saturate at
    LONG_MIN or LONG_MAX. Base 0 accepts ``0x``, ``0b`` and leading-zero
    octal prefixes.
    """
    return _scan(text, base, signed=True)


def strtoul(text: str, base: int = 10) -> tuple[int, int]:
    """Parse an unsigned integer at the start of ``text``.

    Like :func:`strtol`, but a leading minus negates modulo 2**32 and
    overflow saturates at ULONG_MAX.
    """
    return _scan(text, base, signed=False)


def atol(text: str) -> int:
    """Parse a decimal integer, ignoring where parsing stopped."""
    return strtol(text, 10)[0]
"""Floating-point functions with the behaviour of the system's math library."""

from __future__ import annotations

import math
import struct

_LOG2_E = 1.442695040888963


def fabs(x: float) -> float:
    """Absolute value."""
    return -x if x < 0 else x


def floor(x: float) -> float:
    """Truncate, then step down by one for any negative input.

    Negative whole numbers therefore come back one lower than themselves.
    """
    return float(int(x) - 1) if x < 0.0 else float(int(x))


def ceil(x: float) -> float:
    """Smallest whole number not below ``x``."""
    ix = int(x)
    if ix == x or x < 0.0:
        return float(ix)
    return float(ix + 1)


def sin(x: float) -> float:
    """Sine; NaN for infinite input."""
    return math.nan if math.isinf(x) else math.sin(x)


def cos(x: float) -> float:
    """Cosine; NaN for infinite input."""
    return math.nan if math.isinf(x) else math.cos(x)


def sqrt(x: float) -> float:
    """Square root; NaN for negative input."""
    return math.nan if x < 0 else math.sqrt(x)


def log2(x: float, y: float) -> float:
    """Return ``y * log2(x)``."""
    if math.isnan(x) or math.isnan(y) or x < 0:
        return math.nan
    if x == 0:
        return y * -math.inf
    return y * math.log2(x)


def atan2(y: float, x: float) -> float:
    """Arc tangent of ``y / x`` in the correct quadrant."""
    return math.atan2(y, x)


def tan(x: float) -> float:
    """Tangent; NaN for infinite input."""
    return math.nan if math.isinf(x) else math.tan(x)


def cot(x: float) -> float:
    """Cotangent."""
    t = tan(x)
    if t == 0:
        return math.copysign(math.inf, t)
    return 1.0 / t


def pow(x: float, y: float) -> float:  # noqa: A001
    """``x`` raised to ``y``.

    A zero base gives 1 when ``y`` is zero and 0 otherwise; a negative base
    gives NaN.
    """
    if x == 0:
        return 1.0 if y == 0 else 0.0
    if math.isnan(x) or math.isnan(y) or x < 0:
        return math.nan
    t = y * math.log2(x)
    if math.isnan(t):
        return math.nan
    if math.isinf(t):
        return math.inf if t > 0 else 0.0
    try:
        return math.pow(x, y)
    except OverflowError:
        return math.inf


def exp(x: float) -> float:
    """e raised to ``x``; overflows to infinity."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def log(x: float) -> float:
    """Natural logarithm."""
    return log2(x, 1.0) / _LOG2_E


_ATANHI = (
    4.63647609000806093515e-01,
    7.85398163397448278999e-01,
    9.82793723247329054082e-01,
    1.57079632679489655800e00,
)
_ATANLO = (
    2.26987774529616870924e-17,
    3.06161699786838301793e-17,
    1.39033110312309984516e-17,
    6.12323399573676603587e-17,
)
_AT = (
    3.33333333333329318027e-01,
    -1.99999999998764832476e-01,
    1.42857142725034663711e-01,
    -1.11111104054623557880e-01,
    9.09088713343650656196e-02,
    -7.69187620504482999495e-02,
    6.66107313738753120669e-02,
    -5.83357013379057348645e-02,
    4.97687799461593236017e-02,
    -3.65315727442169155270e-02,
    1.62858201153657823623e-02,
)


def _words(x: float) -> tuple[int, int]:
    """Signed high and unsigned low 32-bit words of an IEEE double."""
    bits = struct.unpack("<Q", struct.pack("<d", x))[0]
    high = bits >> 32
    if high & 0x80000000:
        high -= 1 << 32
    return high, bits & 0xFFFFFFFF


def atan(x: float) -> float:
    """Arc tangent by argument reduction and a polynomial approximation."""
    hx, low = _words(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x44100000:
        if ix > 0x7FF00000 or (ix == 0x7FF00000 and low != 0):
            return x + x
        if hx > 0:
            return _ATANHI[3] + _ATANLO[3]
        return -_ATANHI[3] - _ATANLO[3]

    if ix < 0x3FDC0000:
        if ix < 0x3E200000:
            return x
        index = -1
    else:
        x = fabs(x)
        if ix < 0x3FF30000:
            if ix < 0x3FE60000:
                index = 0
                x = (2.0 * x - 1.0) / (2.0 + x)
            else:
                index = 1
                x = (x - 1.0) / (x + 1.0)
        elif ix < 0x40038000:
            index = 2
            x = (x - 1.5) / (1.0 + 1.5 * x)
        else:
            index = 3
            x = -1.0 / x

    z = x * x
    w = z * z
    a = _AT
    s1 = z * (a[0] + w * (a[2] + w * (a[4] + w * (a[6] + w * (a[8] + w * a[10])))))
    s2 = w * (a[1] + w * (a[3] + w * (a[5] + w * (a[7] + w * a[9]))))
    if index < 0:
        return x - x * (s1 + s2)
    z = _ATANHI[index] - ((x * (s1 + s2) - _ATANLO[index]) - x)
    return -z if hx < 0 else z
"""Conversion between host and network (big-endian) byte order."""

import sys

_HOST_IS_BIG = sys.byteorder == "big"


def _swap(x: int, width: int) -> int:
    value = x & ((1 << (8 * width)) - 1)
    if _HOST_IS_BIG:
        return value
    return int.from_bytes(value.to_bytes(width, "little"), "big")


def htons(x: int) -> int:
    """Convert a 16-bit value from host to network order."""
    return _swap(x, 2)


def ntohs(x: int) -> int:
    """Convert a 16-bit value from network to host order."""
    return _swap(x, 2)


def htonl(x: int) -> int:
    """Convert a 32-bit value from host to network order."""
    return _swap(x, 4)


def ntohl(x: int) -> int:
    """Convert a 32-bit value from network to host order."""
    return _swap(x, 4)
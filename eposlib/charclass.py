"""ASCII character classification and case conversion.

Every function takes a character code (an ``int``) or a one-character
string. Anything outside 7-bit ASCII is never a letter, digit or space.
"""

from __future__ import annotations


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def islower(c: int | str) -> bool:
    """True for 'a' to 'z'."""
    code = _code(c)
    return ord("a") <= code <= ord("z")


def isupper(c: int | str) -> bool:
    """True for 'A' to 'Z'."""
    code = _code(c)
    return ord("A") <= code <= ord("Z")


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    return islower(c) or isupper(c)


def isdigit(c: int | str) -> bool:
    """True for '0' to '9'."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isxdigit(c: int | str) -> bool:
    """True for hexadecimal digits in either case."""
    code = _code(c)
    return isdigit(code) or ord("a") <= code <= ord("f") or ord("A") <= code <= ord("F")


def isspace(c: int | str) -> bool:
    """True for space, form feed, newline, carriage return, tab and vertical tab."""
    return _code(c) in (ord(" "), ord("\f"), ord("\n"), ord("\r"), ord("\t"), ord("\v"))


def isblank(c: int | str) -> bool:
    """True for space and tab."""
    return _code(c) in (ord(" "), ord("\t"))


def isgraph(c: int | str) -> bool:
    """True for printable characters other than space."""
    return 32 < _code(c) < 127


def isprint(c: int | str) -> bool:
    """True for printable characters including space."""
    return 32 <= _code(c) < 127


def iscntrl(c: int | str) -> bool:
    """True for control characters and DEL."""
    code = _code(c)
    return 0 <= code < 32 or code == 127


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) < 128


def ispunct(c: int | str) -> bool:
    """True for printable characters that are neither alphanumeric nor space."""
    return isprint(c) and not isalnum(c) and not isspace(c)


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other input comes back unchanged."""
    code = _code(c)
    result = code - ord("A") + ord("a") if isupper(code) else code
    return chr(result) if isinstance(c, str) else result


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other input comes back unchanged."""
    code = _code(c)
    result = code - ord("a") + ord("A") if islower(code) else code
    return chr(result) if isinstance(c, str) else result
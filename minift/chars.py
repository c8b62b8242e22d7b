"""Character classification for single ASCII characters or code points."""

from operator import index

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_lower",
    "is_upper",
]


def _code(c):
    """Return the integer code of ``c``, which is a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return index(c)


def is_lower(c):
    """True for the ASCII lower-case letters a-z."""
    return ord("a") <= _code(c) <= ord("z")


def is_upper(c):
    """True for the ASCII upper-case letters A-Z."""
    return ord("A") <= _code(c) <= ord("Z")


def is_alpha(c):
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_digit(c):
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c):
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c):
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c):
    """True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126
"""Writing characters, strings and integers to a text stream."""

import sys

__all__ = [
    "put_char",
    "put_str",
    "put_nstr",
    "put_endl",
    "put_nbr",
]


def _stream(file):
    return sys.stdout if file is None else file


def put_char(c, file=None):
    """Write one character, given as a one-character string or a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(c)
    _stream(file).write(ch)


def put_str(s, file=None):
    """Write ``s``; nothing is written when ``s`` is None."""
    if s is not None:
        _stream(file).write(s)


def put_nstr(s, length, file=None):
    """Write at most the first ``length`` characters of ``s``.

    Nothing is written when ``s`` is None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if s is not None:
        _stream(file).write(s[:length])


def put_endl(s, file=None):
    """Write ``s`` followed by a newline; nothing is written when ``s`` is None."""
    if s is not None:
        out = _stream(file)
        out.write(s)
        out.write("\n")


def put_nbr(n, file=None):
    """Write the decimal representation of the integer ``n``."""
    _stream(file).write(str(int(n)))
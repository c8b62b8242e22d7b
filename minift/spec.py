"""Conversion specifications: flags, width, precision and length modifiers."""

from dataclasses import dataclass, field
from enum import Enum
from operator import index

from .chars import is_digit
from .numbers import atoi

__all__ = [
    "NO_PRECISION",
    "Flags",
    "Length",
    "Modifiers",
    "is_flag",
    "type_specifier",
    "parse_modifiers",
]

NO_PRECISION = -1
"""Precision value meaning that no precision was given."""

_FLAG_FIELDS = {" ": "space", "#": "pound", "+": "plus", "-": "minus", "0": "zero"}
_LOWER_SPECIFIERS = "%dcspouxfb"
_UPPER_SPECIFIERS = {"i": "d", "O": "o", "U": "u", "X": "x", "F": "f", "B": "b"}
_UNDEFINED_LENGTHS = frozenset("zjhl")


@dataclass
class Flags:
    """The flag characters of a conversion specification."""

    space: bool = False
    pound: bool = False
    plus: bool = False
    minus: bool = False
    zero: bool = False


class Length(Enum):
    """Length modifier of a conversion specification."""

    NONE = ""
    SHORT = "h"
    CHAR = "hh"
    LONG = "l"
    LONG_LONG = "ll"
    LONG_DOUBLE = "L"
    SIZE = "z"


@dataclass
class Modifiers:
    """Everything between the ``%`` and the conversion character."""

    flags: Flags = field(default_factory=Flags)
    width: int = 0
    precision: int = NO_PRECISION
    length: Length = Length.NONE


def _at(fmt, pos):
    return fmt[pos] if 0 <= pos < len(fmt) else ""


def _is_digit(ch):
    return len(ch) == 1 and is_digit(ch)


def _read_number(fmt, pos):
    end = pos
    while _is_digit(_at(fmt, end)):
        end += 1
    return atoi(fmt[pos:end]), end


def _next_int(args):
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return index(value)


def is_flag(ch):
    """True if ``ch`` is one of the flag characters ``' #+-0'``."""
    return len(ch) == 1 and ch in _FLAG_FIELDS


def type_specifier(ch):
    """Classify a conversion character.

    Return ``(conversion, upper)`` where ``conversion`` is one of
    ``%dcspouxfb`` and ``upper`` tells whether the upper-case variant was
    used (``i`` counts as ``d``), or None if ``ch`` is no conversion.
    """
    if len(ch) != 1:
        return None
    if ch in _LOWER_SPECIFIERS:
        return ch, False
    if ch in _UPPER_SPECIFIERS:
        return _UPPER_SPECIFIERS[ch], ch != "i"
    return None


def _parse_length(fmt, pos):
    ch = _at(fmt, pos)
    following = _at(fmt, pos + 1)
    if ch == "L":
        length = Length.LONG_DOUBLE
    elif ch == "h":
        length = Length.CHAR if following == "h" else Length.SHORT
    elif ch == "l":
        length = Length.LONG_LONG if following == "l" else Length.LONG
    elif ch in ("z", "j"):
        length = Length.SIZE
    else:
        return Length.NONE, pos
    pos += 2 if length in (Length.CHAR, Length.LONG_LONG) else 1
    while _at(fmt, pos) in _UNDEFINED_LENGTHS:
        pos += 1
    return length, pos


def parse_modifiers(fmt, pos, args):
    """Parse the specification in ``fmt`` starting at index ``pos``.

    ``pos`` is the index just after the ``%``. ``args`` is an iterator over
    the remaining arguments; a ``*`` width or precision takes the next one.
    Return ``(modifiers, pos)`` with ``pos`` at the conversion character.
    A negative width sets the minus flag; a negative precision counts as none.
    """
    flags = Flags()
    while is_flag(_at(fmt, pos)):
        setattr(flags, _FLAG_FIELDS[fmt[pos]], True)
        pos += 1

    width = 0
    if _at(fmt, pos) == "*":
        width = _next_int(args)
        pos += 1
    if _is_digit(_at(fmt, pos)):
        width, pos = _read_number(fmt, pos)
    if _at(fmt, pos) == "*":
        width = _next_int(args)
        pos += 1
    if width < 0:
        width = -width
        flags.minus = True

    precision = NO_PRECISION
    if _at(fmt, pos) == ".":
        pos += 1
        precision = 0
        if _is_digit(_at(fmt, pos)):
            precision, pos = _read_number(fmt, pos)
        elif _at(fmt, pos) == "*":
            precision = _next_int(args)
            pos += 1
        if precision < 0:
            precision = NO_PRECISION

    length, pos = _parse_length(fmt, pos)
    return Modifiers(flags, width, precision, length), pos
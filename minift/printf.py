"""Formatting of printf-style format strings."""

import sys

from .floats import convert_f
from .integers import convert_b, convert_i, convert_o, convert_u, convert_x
from .spec import parse_modifiers, type_specifier
from .text import convert_c, convert_p, convert_percent, convert_s

__all__ = ["sformat", "printf"]


def _take(args):
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(conversion, upper, mods, args):
    if conversion == "%":
        return convert_percent(mods)
    value = _take(args)
    if conversion == "d":
        return convert_i(mods, value)
    if conversion == "c":
        return convert_c(mods, value)
    if conversion == "s":
        return convert_s(mods, value)
    if conversion == "p":
        return convert_p(mods, value)
    if conversion == "o":
        return convert_o(mods, value, upper)
    if conversion == "u":
        return convert_u(mods, value, upper)
    if conversion == "x":
        return convert_x(mods, value, upper)
    if conversion == "f":
        return convert_f(mods, value, upper)
    return convert_b(mods, value, upper)


def sformat(fmt, *args):
    """Return ``fmt`` with each conversion specification replaced.

    An unknown conversion character is written as is, after its modifiers
    have been consumed; a lone ``%`` at the end produces nothing.
    """
    remaining = iter(args)
    pieces = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent == -1:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        mods, pos = parse_modifiers(fmt, percent + 1, remaining)
        current = fmt[pos : pos + 1]
        spec = type_specifier(current)
        pos += 1
        if spec is None:
            pieces.append(current)
            continue
        conversion, upper = spec
        pieces.append(_convert(conversion, upper, mods, remaining))
    return "".join(pieces)


def printf(fmt, *args, file=None):
    """Write the formatted string to ``file`` (standard output by default).

    Return the number of characters written.
    """
    text = sformat(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)
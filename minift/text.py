"""Character, string, pointer and percent conversions."""

from operator import index

from .numbers import num_string_u_base

__all__ = ["convert_c", "convert_s", "convert_p", "convert_percent"]


def _single(mods, ch):
    if mods.flags.minus:
        return ch + " " * (mods.width - 1)
    if mods.width > 1:
        pad = "0" if mods.flags.zero else " "
        return pad * (mods.width - 1) + ch
    return ch


def convert_c(mods, value):
    """Format one character, given as a code (reduced to a byte) or a string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        ch = value
    else:
        ch = chr(index(value) & 0xFF)
    return _single(mods, ch)


def convert_percent(mods):
    """Format a literal percent sign."""
    return _single(mods, "%")


def convert_s(mods, value):
    """Format a string; None is shown as ``(null)``."""
    text = "(null)" if value is None else value
    if 0 <= mods.precision < len(text):
        text = text[: mods.precision]
    if text and mods.flags.minus:
        return text.ljust(mods.width)
    if mods.width > len(text):
        pad = "0" if mods.flags.zero else " "
        return pad * (mods.width - len(text)) + text
    return text


def _pad_width(mods, length, written, sign):
    precision = mods.precision
    pad = " "
    if length > precision or precision == -1:
        if mods.width <= length:
            return ""
        if mods.flags.zero and precision == -1:
            pad = "0"
        limit = mods.width - length - sign if written == 0 else mods.width - length
    else:
        limit = mods.width - precision - sign
    return pad * max(0, limit - written)


def _zero_fill(precision, length):
    """Leading zeros for ``precision`` and the precision left afterwards."""
    if precision > length:
        return "0" * (precision - length), length - 1
    return "", precision - 1


def _pointer_left(mods, text):
    zeros = "0" * max(0, mods.precision - len(text))
    return (zeros + text).ljust(mods.width)


def _pointer_right(mods, text):
    precision = mods.precision
    sign = int(mods.flags.plus)
    if (
        (mods.flags.zero and mods.width > 14)
        or precision > len(text)
        or (precision > 0 and text[2:3] == "0")
    ):
        out = "0x"
        body = text[2:]
        out += _pad_width(mods, len(body), len(out), sign)
        if precision > len(body) - 2:
            zeros, precision = _zero_fill(precision, len(body))
            out += zeros
    else:
        body = text
        out = _pad_width(mods, len(body), 0, sign)
        if precision > len(body):
            zeros, precision = _zero_fill(precision, len(body))
            out += zeros
    if precision == 0 and body[2:3] == "0":
        return out + body[:-1]
    return out + body


def convert_p(mods, value):
    """Format an address in lower-case hexadecimal with a ``0x`` prefix."""
    address = 0 if value is None else index(value) % 2**64
    if address:
        text = "0x" + num_string_u_base(address, 16).lower()
    else:
        text = "0x0"
    if mods.flags.minus:
        return _pointer_left(mods, text)
    return _pointer_right(mods, text)
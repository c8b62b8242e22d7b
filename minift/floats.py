"""Fixed-point conversion of floating-point values."""

from math import isfinite

from .numbers import integer_part, num_string_base
from .spec import NO_PRECISION

__all__ = ["convert_f"]

_DEFAULT_PRECISION = 6
_NUDGE_LIMIT = 15
_NUDGE = 0.0000000000000001


def _fixed(num, precision):
    """Digits of the non-negative ``num`` with ``precision`` fraction digits.

    The fraction is truncated, not rounded; a tiny nudge guards against
    representation error when the precision is at most 15 digits.
    """
    if precision == NO_PRECISION:
        precision = _DEFAULT_PRECISION
    whole = integer_part(num)
    whole_text = num_string_base(whole, 10)
    if precision == 0:
        return whole_text
    fraction = num - whole
    if precision <= _NUDGE_LIMIT:
        fraction += _NUDGE
    for _ in range(precision):
        fraction *= 10.0
    fraction_text = num_string_base(int(fraction), 10).rjust(precision, "0")
    return f"{whole_text}.{fraction_text}"


def _pad_width(mods, length, written, sign):
    precision = mods.precision
    if length > precision or precision == NO_PRECISION:
        if mods.width <= length:
            return ""
        fill = "0" if mods.flags.zero and precision == NO_PRECISION else " "
        lead = ""
        if written == 0:
            if mods.flags.space and mods.flags.zero:
                lead = " "
            limit = mods.width - length - sign
        else:
            limit = mods.width - length
        return lead + fill * max(0, limit - written - len(lead))
    return " " * max(0, mods.width - precision - sign - written)


def _right_justify(mods, text, negative):
    flags = mods.flags
    precision = mods.precision
    point = flags.pound and "." not in text
    length = len(text) + int(point)
    out = ""
    if negative:
        if flags.zero and precision < 0 and mods.width > length:
            out += "-"
        out += _pad_width(mods, length, len(out), 1)
        if not flags.zero or precision > 0 or not out:
            out += "-"
    else:
        plus_first = (
            flags.plus and flags.zero and precision < 0 and mods.width > length
        )
        if plus_first:
            out += "+"
        out += _pad_width(mods, length, len(out), int(flags.plus))
        if flags.plus and not plus_first:
            out += "+"
        if not flags.plus and flags.space and not out:
            out += " "
    if precision > length:
        out += "0" * (precision - length)
    return out + text + ("." if point else "")


def convert_f(mods, value, upper):
    """Format ``value`` in fixed-point notation, ``[-]ddd.ddd``.

    The fraction is truncated to the precision (6 when none is given).
    ``upper`` marks the ``F`` variant, which formats the same way. The
    output is always right-justified: the minus flag has no effect here.
    """
    num = float(value)
    if not isfinite(num):
        raise ValueError(f"cannot format non-finite value {num!r}")
    negative = num < 0.0
    if negative:
        num = -num
    return _right_justify(mods, _fixed(num, mods.precision), negative)
"""Signed, unsigned, octal, hexadecimal and binary integer conversions."""

from operator import index

from .numbers import num_string_base, num_string_u_base
from .spec import NO_PRECISION, Length

__all__ = ["convert_i", "convert_u", "convert_o", "convert_x", "convert_b"]

_WIDE = frozenset({Length.LONG, Length.LONG_LONG, Length.SIZE})
_NARROW_BITS = {Length.SHORT: 16, Length.CHAR: 8}


def _bits(length):
    if length in _WIDE:
        return 64
    return _NARROW_BITS.get(length, 32)


def _signed_value(value, length):
    """Reduce ``value`` to the signed integer type selected by ``length``."""
    bits = _bits(length)
    value = index(value) & ((1 << bits) - 1)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _unsigned_value(value, length):
    """Reduce ``value`` to the unsigned integer type selected by ``length``."""
    return index(value) % (1 << _bits(length))


def _leading_zeros(precision, length):
    return "0" * max(0, precision - length)


def _pad(mods, length, written, sign, space_rule):
    """Padding placed before the digits of a decimal or octal conversion."""
    precision = mods.precision
    if length > precision or precision == NO_PRECISION:
        if mods.width <= length:
            return ""
        fill = "0" if mods.flags.zero and precision == NO_PRECISION else " "
        out = ""
        if written == 0:
            if space_rule and mods.flags.space and mods.flags.zero:
                out = " "
            limit = mods.width - length - sign
        else:
            limit = mods.width - length
        return out + fill * max(0, limit - written - len(out))
    return " " * max(0, mods.width - precision - sign - written)


def _pad_prefixed(mods, length, written, digits, zero_has_prefix):
    """Padding before the digits of a conversion that may carry a prefix."""
    precision = mods.precision
    if length > precision or precision == NO_PRECISION:
        if mods.width <= length:
            return ""
        fill = "0" if mods.flags.zero and precision == NO_PRECISION else " "
        out = ""
        if mods.flags.space and mods.flags.zero and written == 0:
            out = " "
        if mods.flags.pound and written + len(out) == 0 and digits[:1] != "0":
            length += 2
        return out + fill * max(0, mods.width - length - written - len(out))
    if mods.flags.pound and written == 0 and digits:
        if zero_has_prefix or digits[0] != "0":
            precision += 2
    return " " * max(0, mods.width - precision - written)


def _takes_prefix(mods, digits, zero_has_prefix):
    return bool(
        mods.flags.pound and digits and (zero_has_prefix or digits[0] != "0")
    )


def _prefixed(mods, digits, prefix, zero_has_prefix):
    length = len(digits)
    if mods.flags.minus:
        out = prefix if _takes_prefix(mods, digits, zero_has_prefix) else ""
        out += _leading_zeros(mods.precision, length) + digits
        return out.ljust(mods.width)
    out = ""
    if _takes_prefix(mods, digits, zero_has_prefix):
        if mods.flags.zero and mods.precision == NO_PRECISION:
            out += prefix
        out += _pad_prefixed(mods, length, len(out), digits, zero_has_prefix)
        if not mods.flags.zero or mods.precision > NO_PRECISION:
            out += prefix
    else:
        out += _pad_prefixed(mods, length, 0, digits, zero_has_prefix)
    return out + _leading_zeros(mods.precision, length) + digits


def _signed_right(mods, digits, negative):
    flags = mods.flags
    precision = mods.precision
    length = len(digits)
    out = ""
    if negative:
        if flags.zero and precision < 0 and mods.width > length:
            out += "-"
        out += _pad(mods, length, len(out), 1, True)
        if not flags.zero or precision > 0 or not out:
            out += "-"
    else:
        plus_first = (
            flags.plus and flags.zero and precision < 0 and mods.width > length
        )
        if plus_first:
            out += "+"
        out += _pad(mods, length, len(out), int(flags.plus), True)
        if flags.plus and not plus_first:
            out += "+"
        if not flags.plus and flags.space and not out:
            out += " "
    return out + _leading_zeros(precision, length) + digits


def _signed_left(mods, digits, negative):
    if negative:
        sign = "-"
    elif mods.flags.plus:
        sign = "+"
    elif mods.flags.space:
        sign = " "
    else:
        sign = ""
    out = sign + _leading_zeros(mods.precision, len(digits)) + digits
    return out.ljust(mods.width)


def convert_i(mods, value):
    """Format ``value`` as a signed decimal integer."""
    num = _signed_value(value, mods.length)
    negative = num < 0
    digits = num_string_base(abs(num), 10)
    if digits[:1] == "0" and mods.precision == 0:
        digits = ""
    if mods.flags.minus:
        return _signed_left(mods, digits, negative)
    return _signed_right(mods, digits, negative)


def convert_u(mods, value, upper):
    """Format ``value`` as an unsigned decimal; ``upper`` forces 64 bits."""
    length = Length.SIZE if upper else mods.length
    digits = num_string_u_base(_unsigned_value(value, length), 10)
    if digits[:1] == "0" and mods.precision == 0:
        digits = ""
    zeros = _leading_zeros(mods.precision, len(digits))
    if mods.flags.minus:
        return (zeros + digits).ljust(mods.width)
    pad = _pad(mods, len(digits), 0, int(mods.flags.plus), False)
    return pad + zeros + digits


def convert_o(mods, value, upper):
    """Format ``value`` as unsigned octal; ``upper`` forces 64 bits."""
    length = Length.SIZE if upper else mods.length
    digits = num_string_u_base(_unsigned_value(value, length), 8)
    if mods.flags.pound and digits[:1] != "0":
        digits = "0" + digits
    if digits[:1] == "0" and mods.precision == 0 and not mods.flags.pound:
        digits = ""
    zeros = _leading_zeros(mods.precision, len(digits))
    if mods.flags.minus:
        if mods.flags.plus:
            sign = "+"
        elif mods.flags.space:
            sign = " "
        else:
            sign = ""
        return (sign + zeros + digits).ljust(mods.width)
    pad = _pad(mods, len(digits), 0, int(mods.flags.plus), True)
    return pad + zeros + digits


def convert_x(mods, value, upper):
    """Format ``value`` as unsigned hexadecimal, upper-case when ``upper``."""
    digits = num_string_u_base(_unsigned_value(value, mods.length), 16)
    if not upper:
        digits = digits.lower()
    if digits[:1] == "0" and mods.precision == 0:
        digits = ""
    return _prefixed(mods, digits, "0X" if upper else "0x", False)


def convert_b(mods, value, upper):
    """Format ``value`` as unsigned binary; ``upper`` selects the ``0B`` prefix."""
    num = _unsigned_value(value, mods.length)
    digits = num_string_u_base(num, 2)
    if num == 0 and mods.precision == 0:
        digits = ""
    return _prefixed(mods, digits, "0B" if upper else "0b", True)
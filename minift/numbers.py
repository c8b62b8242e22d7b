"""Integer parsing, formatting in arbitrary bases, and word counting."""

__all__ = [
    "atoi",
    "int_length",
    "itoa",
    "itoa_base",
    "uitoa_base",
    "count_words",
    "num_string_base",
    "num_string_u_base",
    "integer_part",
]

_DIGITS = "0123456789ABCDEF"
_SPACES = " \t\n\v\f\r"

_INT_MIN = -(2**31)
_LLONG_MIN = -(2**63)


def _wrap(value, bits):
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _check_base(base):
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")


def _digits(n, base):
    """Upper-case digits of the non-negative integer ``n`` in ``base``."""
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def atoi(text):
    """Parse a leading, optionally signed decimal integer; 0 if there is none.

    Leading whitespace is skipped and parsing stops at the first non-digit.
    The result wraps to a 32-bit signed integer.
    """
    stripped = text.lstrip(_SPACES)
    negative = False
    if stripped[:1] in ("-", "+"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap(-value if negative else value, 32)


def int_length(num):
    """Number of decimal digits in ``num``, ignoring its sign."""
    return len(str(abs(num)))


def itoa(n):
    """Decimal representation of ``n``."""
    return str(n)


def itoa_base(n, base):
    """Represent ``n`` in ``base`` (2 to 16) using upper-case digits.

    The sign is dropped, except for the 32-bit minimum, which is returned in
    decimal. Base-10 results carry one extra leading zero.
    """
    _check_base(base)
    if n == _INT_MIN:
        return "-2147483648"
    text = _digits(abs(n), base)
    return "0" + text if base == 10 else text


def uitoa_base(n, base):
    """Represent ``n`` as a 32-bit unsigned integer in ``base`` (2 to 16)."""
    _check_base(base)
    return _digits(n % 2**32, base)


def count_words(text, sep):
    """Count the non-empty runs of ``text`` delimited by ``sep``."""
    if not sep:
        raise ValueError("separator must not be empty")
    return sum(1 for part in text.split(sep) if part)


def num_string_base(num, base):
    """Represent a non-negative 64-bit integer in ``base`` (2 to 16).

    The 64-bit minimum yields its magnitude in decimal; any other negative
    value yields an empty string.
    """
    _check_base(base)
    if num == _LLONG_MIN:
        return "9223372036854775808"
    if num < 0:
        return ""
    return _digits(num, base)


def num_string_u_base(num, base):
    """Represent ``num`` as a 64-bit unsigned integer in ``base`` (2 to 16)."""
    _check_base(base)
    return _digits(num % 2**64, base)


def integer_part(number):
    """Integer part of ``number``, truncated toward zero."""
    return int(number)
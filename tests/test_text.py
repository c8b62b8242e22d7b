import pytest

from minift.spec import parse_modifiers
from minift.text import convert_c, convert_p, convert_percent, convert_s


def _mods(spec, *args):
    mods, _ = parse_modifiers(spec, 0, iter(args))
    return mods


def test_percent_plain():
    assert convert_percent(_mods("")) == "%"


def test_percent_right_justified():
    result = convert_percent(_mods("5"))
    assert result == "%".rjust(5)


def test_percent_left_justified():
    result = convert_percent(_mods("-5"))
    assert result == "%".ljust(5)


def test_percent_zero_padded():
    result = convert_percent(_mods("05"))
    assert len(result) == 5
    assert result.endswith("%")
    assert set(result[:-1]) == {"0"}


def test_char_from_code():
    assert convert_c(_mods(""), ord("A")) == "A"


def test_char_code_is_reduced_to_a_byte():
    mods = _mods("")
    assert convert_c(mods, ord("A") + 256) == convert_c(mods, ord("A"))


def test_char_from_string_with_width():
    assert convert_c(_mods("4"), "z") == "z".rjust(4)
    assert convert_c(_mods("-4"), "z") == "z".ljust(4)


@pytest.mark.parametrize("width", [0, 1, 2, 7])
def test_char_length_follows_width(width):
    assert len(convert_c(_mods(str(width)), "q")) == max(width, 1)


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        convert_c(_mods(""), "ab")


def test_string_none_is_null():
    assert convert_s(_mods(""), None) == "(null)"


def test_string_precision_truncates():
    assert convert_s(_mods(".3"), "hello") == "hello"[:3]


def test_string_precision_larger_than_text():
    assert convert_s(_mods(".10"), "hello") == "hello"


def test_string_width():
    assert convert_s(_mods("8"), "hello") == "hello".rjust(8)
    assert convert_s(_mods("-8"), "hello") == "hello".ljust(8)


def test_string_width_smaller_than_text():
    assert convert_s(_mods("-2"), "hello") == "hello"
    assert convert_s(_mods("2"), "hello") == "hello"


def test_string_zero_flag_pads_with_zeros():
    result = convert_s(_mods("07"), "abc")
    assert result.endswith("abc")
    assert set(result[:-3]) == {"0"}
    assert len(result) == 7


def test_empty_string_left_with_zero_flag_pads_right_side_style():
    assert convert_s(_mods("-05"), "") == "0" * 5


def test_pointer_null():
    assert convert_p(_mods(""), None) == "0x0"
    assert convert_p(_mods(""), 0) == "0x0"


def test_pointer_hex_lower_case():
    assert convert_p(_mods(""), 0xDEADBEEF) == "0x" + "deadbeef"


def test_pointer_negative_wraps_to_64_bits():
    assert convert_p(_mods(""), -1) == "0x" + "f" * 16


def test_pointer_zero_precision_null():
    assert convert_p(_mods(".0"), None) == "0x"


def test_pointer_precision_null():
    assert convert_p(_mods(".3"), None) == "0x000"


def test_pointer_width():
    text = convert_p(_mods(""), 0xABC)
    assert convert_p(_mods("20"), 0xABC) == text.rjust(20)
    assert convert_p(_mods("-20"), 0xABC) == text.ljust(20)


def test_pointer_zero_padding_after_prefix():
    result = convert_p(_mods("020"), 0xABC)
    assert len(result) == 20
    assert result.startswith("0x")
    assert result.endswith("abc")
    assert set(result[2:-3]) == {"0"}


def test_pointer_left_precision():
    result = convert_p(_mods("-.8"), 0xABC)
    assert result.endswith("0xabc")
    assert set(result[:-5]) == {"0"}
    assert len(result) == 8
import io

import pytest

from minift.printf import printf, sformat


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (42,)),
        ("%+d", (5,)),
        ("%d", (-17,)),
        ("%u", (7,)),
        ("%x", (255,)),
        ("%#x", (255,)),
        ("%X", (255,)),
        ("%o", (8,)),
        ("%s", ("hello",)),
        ("%.2s", ("abc",)),
        ("%c", (65,)),
        ("%%", ()),
        ("%*d", (5, 42)),
        ("%f", (1.5,)),
        ("a%db%sc", (1, "x")),
        ("%ld", (2**40,)),
        ("plain text", ()),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert sformat(fmt, *args) == fmt % args


def test_binary_conversion():
    assert sformat("%b", 5) == format(5, "b")


def test_pointer_conversion():
    assert sformat("%p", 255) == "0x" + format(255, "x")


def test_null_string():
    assert sformat("%s", None) == "(null)"


def test_char_length_wraps():
    assert sformat("%hhd", 256 + 44) == sformat("%d", 44)


def test_unknown_conversion_is_written_literally():
    assert sformat("%5k") == "k"


def test_trailing_percent_produces_nothing():
    assert sformat("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sformat("%d %d", 1)


def test_extra_arguments_are_ignored():
    assert sformat("%d", 1, 2, 3) == "1"


def test_printf_writes_to_file_and_counts():
    buf = io.StringIO()
    count = printf("%d-%s|%5x", 7, "x", 171, file=buf)
    assert buf.getvalue() == sformat("%d-%s|%5x", 7, "x", 171)
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s=%d\n", "n", 3)
    captured = capsys.readouterr().out
    assert captured == "n=3\n"
    assert count == len(captured)
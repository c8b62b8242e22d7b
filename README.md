# minift

A small library of helpers for characters, integers, byte buffers and text
output, plus a `printf`-style formatter. The formatter handles flags, width,
precision and length modifiers by its own rules.

## Installation

```
pip install minift
```

## Modules

- `minift.chars`: ASCII class tests. Each takes a one-character string or
  an integer code: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_lower`, `is_upper`.
- `minift.numbers`: integer parsing and formatting.
  - `atoi` skips leading whitespace, reads an optional sign and digits, and
    wraps the result to 32 bits.
  - `itoa`, `int_length` and `integer_part` (truncation toward zero).
  - `itoa_base` and `uitoa_base` cover bases 2 to 16 and use upper-case
    digits. `itoa_base` drops the sign, and its base-10 results carry one
    extra leading zero.
  - `num_string_base` and `num_string_u_base` work on 64-bit values.
  - `count_words(text, sep)` counts the non-empty runs between separators.
- `minift.memory`: operations on writable buffers such as `bytearray` and
  `memoryview`: `zero`, `mem_set`, `mem_cpy`, `mem_ccpy`, `mem_chr`,
  `mem_cmp` and `mem_move`.
  - Indexes are returned where a pointer would be, and `None` where a
    search finds nothing.
  - A length that exceeds a buffer, or is negative, raises `ValueError`.
- `minift.output`: `put_char`, `put_str`, `put_nstr`, `put_endl` and
  `put_nbr`. Each writes to `file`, which defaults to standard output.
  `put_str`, `put_nstr` and `put_endl` write nothing for `None`.
- `minift.spec`: parsing of conversion specifications.
  - The `Flags` and `Modifiers` dataclasses and the `Length` enum.
  - `is_flag`, `type_specifier` and `parse_modifiers`.
  - `NO_PRECISION` marks a specification that has no precision.
- `minift.text`: `convert_c`, `convert_s`, `convert_p` and
  `convert_percent`.
- `minift.integers`: `convert_i`, `convert_u`, `convert_o`, `convert_x` and
  `convert_b`.
- `minift.floats`: `convert_f`.
- `minift.printf`: the formatter.
  - `sformat(fmt, *args)` returns the formatted text.
  - `printf(fmt, *args, file=None)` writes it and returns the number of
    characters written.

## Example

```python
from minift.numbers import atoi, itoa_base
from minift.printf import sformat

atoi("  -42abc")          # -42
itoa_base(255, 16)        # "FF"
sformat("[%5d|%-4s|%#x]", 42, "ab", 255)
# "[   42|ab  |0xff]"
```

## Format strings

Conversions:

- `%`, `d`, `i`, `c`, `s`, `p`, `o`, `u`, `x`, `f` and `b`.
- The upper-case forms `O`, `U`, `X`, `F` and `B`.

Modifiers:

- The flags ` `, `#`, `+`, `-` and `0`.
- `*` for width and for precision. It takes the next argument. A negative
  width sets the `-` flag, and a negative precision counts as none.
- The length modifiers `hh`, `h`, `l`, `ll`, `L`, `z` and `j`. Integer
  arguments are reduced to the width that the modifier selects, which is
  32 bits when there is none. `O` and `U` always use 64 bits.

Behaviour to be aware of:

- `f` truncates the fraction to the precision instead of rounding it. The
  precision defaults to 6.
- `f` output is always right-justified.
- Non-finite floats raise `ValueError`.
- `s` shows `None` as `(null)`.
- An unknown conversion character is written as it stands.
- Running out of arguments raises `TypeError`.

## What it does not do

- It provides no command-line program; it is a library only.
- It does not follow the C standard in every corner of `printf` formatting.

## Running the tests

```
pip install "minift[test]"
pytest
```
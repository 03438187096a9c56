# strkit

Helpers in the style of the C `string.h` library for Python values: byte
buffer operations, null-terminated string operations, a few string
transforms, number/text conversions, a `printf`-style formatter and a table
of error-number messages. There are no dependencies outside the standard
library.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `strkit.memory`

`memchr`, `memcmp`, `memcpy`, `memmove` and `memset` work on any object that
supports the buffer protocol (`bytes`, `bytearray`, `memoryview`,
`array.array`, ...), bounded by an explicit byte count `n`.

- `memchr(buf, c, n)` returns the index of the first byte equal to `c` among
  the first `n`, or `None`.
- `memcmp(first, second, n)` returns the difference of the first mismatching
  bytes, or `0`.
- `memcpy`, `memmove` and `memset` write into a writable buffer in place and
  return it.

A character argument may be an `int`, or a one-character `str` or `bytes`.
A negative count, or one larger than a buffer, raises `ValueError`.

### `strkit.cstr`

`strlen`, `strcat`, `strncat`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
`strcpy`, `strncpy`, `strcspn`, `strspn`, `strpbrk`, `strstr` and `strtok`
work on `str` values. A `"\0"` character ends a string, as a terminator would.

- Searches (`strchr`, `strrchr`, `strpbrk`, `strstr`) return an index, or
  `None` when nothing is found. Searching for `"\0"` finds the terminator.
- `strcat`, `strncat`, `strcpy` and `strncpy` return the new contents of
  `dest`; characters of `dest` beyond the new terminator are kept after a
  `"\0"`.
- `strcmp` and `strncmp` return the difference of the first differing
  characters, or `0`.
- `strtok(text, delim)` is a generator yielding the non-empty tokens.

### `strkit.transform`

- `insert(src, text, start_index)` returns a new string; an index outside
  `0..len(src)` raises `IndexError`.
- `trim(src, trim_chars=None)` strips the given characters from both ends;
  with none given it strips space, tab, newline, backspace and vertical tab.
- `to_lower(text)` and `to_upper(text)` change ASCII letters only.

### `strkit.numconv`

- `atoi(text)` strips spaces and `+` signs from both ends, reads an optional
  `-` and the digits after it, and clamps the result to a 32-bit signed range.
  Text without digits gives `0`.
- `itoa(n)` and `itoau(n)` give decimal text; `itoau` raises `ValueError`
  for a negative number.
- `ftoa(value, precision=None)` writes fixed-point text, rounding half away
  from zero. `None` or `-1` means six decimals. The decimal point is always
  written, so precision `0` leaves a trailing `"."`.

### `strkit.strerror`

`strerror(errnum)` returns the message for an error number. On macOS the
Darwin table is used, elsewhere the Linux one. Numbers outside the table, or
without an entry, give `"Unknown error: <errnum>"`.

### `strkit.formatting`

`sprintf(fmt, *args)` returns the formatted text. It handles the conversions
`c d i f s u o x X p e E n %`, the flags `-`, `+`, space and `0`, a width and
a precision (either may be `*` to take it from the arguments) and the length
modifiers `h`, `l` and `L`. Integer arguments are wrapped to 16 bits (`h`),
64 bits (`l`) or 32 bits otherwise.

`%n` stores the number of characters written so far into item `0` of its
argument (for example a one-element list). `%p` writes an integer as
`0x` followed by lower-case hex; `None` gives `0x0`.

Running out of arguments raises `TypeError`; a format that ends inside a
specification raises `ValueError`.

`FormatSpec` is the dataclass that holds the flags, width, precision and
length of one conversion.

## Examples

```python
from strkit.cstr import strcspn, strstr, strtok
from strkit.transform import insert, trim
from strkit.numconv import atoi, ftoa
from strkit.formatting import sprintf

strcspn("hello world", "o")                     # 4
strstr("You are toxic!", "toxic")               # 8
list(strtok("He,l/l.o", ",/."))                 # ["He", "l", "l", "o"]
insert("Hello ", "world", 6)                    # "Hello world"
trim("*** Much Ado About Nothing ***", " *'")   # "Much Ado About Nothing"
atoi("  -123123123")                            # -123123123
ftoa(2.5, 0)                                    # "3."
sprintf("%+5.5d aboba", 10000)                  # "+10000 aboba"
sprintf("%-5i|", 69)                            # "69   |"

count = [0]
sprintf("%d%n", 123, count)                     # "123"; count == [3]
```

## What it does not do

- There is no command-line tool; this is a library only.
- `sprintf` has no `#` flag. `%g` and `%G` are accepted but produce no text.
  `%e`/`%E` always write one decimal and reject zero and non-finite values.
# ftkit

Small utilities whose behaviour follows the classic C library closely:
ASCII character tests, byte-buffer operations, NUL-aware string searching,
a singly linked list, a per-descriptor line reader and a printf-style
formatter. There are no third-party dependencies.

## Modules

- `ftkit.chars` – `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`. Each takes a one-character string or
  an integer code; the case mappings return the same kind they were given.
- `ftkit.memory` – `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset` on `bytes`/`bytearray` buffers. `memchr` returns an
  index or `None`; `memmove(buf, dst_offset, src_offset, n)` moves bytes
  inside one buffer and handles overlap. Counts past the end of a buffer
  raise `ValueError`.
- `ftkit.strings` – `atoi` (skips leading whitespace, one optional sign,
  wraps like a 32-bit `int`), `itoa` (32-bit range, `OverflowError`
  otherwise), `split` (drops empty pieces), `strtrim`, `substr`,
  `strjoin`, `strmapi`, `striteri` (edits a mutable sequence of characters
  in place), `strdup`.
- `ftkit.search` – `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  `strlcpy`, `strlcat`. A `"\0"` ends a string. Searches return an index
  or `None`; `strlcpy` and `strlcat` return `(resulting_string, length)`,
  where the length is what the C functions report.
- `ftkit.output` – `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to a text stream (standard output by default).
- `ftkit.linkedlist` – `Node` and `LinkedList` with `push_front`,
  `push_back`, `last`, `clear`, `for_each` and `map`. The list is iterable
  and supports `len()`.
- `ftkit.getline` – `LineReader.read_line(fd)` returns the next line
  (newline included) or `None` at end of input, keeping leftover data
  separately for each descriptor; `LineReader.lines(fd)` yields the rest.
  `find_newline` returns the index of the first newline or `None`.
- `ftkit.keys` – `Platform` (Linux, macOS, Windows), `Key`, `Color`,
  `keycode(key, platform)`, `key_for_code(code, platform)` and
  `current_platform()`, plus the window constants `WINDOW_WIDTH`,
  `WINDOW_HEIGHT`, `MID_X`, `MID_Y`.
- `ftkit.formatspec` – `parse_spec(fmt, pos)` parses one
  `%[flags][width][.precision]conversion` into a `FormatSpec`;
  `FormatSpec.check_rules()` rejects incompatible flags with `FormatError`.
- `ftkit.conversions` – `render_char`, `render_str`, `render_int`,
  `render_uint`, `render_hex`, `render_ptr`; each returns
  `(text, count)` for a single conversion.
- `ftkit.printf` – `format_string(fmt, *args)` returns the formatted text;
  `printf(fmt, *args, file=None)` writes it and returns the character count.
  Supported conversions are `c s p d i u x X %` with the flags
  `- + 0 # space`, a field width and a precision.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.strings import atoi, itoa, split
from ftkit.printf import format_string

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("a  b c ", " ")     # ["a", "b", "c"]

format_string("%5d|%-4x|%.2s", 42, 255, "hello")   # "   42|ff  |he"
```

Reading lines from a file descriptor:

```python
import os
from ftkit.getline import LineReader

reader = LineReader()
fd = os.open("notes.txt", os.O_RDONLY)
for line in reader.lines(fd):
    print(line, end="")
os.close(fd)
```

A linked list:

```python
from ftkit.linkedlist import LinkedList

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.push_front(0)
doubled = items.map(lambda x: x * 2)
list(doubled)             # [0, 2, 4]
```

## Errors

An empty format string or a malformed or incompatible conversion raises
`ftkit.formatspec.FormatError` (a `ValueError`); running out of arguments
raises `TypeError`. Extra arguments are ignored, and `printf` writes
nothing when the format is invalid.

## What it does not do

`ftkit.keys` only holds key-code tables, colours and window dimensions.
The package opens no windows, reads no map files and draws nothing, and it
has no command-line program.
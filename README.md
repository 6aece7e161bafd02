# ftkit

A small, dependency-free library of helpers that follow the behaviour of
the classic C library routines, on Python strings, `bytearray` buffers and
integers. It is a library only; it has no command-line entry point.

## Modules

- `ftkit.chars`: ASCII classification and case mapping: `is_alnum`,
  `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`, `to_upper`.
  Each takes an integer code or a one-character string; the case mappers
  return the same kind of value they were given.
- `ftkit.memory`: operations on `bytearray` buffers and writable
  `memoryview`s: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset`. A negative count, or one past the end of a buffer,
  raises `ValueError`. `memchr` returns an index or `None`.
- `ftkit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`, `substr`. A string ends at its first NUL
  character, if any. Searches return an index or `None`. `strlcpy(src, size)`
  and `strlcat(dest, src, size)` return a pair of the resulting text and
  the length they tried to create.
- `ftkit.conversions`: `atoi` (leading whitespace, one sign, digits up to
  the first non-digit, 32-bit wrap-around), `itoa` (raises `OverflowError`
  outside the 32-bit range) and `int_len`.
- `ftkit.transform`: `strtrim`, `strjoin` (either argument may be `None`,
  not both), `split` and `count_words` on a single separator character,
  `strmapi`, and `striteri`, which calls a function for each index of a
  mutable sequence so it can rewrite elements in place.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`,
  each writing to a text stream such as `sys.stdout` or an `io.StringIO`.
- `ftkit.linked`: a singly linked list `Node` (iterating a node yields its
  content and that of every following node), `lst_new` and
  `lst_add_front`, which returns the new head.
- `ftkit.rotations`: a frozen `Point(x, y, z)`, rotations `rot_x`, `rot_y`,
  `rot_z` by an angle in degrees, `rot_iso_home` (30 degrees about x, then
  30 about y) and `rotate_grid`, which replaces every point of a list of
  rows in place.
- `ftkit.wordtab`: `str_to_wordtab` splits on runs of spaces and tabs;
  `str_str` and `str_str_quoted` find a substring, the latter skipping
  matches inside double quotes.
- `ftkit.colors`: `channel_shifts` turns red, green and blue channel masks
  into six shift and width values; `get_color_value` packs a `0xRRGGBB`
  colour for a given depth, returning it unchanged at 24 bits or more.

## Installation

```
pip install .
```

## Example

```python
import io

from ftkit.conversions import atoi, itoa
from ftkit.output import putendl_fd
from ftkit.rotations import Point, rot_z
from ftkit.strings import strlcpy
from ftkit.transform import split

split("  10 20  30 ", " ")        # ['10', '20', '30']
atoi("  -42abc")                  # -42
itoa(-10)                         # '-10'
strlcpy("hello", 3)               # ('he', 5)
rot_z(Point(1.0, 0.0, 0.0), 90)   # Point(x≈0.0, y≈1.0, z=0.0)

out = io.StringIO()
putendl_fd("done", out)
out.getvalue()                    # 'done\n'
```

## What it does not do

The rotation and colour helpers compute points and pixel values only.
The package does not open windows, draw lines or images, handle keyboard
or mouse events, or read map files; those are left to whatever program
uses it.

## Running the tests

```
pip install .[test]
pytest
```
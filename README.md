# minifmt

A compact printf-style formatter, plus small helpers for ASCII characters,
byte buffers, strings and singly linked lists.

## Installation

```
pip install minifmt
```

## Formatting

`minifmt.printf` provides `printf` and `render`. They understand these
conversions:

| Conversion | Argument | Output |
|------------|----------|--------|
| `%c` | one-character str, or int (taken modulo 256) | the character |
| `%s` | str or `None` | the string, or `(null)` |
| `%d`, `%i` | int | signed 32-bit decimal |
| `%u` | int | unsigned 32-bit decimal |
| `%x`, `%X` | int | unsigned 32-bit hex, in lower or upper case |
| `%p` | int or `None` | `0x`-prefixed lowercase hex, or `(nil)` for `None` or 0 |
| `%%` | none | a literal `%` |

```python
from minifmt.printf import printf, render

count = printf("%s has %d items\n", "cart", 3)   # writes to stdout, returns 17
text = render("%x / %X", 274348, 274348)          # '42fac / 42FAC'
```

`printf` writes to standard output, or to the text stream given as the
`file=` keyword. It returns the number of characters counted. `render`
returns the same text as a string.

Integer arguments are reduced to the width the conversion reads, so values
out of range wrap. The values are 32 bits, or the platform address width
for `%p`.

Some inputs behave in ways you may not expect:

- An unknown specifier such as `%q` takes no argument and writes nothing.
  It still adds one to the count that `printf` returns.
- A format that ends in a lone `%` raises `ValueError`.
- Too few arguments raises `TypeError`.
- An argument of the wrong type raises `TypeError`.

## Helpers

- `minifmt.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower`.
  - Each takes a code point or a one-character string.
  - Classification is ASCII only.
  - The conversions return a value of the same kind they were given.
- `minifmt.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc`.
  - These work on `bytearray` and other bytes-like buffers.
  - `memmove` copies within one buffer, between two offsets.
  - `memchr` returns an index or `None`.
  - `calloc` raises `MemoryError` if the size would overflow.
- `minifmt.text`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup` and `atoi`.
  - The searches return indices, or `None` when there is no match.
  - `strlcpy` and `strlcat` return the resulting text together with the
    length they tried to create.
  - `atoi` wraps like a signed 32-bit integer.
- `minifmt.transform`: `itoa`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi` and `striteri`.
  - `itoa` raises `OverflowError` outside the signed 32-bit range.
  - `split` drops empty pieces.
  - `striteri` replaces each item of a mutable sequence when the callback
    returns a character.
- `minifmt.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `put_uint`, `put_ptr` and `put_hex`.
  - Each writes to the given text stream, or to standard output when the
    stream is `None`.
  - Each returns the number of characters written.
- `minifmt.linked_list`: `Node` and `LinkedList`.
  - `LinkedList` has `push_front`, `push_back`, `last`, `pop_front`,
    `clear`, `for_each` and `map`.
  - It also supports `len()` and iteration.

```python
from minifmt.transform import split, strtrim
from minifmt.linked_list import LinkedList

split("  a b  c ", " ")          # ['a', 'b', 'c']
strtrim("xxhixx", "x")           # 'hi'

items = LinkedList([1, 2, 3])
doubled = items.map(lambda v: v * 2, None)
list(doubled)                     # [2, 4, 6]
```

## What it does not do

The formatter does not support field widths, precision, flags or length
modifiers. It also has no floating-point conversions. The package is a
library only and installs no command-line tool.

## Running the tests

```
pip install "minifmt[test]"
pytest
```
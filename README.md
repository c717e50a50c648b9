# ftlib

`ftlib` is a small collection of helpers for strings, byte buffers, integer and
floating-point conversion, and singly linked lists. The functions keep the
exact limits, orderings and edge cases of the well-known string and memory
routines they are named after, expressed with Python values: indices instead
of pointers, returned strings instead of filled buffers, and exceptions
instead of null results.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Modules

- `ftlib.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint` for a
  single character or code point; `isnumeric` for an optional sign followed
  only by digits (a lone sign or the empty string counts as numeric); and
  `utf8_length`, the byte length of the UTF-8 sequence at the start of a
  `bytes` value, or 0 if it is not well formed.
- `ftlib.search`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`. Text is read up to its first NUL character.
  The searches return an index or `None`; `strlcpy` and `strlcat` return the
  resulting text together with the length they tried to create.
- `ftlib.strings`: `charstr`, `split`, `strconv`, `strdel`, `strins`,
  `strjoin`, `strmapi`, `strpad`, `strsubst`, `strtrim`, `substr`.
- `ftlib.memory`: operations on `bytearray` buffers: `bzero`, `memset`,
  `memcpy`, `memccpy`, `memmove` (offsets within one buffer, overlap allowed),
  `memchr`, `memcmp`, `calloc`, `realloc`, plus `bit_string` and `memprint`,
  which show the bits of little-endian data most significant first.
- `ftlib.integers`: `atoi`, `itoa`, and `itoa_base` for bases 2 to 16 with
  optional `0b`, `0` and `0x` prefixes (`PREFIX_ON` / `PREFIX_OFF`).
  `atoi` saturates at the 64-bit range and then keeps the low 32 bits, so
  positive overflow gives -1 and negative overflow gives 0.
- `ftlib.fmath`: `absd`, `floor`, `frexp`, `log10`, `power`, `ipow` (0 on
  64-bit overflow), `isnan`, `isposinf`, `isneginf`, `signbit`, `arclen`.
- `ftlib.dtoa`: float to text with `dtoa(value, sign, notation, precision)`,
  where `sign` is `SIGN_PLUS` or `SIGN_MINUS` and `notation` is a `Notation`
  member (`FIXED`, `EXPONENT`, `FIXED_HASH`, `EXPONENT_HASH`; the hash forms
  always keep the decimal point). Its building blocks are public too:
  `convert_double`, `round_double` (ties to even, precision capped at 15) and
  `stripzeros`.
- `ftlib.linked`: `Node` and `LinkedList`, with `add_front`, `add_back`,
  `last`, `clear`, `iterate`, `map`, `len()` and iteration over contents.
- `ftlib.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write
  to a file descriptor.

## Examples

```python
from ftlib.integers import atoi, itoa_base
from ftlib.strings import split, strtrim
from ftlib.dtoa import dtoa, Notation, SIGN_PLUS
from ftlib.linked import LinkedList

atoi("   -42abc")                 # -42
itoa_base(255, False, 16, True)   # "0xff"
split("  a b  c ", " ")           # ["a", "b", "c"]
strtrim("xxhixx", "x")            # "hi"
dtoa(3.14159, SIGN_PLUS, Notation.FIXED, 2)   # "3.14"

items = LinkedList([1, 2])
items.add_front(0)
list(items)                       # [0, 1, 2]
```

## Errors

Invalid arguments raise exceptions: `ValueError` for out-of-range counts,
sizes, bases, signs or values and for a substring that `strsubst` cannot
find, `IndexError` for bad positions in `strdel` and `strins`, and
`TypeError` where a required string is `None`.

## What this package does not do

It is a library only. It has no command-line program, does not read lines
from files or descriptors, and offers no wide-character conversion.
# ftkit

Small helpers with no dependencies, modelled on the classic C library
routines. They cover character classification, string searching and building,
byte-buffer handling, simple output to text streams and a minimal
printf-style formatter.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

- `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint` take a code point or a
  one-character string and return a `bool`. Only ASCII ranges are considered.
- `toupper` and `tolower` convert ASCII letters. Any other character comes
  back unchanged. The result has the same type as the argument.
- `atoi(text)` skips leading whitespace, accepts one optional sign and reads
  the decimal digits that follow. If no digits follow, it returns `0`.
- `itoa(n)` returns the decimal text of an `int`.

### `ftkit.memory`

These functions work on `bytes` and `bytearray`. A length that is negative
raises `ValueError`. A length that runs past the buffer raises `IndexError`.

- `memset(buf, value, n)` fills the first `n` bytes of `buf` and returns
  `buf`.
- `bzero(buf, n)` sets the first `n` bytes of `buf` to zero.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`. A size that is too
  large raises `OverflowError`.
- `memchr(data, c, n)` returns the index of the first matching byte, or
  `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal pair of
  bytes, or `0`.
- `memcpy(dest, src, n)` copies the first `n` bytes of `src` into `dest`.
- `memmove(buf, dest, src, n)` copies `n` bytes within `buf` from offset
  `src` to offset `dest`. The two regions may overlap.

### `ftkit.search`

- `strlen(s)` returns the number of characters in `s`.
- `strchr(s, c)` and `strrchr(s, c)` return the index of the first or last
  `c`, or `None`. Searching for NUL gives `len(s)`.
- `strncmp(s1, s2, n)` compares at most `n` characters. The end of a string
  counts as code 0.
- `strnstr(haystack, needle, length)` returns the index of `needle` when it
  lies wholly within the first `length` characters, or `None`.
- `strlcpy(dest, src, size)` and `strlcat(dest, src, size)` return a tuple.
  The first item is the new buffer contents. The second is the length that
  was attempted.

### `ftkit.build`

- `strdup`, `substr`, `strjoin` and `strtrim` return new strings.
- `split(s, c)` splits on a single delimiter and drops empty words.
- `strmapi(s, f)` builds a string from `f(index, char)`.
- `striteri(s, f)` works in place on a mutable sequence of characters, such
  as a `list`. When `f` returns a character, that character replaces the one
  at the index. When `f` returns `None`, the character is left as it was.

### `ftkit.output`

`putchar`, `putstr`, `putendl` and `putnbr` write to the stream you pass. If
you pass none, they write to standard output.

### `ftkit.printf`

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args,
file=None)` writes it to `file` and returns how many characters it wrote. If
`file` is `None`, it writes to standard output.

```python
from ftkit.printf import sprintf, printf

sprintf("Hello %s, number: %d", "Luigi", 42)
# 'Hello Luigi, number: 42'

printf("%x %X %u%%\n", 255, 255, 7)
# prints "ff FF 7%" and a newline, returns 9
```

| Spec | Meaning                                                              |
|------|----------------------------------------------------------------------|
| `%c` | a one-character string, or an integer truncated to one byte          |
| `%s` | a string; `None` gives `(null)`                                      |
| `%d` | a signed 32-bit integer; larger values wrap around                   |
| `%i` | same as `%d`                                                         |
| `%u` | an unsigned 32-bit integer                                           |
| `%x` | unsigned 32-bit hexadecimal, lower case                              |
| `%X` | unsigned 32-bit hexadecimal, upper case                              |
| `%p` | `0x` followed by hex; `None` or `0` gives `(nil)`; a non-integer object is shown by its `id()` |
| `%%` | a literal percent sign                                               |

An unknown conversion gives no output and uses up no argument. A `%` at the
very end of the format is printed as it is. Too few arguments raises
`TypeError`.

The helpers for each conversion are public as well: `format_char`,
`format_string`, `format_int`, `utoa`, `format_unsigned`, `format_hex`,
`format_pointer` and `format_conversion`.

## Limitations

The formatter does not support flags, field widths, precision or length
modifiers. Only the conversions listed above are handled.
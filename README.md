# faststrings

C library string routines that work on Python data and keep C semantics. A
nul byte (or a zero unit) ends a string. A buffer with no nul ends at its
last element. Copies are cut short to fit the destination, and nothing is
written past its end. Comparisons return a signed integer.

Byte strings are `bytes` or `bytearray`, and destinations are `bytearray`
objects written in place. Wide strings are sequences of integer code units,
and destinations are lists written in place. A negative count raises
`ValueError`.

## Install

```
pip install faststrings
pip install "faststrings[test]"   # adds pytest
```

## Byte strings (`faststrings.cstring`)

```python
from faststrings.cstring import strlen, strcpy, strcat, strcmp, strlcpy, strverscmp, strdup

strlen(b"hello\0world")            # 5
dest = bytearray(20)
strcpy(dest, b"hello\0")           # 6: bytes written, nul included
strcat(dest, b" world\0")          # 11: the new length
strcmp(b"abc\0", b"abd\0") < 0     # True
buf = bytearray(5)
strlcpy(buf, b"hello world\0")     # 11; buf == bytearray(b"hell\0")
strverscmp(b"a2\0", b"a10\0") < 0  # True: digit runs compare as numbers
strdup(b"abc")                     # b"abc\0"
```

The module also has these functions:

- Length and copying: `strnlen`, `strncpy`, `stpcpy`, `stpncpy`, `strncat`,
  `strlcat`, `strndup`.
- Comparison: `strncmp`, `strcoll` (the same as `strcmp` in the C locale),
  `strcasecmp` and `strncasecmp`, which ignore ASCII case.
- `strxfrm`, a plain copy in the C locale that returns the full source
  length.

## Error messages (`faststrings.errors`)

```python
from faststrings.errors import strerror, strerror_r, lookup_error_message

strerror(2)                  # b"No such file or directory\0"
strerror(10_000)             # b"Unknown error\0"
lookup_error_message(-1)     # None

buf = bytearray(64)
strerror_r(22, buf)          # 17: bytes written, nul included
small = bytearray(8)
strerror_r(2, small)         # raises OSError; small == bytearray(b"No such\0")
```

The messages are the English descriptions of the Linux errno values 0 to
133. `strerror_r` raises `OSError` with errno `ERANGE` when the buffer is
empty or too small. When the buffer is too small, it still holds the
message, cut short and nul-terminated. For an unknown number it writes the
generic message and raises `OSError` with errno `EINVAL`. The module also
exports `EINVAL`, `ERANGE` and `UNKNOWN_ERROR_MESSAGE`.

## Tokenizing (`faststrings.tokens`)

```python
from faststrings.tokens import Tokenizer, Splitter, strtok_r

list(Tokenizer(b"hello,world,foo\0", b",\0"))  # [b"hello", b"world", b"foo"]
list(Splitter(b"a,,b,\0", b",\0"))             # [b"a", b"", b"b", b""]

pos = 0
token, pos = strtok_r(b"one:two\0", b":\0", pos)  # b"one"
token, pos = strtok_r(b"one:two\0", b":\0", pos)  # b"two"
token, pos = strtok_r(b"one:two\0", b":\0", pos)  # None
```

`Tokenizer` skips empty fields, as `strtok` does. `Splitter` keeps them, as
`strsep` does. `Tokenizer.from_slice` and `Splitter.from_slice` use the
whole of both buffers, nul bytes included. `strtok_iter` and `strsep_iter`
return these iterators.

`strtok` and `strtok_r` return a `(token, position)` pair. You pass the
position back in on the next call.

## Wide strings (`faststrings.wide`)

```python
from faststrings.wide import wcslen, wcsstr, wcschr, wcstok

s = [ord("h"), ord("i"), 0, ord("!")]
wcslen(s)                                        # 2
wcsstr([97, 98, 99, 0], [98, 99, 0])             # 1
wcschr([97, 98, 97, 0], 97)                      # 0
wcstok([97, 44, 98, 0], [44, 0], 0)              # ([97], 2)
```

The functions fall into these groups:

- Length: `wcslen`, `wcsnlen`.
- Copying: `wcscpy`, `wcsncpy`, `wcpcpy`, `wcpncpy`, `wcslcpy`.
- Appending: `wcscat`, `wcsncat`, `wcslcat`.
- Duplication and collation: `wcsdup`, `wcsxfrm`.
- Comparison: `wcscmp`, `wcsncmp`, `wcscoll`, `wcscasecmp`, `wcsncasecmp`.
  These return -1, 0 or 1.
- Search: `wcschr`, `wcsrchr`, `wcschrnul`, `wcsstr`, `wcsspn`, `wcscspn`,
  `wcspbrk`. A search that finds nothing returns `None`.
- Tokenizing: `wcstok`.

## Wide memory (`faststrings.wmem`)

These functions never look for a nul, so every unit of the arrays takes
part. Destinations may be lists, `array.array` objects or memoryviews.

```python
from faststrings.wmem import wmemmove, wmemcmp, wmemchr

buf = [1, 2, 3, 4, 5]
wmemmove(memoryview_or_list := buf, buf[1:])  # 4; buf == [2, 3, 4, 5, 5]
wmemcmp([1, 2], [1, 3])                       # -1
wmemchr([5, 6, 5], 5)                         # 0
```

The module also has `wmemcpy`, `wmempcpy`, `wmemset` and `wmemrchr`.

## What it does not include

The byte-string module has no search routines, such as `strchr`, `strrchr`,
`strstr` or `strspn`. There are no byte-memory routines either, such as
`memcpy`, `memmove`, `memset`, `memcmp` or `memchr`. Searching is only
available for wide strings and wide arrays, through `faststrings.wide` and
`faststrings.wmem`.

## Tests

```
pytest
```
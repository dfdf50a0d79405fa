"""Splitting nul-terminated byte strings into tokens.

``strtok`` and ``strtok_r`` keep their scan position in a value the caller
passes back in; :class:`Tokenizer` and :class:`Splitter` are iterators that
skip empty fields and keep them respectively.
"""

from __future__ import annotations

from .cstring import strlen

__all__ = [
    "Tokenizer",
    "Splitter",
    "strtok",
    "strtok_r",
    "strtok_iter",
    "strsep_iter",
]


def _terminated(data: bytes | bytearray) -> bytes:
    return bytes(data[: strlen(data)])


def strtok_r(
    s: bytes | bytearray, delim: bytes | bytearray, saveptr: int
) -> tuple[bytes | None, int]:
    """Return the next token of ``s`` and the position to resume from.

    Start with ``saveptr`` 0 and pass back the returned position on each
    call; the token is None once the string is exhausted.
    """
    if saveptr < 0:
        raise ValueError(f"saveptr must not be negative, got {saveptr}")
    text = _terminated(s)
    delims = _terminated(delim)
    length = len(text)

    pos = min(saveptr, length + 1)
    if pos > length:
        return None, saveptr

    while pos < length and text[pos] in delims:
        pos += 1
    if pos >= length:
        return None, length + 1

    start = pos
    while pos < length and text[pos] not in delims:
        pos += 1

    resume = pos + 1 if pos < length else length + 1
    return text[start:pos], resume


def strtok(
    s: bytes | bytearray, delim: bytes | bytearray, state: int
) -> tuple[bytes | None, int]:
    """Tokenize like :func:`strtok_r`, with the state kept by the caller."""
    return strtok_r(s, delim, state)


class Tokenizer:
    """Iterator over the non-empty tokens of a string.

    Runs of delimiters are skipped, as ``strtok`` does.
    """

    def __init__(self, data: bytes | bytearray, delimiters: bytes | bytearray):
        self._data = _terminated(data)
        self._delimiters = _terminated(delimiters)
        self._position = 0

    @classmethod
    def from_slice(
        cls, data: bytes | bytearray, delimiters: bytes | bytearray
    ) -> "Tokenizer":
        """Build a tokenizer that uses the whole of both buffers, nuls included."""
        tokenizer = cls(b"", b"")
        tokenizer._data = bytes(data)
        tokenizer._delimiters = bytes(delimiters)
        return tokenizer

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> bytes:
        data = self._data
        delims = self._delimiters
        pos = self._position
        while pos < len(data) and data[pos] in delims:
            pos += 1
        if pos >= len(data):
            self._position = pos
            raise StopIteration
        start = pos
        while pos < len(data) and data[pos] not in delims:
            pos += 1
        self._position = pos
        return data[start:pos]


class Splitter:
    """Iterator over the fields of a string, empty ones included.

    Behaves like repeated ``strsep``: a trailing delimiter yields a final
    empty field.
    """

    def __init__(self, data: bytes | bytearray, delimiters: bytes | bytearray):
        self._data = _terminated(data)
        self._delimiters = _terminated(delimiters)
        self._position = 0
        self._done = False

    @classmethod
    def from_slice(
        cls, data: bytes | bytearray, delimiters: bytes | bytearray
    ) -> "Splitter":
        """Build a splitter that uses the whole of both buffers, nuls included."""
        splitter = cls(b"", b"")
        splitter._data = bytes(data)
        splitter._delimiters = bytes(delimiters)
        return splitter

    def __iter__(self) -> "Splitter":
        return self

    def __next__(self) -> bytes:
        if self._done:
            raise StopIteration
        data = self._data
        delims = self._delimiters
        start = pos = self._position
        while pos < len(data) and data[pos] not in delims:
            pos += 1
        if pos < len(data):
            self._position = pos + 1
        else:
            self._position = pos
            self._done = True
        return data[start:pos]


def strtok_iter(s: bytes | bytearray, delim: bytes | bytearray) -> Tokenizer:
    """Return an iterator over the non-empty tokens of ``s``."""
    return Tokenizer(s, delim)


def strsep_iter(s: bytes | bytearray, delim: bytes | bytearray) -> Splitter:
    """Return an iterator over the fields of ``s``, keeping empty ones."""
    return Splitter(s, delim)
"""Operations on nul-terminated wide strings.

A wide string is a sequence of integer code units (``wchar_t`` values) in
which the first zero ends the string; a sequence without a zero ends at its
last element. Destination arguments are lists that are written in place,
and no function ever writes past the end of its destination.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

__all__ = [
    "wcslen",
    "wcsnlen",
    "wcscpy",
    "wcsncpy",
    "wcpcpy",
    "wcpncpy",
    "wcscat",
    "wcsncat",
    "wcscmp",
    "wcsncmp",
    "wcscoll",
    "wcschr",
    "wcsrchr",
    "wcsstr",
    "wcsspn",
    "wcscspn",
    "wcspbrk",
    "wcscasecmp",
    "wcsncasecmp",
    "wcschrnul",
    "wcslcpy",
    "wcslcat",
    "wcsdup",
    "wcsxfrm",
    "wcstok",
]

WideString = Sequence[int]
WideBuffer = MutableSequence[int]

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")


def _check_count(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _lower(c: int) -> int:
    return c + 32 if _UPPER_A <= c <= _UPPER_Z else c


def _terminated(s: WideString) -> list[int]:
    return list(s[: wcslen(s)])


def wcslen(s: WideString) -> int:
    """Return the number of units before the first nul, or ``len(s)``."""
    try:
        return s.index(0)
    except ValueError:
        return len(s)


def wcsnlen(s: WideString, maxlen: int) -> int:
    """Return the length of ``s`` before its first nul, at most ``maxlen``."""
    _check_count(maxlen, "maxlen")
    limit = min(len(s), maxlen)
    try:
        return s.index(0, 0, limit)
    except ValueError:
        return limit


def wcscpy(dest: WideBuffer, src: WideString) -> int:
    """Copy ``src`` with its nul into ``dest``; return the units written."""
    src_len = wcslen(src)
    copy_len = min(src_len + 1, len(dest), len(src))
    content_len = min(copy_len, src_len)
    dest[:content_len] = src[:content_len]
    if copy_len > src_len:
        dest[src_len] = 0
        return src_len + 1
    return content_len


def wcsncpy(dest: WideBuffer, src: WideString, n: int) -> int:
    """Copy at most ``n`` units, padding with nuls; return the span written."""
    _check_count(n)
    limit = min(len(dest), n)
    copy_len = min(wcslen(src), limit, len(src))
    dest[:copy_len] = src[:copy_len]
    if copy_len < limit:
        dest[copy_len:limit] = [0] * (limit - copy_len)
    return limit


def wcpcpy(dest: WideBuffer, src: WideString) -> int:
    """Copy ``src`` into ``dest``; return the index of the terminating nul."""
    copy_len = min(wcslen(src), max(len(dest) - 1, 0))
    dest[:copy_len] = src[:copy_len]
    if copy_len < len(dest):
        dest[copy_len] = 0
    return copy_len


def wcpncpy(dest: WideBuffer, src: WideString, n: int) -> int:
    """Copy at most ``n`` units, padding with nuls.

    Returns the index of the first nul written, or the copied span when no
    nul was written.
    """
    _check_count(n)
    limit = min(len(dest), n)
    copy_len = min(wcslen(src), limit)
    dest[:copy_len] = src[:copy_len]
    if copy_len < limit:
        dest[copy_len:limit] = [0] * (limit - copy_len)
        return copy_len
    return limit


def _append(dest: WideBuffer, src: WideString, src_len: int) -> int:
    dest_len = wcslen(dest)
    if dest_len >= len(dest):
        return dest_len
    copy_len = min(src_len, len(dest) - dest_len - 1, len(src))
    end = dest_len + copy_len
    dest[dest_len:end] = src[:copy_len]
    if end < len(dest):
        dest[end] = 0
    return end


def wcscat(dest: WideBuffer, src: WideString) -> int:
    """Append ``src`` to the string in ``dest``; return the new length."""
    return _append(dest, src, wcslen(src))


def wcsncat(dest: WideBuffer, src: WideString, n: int) -> int:
    """Append at most ``n`` units of ``src``; return the new length."""
    _check_count(n)
    return _append(dest, src, wcsnlen(src, n))


def _compare(s1: WideString, s2: WideString, len1: int, len2: int,
             fold: bool) -> int | None:
    for a, b in zip(s1[:len1], s2[:len2]):
        if fold:
            a, b = _lower(a), _lower(b)
        if a != b:
            return -1 if a < b else 1
    return None


def wcscmp(s1: WideString, s2: WideString) -> int:
    """Compare two wide strings; return -1, 0 or 1."""
    len1, len2 = wcslen(s1), wcslen(s2)
    diff = _compare(s1, s2, len1, len2, fold=False)
    return _sign(len1 - len2) if diff is None else diff


def _bounded_compare(s1: WideString, s2: WideString, n: int, fold: bool) -> int:
    _check_count(n)
    if n == 0:
        return 0
    len1, len2 = wcsnlen(s1, n), wcsnlen(s2, n)
    diff = _compare(s1, s2, len1, len2, fold=fold)
    if diff is not None:
        return diff
    if len1 < n and len2 < n:
        return _sign(len1 - len2)
    return 0


def wcsncmp(s1: WideString, s2: WideString, n: int) -> int:
    """Compare at most ``n`` units of two wide strings; return -1, 0 or 1."""
    return _bounded_compare(s1, s2, n, fold=False)


def wcscoll(s1: WideString, s2: WideString) -> int:
    """Compare two wide strings in the C locale, which is plain ``wcscmp``."""
    return wcscmp(s1, s2)


def wcschr(s: WideString, c: int) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for nul finds the terminator.
    """
    search_len = len(s) if c == 0 else min(wcslen(s) + 1, len(s))
    try:
        return s.index(c, 0, search_len)
    except ValueError:
        return None


def wcsrchr(s: WideString, c: int) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None."""
    length = wcslen(s)
    search_len = min(length + 1 if c == 0 else length, len(s))
    for index in range(search_len - 1, -1, -1):
        if s[index] == c:
            return index
    return None


def wcsstr(haystack: WideString, needle: WideString) -> int | None:
    """Return the index of the first occurrence of ``needle``, or None."""
    pattern = _terminated(needle)
    if not pattern:
        return 0
    text = _terminated(haystack)
    size = len(pattern)
    if size > len(text):
        return None
    return next(
        (i for i in range(len(text) - size + 1) if text[i:i + size] == pattern),
        None,
    )


def wcsspn(s: WideString, accept: WideString) -> int:
    """Return the length of the prefix of ``s`` made of ``accept`` units."""
    allowed = set(_terminated(accept))
    text = _terminated(s)
    return next((i for i, c in enumerate(text) if c not in allowed), len(text))


def wcscspn(s: WideString, reject: WideString) -> int:
    """Return the length of the prefix of ``s`` free of ``reject`` units."""
    rejected = set(_terminated(reject))
    text = _terminated(s)
    return next((i for i, c in enumerate(text) if c in rejected), len(text))


def wcspbrk(s: WideString, accept: WideString) -> int | None:
    """Return the index of the first unit of ``s`` found in ``accept``."""
    allowed = set(_terminated(accept))
    return next((i for i, c in enumerate(_terminated(s)) if c in allowed), None)


def wcscasecmp(s1: WideString, s2: WideString) -> int:
    """Compare two wide strings ignoring ASCII case; return -1, 0 or 1."""
    len1, len2 = wcslen(s1), wcslen(s2)
    diff = _compare(s1, s2, len1, len2, fold=True)
    return _sign(len1 - len2) if diff is None else diff


def wcsncasecmp(s1: WideString, s2: WideString, n: int) -> int:
    """Compare at most ``n`` units ignoring ASCII case; return -1, 0 or 1."""
    return _bounded_compare(s1, s2, n, fold=True)


def wcschrnul(s: WideString, c: int) -> int:
    """Return the index of the first ``c``, or of the terminator if absent."""
    length = wcslen(s)
    if c == 0:
        return length
    try:
        return s.index(c, 0, length)
    except ValueError:
        return length


def wcslcpy(dest: WideBuffer, src: WideString) -> int:
    """Copy ``src`` into ``dest``, always nul-terminating.

    Returns the length of ``src`` so that truncation can be detected.
    """
    src_len = wcslen(src)
    if not dest:
        return src_len
    copy_len = min(src_len, len(dest) - 1, len(src))
    dest[:copy_len] = src[:copy_len]
    dest[copy_len] = 0
    return src_len


def wcslcat(dest: WideBuffer, src: WideString) -> int:
    """Append ``src`` to ``dest``, always nul-terminating.

    Returns the length the result would have had without truncation.
    """
    size = len(dest)
    dest_len = wcsnlen(dest, size)
    src_len = wcslen(src)
    if dest_len >= size:
        return size + src_len
    copy_len = min(src_len, size - dest_len - 1, len(src))
    dest[dest_len:dest_len + copy_len] = src[:copy_len]
    dest[dest_len + copy_len] = 0
    return dest_len + src_len


def wcsdup(src: WideString) -> list[int]:
    """Return a nul-terminated copy of the wide string in ``src``."""
    return _terminated(src) + [0]


def wcsxfrm(dest: WideBuffer, src: WideString) -> int:
    """Write the C-locale collation form of ``src`` into ``dest``.

    Returns the full transformed length, excluding the trailing nul.
    """
    src_len = wcslen(src)
    if not dest:
        return src_len
    copy_len = min(src_len, len(dest) - 1)
    dest[:copy_len] = src[:copy_len]
    dest[copy_len] = 0
    return src_len


def wcstok(
    s: WideString, delim: WideString, saveptr: int
) -> tuple[list[int] | None, int]:
    """Return the next token of ``s`` and the position to resume from.

    Start with ``saveptr`` 0 and pass back the returned position on each
    call; the token is None once the string is exhausted.
    """
    if saveptr < 0:
        raise ValueError(f"saveptr must not be negative, got {saveptr}")
    text = _terminated(s)
    delims = set(_terminated(delim))
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
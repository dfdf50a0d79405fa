"""Operations on nul-terminated byte strings.

Every string argument is a bytes-like object in which the first zero byte
ends the string; a buffer without a zero byte ends at its last byte.
Destination arguments are ``bytearray`` objects that are written in place,
and no function ever writes past the end of its destination.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "strlen",
    "strnlen",
    "strverscmp",
    "strcpy",
    "strncpy",
    "stpcpy",
    "stpncpy",
    "strcat",
    "strncat",
    "strcmp",
    "strncmp",
    "strcoll",
    "strcasecmp",
    "strncasecmp",
    "strlcpy",
    "strlcat",
    "strdup",
    "strndup",
    "strxfrm",
]

_NUL = b"\x00"
_ZERO = ord("0")
_ONE = ord("1")


def _check_count(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _lower(c: int) -> int:
    return c + 32 if 65 <= c <= 90 else c


def _byte_at(s: Sequence[int], index: int) -> int:
    return s[index] if index < len(s) else 0


def _is_digit(c: int) -> bool:
    return ((c - _ZERO) & 0xFF) < 10


def strlen(s: bytes | bytearray) -> int:
    """Return the number of bytes before the first nul, or ``len(s)``."""
    pos = s.find(_NUL)
    return len(s) if pos < 0 else pos


def strnlen(s: bytes | bytearray, maxlen: int) -> int:
    """Return the length of ``s`` before its first nul, at most ``maxlen``."""
    _check_count(maxlen, "maxlen")
    limit = min(len(s), maxlen)
    pos = s.find(_NUL, 0, limit)
    return limit if pos < 0 else pos


def strverscmp(s1: bytes | bytearray, s2: bytes | bytearray) -> int:
    """Compare two strings, ordering runs of digits as version numbers."""
    i = 0
    dp = 0
    zeros = True

    while True:
        c1 = _byte_at(s1, i)
        c2 = _byte_at(s2, i)
        if c1 != c2:
            break
        if c1 == 0:
            return 0
        if not _is_digit(c1):
            dp = i + 1
            zeros = True
        elif c1 != _ZERO:
            zeros = False
        i += 1

    dp_c1 = _byte_at(s1, dp)
    dp_c2 = _byte_at(s2, dp)

    if ((dp_c1 - _ONE) & 0xFF) < 9 and ((dp_c2 - _ONE) & 0xFF) < 9:
        j = i
        while _is_digit(_byte_at(s1, j)):
            if not _is_digit(_byte_at(s2, j)):
                return 1
            j += 1
        if _is_digit(_byte_at(s2, j)):
            return -1
    elif zeros and dp < i:
        c1 = _byte_at(s1, i)
        c2 = _byte_at(s2, i)
        if _is_digit(c1) or _is_digit(c2):
            return ((c1 - _ZERO) & 0xFF) - ((c2 - _ZERO) & 0xFF)

    return _byte_at(s1, i) - _byte_at(s2, i)


def strcpy(dest: bytearray, src: bytes | bytearray) -> int:
    """Copy ``src`` with its nul into ``dest``; return the bytes written."""
    src_len = strlen(src)
    copy_len = min(src_len + 1, len(dest), len(src))
    content_len = min(copy_len, src_len)
    dest[:content_len] = src[:content_len]

    if copy_len > src_len:
        dest[src_len] = 0
        return src_len + 1
    return content_len


def strncpy(dest: bytearray, src: bytes | bytearray, n: int) -> int:
    """Copy at most ``n`` bytes, padding with nuls; return the span written."""
    _check_count(n)
    limit = min(len(dest), n)
    copy_len = min(strlen(src), limit, len(src))
    dest[:copy_len] = src[:copy_len]
    if copy_len < limit:
        dest[copy_len:limit] = bytes(limit - copy_len)
    return limit


def stpcpy(dest: bytearray, src: bytes | bytearray) -> int:
    """Copy ``src`` into ``dest``; return the index of the terminating nul."""
    src_len = strlen(src)
    copy_len = min(src_len, len(dest), len(src))
    dest[:copy_len] = src[:copy_len]
    if copy_len < len(dest) and src_len < len(src):
        dest[copy_len] = 0
    return copy_len


def stpncpy(dest: bytearray, src: bytes | bytearray, n: int) -> int:
    """Copy at most ``n`` bytes, padding with nuls.

    Returns the index of the first nul written, or the copied span when no
    nul was written.
    """
    _check_count(n)
    limit = min(len(dest), n)
    copy_len = min(strlen(src), limit)
    dest[:copy_len] = src[:copy_len]
    if copy_len < limit:
        dest[copy_len:limit] = bytes(limit - copy_len)
        return copy_len
    return limit


def _append(dest: bytearray, src: bytes | bytearray, src_len: int) -> int:
    dest_len = strlen(dest)
    if dest_len >= len(dest):
        return dest_len
    remaining = len(dest) - dest_len
    copy_len = min(src_len, remaining - 1, len(src))
    end = dest_len + copy_len
    dest[dest_len:end] = src[:copy_len]
    if end < len(dest):
        dest[end] = 0
    return end


def strcat(dest: bytearray, src: bytes | bytearray) -> int:
    """Append ``src`` to the string in ``dest``; return the new length."""
    return _append(dest, src, strlen(src))


def strncat(dest: bytearray, src: bytes | bytearray, n: int) -> int:
    """Append at most ``n`` bytes of ``src``; return the new length."""
    _check_count(n)
    return _append(dest, src, strnlen(src, n))


def _compare(s1, s2, len1: int, len2: int, fold: bool) -> int | None:
    for a, b in zip(s1[:len1], s2[:len2]):
        if fold:
            a, b = _lower(a), _lower(b)
        if a != b:
            return a - b
    return None


def strcmp(s1: bytes | bytearray, s2: bytes | bytearray) -> int:
    """Compare two strings byte by byte."""
    len1, len2 = strlen(s1), strlen(s2)
    diff = _compare(s1, s2, len1, len2, fold=False)
    return _sign(len1 - len2) if diff is None else diff


def strncmp(s1: bytes | bytearray, s2: bytes | bytearray, n: int) -> int:
    """Compare at most ``n`` bytes of two strings."""
    _check_count(n)
    if n == 0:
        return 0
    len1, len2 = strnlen(s1, n), strnlen(s2, n)
    diff = _compare(s1, s2, len1, len2, fold=False)
    if diff is not None:
        return diff
    if len1 < n and len2 < n:
        return _sign(len1 - len2)
    return 0


def strcoll(s1: bytes | bytearray, s2: bytes | bytearray) -> int:
    """Compare two strings in the C locale, which is plain ``strcmp``."""
    return strcmp(s1, s2)


def strcasecmp(s1: bytes | bytearray, s2: bytes | bytearray) -> int:
    """Compare two strings ignoring ASCII case."""
    len1, len2 = strlen(s1), strlen(s2)
    diff = _compare(s1, s2, len1, len2, fold=True)
    return _sign(len1 - len2) if diff is None else diff


def strncasecmp(s1: bytes | bytearray, s2: bytes | bytearray, n: int) -> int:
    """Compare at most ``n`` bytes ignoring ASCII case."""
    _check_count(n)
    if n == 0:
        return 0
    len1, len2 = strnlen(s1, n), strnlen(s2, n)
    diff = _compare(s1, s2, len1, len2, fold=True)
    if diff is not None:
        return diff
    if len1 < n and len2 < n:
        return _sign(len1 - len2)
    return 0


def strlcpy(dest: bytearray, src: bytes | bytearray) -> int:
    """Copy ``src`` into ``dest``, always nul-terminating.

    Returns the length of ``src`` so that truncation can be detected.
    """
    src_len = strlen(src)
    if not dest:
        return src_len
    copy_len = min(src_len, len(dest) - 1, len(src))
    dest[:copy_len] = src[:copy_len]
    dest[copy_len] = 0
    return src_len


def strlcat(dest: bytearray, src: bytes | bytearray) -> int:
    """Append ``src`` to ``dest``, always nul-terminating.

    Returns the length the result would have had without truncation.
    """
    size = len(dest)
    dest_len = strnlen(dest, size)
    src_len = strlen(src)
    if dest_len >= size:
        return size + src_len
    copy_len = min(src_len, size - dest_len - 1, len(src))
    dest[dest_len:dest_len + copy_len] = src[:copy_len]
    dest[dest_len + copy_len] = 0
    return dest_len + src_len


def strdup(src: bytes | bytearray) -> bytes:
    """Return a nul-terminated copy of the string in ``src``."""
    return bytes(src[:strlen(src)]) + _NUL


def strndup(src: bytes | bytearray, n: int) -> bytes:
    """Return a nul-terminated copy of at most ``n`` bytes of ``src``."""
    _check_count(n)
    return bytes(src[:strnlen(src, n)]) + _NUL


def strxfrm(dest: bytearray, src: bytes | bytearray) -> int:
    """Write the C-locale collation form of ``src`` into ``dest``.

    Returns the full transformed length, excluding the trailing nul.
    """
    src_len = strlen(src)
    if not dest:
        return src_len
    copy_len = min(src_len, len(dest) - 1)
    dest[:copy_len] = src[:copy_len]
    dest[copy_len] = 0
    return src_len
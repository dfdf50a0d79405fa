"""Operations on wide-character arrays of a given length.

Unlike the wide string functions, these never look for a terminating nul:
every unit of the arrays passed in takes part. Destination arguments are
mutable sequences of integers (lists, ``array.array`` objects or
memoryviews) that are written in place.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence

__all__ = [
    "wmemcpy",
    "wmempcpy",
    "wmemmove",
    "wmemset",
    "wmemcmp",
    "wmemchr",
    "wmemrchr",
]

WideArray = Sequence[int]
WideBuffer = MutableSequence[int]


def _store(dest: WideBuffer, values: Iterable[int]) -> None:
    for index, value in enumerate(values):
        dest[index] = value


def wmemcpy(dest: WideBuffer, src: WideArray) -> int:
    """Copy as many units as both arrays hold; return the count copied."""
    n = min(len(dest), len(src))
    _store(dest, src[:n])
    return n


def wmempcpy(dest: WideBuffer, src: WideArray) -> int:
    """Copy like :func:`wmemcpy`; return the index one past the last unit."""
    return wmemcpy(dest, src)


def wmemmove(dest: WideBuffer, src: WideArray) -> int:
    """Copy like :func:`wmemcpy`, correct even when the arrays overlap."""
    n = min(len(dest), len(src))
    _store(dest, list(src[:n]))
    return n


def wmemset(dest: WideBuffer, c: int) -> int:
    """Set every unit of ``dest`` to ``c``; return the count set."""
    _store(dest, [c] * len(dest))
    return len(dest)


def wmemcmp(s1: WideArray, s2: WideArray) -> int:
    """Compare two arrays unit by unit; return -1, 0 or 1.

    When one array is a prefix of the other, the shorter one is less.
    """
    for a, b in zip(s1, s2):
        if a != b:
            return -1 if a < b else 1
    return (len(s1) > len(s2)) - (len(s1) < len(s2))


def wmemchr(s: WideArray, c: int) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None."""
    return next((i for i, unit in enumerate(s) if unit == c), None)


def wmemrchr(s: WideArray, c: int) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None."""
    return next(
        (i for i in reversed(range(len(s))) if s[i] == c),
        None,
    )
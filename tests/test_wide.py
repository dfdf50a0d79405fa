import pytest

from faststrings.wide import (
    wcpcpy,
    wcpncpy,
    wcscasecmp,
    wcscat,
    wcschr,
    wcschrnul,
    wcscmp,
    wcscoll,
    wcscpy,
    wcscspn,
    wcsdup,
    wcslcat,
    wcslcpy,
    wcslen,
    wcsncasecmp,
    wcsncat,
    wcsncmp,
    wcsncpy,
    wcsnlen,
    wcspbrk,
    wcsrchr,
    wcsspn,
    wcsstr,
    wcstok,
    wcsxfrm,
)


def _w(text):
    return [ord(ch) for ch in text]


def test_wcslen_wcsnlen():
    s = _w("hi\0!")
    assert wcslen(s) == 2
    assert wcsnlen(s, 0) == 0
    assert wcsnlen(s, 1) == 1
    assert wcsnlen(s, 4) == 2


def test_wcslen_without_terminator():
    assert wcslen(_w("abc")) == 3


def test_wcscpy_wcsncpy():
    src = _w("ab\0")
    dest = [0] * 5
    assert wcscpy(dest, src) == 3
    assert dest[:3] == _w("ab\0")

    dest2 = _w("xxxxx")
    assert wcsncpy(dest2, src, 4) == 4
    assert dest2 == _w("ab\0\0x")


def test_wcscat_wcsncat():
    dest = _w("hi\0\0\0")
    assert wcscat(dest, _w("!\0")) == 3
    assert dest[:4] == _w("hi!\0")

    dest2 = _w("a\0\0\0\0")
    assert wcsncat(dest2, _w("bc\0"), 1) == 2
    assert dest2[:3] == _w("ab\0")


def test_wcscmp_wcsncmp():
    a = _w("a\0")
    b = _w("b\0")
    assert wcscmp(a, b) < 0
    assert wcscmp(b, a) > 0
    assert wcsncmp(a, b, 0) == 0
    assert wcsncmp(a, b, 1) < 0
    assert wcscoll(a, a) == 0


def test_wcschr_wcsrchr_wcsstr():
    s = _w("aba\0")
    assert wcschr(s, ord("a")) == 0
    assert wcsrchr(s, ord("a")) == 2

    assert wcsstr(_w("abc\0"), _w("bc\0")) == 1


def test_search_edges():
    s = _w("aba\0")
    assert wcschr(s, ord("z")) is None
    assert wcsrchr(s, 0) == 3
    assert wcsstr(s, _w("\0")) == 0
    assert wcsstr(_w("ab\0"), _w("abc\0")) is None


def test_wcsspn_wcscspn_wcspbrk():
    s = _w("abc\0")
    accept = _w("ab\0")
    reject = _w("c\0")
    assert wcsspn(s, accept) == 2
    assert wcscspn(s, reject) == 2
    assert wcspbrk(s, accept) == 0
    assert wcspbrk(s, _w("z\0")) is None


def test_wcscasecmp_wcsncasecmp():
    s1 = _w("Ab\0")
    s2 = _w("aB\0")
    assert wcscasecmp(s1, s2) == 0
    assert wcsncasecmp(s1, s2, 1) == 0
    assert wcsncasecmp(s1, s2, 2) == 0


def test_wcpcpy_wcpncpy():
    src = _w("hi\0")
    dest = [0] * 4
    assert wcpcpy(dest, src) == 2
    assert dest[:3] == _w("hi\0")

    dest2 = _w("xxxx")
    assert wcpncpy(dest2, src, 2) == 2
    assert dest2[:2] == _w("hi")

    dest3 = _w("xxxx")
    assert wcpncpy(dest3, src, 3) == 2
    assert dest3[:3] == _w("hi\0")


def test_wcschrnul():
    s = _w("ab\0")
    assert wcschrnul(s, ord("a")) == 0
    assert wcschrnul(s, ord("b")) == 1
    assert wcschrnul(s, ord("c")) == 2
    assert wcschrnul(s, 0) == 2


def test_wcslcpy_wcslcat():
    dest = [0] * 3
    assert wcslcpy(dest, _w("hi\0")) == 2
    assert dest == _w("hi\0")

    dest2 = _w("a\0\0\0")
    assert wcslcat(dest2, _w("bc\0")) == 3
    assert dest2[:3] == _w("abc")


def test_wcslcat_full_destination():
    dest = _w("ab")
    assert wcslcat(dest, _w("c\0")) == 3
    assert dest == _w("ab")


def test_wcsdup_basic():
    src = _w("ab\0")
    assert wcsdup(src) == src


def test_wcsdup_adds_terminator_when_missing():
    assert wcsdup(_w("ab")) == _w("ab\0")


def test_wcstok_sequence():
    s = _w("a,b,c\0")
    delim = _w(",\0")
    save = 0
    token, save = wcstok(s, delim, save)
    assert token == _w("a")
    token, save = wcstok(s, delim, save)
    assert token == _w("b")
    token, save = wcstok(s, delim, save)
    assert token == _w("c")
    token, save = wcstok(s, delim, save)
    assert token is None


def test_wcsxfrm_copy_and_len():
    dest = [0] * 8
    assert wcsxfrm(dest, _w("ab\0")) == 2
    assert dest[:3] == _w("ab\0")


def test_wcsxfrm_truncation():
    dest = [0] * 2
    assert wcsxfrm(dest, _w("hi!\0")) == 3
    assert dest == _w("h\0")


@pytest.mark.parametrize(
    "call",
    [
        lambda: wcsnlen(_w("a"), -1),
        lambda: wcsncpy([0], _w("a"), -1),
        lambda: wcsncmp(_w("a"), _w("a"), -1),
        lambda: wcstok(_w("a"), _w(","), -1),
    ],
)
def test_negative_counts_rejected(call):
    with pytest.raises(ValueError):
        call()
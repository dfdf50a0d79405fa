import pytest

from faststrings.tokens import (
    Splitter,
    Tokenizer,
    strsep_iter,
    strtok,
    strtok_iter,
    strtok_r,
)


def test_strtok_sequence():
    s = b"one:two:three\x00"
    state = 0
    token, state = strtok(s, b":\x00", state)
    assert token == b"one"
    token, state = strtok(s, b":\x00", state)
    assert token == b"two"
    token, state = strtok(s, b":\x00", state)
    assert token == b"three"
    token, state = strtok(s, b":\x00", state)
    assert token is None


def test_strtok_r_sequence():
    s = b"aa,bb,,cc\x00"
    save = 0
    tokens = []
    for _ in range(4):
        token, save = strtok_r(s, b",\x00", save)
        tokens.append(token)
    assert tokens == [b"aa", b"bb", b"cc", None]


def test_strtok_r_all_delims():
    token, save = strtok_r(b",,,\x00", b",\x00", 0)
    assert token is None
    assert save == 4


def test_strtok_r_stays_exhausted():
    s = b"x\x00"
    token, save = strtok_r(s, b",\x00", 0)
    assert (token, save) == (b"x", 2)
    assert strtok_r(s, b",\x00", save) == (None, 2)


def test_strtok_r_ignores_text_after_nul():
    token, save = strtok_r(b"ab\x00cd", b",\x00", 0)
    assert token == b"ab"
    assert strtok_r(b"ab\x00cd", b",\x00", save)[0] is None


def test_strtok_r_negative_saveptr():
    with pytest.raises(ValueError):
        strtok_r(b"a\x00", b",\x00", -1)


def test_tokenizer_basic():
    tok = Tokenizer(b"hello,world,foo\x00", b",\x00")
    assert next(tok) == b"hello"
    assert next(tok) == b"world"
    assert next(tok) == b"foo"
    with pytest.raises(StopIteration):
        next(tok)


def test_tokenizer_from_slice_uses_whole_buffer():
    assert list(Tokenizer.from_slice(b"a\x00b", b"\x00")) == [b"a", b"b"]


def test_splitter_preserves_empty():
    split = Splitter(b"a,,b,\x00", b",\x00")
    assert next(split) == b"a"
    assert next(split) == b""
    assert next(split) == b"b"
    assert next(split) == b""
    with pytest.raises(StopIteration):
        next(split)


def test_splitter_from_slice():
    assert list(Splitter.from_slice(b"x;y", b";")) == [b"x", b"y"]


def test_splitter_empty_input_yields_one_empty_field():
    assert list(Splitter(b"\x00", b",\x00")) == [b""]


def test_iter_helpers():
    assert list(strtok_iter(b"a,b,c\x00", b",\x00")) == [b"a", b"b", b"c"]
    assert list(strsep_iter(b"a,,\x00", b",\x00")) == [b"a", b"", b""]


def test_multiple_delimiters():
    assert list(strtok_iter(b" a\tb  c\x00", b" \t\x00")) == [b"a", b"b", b"c"]
import io

import pytest

from wordtally.futil import isnewline, tokenize


def test_isnewline():
    assert isnewline("\n") is True
    assert isnewline("a") is False
    assert isnewline("\r") is False


def test_tokenize_splits_filters_and_transforms():
    stream = io.StringIO("Hello, World!\nfoo")
    tokens = tokenize(stream, 1, str.isspace, str.isalnum, str.lower)
    assert tokens == ["hello", "world", "foo"]


def test_tokenize_drops_short_tokens():
    stream = io.StringIO("a bb ccc dddd")
    tokens = tokenize(stream, 3, str.isspace)
    assert tokens == ["ccc", "dddd"]
    assert all(len(t) >= 3 for t in tokens)


def test_tokenize_consecutive_separators_give_no_empty_tokens():
    tokens = tokenize(io.StringIO("  one   two  "), 1, str.isspace)
    assert tokens == ["one", "two"]


def test_tokenize_zero_min_length_keeps_empty_tokens():
    tokens = tokenize(io.StringIO("x  y"), 0, str.isspace)
    assert tokens == ["x", "", "y"]


def test_tokenize_empty_stream():
    assert tokenize(io.StringIO(""), 1, str.isspace) == []
    assert tokenize(io.StringIO(""), 0, str.isspace) == [""]


def test_tokenize_without_split_gives_whole_text():
    text = "no splitting here"
    assert tokenize(io.StringIO(text), 1) == [text]


def test_filtered_characters_do_not_split():
    tokens = tokenize(io.StringIO("don't stop"), 1, str.isspace, str.isalnum)
    assert tokens == ["dont", "stop"]


def test_tokenize_long_token_crosses_buffer_boundaries():
    word = "x" * 1000
    tokens = tokenize(io.StringIO(word + " " + word), 1, str.isspace)
    assert tokens == [word, word]


def test_tokenize_transform_applied_after_filter():
    tokens = tokenize(io.StringIO("AB1 C"), 1, str.isspace, str.isalpha, str.lower)
    assert tokens == ["ab", "c"]


def test_tokenize_rejects_missing_stream():
    with pytest.raises(ValueError):
        tokenize(None, 1)
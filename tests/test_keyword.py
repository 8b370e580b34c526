import pytest

from app.retrieval.keyword import tokenize


def test_lowercases_and_dedupes():
    assert tokenize("Hello, World!  hello") == {"hello", "world"}


def test_case_insensitive():
    assert tokenize("Dog") == tokenize("dog") == {"dog"}


def test_punctuation_is_deleted_not_replaced():
    assert tokenize("don't") == {"dont"}
    assert tokenize("state-of-the-art") == {"stateoftheart"}


def test_non_ascii_letters_are_stripped():
    assert tokenize("café naïve") == {"caf", "nave"}


@pytest.mark.parametrize("text", ["", "   \n\t ", "!!! ??? ...", "¿¡—…", None])
def test_no_tokens_gives_empty_set(text):
    assert tokenize(text) == frozenset()


def test_digits_are_kept():
    assert tokenize("Room 101, floor 3.") == {"room", "101", "floor", "3"}


def test_tokens_are_clean():
    words = tokenize("Mixed\tCASE, punctuation; and   runs of\nwhitespace!! 42")
    assert words
    for w in words:
        assert w
        assert w == w.lower()
        assert w.isalnum()


@pytest.mark.parametrize("text", [
    "The quick brown fox jumps over the lazy dog.",
    "Machine learning is a field of inquiry devoted to understanding 'learn'",
    "Ünïcödé & symbols #$% mixed with words",
    "",
])
def test_idempotent(text):
    words = tokenize(text)
    assert tokenize(" ".join(words)) == words


@pytest.mark.parametrize("text", ["foo\u00a0bar", "foo\x1fbar", "foo\u2003bar"])
def test_non_ascii_whitespace_is_deleted(text):
    assert tokenize(text) == {"foobar"}


def test_ascii_whitespace_still_separates():
    assert tokenize("foo\tbar\nbaz\x0bqux\x0cend\rx") == {"foo", "bar", "baz", "qux", "end", "x"}

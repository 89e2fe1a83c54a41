"""Tests for the predefined alphabets and charset normalization."""

import pytest

from genpass.charsets import (
    CHARSET_ALL,
    CHARSET_ALPHA,
    CHARSET_ALPHANUM,
    CHARSET_HEX,
    CHARSET_LOWER,
    CHARSET_NUM,
    CHARSET_SPECIAL,
    CHARSET_UPPER,
    build_charset,
    normalize_charset,
)


def test_predefined_charsets_are_exact():
    assert CHARSET_LOWER == "abcdefghijklmnopqrstuvwxyz"
    assert CHARSET_UPPER == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert CHARSET_NUM == "0123456789"
    assert CHARSET_HEX == "abcdef0123456789"
    assert CHARSET_SPECIAL == "!@#$%^&*()_"
    assert CHARSET_ALPHA == CHARSET_LOWER + CHARSET_UPPER
    assert CHARSET_ALPHANUM == CHARSET_ALPHA + CHARSET_NUM
    assert CHARSET_ALL == CHARSET_ALPHA + CHARSET_NUM + CHARSET_SPECIAL


def test_normalize_sorts_and_deduplicates():
    assert normalize_charset("banana") == "abn"
    assert normalize_charset(CHARSET_HEX) == "0123456789abcdef"


def test_normalize_empty():
    assert normalize_charset("") == ""


@pytest.mark.parametrize("charset", ["", "zyx", "aabbcc", CHARSET_ALL, "ünï©ode"])
def test_normalize_is_idempotent(charset):
    once = normalize_charset(charset)
    assert normalize_charset(once) == once


def test_normalize_ignores_order_and_repetition():
    assert normalize_charset("cab") == normalize_charset("bacabccc") == "abc"


def test_normalize_accepts_any_iterable_of_symbols():
    assert normalize_charset(["z", "a", "z"]) == "az"


def test_normalized_symbols_are_distinct_and_ascending():
    out = normalize_charset(CHARSET_ALL + CHARSET_HEX)
    assert len(set(out)) == len(out)
    assert [ord(c) for c in out] == sorted(ord(c) for c in out)


def test_build_charset_defaults_to_everything():
    assert build_charset() == normalize_charset(CHARSET_ALL)
    assert len(build_charset()) == 73


def test_build_charset_unions_selected_sets():
    assert build_charset(hex=True) == "0123456789abcdef"
    assert build_charset(hex=True, number=True) == "0123456789abcdef"
    assert build_charset(lower=True, upper=True) == normalize_charset(CHARSET_ALPHA)
    assert build_charset(special=True) == normalize_charset(CHARSET_SPECIAL)

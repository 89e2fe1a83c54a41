"""Tests for the statistical audit helpers."""

import numpy as np
import pytest

from genpass.charsets import CHARSET_NUM
from genpass.metrics import (
    audit_generator,
    chi_square_uniform,
    counts_to_vector,
    kl_divergence,
    normalize_counts,
    symbol_counts,
)


def test_symbol_counts():
    assert symbol_counts(["abba", "baba"], "ab") == {0: 4, 1: 4}
    assert symbol_counts(["ccc"], "abc") == {2: 3}
    assert symbol_counts([], "abc") == {}


def test_symbol_counts_rejects_foreign_symbol():
    with pytest.raises(ValueError):
        symbol_counts(["abz"], "ab")


def test_counts_to_vector_fills_gaps():
    v = counts_to_vector({0: 2, 3: 5}, 4)
    assert v.tolist() == [2.0, 0.0, 0.0, 5.0]


def test_normalize_counts():
    assert normalize_counts({0: 1, 1: 3}) == {0: 0.25, 1: 0.75}
    with pytest.raises(ValueError):
        normalize_counts({})


def test_chi_square_perfectly_uniform():
    res = chi_square_uniform({0: 50, 1: 50, 2: 50, 3: 50}, support_size=4)
    assert res.stat == pytest.approx(0.0)
    assert res.df == 3
    assert res.pvalue == pytest.approx(1.0)
    assert res.expected == [50.0] * 4


def test_chi_square_detects_skew():
    res = chi_square_uniform({0: 900, 1: 100}, support_size=2)
    assert res.stat == pytest.approx(640.0)
    assert res.pvalue < 1e-10


def test_chi_square_infers_support_size():
    assert chi_square_uniform({0: 5, 2: 5}).df == 2


def test_chi_square_rejects_empty_counts():
    with pytest.raises(ValueError):
        chi_square_uniform({}, support_size=3)


def test_kl_divergence():
    assert kl_divergence([1, 1], [1, 1]) == pytest.approx(0.0)
    assert kl_divergence([1, 0], [1, 1]) == pytest.approx(1.0, abs=1e-6)
    with pytest.raises(ValueError):
        kl_divergence([1, 2], [1, 2, 3])


def test_generated_symbols_are_uniform():
    report = audit_generator(CHARSET_NUM, length=10, samples=2000)
    assert report.samples == 2000
    assert report.symbols == 20000
    assert report.chi_square.df == 9
    assert report.chi_square.pvalue > 1e-6
    assert report.kl_bits < 0.01
    assert np.isclose(sum(report.chi_square.expected), 20000)


def test_audit_rejects_trivial_alphabet():
    with pytest.raises(ValueError):
        audit_generator("a", length=10, samples=10)

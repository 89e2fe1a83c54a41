"""
metrics.py

Statistical audit of generated passwords.

What this module does

- Builds histograms of symbol occurrences over an alphabet.
- Runs a Chi-square test against the uniform distribution.
- Computes KL divergence (with safe smoothing).
- Bundles both into a UniformityReport for a live generator.

Design choices

- "Uniform" means: every symbol of the alphabet equally likely at every
  position, probability 1/|alphabet|.
- Counts are keyed by alphabet index (0..|alphabet|-1), so the same helpers
  work for any alphabet.
- KL divergence uses additive epsilon smoothing to avoid log(0).

Quick start

>>> from genpass.metrics import symbol_counts, chi_square_uniform
>>> counts = symbol_counts(["abba", "baba"], "ab")
>>> counts
{0: 4, 1: 4}
>>> chi_square_uniform(counts, support_size=2)
ChiSquareResult(stat=0.0, df=1, pvalue=1.0, expected=[4.0, 4.0])

Dependencies

- numpy
- scipy (for chi-square p-values)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
import logging

import numpy as np
from scipy.stats import chisquare

from .entropy_source import SecureSource
from .passwords import PasswordGenerator

logger = logging.getLogger(__name__)


#Helpers: counts / probabilities

def counts_to_vector(
    counts: Mapping[int, int],
    support_size: int,
) -> np.ndarray:
    """
    Convert integer-keyed counts {k: c} into a length-`support_size` vector
    ordered by index (0..support_size-1). Missing entries are treated as 0.
    """
    v = np.zeros(support_size, dtype=float)
    for k, c in counts.items():
        if 0 <= k < support_size:
            v[k] = float(c)
    return v


def normalize_counts(counts: Mapping[int, int]) -> Dict[int, float]:
    """
    Normalize a counts dict into probabilities. Returns a new dict.
    """
    total = float(sum(counts.values()))
    if total <= 0.0:
        raise ValueError("Cannot normalize empty or zero-total counts.")
    return {k: v / total for k, v in counts.items()}


def symbol_counts(passwords: Iterable[str], alphabet: str) -> Dict[int, int]:
    """
    Count how often each alphabet symbol occurs across `passwords`.

    Keys are alphabet indices; symbols that never occur are absent. A symbol
    outside the alphabet raises ValueError.
    """
    index = {ch: i for i, ch in enumerate(alphabet)}
    out: Dict[int, int] = {}
    for pw in passwords:
        for ch in pw:
            try:
                k = index[ch]
            except KeyError:
                raise ValueError(f"Symbol {ch!r} is not in the alphabet.") from None
            out[k] = out.get(k, 0) + 1
    return out


#Chi-square uniformity test

@dataclass
class ChiSquareResult:
    stat: float
    df: int
    pvalue: float
    expected: List[float]


def chi_square_uniform(
    counts: Mapping[int, int],
    support_size: Optional[int] = None,
) -> ChiSquareResult:
    """
    Chi-square goodness-of-fit against a uniform distribution.

    Parameters
    ----------
    counts : Mapping
        Alphabet index -> frequency (int).
    support_size : int, optional
        Total number of categories to test against (the alphabet size).
        If omitted, max(counts)+1 is used as a heuristic.

    Returns

    ChiSquareResult(stat, df, pvalue, expected)

    Notes

    - df = (support_size - 1)
    """
    if support_size is None:
        if not counts:
            raise ValueError("support_size could not be inferred; please pass it.")
        support_size = max(counts.keys()) + 1
    if support_size < 2:
        raise ValueError("support_size must be >= 2")

    observed = counts_to_vector(counts, support_size)
    total = observed.sum()
    if total <= 0:
        raise ValueError("Empty counts supplied.")

    expected = np.ones(support_size, dtype=float) * (total / support_size)
    res = chisquare(f_obs=observed, f_exp=expected)

    return ChiSquareResult(
        stat=float(res.statistic),
        df=support_size - 1,
        pvalue=float(res.pvalue),
        expected=expected.tolist(),
    )


#KL divergence

def kl_divergence(
    p: Sequence[float],
    q: Sequence[float],
    eps: float = 1e-12,
) -> float:
    """
    Compute D_KL(p || q) with additive smoothing.

    We apply: p' = normalize(p) + eps, q' = normalize(q) + eps,
    then renormalize again so they sum to 1, and compute sum p' * log2(p'/q').

    Returns

    float
        KL divergence in bits.
    """
    p = np.asarray(p, dtype=float)
    q = np.asarray(q, dtype=float)
    if p.shape != q.shape:
        raise ValueError("p and q must have the same shape.")

    def _norm(x: np.ndarray) -> np.ndarray:
        s = x.sum()
        if s <= 0:
            raise ValueError("Distribution has zero or negative sum.")
        return x / s

    p = _norm(p) + eps
    q = _norm(q) + eps
    p = p / p.sum()
    q = q / q.sum()
    return float(np.sum(p * np.log2(p / q)))


#Generator audit

@dataclass
class UniformityReport:
    samples: int
    symbols: int
    chi_square: ChiSquareResult
    kl_bits: float


def audit_generator(
    alphabet: str,
    length: int,
    samples: int,
    source: Optional[SecureSource] = None,
) -> UniformityReport:
    """
    Generate `samples` passwords and test their symbols for uniformity.

    The alphabet needs at least 2 symbols for the test to mean anything.
    """
    if len(alphabet) < 2:
        raise ValueError("alphabet must contain at least 2 characters")
    if length <= 0 or samples <= 0:
        raise ValueError("length and samples must be positive")

    gen = PasswordGenerator(alphabet=alphabet, source=source)
    counts = symbol_counts(gen.passwords(length, samples), alphabet)
    chi = chi_square_uniform(counts, support_size=len(alphabet))
    observed = counts_to_vector(counts, len(alphabet))
    kl = kl_divergence(observed, np.ones(len(alphabet)))

    logger.debug(
        "uniformity audit: %d symbols, chi2=%.3f, p=%.4f, kl=%.3g bits",
        int(observed.sum()),
        chi.stat,
        chi.pvalue,
        kl,
    )
    return UniformityReport(
        samples=samples,
        symbols=int(observed.sum()),
        chi_square=chi,
        kl_bits=kl,
    )


__all__ = [
    "ChiSquareResult",
    "UniformityReport",
    "chi_square_uniform",
    "kl_divergence",
    "counts_to_vector",
    "normalize_counts",
    "symbol_counts",
    "audit_generator",
]

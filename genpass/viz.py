"""
viz.py: Matplotlib helpers for clean figures about generated passwords

Aim:
- Small, dependency-light (matplotlib only).
- Return (fig, ax) so callers can further customize or save.
- Accept plain dicts/arrays from `metrics.py`.


Quick start

>>> from genpass.viz import plot_symbol_histogram, plot_collision_horizon
>>> fig, ax = plot_symbol_histogram({0: 120, 1: 130, 2: 121}, "abc", title="Symbol counts")

>>> fig, ax = plot_collision_horizon(range(4, 33, 4), alphabet_size=62)
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple
import math
import numpy as np
import matplotlib.pyplot as plt

from .collision import collision_seconds_from_length
from .duration import ONE_YEAR


#Basic helpers

def _autox_labels(ax, labels: Sequence[str]) -> None:
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=0)


def _check_lengths(lengths: Sequence[int], alphabet_size: int) -> None:
    if any(L <= 0 for L in lengths):
        raise ValueError("All lengths must be positive.")
    if alphabet_size < 2:
        raise ValueError("alphabet_size must be >= 2")


#Plots

def plot_symbol_histogram(
    counts: Mapping[int, int],
    alphabet: str,
    *,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Bar chart of symbol counts, one bar per alphabet symbol.

    `counts` is keyed by alphabet index, as returned by metrics.symbol_counts.
    """
    labels = list(alphabet)
    vals = [int(counts.get(i, 0)) for i in range(len(alphabet))]

    fig, ax = plt.subplots()
    ax.bar(range(len(vals)), vals)
    _autox_labels(ax, labels)
    ax.set_ylabel("Counts")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


def plot_uniformity_residuals(
    observed: Sequence[float],
    expected: Sequence[float],
    *,
    title: Optional[str] = "Uniformity residuals (observed - expected)",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Visualize how far each symbol is from uniform expectation.

    Inputs can be counts or probabilities, as long as both use the same scale.
    """
    observed = np.asarray(observed, dtype=float).reshape(-1)
    expected = np.asarray(expected, dtype=float).reshape(-1)
    if observed.shape != expected.shape:
        raise ValueError("observed and expected must have same length.")

    resid = observed - expected
    labels = [str(i) for i in range(len(resid))]

    fig, ax = plt.subplots()
    ax.bar(range(len(resid)), resid)
    _autox_labels(ax, labels)
    ax.axhline(0.0)
    ax.set_ylabel("Observed - Expected")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


def plot_password_entropy_curve(
    lengths: Sequence[int],
    alphabet_size: int,
    *,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot H = length * log2(alphabet_size) over a set of lengths.
    """
    lengths = list(lengths)
    _check_lengths(lengths, alphabet_size)

    H = [L * math.log2(alphabet_size) for L in lengths]

    fig, ax = plt.subplots()
    ax.plot(lengths, H, marker="o")
    ax.set_xlabel("Password length")
    ax.set_ylabel("Entropy (bits)")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


def plot_collision_horizon(
    lengths: Sequence[int],
    alphabet_size: int,
    *,
    title: Optional[str] = "Time to 1% collision chance",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot log10(seconds to a 1% collision chance) over a set of lengths.

    math.log10 takes the exact int, so counts with hundreds of digits are fine.
    A dashed line marks one year.
    """
    lengths = list(lengths)
    _check_lengths(lengths, alphabet_size)

    logs = [math.log10(collision_seconds_from_length(alphabet_size, L)) for L in lengths]

    fig, ax = plt.subplots()
    ax.plot(lengths, logs, marker="o")
    ax.axhline(math.log10(ONE_YEAR), linestyle="--")
    ax.set_xlabel("Password length")
    ax.set_ylabel("log10(seconds)")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


__all__ = [
    "plot_symbol_histogram",
    "plot_uniformity_residuals",
    "plot_password_entropy_curve",
    "plot_collision_horizon",
]

"""
collision.py

Birthday-paradox collision estimates for a password space.

If one password is generated per second from a space of M equally likely
passwords, the number of seconds until the chance of at least one repeat
reaches p is

    N = sqrt(2 * M * ln(1 / (1 - p)))

rounded up, since a partially elapsed generation still counts. For any other
rate, multiply N by the number of passwords generated per second.

Design choices

- M is a Python int and may have hundreds of digits (95^64 has 127), far
  beyond a float. The whole formula runs in `decimal` with a working
  precision scaled to the size of M, so the integer result is exact.
- A space of size 0 is rejected with ValueError, like an empty alphabet is
  rejected by the sampler.

Quick start

>>> from genpass.collision import collision_seconds_from_length
>>> collision_seconds_from_length(10, 1)
1
>>> collision_seconds_from_length(26, 8)
64789
"""

from __future__ import annotations

from decimal import Decimal, ROUND_CEILING, localcontext
from numbers import Real
from typing import Union
import logging

logger = logging.getLogger(__name__)

DEFAULT_PROBABILITY = Decimal("0.01")

# digits carried beyond the integer part of the square root
_GUARD_DIGITS = 30

Probability = Union[Decimal, Real, str]


def _check_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _as_probability(p: Probability) -> Decimal:
    # str() keeps 0.01 as typed instead of its binary float expansion
    prob = p if isinstance(p, Decimal) else Decimal(str(p))
    if not (0 < prob < 1):
        raise ValueError("probability must be strictly between 0 and 1")
    return prob


def collision_seconds(
    possible_passwords: int,
    probability: Probability = DEFAULT_PROBABILITY,
) -> int:
    """
    Seconds (generation events) until a `probability` chance of a collision.

    Parameters
    ----------
    possible_passwords : int
        Size M of the password space. Must be >= 1.
    probability : Decimal, float or str, default=0.01
        Target cumulative collision probability, 0 < p < 1.

    Returns
    -------
    int
        ceil(sqrt(2 * M * ln(1 / (1 - p)))).
    """
    _check_int("possible_passwords", possible_passwords)
    if possible_passwords < 1:
        raise ValueError("possible_passwords must be >= 1 (empty charset?)")
    prob = _as_probability(probability)

    digits = len(str(possible_passwords))
    with localcontext() as ctx:
        ctx.prec = digits // 2 + _GUARD_DIGITS
        ln_factor = (Decimal(1) / (Decimal(1) - prob)).ln()
        root = (2 * Decimal(possible_passwords) * ln_factor).sqrt()
        seconds = int(root.to_integral_value(rounding=ROUND_CEILING))

    logger.debug(
        "collision estimate: M has %d digits, p=%s -> %d seconds",
        digits,
        prob,
        seconds,
    )
    return seconds


def collision_seconds_from_length(
    charset_len: int,
    password_len: int,
    probability: Probability = DEFAULT_PROBABILITY,
) -> int:
    """
    Like `collision_seconds`, but M is computed as charset_len ** password_len.
    """
    _check_int("charset_len", charset_len)
    _check_int("password_len", password_len)
    if charset_len < 1:
        raise ValueError("charset_len must be >= 1")
    if password_len < 0:
        raise ValueError("password_len must be non-negative")
    return collision_seconds(charset_len ** password_len, probability)


__all__ = [
    "DEFAULT_PROBABILITY",
    "collision_seconds",
    "collision_seconds_from_length",
]

"""
passwords.py

Aim:
1) Provides a PasswordGenerator that draws unbiased indices from a SecureSource.
2) Exposes simple helpers to make passwords and describe their space:
   entropy, number of possible passwords, time to a likely collision.

Note:
- Unbiased indices come from `entropy_source.SecureSource.uniform_int`, which
  uses rejection sampling under the hood
- Entropy =  length * log2(alphabet_size).

Quick start
>>> from genpass.passwords import generate, entropy_bits
>>> from genpass.charsets import CHARSET_ALL, normalize_charset
>>> alphabet = normalize_charset(CHARSET_ALL)
>>> generate(alphabet, 16)
# 16 chars from the full set
>>> entropy_bits(len(alphabet), 16)
# ~98 bits for 73 symbols

Custom alphabet:
>>> from genpass.passwords import PasswordGenerator
>>> gen = PasswordGenerator(alphabet="0123456789abcdef")
>>> gen.passwords(length=12, count=5)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
import logging
import math

from . import entropy_source
from .charsets import CHARSET_ALL, normalize_charset
from .collision import collision_seconds

logger = logging.getLogger(__name__)


#Strength thresholds (bits)
MIN_ENTROPY_WEAK = 28.0
MIN_ENTROPY_FAIR = 56.0
MIN_ENTROPY_STRONG = 84.0
MIN_ENTROPY_VERY_STRONG = 128.0


#Password generator
@dataclass
class PasswordGenerator:
    """
    Generate unbiased passwords over a chosen alphabet.

    Parameters

    alphabet : str, default=normalized CHARSET_ALL
        Characters to sample from. Must be non-empty. It is used as given;
        pass it through `normalize_charset` first to drop duplicates.
    source : entropy_source.SecureSource, optional
        Source of unbiased indices. Defaults to the module's default source.

    Examples

    >>> gen = PasswordGenerator()
    >>> gen.password(16)
    'q@4T...'
    >>> gen.entropy_bits(16)
    99.0...
    """

    alphabet: str = normalize_charset(CHARSET_ALL)
    source: Optional[entropy_source.SecureSource] = None

    def __post_init__(self) -> None:
        if self.source is None:
            self.source = entropy_source.default_source()
        if len(self.alphabet) < 1:
            raise ValueError("Alphabet must contain at least 1 character.")

    #Introspection
    @property
    def alpha_size(self) -> int:
        """Number of symbols in the active alphabet."""
        return len(self.alphabet)

    @property
    def per_char_entropy_bits(self) -> float:
        """Entropy contributed by each character: log2(|alphabet|)."""
        return math.log2(self.alpha_size)

    #Estimates
    def entropy_bits(self, length: int) -> float:
        """Estimate total entropy for a password of `length`."""
        return entropy_bits(self.alpha_size, length)

    def possible_passwords(self, length: int) -> int:
        """Number of distinct passwords of `length`."""
        return possible_passwords(self.alpha_size, length)

    def collision_seconds(self, length: int) -> int:
        """Seconds until a 1% collision chance at one password per second."""
        return collision_seconds(self.possible_passwords(length))

    #Generation
    def password(self, length: int) -> str:
        """
        Create one unbiased password of given length.

        How it works

        1) Draw `length` many unbiased integers in [0, |alphabet|).
        2) Map each index to a character.
        """
        if length < 0:
            raise ValueError("length must be non-negative")
        idxs = self.source.uniform_ints(self.alpha_size, size=length)
        return "".join(self.alphabet[i] for i in idxs)

    def passwords(self, length: int, count: int) -> List[str]:
        """Create `count` passwords (each of length `length`)."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.password(length) for _ in range(count)]


#Convenience helpers
def generate(
    alphabet: str,
    length: int,
    source: Optional[entropy_source.SecureSource] = None,
) -> str:
    """
    One-shot helper to generate a password without creating a class instance.

    Raises ValueError for an empty alphabet or a negative length, and
    EntropySourceError if the secure source fails.
    """
    gen = PasswordGenerator(alphabet=alphabet, source=source)
    password = gen.password(length)
    logger.debug("generated password: length=%d, alphabet size=%d", length, gen.alpha_size)
    return password


def entropy_bits(alphabet_size: int, length: int) -> float:
    """
    Password entropy (in bits): H = length * log2(alphabet_size).
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if alphabet_size < 1:
        raise ValueError("alphabet_size must be >= 1")
    return length * math.log2(alphabet_size)


def possible_passwords(alphabet_size: int, length: int) -> int:
    """
    Size of the password space, alphabet_size ** length, as an exact int.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if alphabet_size < 1:
        raise ValueError("alphabet_size must be >= 1")
    return alphabet_size ** length


def rate_entropy(bits: float) -> str:
    """
    Coarse label for an entropy figure, from "very weak" to "very strong".
    """
    if bits >= MIN_ENTROPY_VERY_STRONG:
        return "very strong"
    if bits >= MIN_ENTROPY_STRONG:
        return "strong"
    if bits >= MIN_ENTROPY_FAIR:
        return "fair"
    if bits >= MIN_ENTROPY_WEAK:
        return "weak"
    return "very weak"


__all__ = [
    "MIN_ENTROPY_WEAK",
    "MIN_ENTROPY_FAIR",
    "MIN_ENTROPY_STRONG",
    "MIN_ENTROPY_VERY_STRONG",
    "PasswordGenerator",
    "generate",
    "entropy_bits",
    "possible_passwords",
    "rate_entropy",
]

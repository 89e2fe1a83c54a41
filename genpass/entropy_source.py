"""
entropy_source.py


Purpose/Aim:
1) Wraps the operating system CSPRNG (os.urandom) as the only source of randomness.
2) Turns fresh random bytes into k-bit unsigned integers.
3) Provides unbiased integers in [0, n) using rejection sampling.
4) Fails loudly: a broken source raises EntropySourceError, never a weaker fallback.

Why this shape?

- Every draw reads the OS source directly, so nothing random is cached
  between calls and concurrent callers share no state.
- Rejection sampling ensures no modulo bias when mapping bits to [0, n).

Quick start

>>> from genpass.entropy_source import random_bytes, uniform_int
>>> random_bytes(16)         # 16 fresh bytes
>>> uniform_int(10)          # unbiased integer 0..9

With an explicit source (e.g. to inject a reader in tests):
>>> from genpass.entropy_source import SecureSource
>>> source = SecureSource()
>>> source.uniform_ints(10, size=1000)
# 1,000 numbers in [0,10)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional
import logging
import os

logger = logging.getLogger(__name__)


class EntropySourceError(RuntimeError):
    """The secure entropy source failed or returned too little data."""


#Secure source
@dataclass
class SecureSource:
    """
    Cryptographically secure random integers backed by the OS CSPRNG.

    Typical usage

    >>> source = SecureSource()
    >>> source.get_uint(12)         # 12-bit unsigned integer
    >>> source.uniform_int(1000)    # unbiased integer in [0, 1000)
    >>> source.uniform_ints(10, 5)  # 5 unbiased integers in [0, 10)

    Parameters

    read_bytes : callable, default=os.urandom
        Function returning `n` secure random bytes. Any OSError or short read
        is reported as EntropySourceError.
    """

    read_bytes: Callable[[int], bytes] = os.urandom

    #public API
    def get_bytes(self, n_bytes: int) -> bytes:
        """
        Return `n_bytes` fresh bytes from the reader.
        """
        if n_bytes < 0:
            raise ValueError("n_bytes must be non-negative")
        try:
            data = self.read_bytes(n_bytes)
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceError(f"secure entropy source unavailable: {exc}") from exc
        if len(data) != n_bytes:
            raise EntropySourceError(
                f"secure entropy source returned {len(data)} of {n_bytes} bytes"
            )
        return data

    def get_uint(self, k_bits: int) -> int:
        """
        Interpret `k_bits` fresh bits as a big-endian, non-negative integer.
        """
        if k_bits <= 0:
            raise ValueError("k_bits must be positive")
        n_bytes = (k_bits + 7) // 8
        val = int.from_bytes(self.get_bytes(n_bytes), "big")
        # drop the surplus low bits of the last byte
        return val >> (n_bytes * 8 - k_bits)

    def uniform_int(self, n: int) -> int:
        """
        Unbiased integer in [0, n) via rejection sampling.

        How it works (short version)
        - Choose k = bit length of n - 1, so values live in [0, 2^k) and 2^k < 2n.
        - Accept only when the k-bit value is below n; otherwise draw again.
        - Each draw is accepted with probability > 1/2.
        """
        if n <= 0:
            raise ValueError("n must be positive")
        if n == 1:
            return 0

        k = (n - 1).bit_length()
        while True:
            x = self.get_uint(k)
            if x < n:
                return x

    def uniform_ints(self, n: int, size: int) -> List[int]:
        """
        Convenience: `size` many unbiased integers in [0, n).
        """
        if size < 0:
            raise ValueError("size must be non-negative")
        return [self.uniform_int(n) for _ in range(size)]


#Module-level convenience singletons
_default_source: Optional[SecureSource] = None


def default_source() -> SecureSource:
    """
    Lazily create (and reuse) a default SecureSource.
    It is stateless, so sharing it across threads is safe.
    """
    global _default_source
    if _default_source is None:
        logger.debug("creating default secure source")
        _default_source = SecureSource()
    return _default_source


def random_bytes(n_bytes: int) -> bytes:
    """Fetch `n_bytes` from the default source."""
    return default_source().get_bytes(n_bytes)


def uniform_int(n: int) -> int:
    """Unbiased integer in [0, n) from the default source."""
    return default_source().uniform_int(n)


def uniform_ints(n: int, size: int) -> List[int]:
    """Unbiased integers in [0, n) from the default source."""
    return default_source().uniform_ints(n, size)


__all__ = [
    "EntropySourceError",
    "SecureSource",
    "default_source",
    "random_bytes",
    "uniform_int",
    "uniform_ints",
]

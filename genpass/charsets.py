"""
charsets.py

Aim:
1) Defines the predefined alphabets (lowercase, uppercase, digits, hex, special).
2) Normalizes any character set into a canonical alphabet: no duplicates,
   ascending by code point.
3) Combines the predefined sets the way the command line selects them.

Why normalize?

- Two charsets holding the same symbols (in any order, with any repetition)
  must give the same alphabet, so entropy and collision figures only depend
  on which symbols are present.

Quick start
>>> from genpass.charsets import normalize_charset, CHARSET_HEX
>>> normalize_charset("banana")
'abn'
>>> normalize_charset(CHARSET_HEX)
'0123456789abcdef'
"""

from __future__ import annotations

from typing import Iterable


#Alphabets 
CHARSET_HEX = "abcdef0123456789"
CHARSET_LOWER = "abcdefghijklmnopqrstuvwxyz"
CHARSET_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
CHARSET_NUM = "0123456789"
CHARSET_SPECIAL = "!@#$%^&*()_"
CHARSET_ALPHA = CHARSET_LOWER + CHARSET_UPPER
CHARSET_ALPHANUM = CHARSET_ALPHA + CHARSET_NUM
CHARSET_ALL = CHARSET_ALPHA + CHARSET_NUM + CHARSET_SPECIAL


#Normalization 
def normalize_charset(charset: Iterable[str]) -> str:
    """
    Remove duplicate symbols and sort the rest in ascending code point order.

    Accepts a string or any iterable of single-character strings. The
    operation is idempotent and an empty input gives "".
    """
    return "".join(sorted(set(charset)))


def build_charset(
    *,
    hex: bool = False,
    alpha: bool = False,
    lower: bool = False,
    upper: bool = False,
    number: bool = False,
    special: bool = False,
) -> str:
    """
    Join the selected predefined sets into one normalized alphabet.

    With nothing selected the full set (letters, digits, special) is used.
    """
    selected = [
        (hex, CHARSET_HEX),
        (alpha, CHARSET_ALPHA),
        (lower, CHARSET_LOWER),
        (upper, CHARSET_UPPER),
        (number, CHARSET_NUM),
        (special, CHARSET_SPECIAL),
    ]
    charset = "".join(chars for flag, chars in selected if flag)
    if not charset:
        charset = CHARSET_ALL
    return normalize_charset(charset)


__all__ = [
    "CHARSET_HEX",
    "CHARSET_LOWER",
    "CHARSET_UPPER",
    "CHARSET_NUM",
    "CHARSET_SPECIAL",
    "CHARSET_ALPHA",
    "CHARSET_ALPHANUM",
    "CHARSET_ALL",
    "normalize_charset",
    "build_charset",
]

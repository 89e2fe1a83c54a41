"""
Secure password generator with entropy and birthday-collision estimates.
"""

from .charsets import (
    CHARSET_ALL,
    CHARSET_ALPHA,
    CHARSET_ALPHANUM,
    CHARSET_HEX,
    CHARSET_LOWER,
    CHARSET_NUM,
    CHARSET_SPECIAL,
    CHARSET_UPPER,
    normalize_charset,
)
from .collision import collision_seconds, collision_seconds_from_length
from .config import DEFAULT_CONFIG, GenpassConfig
from .duration import format_duration
from .entropy_source import EntropySourceError, SecureSource
from .passwords import PasswordGenerator, entropy_bits, generate

__all__ = [
    "CHARSET_ALL",
    "CHARSET_ALPHA",
    "CHARSET_ALPHANUM",
    "CHARSET_HEX",
    "CHARSET_LOWER",
    "CHARSET_NUM",
    "CHARSET_SPECIAL",
    "CHARSET_UPPER",
    "normalize_charset",
    "collision_seconds",
    "collision_seconds_from_length",
    "DEFAULT_CONFIG",
    "GenpassConfig",
    "format_duration",
    "EntropySourceError",
    "SecureSource",
    "PasswordGenerator",
    "entropy_bits",
    "generate",
]

"""
Configuration for the password generator.
"""

from dataclasses import dataclass

from .charsets import CHARSET_ALL
from .collision import DEFAULT_PROBABILITY


@dataclass
class GenpassConfig:
    # Desired password length in characters.
    length: int = 16

    # Symbols to draw from. Normalized (deduplicated, sorted) before use.
    charset: str = CHARSET_ALL

    # Target chance of at least one repeated password for the
    # collision estimate, at one generated password per second.
    collision_probability: float = float(DEFAULT_PROBABILITY)


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GenpassConfig()

"""
duration.py

Human-readable durations for second counts of any size.

Aim:
- One fixed ladder of units, from a second up to a googol years.
- Pick the largest unit that fits, show the truncated quotient.
- Two literal fallbacks: "less than a second" and "an eternity".

Quick start

>>> from genpass.duration import format_duration
>>> format_duration(0)
'less than a second'
>>> format_duration(120)
'2 minutes'
>>> format_duration(3 * 10**6 * 31536000)
'3 million years'
"""

from __future__ import annotations

from typing import NamedTuple, Tuple


class DurationUnit(NamedTuple):
    name: str
    seconds: int


# 365-day year, leap years ignored
ONE_YEAR = 31536000


def _years(power: int) -> int:
    """Seconds in 10**power years."""
    return 10**power * ONE_YEAR


#Unit ladder (ascending)
UNITS: Tuple[DurationUnit, ...] = (
    DurationUnit("second", 1),
    DurationUnit("minute", 60),
    DurationUnit("hour", 3600),
    DurationUnit("day", 86400),
    DurationUnit("year", ONE_YEAR),
    DurationUnit("thousand years", _years(3)),
    DurationUnit("million years", _years(6)),
    DurationUnit("billion years", _years(9)),
    DurationUnit("trillion years", _years(12)),
    DurationUnit("quadrillion years", _years(15)),
    DurationUnit("quintillion years", _years(18)),
    DurationUnit("sextillion years", _years(21)),
    DurationUnit("septillion years", _years(24)),
    DurationUnit("octillion years", _years(27)),
    DurationUnit("nonillion years", _years(30)),
    DurationUnit("decillion years", _years(33)),
    DurationUnit("undecillion years", _years(36)),
    DurationUnit("duodecillion years", _years(39)),
    DurationUnit("tredecillion years", _years(42)),
    DurationUnit("quattuordecillion years", _years(45)),
    DurationUnit("quindecillion years", _years(48)),
    DurationUnit("sexdecillion years", _years(51)),
    DurationUnit("septendecillion years", _years(54)),
    DurationUnit("octodecillion years", _years(57)),
    DurationUnit("novemdecillion years", _years(60)),
    DurationUnit("vigintillion years", _years(63)),
    DurationUnit("unvigintillion years", _years(66)),
    DurationUnit("duovigintillion years", _years(69)),
    DurationUnit("trevigintillion years", _years(72)),
    DurationUnit("quattuorvigintillion years", _years(75)),
    DurationUnit("quinvigintillion years", _years(78)),
    DurationUnit("sexvigintillion years", _years(81)),
    DurationUnit("septenvigintillion years", _years(84)),
    DurationUnit("octovigintillion years", _years(87)),
    DurationUnit("novemvigintillion years", _years(90)),
    DurationUnit("trigintillion years", _years(93)),
    DurationUnit("untrigintillion years", _years(96)),
    DurationUnit("duotrigintillion years", _years(99)),
    DurationUnit("googol years", _years(100)),
)

# at or beyond this many seconds the number is no longer shown
ETERNITY_SECONDS = 999 * _years(100)


def format_duration(seconds: int) -> str:
    """
    Format `seconds` using the largest unit that holds at least one whole unit.

    The count is the truncated integer quotient. Single-word units take a
    plural "s" unless the count is exactly 1; multi-word units ("million
    years") are shown as they are.

    Raises TypeError for non-int input and ValueError for negative input.
    """
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise TypeError(f"seconds must be an int, got {type(seconds).__name__}")
    if seconds < 0:
        raise ValueError("seconds must be non-negative")

    if seconds >= ETERNITY_SECONDS:
        return "an eternity"

    for unit in reversed(UNITS):
        if seconds >= unit.seconds:
            count = seconds // unit.seconds
            name = unit.name
            if " " not in name and count != 1:
                name += "s"
            return f"{count} {name}"

    return "less than a second"


__all__ = [
    "DurationUnit",
    "ONE_YEAR",
    "UNITS",
    "ETERNITY_SECONDS",
    "format_duration",
]

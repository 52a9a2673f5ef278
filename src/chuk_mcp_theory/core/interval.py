"""
Interval engine - number + size arithmetic.

An interval is a number (letter steps, 1 = unison) plus a size. The size
has two forms, modelled as two value types:
- SemitoneInterval: raw semitone count, e.g. (3, 4) is a major third
- QualityInterval: quality name/offset, e.g. (3, 'M')

SemitoneInterval is the working form for arithmetic; QualityInterval is
the form people read and write. Every operation accepts either, and
operations that only shift the number keep the input's form.

All values are immutable; every transformation returns a new interval.
Arithmetic (join, split, octave shifts) does not validate its result.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any

from chuk_mcp_theory.constants import MAX_INTERVAL_NUMBER, ErrorMessages
from chuk_mcp_theory.core import number as _number
from chuk_mcp_theory.core import quality as _quality
from chuk_mcp_theory.core.conversion import semitones_to_cents, semitones_to_frequency_ratio
from chuk_mcp_theory.core.diatonic import number_octaves, number_to_semitone, semitone_to_number
from chuk_mcp_theory.core.quality import Quality
from chuk_mcp_theory.core.semitone import is_semitone


@dataclass(frozen=True)
class SemitoneInterval:
    """
    Interval measured in semitones.

    SemitoneInterval(1, 0) = perfect unison
    SemitoneInterval(5, 7) = perfect fifth
    SemitoneInterval(2, 1) = minor second
    """

    number: int
    semitone: int

    def __str__(self) -> str:
        return to_string(self)


@dataclass(frozen=True)
class QualityInterval:
    """
    Interval described by its quality.

    QualityInterval(5, 'P') = perfect fifth
    QualityInterval(3, 'minor') = minor third
    QualityInterval(2, -1) = minor second (offset form)
    """

    number: int
    quality: Quality

    def __str__(self) -> str:
        return to_string(self)


Interval = SemitoneInterval | QualityInterval


def _fields(value: object) -> tuple[Any, Any, Any]:
    """Pull (number, semitone, quality) out of an interval or mapping."""
    if isinstance(value, Mapping):
        return value.get("number"), value.get("semitone"), value.get("quality")
    return (
        getattr(value, "number", None),
        getattr(value, "semitone", None),
        getattr(value, "quality", None),
    )


def _valid_semitone_form(number: int, semitone: Any) -> bool:
    if not is_semitone(semitone):
        return False
    correction = semitone - number_to_semitone(number)
    return _quality.is_quality(correction, _number.is_perfect_family(number))


def _valid_quality_form(number: int, quality: Any) -> bool:
    perfect = _number.is_perfect_family(number)
    if not _quality.is_quality(quality, perfect):
        return False
    correction = _quality.offset(quality, perfect)
    return number_to_semitone(number) + correction >= 0


def is_interval(value: object) -> bool:
    """
    Check whether a value describes a real interval.

    Accepts interval instances and mappings with number/semitone/quality.
    The number must be a positive integer, and either the semitone count
    or the quality must fit that number's quality family.
    """
    if value is None:
        return False
    number, semitone, quality = _fields(value)
    if not _number.is_number(number):
        return False
    return _valid_semitone_form(number, semitone) or _valid_quality_form(number, quality)


def quality(interval: Interval) -> Quality:
    """
    Quality of an interval.

    Semitone intervals yield the raw offset from the diatonic size;
    quality intervals return their quality unchanged.
    """
    if isinstance(interval, SemitoneInterval):
        return interval.semitone - number_to_semitone(interval.number)
    return interval.quality


def semitones(interval: Interval) -> int:
    """Semitone count of an interval."""
    if isinstance(interval, QualityInterval):
        perfect = _number.is_perfect_family(interval.number)
        return number_to_semitone(interval.number) + _quality.offset(interval.quality, perfect)
    return interval.semitone


def to_semitone_interval(interval: Interval) -> SemitoneInterval:
    """Convert any interval to its semitone form."""
    if isinstance(interval, SemitoneInterval):
        return interval
    return SemitoneInterval(interval.number, semitones(interval))


def to_quality_interval(interval: Interval) -> QualityInterval:
    """Convert any interval to its quality form (offset quality for semitone input)."""
    if isinstance(interval, QualityInterval):
        return interval
    return QualityInterval(interval.number, quality(interval))


def numbers(semitone: int, quality_name: str) -> int | None:
    """
    Recover the interval number from a semitone count and a quality.

    Returns None when no number fits the combination.
    numbers(7, 'P') == 5, numbers(4, 'M') == 3, numbers(4, 'P') is None
    """
    for perfect in (True, False):
        if not _quality.is_quality(quality_name, perfect):
            continue
        candidate = semitone_to_number(semitone - _quality.offset(quality_name, perfect))
        if (
            candidate is not None
            and _number.is_number(candidate)
            and _number.is_perfect_family(candidate) == perfect
        ):
            return candidate
    return None


def equal(first: Interval, second: Interval) -> bool:
    """Same number and same size."""
    if first is second:
        return True
    if first.number != second.number:
        return False
    return semitones(first) == semitones(second)


def simple_equal(first: Interval, second: Interval) -> bool:
    """Equal after reducing both to simple intervals (ignores whole octaves)."""
    if first is second:
        return True
    return equal(simplify(first), simplify(second))


def semitone_equal(first: Interval, second: Interval) -> bool:
    """Same semitone count, regardless of number (e.g. A1 and m2)."""
    if first is second:
        return True
    return semitones(first) == semitones(second)


def increase_octave(interval: Interval, times: int = 1) -> Interval:
    """Add whole octaves. The input's form (semitone/quality) is kept."""
    if isinstance(interval, QualityInterval):
        increased = increase_octave(to_semitone_interval(interval), times)
        return QualityInterval(increased.number, interval.quality)

    number, semitone = interval.number, interval.semitone
    for _ in range(times):
        number += 7
        semitone += 12
    return SemitoneInterval(number, semitone)


def decrease_octave(interval: Interval, times: int = 1) -> Interval:
    """
    Remove whole octaves.

    Saturating: stops early rather than going below a unison or 0 semitones.
    """
    if isinstance(interval, QualityInterval):
        decreased = decrease_octave(to_semitone_interval(interval), times)
        return QualityInterval(decreased.number, interval.quality)

    number, semitone = interval.number, interval.semitone
    while times > 0 and number - 7 >= 1 and semitone - 12 >= 0:
        number -= 7
        semitone -= 12
        times -= 1
    return SemitoneInterval(number, semitone)


def rationalize(interval: Interval) -> Interval:
    """
    Raise an interval by octaves until number >= 1 and semitone >= 0.

    Raises:
        ValueError: if the number would grow past 99
    """
    if isinstance(interval, QualityInterval):
        rationalized = rationalize(to_semitone_interval(interval))
        return QualityInterval(rationalized.number, interval.quality)

    number, semitone = interval.number, interval.semitone
    while number < 1 or semitone < 0:
        number += 7
        semitone += 12
        if number > MAX_INTERVAL_NUMBER:
            raise ValueError(ErrorMessages.INVALID_INTERVAL.format(limit=MAX_INTERVAL_NUMBER))
    return SemitoneInterval(number, semitone)


def simplify(interval: Interval) -> Interval:
    """
    Reduce a compound interval to a simple one.

    Unison through octave are already simple and come back unchanged
    (an octave stays an octave). Larger intervals drop their whole
    octaves: 9 -> 2, 15 -> 1.
    """
    if _number.is_simple(interval.number):
        return interval
    return decrease_octave(interval, number_octaves(interval.number))


def invert(interval: Interval) -> Interval:
    """
    Invert an interval: number -> 9 - number, size mirrored within the octave.

    M3 -> m6, P5 -> P4, P1 -> P8. The result is rationalized.
    """
    inverted_number = 9 - interval.number
    if isinstance(interval, SemitoneInterval):
        return rationalize(SemitoneInterval(inverted_number, 12 - interval.semitone))

    perfect = _number.is_perfect_family(interval.number)
    inverted_quality = _quality.invert(interval.quality, perfect)
    return rationalize(QualityInterval(inverted_number, inverted_quality))


def join(first: Interval, second: Interval) -> SemitoneInterval:
    """
    Stack two intervals end to end, sharing the middle pitch.

    M3 + m3 = P5
    """
    a = to_semitone_interval(first)
    b = to_semitone_interval(second)
    return SemitoneInterval(a.number + b.number - 1, a.semitone + b.semitone)


def merge(*intervals: Interval) -> Interval:
    """Join one or more intervals left to right."""
    if len(intervals) == 1:
        return intervals[0]
    return reduce(join, intervals)


def split(whole: Interval, part: Interval) -> SemitoneInterval:
    """
    Remove a sub-interval from the bottom of a larger one.

    Inverse of join. May produce a negative interval when the part is
    bigger than the whole; callers must check.
    """
    a = to_semitone_interval(whole)
    b = to_semitone_interval(part)
    return SemitoneInterval(a.number - b.number + 1, a.semitone - b.semitone)


def separate(*intervals: Interval) -> Interval:
    """Split every following interval off the first one."""
    if len(intervals) == 1:
        return intervals[0]
    return reduce(split, intervals)


def cents(interval: Interval) -> float:
    """Size in cents (100 per semitone)."""
    return semitones_to_cents(semitones(interval))


def frequency_ratio(interval: Interval) -> float:
    """Equal-tempered frequency ratio, e.g. 2.0 for an octave."""
    return semitones_to_frequency_ratio(semitones(interval))


def to_string(interval: Interval) -> str:
    """Short notation: quality prefix + number, e.g. 'M3', 'P5'."""
    perfect = _number.is_perfect_family(interval.number)
    return f"{_quality.prefix(quality(interval), perfect)}{interval.number}"


def to_nice_string(interval: Interval) -> str | None:
    """
    Long notation: quality name + ordinal word, e.g. 'major third'.

    None for numbers without an ordinal word (above 99).
    """
    perfect = _number.is_perfect_family(interval.number)
    name = _quality.nice_name(quality(interval), perfect)
    word = _number.to_ordinal_word(interval.number)
    if word is None:
        return None
    return f"{name} {word}"


def from_string(text: str) -> QualityInterval | None:
    """
    Parse interval notation.

    Accepts short ('P5', 'AA2') and long ('perfect fifth',
    'doubly-augmented second', 'major 3rd', 'minor twenty-first') forms.
    """
    if not isinstance(text, str):
        return None

    interval_number = _number.from_string(text)
    if interval_number is None:
        return None

    interval_quality = _quality.from_string(text, _number.is_perfect_family(interval_number))
    if interval_quality is None:
        return None

    interval = QualityInterval(interval_number, interval_quality)
    return interval if is_interval(interval) else None


def make_interval(value: object) -> Interval | None:
    """
    Build an interval from loose input.

    Accepts an interval, a mapping with number + semitone or number + quality,
    or interval notation text. Anything else yields None.
    """
    if isinstance(value, str):
        return from_string(value)
    if isinstance(value, (SemitoneInterval, QualityInterval)):
        return value if is_interval(value) else None
    if not isinstance(value, Mapping):
        return None

    number, semitone, interval_quality = _fields(value)
    if not _number.is_number(number):
        return None
    if _valid_semitone_form(number, semitone):
        return SemitoneInterval(number, semitone)
    if _valid_quality_form(number, interval_quality):
        return QualityInterval(number, interval_quality)
    return None

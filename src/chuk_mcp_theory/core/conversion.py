"""
Conversions between semitones, cents and frequency ratios.

All functions take an optional ``to_fixed`` to round the result.
"""

from __future__ import annotations

import math


def _fixed(value: float, to_fixed: int | None) -> float:
    return value if to_fixed is None else round(value, to_fixed)


def frequency_ratio_to_semitones(ratio: float, to_fixed: int | None = None) -> float:
    """3:2 -> ~7.02 semitones."""
    return _fixed(12 * math.log2(ratio), to_fixed)


def semitones_to_frequency_ratio(semitones: float, to_fixed: int | None = None) -> float:
    """12 semitones -> 2.0."""
    return _fixed(2 ** (semitones / 12), to_fixed)


def cents_to_semitones(cents: float, to_fixed: int | None = None) -> float:
    return _fixed(cents / 100, to_fixed)


def semitones_to_cents(semitones: float, to_fixed: int | None = None) -> float:
    return _fixed(semitones * 100, to_fixed)

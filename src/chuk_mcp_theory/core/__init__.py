"""
Core music theory primitives.

These are the value types and arithmetic everything else composes on:
- diatonic: step letters and their semitone offsets
- accidental / quality / number / semitone: interval building blocks
- interval: SemitoneInterval and QualityInterval arithmetic
- pitch: spelled absolute pitches (letter + accidental + octave)
- chord: chord types, construction and inversion

Modules are imported as namespaces since they share operation names
(interval.from_string, pitch.from_string, chord.from_string, ...).
"""

from chuk_mcp_theory.core import (
    accidental,
    chord,
    conversion,
    diatonic,
    interval,
    number,
    pitch,
    quality,
    semitone,
)
from chuk_mcp_theory.core.chord import Chord
from chuk_mcp_theory.core.interval import Interval, QualityInterval, SemitoneInterval
from chuk_mcp_theory.core.pitch import Pitch

__all__ = [
    # Modules
    "accidental",
    "chord",
    "conversion",
    "diatonic",
    "interval",
    "number",
    "pitch",
    "quality",
    "semitone",
    # Value types
    "Chord",
    "Interval",
    "Pitch",
    "QualityInterval",
    "SemitoneInterval",
]

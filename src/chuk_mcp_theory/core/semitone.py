"""
Semitone counts - the quantitative size of an interval.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompoundSemitone:
    """A semitone count folded into (octave, semitone within the octave)."""

    octave: int
    semitone: int


def is_semitone(value: object) -> bool:
    """Check for a valid semitone count (a non-negative integer)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def octave(semitone: int) -> int:
    """Whole octaves spanned by a semitone count."""
    return semitone // 12


def compound(semitone: int) -> CompoundSemitone:
    """Fold a semitone count into its compound form."""
    return CompoundSemitone(octave=octave(semitone), semitone=semitone % 12)


def simplify(compound: CompoundSemitone) -> int:
    """Expand a compound semitone count back into a flat count."""
    return compound.octave * 12 + compound.semitone

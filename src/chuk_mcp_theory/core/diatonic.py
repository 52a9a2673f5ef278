"""
Diatonic table - step letters, step numbers and their semitone offsets.

A natural scale (C D E F G A B) has a fixed number of semitones between
any two letters, so it is the baseline every other calculation builds on.
Numbers start at 1 (C) and keep counting through higher octaves (C1 = 8).
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_theory.constants import StepName

# Parallel tables, indexed by step number - 1
_NAMES: tuple[StepName, ...] = ("C", "D", "E", "F", "G", "A", "B")
_NUMBERS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)
_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

LENGTH = 7


@dataclass(frozen=True)
class CompoundNumber:
    """A diatonic number folded into (octave, number within the octave)."""

    octave: int
    number: int


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_step_name(value: object) -> bool:
    """Check whether a value is one of the letters A-G."""
    return isinstance(value, str) and len(value) == 1 and value in _NAMES


def is_diatonic_semitone(semitone: object) -> bool:
    """Check whether a semitone count lands on an unaltered letter."""
    if not _is_int(semitone):
        return False
    return semitone % 12 in _SEMITONES  # type: ignore[operator]


def step_number(number: int) -> int:
    """Reduce any diatonic number to 1-7."""
    return (number - 1) % LENGTH + 1


def number_to_step_name(number: int) -> StepName:
    """
    Get the step letter for a diatonic number.

    number_to_step_name(1) == 'C', number_to_step_name(9) == 'D'
    """
    return _NAMES[step_number(number) - 1]


def step_name_to_number(step_name: str) -> int:
    """Get the step number (1-7) for a letter."""
    return _NUMBERS[_NAMES.index(step_name)]  # type: ignore[arg-type]


def number_octaves(number: int) -> int:
    """Number of whole octaves spanned by a diatonic number."""
    return (number - 1) // LENGTH


def number_to_semitone(number: int) -> int:
    """
    Semitones from C for a diatonic number.

    1 (C) -> 0, 2 (D) -> 2, ..., 8 (C) -> 12, 9 (D) -> 14
    """
    return _SEMITONES[step_number(number) - 1] + number_octaves(number) * 12


def semitone_to_number(semitone: int) -> int | None:
    """
    Diatonic number for a semitone count, if a letter lands on it.

    semitone_to_number(4) == 3, semitone_to_number(6) is None
    """
    if not _is_int(semitone):
        return None
    try:
        index = _SEMITONES.index(semitone % 12)
    except ValueError:
        return None
    return _NUMBERS[index] + (semitone // 12) * LENGTH


def number_compound(number: int) -> CompoundNumber:
    """Fold a diatonic number into its compound form."""
    return CompoundNumber(octave=number_octaves(number), number=step_number(number))


def number_simplify(compound: CompoundNumber) -> int:
    """Expand a compound number back into a flat diatonic number."""
    return compound.octave * LENGTH + compound.number

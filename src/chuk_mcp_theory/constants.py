"""
Constants and enums for the theory system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# Step letters in diatonic order starting from C
StepName = Literal["C", "D", "E", "F", "G", "A", "B"]

# Chord classes by number of stacked tones
ChordClass = Literal["Triad", "Seventh", "Ninth", "Eleventh"]

# Reference pitch for frequency calculation (A4)
STANDARD_FREQUENCY_OF_A4 = 440

# Semitones from C0 to A4
SEMITONES_C0_TO_A4 = 57

# Largest interval number the engine will produce
MAX_INTERVAL_NUMBER = 99

# MIDI / piano key ranges
MIDI_RANGE: tuple[int, int] = (12, 127)
PIANO_KEY_RANGE: tuple[int, int] = (1, 88)


class ChordRole(str, Enum):
    """
    Function of a pitch within a chord.

    Used to tag fingerboard positions for display.
    """

    ROOT = "root"
    THIRD = "third"
    FIFTH = "fifth"
    SEVENTH = "seventh"
    NINTH = "ninth"
    ELEVENTH = "eleventh"
    NONE = ""


# Role order matches chord tone order in root position
CHORD_ROLE_ORDER: tuple[ChordRole, ...] = (
    ChordRole.ROOT,
    ChordRole.THIRD,
    ChordRole.FIFTH,
    ChordRole.SEVENTH,
    ChordRole.NINTH,
    ChordRole.ELEVENTH,
)


class TransposeDirection(str, Enum):
    """Direction for pitch transposition."""

    UP = "up"
    DOWN = "down"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_INTERVAL = "Invalid interval: number exceeded {limit} while rationalizing."
    INVALID_INVERSION = "Invalid inversion {case} for a chord with {length} tones."
    UNPARSEABLE_INTERVAL = "Could not parse interval: '{text}'."
    UNPARSEABLE_PITCH = "Could not parse pitch: '{text}'."
    UNPARSEABLE_CHORD = "Could not parse chord: '{text}'."
    INSTRUMENT_NOT_FOUND = "Instrument '{name}' not found."
    INVALID_TUNING = "Invalid tuning pitch: '{pitch}'."

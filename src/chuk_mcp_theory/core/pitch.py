"""
Pitch primitives - absolute pitches with letter, accidental and octave.

A pitch is a step letter (A-G), an accidental that raises or lowers it,
and an octave in scientific pitch notation (C4 = middle C). Unlike a bare
pitch class, a pitch keeps its spelling: C♯4 and D♭4 sound the same but
are different pitches.

Arithmetic goes through the interval engine: every pitch is an interval
above C0 (number = letter steps, semitone = size), so transposing a
pitch is joining or splitting intervals.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chuk_mcp_theory.constants import (
    MIDI_RANGE,
    PIANO_KEY_RANGE,
    SEMITONES_C0_TO_A4,
    STANDARD_FREQUENCY_OF_A4,
)
from chuk_mcp_theory.core import accidental as _accidental
from chuk_mcp_theory.core.accidental import Accidental
from chuk_mcp_theory.core.conversion import semitones_to_frequency_ratio
from chuk_mcp_theory.core.diatonic import (
    is_step_name,
    number_compound,
    number_to_semitone,
    number_to_step_name,
    step_name_to_number,
)
from chuk_mcp_theory.core.interval import Interval, SemitoneInterval, join, split, to_semitone_interval
from chuk_mcp_theory.core.semitone import octave as semitone_octave

_TRAILING_OCTAVE = re.compile(r"\d+$")

# Diatonic numbers (1 = C ... 7 = B) able to spell each pitch class.
# Row order is the preferred spelling order.
_ENHARMONIC_NUMBERS: tuple[tuple[int, ...], ...] = (
    (1, 7, 2),
    (1, 2, 7),
    (2, 1, 3),
    (2, 3, 4),
    (3, 4, 2),
    (4, 3, 5),
    (4, 5, 3),
    (5, 4, 6),
    (5, 6),
    (6, 5, 7),
    (6, 7, 1),
    (7, 1, 6),
)


@dataclass(frozen=True)
class Pitch:
    """
    An absolute, spelled pitch.

    The accidental may be given in any form (offset, sign or nice name);
    comparisons go through its semitone offset.

    Examples:
        Pitch("C", 0, 4) = middle C
        Pitch("F", "♯", 3) = F♯3
        Pitch("B", "flat") = B♭0
    """

    step_name: str
    accidental: Accidental = 0
    octave: int = 0

    def __str__(self) -> str:
        return name(self)


def _fields(value: object) -> tuple[Any, Any, Any]:
    if isinstance(value, Mapping):
        return value.get("step_name"), value.get("accidental", 0), value.get("octave", 0)
    return (
        getattr(value, "step_name", None),
        getattr(value, "accidental", 0),
        getattr(value, "octave", 0),
    )


def numbers_start_with_c0(pitch: Pitch) -> int:
    """Letter steps from C0, counting C0 itself as 1."""
    return step_name_to_number(pitch.step_name) + pitch.octave * 7


def semitones_start_with_c0(pitch: Pitch) -> int:
    """Semitones above C0."""
    return number_to_semitone(numbers_start_with_c0(pitch)) + _accidental.offset(pitch.accidental)


def to_interval_start_with_c0(pitch: Pitch) -> SemitoneInterval:
    """The interval from C0 up to this pitch."""
    return SemitoneInterval(numbers_start_with_c0(pitch), semitones_start_with_c0(pitch))


def from_interval_start_with_c0(interval: Interval) -> Pitch:
    """
    The pitch an interval above C0 lands on.

    The accidental is always returned in sign form.
    """
    measured = to_semitone_interval(interval)
    compound = number_compound(measured.number)
    correction = measured.semitone - number_to_semitone(measured.number)
    return Pitch(
        step_name=number_to_step_name(compound.number),
        accidental=_accidental.sign(correction),
        octave=compound.octave,
    )


def is_pitch(value: object) -> bool:
    """
    Check whether a value describes a real pitch.

    Accepts Pitch instances and mappings with step_name/accidental/octave.
    The pitch must not fall below C0.
    """
    if value is None:
        return False
    step_name, accidental, octave = _fields(value)
    if not is_step_name(step_name) or not _accidental.is_accidental(accidental):
        return False
    if not isinstance(octave, int) or isinstance(octave, bool):
        return False
    pitch = Pitch(step_name, accidental, octave)
    return numbers_start_with_c0(pitch) >= 1 and semitones_start_with_c0(pitch) >= 0


def equal(first: Pitch, second: Pitch) -> bool:
    """Same letter, same accidental offset, same octave."""
    if first is second:
        return True
    return (
        first.step_name == second.step_name
        and _accidental.offset(first.accidental) == _accidental.offset(second.accidental)
        and first.octave == second.octave
    )


def semitone_equal(first: Pitch, second: Pitch) -> bool:
    """Same sounding pitch, e.g. C♯4 and D♭4."""
    if first is second:
        return True
    return semitones_start_with_c0(first) == semitones_start_with_c0(second)


def simple_equal(first: Pitch, second: Pitch) -> bool:
    """Same spelling in any octave, e.g. C♯2 and C♯5."""
    if first is second:
        return True
    return first.step_name == second.step_name and _accidental.offset(
        first.accidental
    ) == _accidental.offset(second.accidental)


def name(pitch: Pitch) -> str:
    """
    Display name: letter + accidental sign + octave.

    The natural sign and octave 0 are not shown: C0 -> 'C', C♯4 -> 'C♯4'.
    """
    octave = str(pitch.octave) if pitch.octave else ""
    text = f"{pitch.step_name}{_accidental.sign(pitch.accidental)}{octave}"
    return text.replace(_accidental.NATURAL, "")


def simplify(pitch: Pitch) -> Pitch:
    """
    Move a pitch into octave 0.

    Spellings that would fall below C0 there (C♭, C♭♭) go to octave 1.
    """
    simple = Pitch(pitch.step_name, pitch.accidental, 0)
    if semitones_start_with_c0(simple) >= 0:
        return simple
    return Pitch(pitch.step_name, pitch.accidental, 1)


def higher_pitch(pitch: Pitch, interval: Interval) -> Pitch:
    """
    The pitch an interval above this one.

    higher_pitch(C0, M3) = E0
    """
    return from_interval_start_with_c0(join(to_interval_start_with_c0(pitch), interval))


def lower_pitch(pitch: Pitch, interval: Interval) -> Pitch:
    """
    The pitch an interval below this one.

    lower_pitch(G0, m3) = E0
    """
    return from_interval_start_with_c0(split(to_interval_start_with_c0(pitch), interval))


def frequency(pitch: Pitch, to_fixed: int | None = None) -> float:
    """Equal-tempered frequency in Hz, with A4 = 440."""
    ratio = semitones_to_frequency_ratio(semitones_start_with_c0(pitch) - SEMITONES_C0_TO_A4)
    hertz = STANDARD_FREQUENCY_OF_A4 * ratio
    return hertz if to_fixed is None else round(hertz, to_fixed)


def to_midi_number(pitch: Pitch) -> int | None:
    """MIDI note number (C4 = 60). None outside 12-127."""
    midi_number = semitones_start_with_c0(pitch) + 12
    low, high = MIDI_RANGE
    return midi_number if low <= midi_number <= high else None


def from_midi_number(midi_number: int) -> list[Pitch]:
    """All common spellings of a MIDI note number."""
    return enharmonic_notes(midi_number - 12)


def to_piano_key_number(pitch: Pitch) -> int | None:
    """Piano key number, 1 (A0) to 88 (C8). None off the keyboard."""
    key_number = semitones_start_with_c0(pitch) - 8
    low, high = PIANO_KEY_RANGE
    return key_number if low <= key_number <= high else None


def from_piano_key_number(key_number: int) -> list[Pitch]:
    """All common spellings of a piano key."""
    return enharmonic_notes(key_number + 8)


def enharmonic_notes(semitone: int) -> list[Pitch]:
    """
    Spellings of the pitch a number of semitones above C0.

    Spellings that borrow a letter from the octave below can fall under
    C0 and then fail is_pitch.

    enharmonic_notes(0) -> [C0, B♯-1, D♭♭0]
    enharmonic_notes(1) -> [C♯0, D♭0, B×-1]
    """
    octaves = semitone_octave(semitone)
    pitches = []
    for step in _ENHARMONIC_NUMBERS[semitone % 12]:
        number = step + octaves * 7
        # B♯ / C♭ style spellings borrow a letter from the neighbouring octave
        distance = semitone - number_to_semitone(number)
        if distance > 6:
            number += 7
        elif distance < -6:
            number -= 7
        pitches.append(from_interval_start_with_c0(SemitoneInterval(number, semitone)))
    return pitches


def to_string(pitch: Pitch) -> str:
    """
    Notation text: letter + accidental as stored + octave.

    Unlike name(), the accidental is not converted to its sign, and a
    natural is still written: Pitch("C", "♮", 4) -> "C♮4",
    Pitch("C", "sharp", 4) -> "Csharp4", Pitch("C", 1, 4) -> "C14".
    """
    octave = str(pitch.octave) if pitch.octave else ""
    return f"{pitch.step_name}{pitch.accidental}{octave}"


def from_string(text: str) -> Pitch | None:
    """
    Parse pitch notation.

    'C#4', 'Bbb1', 'F＃', 'Cx4', 'e♭3'. The octave defaults to 0.
    """
    if not isinstance(text, str):
        return None

    stripped = text.strip()
    if not stripped:
        return None

    step_name = stripped[0].upper()
    if not is_step_name(step_name):
        return None

    match = _TRAILING_OCTAVE.search(stripped)
    octave = int(match.group(0)) if match else 0
    accidental = _accidental.from_string(stripped[1:])

    pitch = Pitch(step_name, accidental, octave)
    return pitch if is_pitch(pitch) else None


def make_pitch(value: object) -> Pitch | None:
    """
    Build a pitch from loose input.

    Accepts a Pitch, a mapping with step_name/accidental/octave, or
    pitch notation text. Anything else yields None.
    """
    if isinstance(value, str):
        return from_string(value)
    if isinstance(value, Pitch):
        return value if is_pitch(value) else None
    if isinstance(value, Mapping) and is_pitch(value):
        step_name, accidental, octave = _fields(value)
        return Pitch(step_name, accidental, octave)
    return None

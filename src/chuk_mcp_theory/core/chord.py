"""
Chord primitives - chord types, construction and inversion.

Chords are stacks of intervals above a root. A chord type (maj, m7, 9, ...)
defines the intervals; a concrete Chord holds the spelled tones in root
position plus an inversion case that picks the bass tone.

Positional access follows the inversion: chord[0] is always the bass.
Named accessors (root, third, fifth, ...) always return the same tone
objects regardless of inversion.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, replace

from chuk_mcp_theory.constants import CHORD_ROLE_ORDER, ChordClass, ChordRole, ErrorMessages
from chuk_mcp_theory.core import pitch as _pitch
from chuk_mcp_theory.core.interval import SemitoneInterval
from chuk_mcp_theory.core.pitch import Pitch

# Intervals above the root
M2 = SemitoneInterval(2, 2)
m3 = SemitoneInterval(3, 3)
M3 = SemitoneInterval(3, 4)
P4 = SemitoneInterval(4, 5)
d5 = SemitoneInterval(5, 6)
P5 = SemitoneInterval(5, 7)
A5 = SemitoneInterval(5, 8)
M6 = SemitoneInterval(6, 9)
d7 = SemitoneInterval(7, 9)
m7 = SemitoneInterval(7, 10)
M7 = SemitoneInterval(7, 11)
M9 = SemitoneInterval(9, 14)
P11 = SemitoneInterval(11, 17)


@dataclass(frozen=True)
class ChordDefinition:
    """The class of a chord type and its intervals above the root."""

    chord_class: ChordClass
    intervals: tuple[SemitoneInterval, ...]


CHORD_TYPES: dict[str, ChordDefinition] = {
    "maj": ChordDefinition("Triad", (M3, P5)),
    "min": ChordDefinition("Triad", (m3, P5)),
    "aug": ChordDefinition("Triad", (M3, A5)),
    "dim": ChordDefinition("Triad", (m3, d5)),
    "sus2": ChordDefinition("Triad", (M2, P5)),
    "sus4": ChordDefinition("Triad", (P4, P5)),
    "7": ChordDefinition("Seventh", (M3, P5, m7)),
    "m7": ChordDefinition("Seventh", (m3, P5, m7)),
    "M7": ChordDefinition("Seventh", (M3, P5, M7)),
    "mM7": ChordDefinition("Seventh", (m3, P5, M7)),
    "aug7": ChordDefinition("Seventh", (M3, A5, M7)),
    "dim7": ChordDefinition("Seventh", (m3, d5, d7)),
    "m7-5": ChordDefinition("Seventh", (m3, d5, m7)),
    "6": ChordDefinition("Seventh", (M3, P5, M6)),
    "m6": ChordDefinition("Seventh", (m3, P5, M6)),
    "9": ChordDefinition("Ninth", (M3, P5, m7, M9)),
    "m9": ChordDefinition("Ninth", (m3, P5, m7, M9)),
    "11": ChordDefinition("Eleventh", (M3, P5, m7, M9, P11)),
}

_TYPE_ALIASES: dict[str, str] = {"": "maj", "M": "maj", "m": "min", "maj7": "M7"}

_LEADING_ACCIDENTAL = re.compile("^(bb|##|♭♭|b|#|＃|x|♭|♯|×)")
_TRAILING_OCTAVE = re.compile(r"-?\d+$")


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord.

    Tones are stored in root position; ``inversion`` rotates positional
    access so that tone ``inversion`` becomes the bass.

    Example:
        chord = create(Pitch("C"), "maj", 1)
        chord[0] -> E (the bass), chord.root -> C
    """

    type: str
    chord_class: ChordClass
    tones: tuple[Pitch, ...]
    inversion: int = 0

    def __len__(self) -> int:
        return len(self.tones)

    def __getitem__(self, index: int) -> Pitch:
        if not -len(self.tones) <= index < len(self.tones):
            raise IndexError(index)
        return self.tones[(index + self.inversion) % len(self.tones)]

    def __iter__(self) -> Iterator[Pitch]:
        for index in range(len(self.tones)):
            yield self[index]

    def __str__(self) -> str:
        return to_string(self)

    def _tone(self, position: int) -> Pitch | None:
        return self.tones[position] if position < len(self.tones) else None

    @property
    def root(self) -> Pitch:
        return self.tones[0]

    @property
    def third(self) -> Pitch | None:
        return self._tone(1)

    @property
    def fifth(self) -> Pitch | None:
        return self._tone(2)

    @property
    def seventh(self) -> Pitch | None:
        return self._tone(3)

    @property
    def ninth(self) -> Pitch | None:
        return self._tone(4)

    @property
    def eleventh(self) -> Pitch | None:
        return self._tone(5)

    @property
    def base(self) -> Pitch:
        """The bass tone after inversion."""
        return self.tones[self.inversion]


def ensure_type(chord_type: str) -> str:
    """
    Normalize a chord type name.

    Known types pass through. '' and 'M' mean 'maj', 'm' means 'min',
    'maj7' means 'M7'; anything else falls back to 'maj'.
    """
    if chord_type in CHORD_TYPES:
        return chord_type
    return _TYPE_ALIASES.get(chord_type, "maj")


def create(root: Pitch, chord_type: str = "maj", inversion: int = 0) -> Chord:
    """
    Build a chord by stacking its type's intervals on a root.

    Args:
        root: Root pitch (kept as the chord's root object)
        chord_type: Chord type name, normalized with ensure_type
        inversion: Inversion case, 0 = root position

    Raises:
        ValueError: if the inversion is out of range for the chord
    """
    chord_type = ensure_type(chord_type)
    definition = CHORD_TYPES[chord_type]
    tones = (root, *(_pitch.higher_pitch(root, interval) for interval in definition.intervals))
    chord = Chord(type=chord_type, chord_class=definition.chord_class, tones=tones)
    return invert(chord, inversion) if inversion else chord


def invert(chord: Chord, case: int) -> Chord:
    """
    Put tone ``case`` (0 = root, 1 = third, ...) in the bass.

    Returns a new chord; the tone objects are shared.

    Raises:
        ValueError: if case is negative or not smaller than the chord length
    """
    if case < 0 or case >= len(chord):
        raise ValueError(ErrorMessages.INVALID_INVERSION.format(case=case, length=len(chord)))
    if case == chord.inversion:
        return chord
    return replace(chord, inversion=case)


def is_inverted(chord: Chord) -> bool:
    """True when the bass is not the root."""
    return chord.base is not chord.root


def role_of(chord: Chord, pitch: Pitch) -> ChordRole:
    """
    Role of a tone object within the chord.

    Matching is by identity, so only the chord's own tone objects
    have a role; an equal but separate Pitch gets ChordRole.NONE.
    """
    for position, tone in enumerate(chord.tones):
        if tone is pitch:
            return CHORD_ROLE_ORDER[position]
    return ChordRole.NONE


def _parse_note(text: str) -> Pitch | None:
    # C♭ and C♭♭ sit below C0, so they are spelled in octave 1
    return _pitch.from_string(text) or _pitch.from_string(f"{text}1")


def _display_name(pitch: Pitch) -> str:
    return _TRAILING_OCTAVE.sub("", _pitch.name(pitch))


def to_string(chord: Chord) -> str:
    """
    Chord symbol, e.g. 'C', 'Am', 'G7', 'C/E'.

    Octaves are not shown.
    """
    suffix = {"maj": "", "min": "m"}.get(chord.type, chord.type)
    root = _display_name(chord.root)
    base = _display_name(chord.base)
    bass = "" if root == base else f"/{base}"
    return f"{root}{suffix}{bass}"


def from_string(text: str) -> Chord | None:
    """
    Parse a chord symbol.

    'C', 'Am', 'F#m7', 'Bbmaj7', 'C/E'. A bass note after '/' selects
    the inversion whose tone has that spelling; an unmatched bass is
    ignored. Returns None when the root cannot be parsed.
    """
    if not isinstance(text, str):
        return None

    symbol = re.sub(r"\s", "", text)
    bass: Pitch | None = None
    if "/" in symbol:
        symbol, bass_text = symbol.split("/", 1)
        bass = _parse_note(bass_text)

    if not symbol:
        return None

    rest = symbol[1:]
    accidental = ""
    if match := _LEADING_ACCIDENTAL.match(rest):
        accidental = match.group(0)
        rest = rest[len(accidental) :]

    root = _parse_note(symbol[0] + accidental)
    if root is None:
        return None

    chord = create(root, ensure_type(rest))
    if bass is not None:
        for position, tone in enumerate(chord.tones):
            if _pitch.simple_equal(tone, bass):
                return invert(chord, position)
    return chord

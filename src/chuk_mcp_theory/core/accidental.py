"""
Accidental primitives.

An accidental has three interchangeable forms:
- nice name: 'sharp'
- sign: '♯'
- offset: 1 (semitones added to the natural letter)

All three map onto the same 5-position ordinal scale, so converting
between them is an index lookup.
"""

from __future__ import annotations

import re

Accidental = int | str

_NICE_NAMES: tuple[str, ...] = ("double flat", "flat", "natural", "sharp", "double sharp")
_OFFSETS: tuple[int, ...] = (-2, -1, 0, 1, 2)
_SIGNS: tuple[str, ...] = ("♭♭", "♭", "♮", "♯", "×")

# Natural, used when no accidental is given
_DEFAULT_INDEX = 2

DOUBLE_FLAT, FLAT, NATURAL, SHARP, DOUBLE_SHARP = _SIGNS

# Longest flat run first, then sharp + double sharp, lone sharp, lone double sharp
_SIGN_PATTERN = re.compile("♭{1,3}|♯×|♯|×")
_SHARP_SHORTHAND = re.compile("[#＃]")


def _is_offset(accidental: object) -> bool:
    return isinstance(accidental, int) and not isinstance(accidental, bool)


def is_accidental(value: object) -> bool:
    """
    Check whether a value is any valid accidental form.

    is_accidental('sharp') -> True
    is_accidental(3) -> False
    """
    if _is_offset(value):
        return value in _OFFSETS
    if isinstance(value, str):
        return value in _SIGNS or value in _NICE_NAMES
    return False


def _index(accidental: Accidental | None) -> int:
    if accidental is None:
        return _DEFAULT_INDEX
    if _is_offset(accidental):
        return _OFFSETS.index(accidental)  # type: ignore[arg-type]
    if accidental in _SIGNS:
        return _SIGNS.index(accidental)  # type: ignore[arg-type]
    return _NICE_NAMES.index(accidental)  # type: ignore[arg-type]


def offset(accidental: Accidental | None = None) -> int:
    """Semitone offset of an accidental (natural when omitted)."""
    return _OFFSETS[_index(accidental)]


def nice_name(accidental: Accidental | None = None) -> str:
    """Readable name of an accidental, e.g. 'double sharp'."""
    return _NICE_NAMES[_index(accidental)]


def sign(accidental: Accidental | None = None) -> str:
    """Symbol form of an accidental, e.g. '♯'."""
    return _SIGNS[_index(accidental)]


def from_string(text: str | None) -> str:
    """
    Extract an accidental sign from free text.

    ASCII shorthand is normalized first ('#' -> '♯', 'b' -> '♭', 'x' -> '×').
    Text without any accidental yields the natural sign.

    from_string('C#4') -> '♯'
    from_string('Bbb1') -> '♭♭'
    """
    normalized = _SHARP_SHORTHAND.sub("♯", text or "", count=1)
    normalized = normalized.replace("b", "♭").replace("x", "×", 1)
    match = _SIGN_PATTERN.search(normalized)
    return match.group(0) if match else NATURAL


def to_string(accidental: Accidental) -> str:
    """String form of an accidental (its sign)."""
    return sign(accidental)

"""
Interval quality - perfect, major, minor, augmented, diminished.

Quality distinguishes intervals with the same number but a different size.
It is stored as an offset from the diatonic size of the interval, and has
three interchangeable forms:
- prefix: 'M', 'P', 'AA', 'd', ...
- nice name: 'major', 'perfect', 'doubly augmented', ...
- offset: signed semitone correction

Numbers 1, 4, 5, 8 (mod 7) form the perfect family (9 qualities centred on
perfect). Numbers 2, 3, 6, 7 form the imperfect family (10 qualities, with
minor and major straddling the centre), so every lookup needs a family flag.
"""

from __future__ import annotations

import re

Quality = int | str

_PERFECT_PREFIXES: tuple[str, ...] = ("dddd", "ddd", "dd", "d", "P", "A", "AA", "AAA", "AAAA")
_IMPERFECT_PREFIXES: tuple[str, ...] = (
    "dddd",
    "ddd",
    "dd",
    "d",
    "m",
    "M",
    "A",
    "AA",
    "AAA",
    "AAAA",
)

_PERFECT_NICE_NAMES: tuple[str, ...] = (
    "quadruply diminished",
    "triply diminished",
    "doubly diminished",
    "diminished",
    "perfect",
    "augmented",
    "doubly augmented",
    "triply augmented",
    "quadruply augmented",
)
_IMPERFECT_NICE_NAMES: tuple[str, ...] = (
    "quadruply diminished",
    "triply diminished",
    "doubly diminished",
    "diminished",
    "minor",
    "major",
    "augmented",
    "doubly augmented",
    "triply augmented",
    "quadruply augmented",
)

_PERFECT_OFFSETS: tuple[int, ...] = (-4, -3, -2, -1, 0, 1, 2, 3, 4)
_IMPERFECT_OFFSETS: tuple[int, ...] = (-5, -4, -3, -2, -1, 0, 1, 2, 3, 4)

_NICE_NAME_PATTERN = re.compile(
    r"((doubly|triply|quadruply)(-|\s)?)?(augmented|diminished|perfect|major|minor)"
)
_PREFIX_PATTERN = re.compile(r"(P|M|m|A{1,4}|d{1,4})\d+")


def _is_offset(quality: object) -> bool:
    return isinstance(quality, int) and not isinstance(quality, bool)


def _is_prefix(quality: str) -> bool:
    # Longest prefix is 'AAAA'; every nice name is longer
    return len(quality) < 5


def _tables(perfect: bool) -> tuple[tuple[str, ...], tuple[str, ...], tuple[int, ...]]:
    if perfect:
        return _PERFECT_PREFIXES, _PERFECT_NICE_NAMES, _PERFECT_OFFSETS
    return _IMPERFECT_PREFIXES, _IMPERFECT_NICE_NAMES, _IMPERFECT_OFFSETS


def _index(quality: Quality, perfect: bool) -> int:
    prefixes, nice_names, offsets = _tables(perfect)
    if _is_offset(quality):
        return offsets.index(quality)  # type: ignore[arg-type]
    if _is_prefix(quality):  # type: ignore[arg-type]
        return prefixes.index(quality)  # type: ignore[arg-type]
    return nice_names.index(quality)  # type: ignore[arg-type]


def is_quality(quality: object, perfect: bool = False) -> bool:
    """
    Check whether a value is a valid quality for the given family.

    Offsets are bounded to -4..4 (perfect) or -5..4 (imperfect);
    strings must match a prefix or nice name of the family exactly.
    """
    if _is_offset(quality):
        return quality <= 4 and quality >= (-4 if perfect else -5)  # type: ignore[operator]
    if not isinstance(quality, str):
        return False
    prefixes, nice_names, _ = _tables(perfect)
    return quality in prefixes or quality in nice_names


def invert(quality: Quality, perfect: bool = False) -> Quality:
    """
    Mirror a quality within its family, keeping its form.

    'M' -> 'm', 'augmented' -> 'diminished', 0 (P) -> 0
    """
    prefixes, nice_names, offsets = _tables(perfect)
    reverse_index = len(offsets) - 1 - _index(quality, perfect)
    if _is_offset(quality):
        return offsets[reverse_index]
    if _is_prefix(quality):  # type: ignore[arg-type]
        return prefixes[reverse_index]
    return nice_names[reverse_index]


def offset(quality: Quality, perfect: bool = False) -> int:
    """Semitone offset of a quality from the diatonic size."""
    if _is_offset(quality):
        return quality  # type: ignore[return-value]
    _, _, offsets = _tables(perfect)
    return offsets[_index(quality, perfect)]


def prefix(quality: Quality, perfect: bool = False) -> str:
    """Short prefix of a quality, e.g. 'M'."""
    if isinstance(quality, str) and _is_prefix(quality):
        return quality
    prefixes, _, _ = _tables(perfect)
    return prefixes[_index(quality, perfect)]


def nice_name(quality: Quality, perfect: bool = False) -> str:
    """Long name of a quality, e.g. 'major'."""
    if isinstance(quality, str) and not _is_prefix(quality):
        return quality
    _, nice_names, _ = _tables(perfect)
    return nice_names[_index(quality, perfect)]


def from_string(text: str, perfect: bool = False) -> str | None:
    """
    Extract a quality from interval text.

    Nice names are tried first ('doubly-augmented second'), then prefixes
    directly followed by a number ('AA2'). The result must be valid for
    the family.
    """
    text = text.strip()

    match = _NICE_NAME_PATTERN.search(text)
    if match:
        name = match.group(0).replace("-", " ")
        if is_quality(name, perfect):
            return name

    match = _PREFIX_PATTERN.search(text)
    if match:
        short = match.group(1)
        if is_quality(short, perfect):
            return short

    return None

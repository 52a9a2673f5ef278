"""
Chord chart models - the result of mapping a chord onto a fingerboard.

A chart assigns exactly one chord tone and fret to every string.
String 0 is the first string of the tuning (the one listed first).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chuk_mcp_theory.constants import ChordRole
from chuk_mcp_theory.core.chord import Chord
from chuk_mcp_theory.core.pitch import Pitch


@dataclass(frozen=True)
class ChordChartItem:
    """One string of a voicing: which fret to press and what sounds."""

    string: int
    fret: int
    pitch: Pitch
    role: ChordRole = ChordRole.NONE


@dataclass(frozen=True)
class ChordChart:
    """
    One voicing of a chord.

    Items are ordered by string, one per string.
    """

    chord: Chord
    items: tuple[ChordChartItem, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> ChordChartItem:
        return self.items[index]

    def __iter__(self) -> Iterator[ChordChartItem]:
        return iter(self.items)

    @property
    def frets(self) -> tuple[int, ...]:
        """Fret per string, 0 = open."""
        return tuple(item.fret for item in self.items)

    @property
    def pitches(self) -> tuple[Pitch, ...]:
        """Chord tone assigned to each string."""
        return tuple(item.pitch for item in self.items)

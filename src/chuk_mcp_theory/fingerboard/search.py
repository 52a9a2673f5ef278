"""
Fingerboard voicing search.

Maps a chord onto a fretted instrument: every string gets one chord tone,
played at the lowest fret where that tone's pitch class occurs. A voicing
is kept when all fretted (non-open) strings fit inside the hand span.

The search permutes chord tones over the strings, last string first,
pruning any partial assignment that already breaks the span. Chords with
fewer tones than strings are padded with repeated tones first, and
voicings that sound the same pitches on every string are reported once.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import combinations_with_replacement

from chuk_mcp_theory.core.chord import Chord, role_of
from chuk_mcp_theory.core.pitch import Pitch, semitones_start_with_c0
from chuk_mcp_theory.fingerboard.models import ChordChart, ChordChartItem

logger = logging.getLogger(__name__)

# Frets scanned when locating a pitch class (one octave)
_OCTAVE_FRETS = 12


class Fingerboard:
    """
    A fretted instrument's neck.

    Args:
        tuning: Open-string pitches, first string first
        frets: Number of frets on the neck
        capo: Fret the capo sits on; raises every open string
        max_span: Largest allowed distance between fretted notes
    """

    def __init__(
        self,
        tuning: Sequence[Pitch],
        frets: int = 12,
        capo: int = 0,
        max_span: int = 3,
    ):
        self.tuning = tuple(tuning)
        self.frets = frets
        self.capo = capo
        self.max_span = max_span

    @property
    def string_count(self) -> int:
        return len(self.tuning)

    def tuning_semitones(self) -> list[int]:
        """Semitones above C0 of each open string (capo included)."""
        return [semitones_start_with_c0(pitch) + self.capo for pitch in self.tuning]

    def pitch_position_on_string(self, pitch: Pitch, string: int) -> int | None:
        """
        Lowest fret on a string that sounds the pitch's pitch class.

        Returns None when the pitch class is not within reach.
        """
        pitch_class = semitones_start_with_c0(pitch) % 12
        open_string = semitones_start_with_c0(self.tuning[string]) + self.capo
        for fret in range(min(self.frets, _OCTAVE_FRETS)):
            if (open_string + fret) % 12 == pitch_class:
                return fret
        return None

    def pitch_coordinate(self, pitch: Pitch) -> list[int | None]:
        """Lowest fret of a pitch class on every string."""
        return [self.pitch_position_on_string(pitch, string) for string in range(self.string_count)]

    def _playable(self, assignment: Sequence[Pitch]) -> bool:
        if len(assignment) < 2:
            return True

        frets = [self.pitch_position_on_string(pitch, string) for string, pitch in enumerate(assignment)]
        if None in frets:
            return False

        fretted = [fret for fret in frets if fret]
        if len(fretted) < 2:
            return True
        return max(fretted) - min(fretted) <= self.max_span

    def _permute(
        self,
        source: tuple[Pitch, ...],
        assignment: tuple[Pitch, ...],
        output: list[tuple[Pitch, ...]],
        seen: set[tuple[int, ...]],
    ) -> None:
        if not self._playable(assignment):
            return

        if len(assignment) == self.string_count:
            sounding = tuple(semitones_start_with_c0(pitch) for pitch in assignment)
            if sounding not in seen:
                seen.add(sounding)
                output.append(assignment)
            return

        for index in reversed(range(len(source))):
            remaining = source[:index] + source[index + 1 :]
            self._permute(remaining, (*assignment, source[index]), output, seen)

    def _sources(self, chord: Chord) -> list[tuple[Pitch, ...]]:
        """Tone multisets to permute: the chord itself, padded with repeats if short."""
        tones = tuple(chord)
        missing = self.string_count - len(tones)
        if missing <= 0:
            return [tones]
        return [tones + extra for extra in combinations_with_replacement(tones, missing)]

    def chord_charts(self, chord: Chord) -> list[ChordChart]:
        """
        All distinct voicings of a chord on this fingerboard.

        Order follows the search and carries no meaning.
        """
        if not self.string_count:
            return []

        sources = self._sources(chord)
        logger.debug(f"Searching {len(sources)} tone sets for {chord} on {self.string_count} strings")

        assignments: list[tuple[Pitch, ...]] = []
        seen: set[tuple[int, ...]] = set()
        for source in sources:
            self._permute(source, (), assignments, seen)

        charts = []
        for assignment in assignments:
            items = []
            for string, pitch in enumerate(assignment):
                # Every string of an accepted assignment has a fret
                fret = self.pitch_position_on_string(pitch, string)
                items.append(ChordChartItem(string, fret, pitch, role_of(chord, pitch)))  # type: ignore[arg-type]
            charts.append(ChordChart(chord=chord, items=tuple(items)))

        logger.debug(f"Found {len(charts)} voicings for {chord}")
        return charts

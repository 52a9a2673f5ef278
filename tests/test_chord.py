"""
Tests for chord construction, inversion and chord symbols.
"""

import pytest

from chuk_mcp_theory.constants import ChordRole
from chuk_mcp_theory.core import chord, pitch
from chuk_mcp_theory.core.chord import CHORD_TYPES, Chord
from chuk_mcp_theory.core.pitch import Pitch


def names(value: Chord) -> list[str]:
    """Display names of a chord's tones, bass first."""
    return [pitch.name(tone) for tone in value]


class TestChordTypes:
    """Tests for the chord type table."""

    def test_all_types_defined(self) -> None:
        """Eighteen chord types."""
        assert len(CHORD_TYPES) == 18
        assert CHORD_TYPES["maj"].chord_class == "Triad"
        assert CHORD_TYPES["dim7"].chord_class == "Seventh"
        assert CHORD_TYPES["m9"].chord_class == "Ninth"
        assert CHORD_TYPES["11"].chord_class == "Eleventh"

    def test_ensure_type(self) -> None:
        """Aliases and unknown types normalize."""
        assert chord.ensure_type("m7") == "m7"
        assert chord.ensure_type("") == "maj"
        assert chord.ensure_type("M") == "maj"
        assert chord.ensure_type("m") == "min"
        assert chord.ensure_type("maj7") == "M7"
        assert chord.ensure_type("xyz") == "maj"


class TestCreate:
    """Tests for chord construction."""

    def test_triads(self) -> None:
        """Triads on C."""
        assert names(chord.create(Pitch("C"), "maj")) == ["C", "E", "G"]
        assert names(chord.create(Pitch("C"), "min")) == ["C", "E♭", "G"]
        assert names(chord.create(Pitch("C"), "aug")) == ["C", "E", "G♯"]
        assert names(chord.create(Pitch("C"), "dim")) == ["C", "E♭", "G♭"]
        assert names(chord.create(Pitch("C"), "sus4")) == ["C", "F", "G"]

    def test_seventh_chords(self) -> None:
        """G7 spans into octave 1."""
        g7 = chord.create(Pitch("G"), "7")
        assert names(g7) == ["G", "B", "D1", "F1"]
        assert g7.chord_class == "Seventh"
        assert len(g7) == 4

    def test_eleventh_chord(self) -> None:
        """Eleventh chords have six tones."""
        g11 = chord.create(Pitch("G"), "11")
        assert names(g11) == ["G", "B", "D1", "F1", "A1", "C2"]
        assert pitch.equal(g11.eleventh, Pitch("C", 0, 2))

    def test_named_accessors(self) -> None:
        """Triads have no seventh."""
        c = chord.create(Pitch("C"), "maj")
        assert pitch.equal(c.third, Pitch("E"))
        assert c.seventh is None
        assert c.ninth is None

    def test_root_is_kept(self) -> None:
        """The root object passed in is the chord's root."""
        root = Pitch("D", 0, 3)
        assert chord.create(root, "min").root is root


class TestInversion:
    """Tests for chord inversion."""

    def test_rotation(self) -> None:
        """Each inversion rotates the tone order."""
        expected = ["C", "E", "G", "B♭", "D1", "F1"]
        for case in range(6):
            inverted = chord.create(Pitch("C"), "11", case)
            assert names(inverted) == expected[case:] + expected[:case]
            assert pitch.name(inverted.base) == expected[case]
            assert pitch.name(inverted.root) == "C"

    def test_is_inverted(self) -> None:
        """Only root position is not inverted."""
        assert not chord.is_inverted(chord.create(Pitch("C"), "11", 0))
        for case in range(1, 6):
            assert chord.is_inverted(chord.create(Pitch("C"), "11", case))

    def test_invert_returns_new_chord(self) -> None:
        """Inversion does not change the original chord."""
        c = chord.create(Pitch("C"), "maj")
        first = chord.invert(c, 1)
        assert c.inversion == 0
        assert first.inversion == 1
        assert first.third is c.third
        assert first[0] is c.third

    def test_invert_back_to_root(self) -> None:
        """Inverting to case 0 restores root position."""
        first = chord.create(Pitch("C"), "maj", 1)
        assert not chord.is_inverted(chord.invert(first, 0))

    def test_invert_out_of_range(self) -> None:
        """A triad has no third inversion."""
        with pytest.raises(ValueError, match="Invalid inversion"):
            chord.invert(chord.create(Pitch("C"), "maj"), 3)
        with pytest.raises(ValueError):
            chord.create(Pitch("C"), "7", 4)


class TestRoles:
    """Tests for role tagging."""

    def test_role_by_identity(self) -> None:
        """Roles follow the chord's own tone objects."""
        c = chord.create(Pitch("C"), "7")
        assert chord.role_of(c, c.root) == ChordRole.ROOT
        assert chord.role_of(c, c.fifth) == ChordRole.FIFTH
        assert chord.role_of(c, c.seventh) == ChordRole.SEVENTH

    def test_equal_pitch_has_no_role(self) -> None:
        """An equal but separate pitch is not a chord tone."""
        c = chord.create(Pitch("C"), "maj")
        assert chord.role_of(c, Pitch("E", "♮", 0)) == ChordRole.NONE


class TestSymbols:
    """Tests for chord symbol formatting and parsing."""

    def test_to_string(self) -> None:
        """Major is implied, minor is 'm', inversions use a slash."""
        assert chord.to_string(chord.create(Pitch("C"), "maj")) == "C"
        assert chord.to_string(chord.create(Pitch("A"), "min")) == "Am"
        assert chord.to_string(chord.create(Pitch("G"), "7")) == "G7"
        assert chord.to_string(chord.create(Pitch("F", "♯", 3), "m7")) == "F♯m7"
        assert chord.to_string(chord.create(Pitch("C"), "maj", 1)) == "C/E"
        assert str(chord.create(Pitch("G"), "7", 1)) == "G7/B"

    def test_from_string(self) -> None:
        """Root, accidental and type parse."""
        am = chord.from_string("Am")
        assert am.type == "min"
        assert pitch.name(am.root) == "A"

        bb = chord.from_string("Bbmaj7")
        assert bb.type == "M7"
        assert pitch.name(bb.root) == "B♭"

        assert chord.from_string("F#m7-5").type == "m7-5"
        assert chord.from_string("C").type == "maj"

    def test_from_string_bass(self) -> None:
        """A slash bass selects the inversion."""
        assert chord.from_string("C/E").inversion == 1
        assert chord.from_string("G7/F").inversion == 3
        assert chord.from_string("G/D").inversion == 2
        assert chord.from_string("C/F#").inversion == 0

    def test_from_string_c_flat(self) -> None:
        """C♭ roots are spelled in octave 1."""
        cb = chord.from_string("Cb")
        assert pitch.name(cb.root) == "C♭1"
        assert chord.to_string(cb) == "C♭"

    def test_from_string_rejects(self) -> None:
        """Unparseable roots yield None."""
        assert chord.from_string("Hm") is None
        assert chord.from_string("") is None
        assert chord.from_string(None) is None

    def test_symbol_round_trip(self) -> None:
        """Symbols survive formatting and parsing."""
        for symbol in ("C", "Am", "G7", "E♭M7", "Dm9", "C/G", "B♭sus4"):
            assert chord.to_string(chord.from_string(symbol)) == symbol

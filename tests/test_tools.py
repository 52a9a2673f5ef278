"""
Tests for MCP tools.

Tests the MCP tool implementations for intervals, pitches, chords
and instruments.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_theory.instruments import InstrumentLoader
from chuk_mcp_theory.tools import (
    register_chord_tools,
    register_instrument_tools,
    register_interval_tools,
    register_pitch_tools,
)


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def interval_tools():
    return register_interval_tools(MockMCPServer("test"))


@pytest.fixture
def pitch_tools():
    return register_pitch_tools(MockMCPServer("test"))


@pytest.fixture
def chord_tools():
    return register_chord_tools(MockMCPServer("test"))


@pytest.fixture
def instrument_tools(instruments_library_path: Path):
    loader = InstrumentLoader(library_path=instruments_library_path)
    return register_instrument_tools(MockMCPServer("test"), loader)


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_on_server(self, instruments_library_path: Path) -> None:
        """Every tool is registered with the server under its own name."""
        mcp = MockMCPServer("test")
        register_interval_tools(mcp)
        register_pitch_tools(mcp)
        register_chord_tools(mcp)
        register_instrument_tools(mcp, InstrumentLoader(library_path=instruments_library_path))

        assert set(mcp.tools) == {
            "theory_describe_interval",
            "theory_invert_interval",
            "theory_combine_intervals",
            "theory_describe_pitch",
            "theory_transpose",
            "theory_enharmonics",
            "theory_build_chord",
            "theory_list_instruments",
            "theory_chord_charts",
        }


class TestIntervalTools:
    """Tests for interval tools."""

    @pytest.mark.asyncio
    async def test_describe_interval(self, interval_tools) -> None:
        """Describe a major third."""
        data = json.loads(await interval_tools["theory_describe_interval"](text="M3"))
        assert data["status"] == "success"
        assert data["interval"] == "M3"
        assert data["name"] == "major third"
        assert data["semitones"] == 4
        assert data["cents"] == 400

    @pytest.mark.asyncio
    async def test_describe_compound_interval(self, interval_tools) -> None:
        """Compound intervals report their simple form."""
        data = json.loads(await interval_tools["theory_describe_interval"](text="major ninth"))
        assert data["status"] == "success"
        assert data["compound"] is True
        assert data["simple"] == "M2"

    @pytest.mark.asyncio
    async def test_describe_invalid_interval(self, interval_tools) -> None:
        """Unparseable text is an error."""
        data = json.loads(await interval_tools["theory_describe_interval"](text="Q9"))
        assert data["status"] == "error"
        assert "Q9" in data["message"]

    @pytest.mark.asyncio
    async def test_invert_interval(self, interval_tools) -> None:
        """M3 inverts to m6."""
        data = json.loads(await interval_tools["theory_invert_interval"](text="M3"))
        assert data["status"] == "success"
        assert data["inverted"]["interval"] == "m6"

    @pytest.mark.asyncio
    async def test_combine_intervals(self, interval_tools) -> None:
        """M3 + m3 = P5."""
        data = json.loads(await interval_tools["theory_combine_intervals"](intervals=["M3", "m3"]))
        assert data["status"] == "success"
        assert data["combined"]["interval"] == "P5"
        assert data["combined"]["semitones"] == 7

    @pytest.mark.asyncio
    async def test_combine_nothing(self, interval_tools) -> None:
        """An empty list is an error."""
        data = json.loads(await interval_tools["theory_combine_intervals"](intervals=[]))
        assert data["status"] == "error"


class TestPitchTools:
    """Tests for pitch tools."""

    @pytest.mark.asyncio
    async def test_describe_pitch(self, pitch_tools) -> None:
        """A4 is 440 Hz, MIDI 69, piano key 49."""
        data = json.loads(await pitch_tools["theory_describe_pitch"](text="A4"))
        assert data["status"] == "success"
        assert data["frequency"] == 440.0
        assert data["midi"] == 69
        assert data["piano_key"] == 49
        assert data["accidental"] == "natural"

    @pytest.mark.asyncio
    async def test_describe_invalid_pitch(self, pitch_tools) -> None:
        """Unparseable pitches are an error."""
        data = json.loads(await pitch_tools["theory_describe_pitch"](text="H2"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_transpose_up(self, pitch_tools) -> None:
        """D4 up a major third is F♯4."""
        data = json.loads(await pitch_tools["theory_transpose"](pitch="D4", interval="M3", direction="up"))
        assert data["status"] == "success"
        assert data["pitch"]["name"] == "F♯4"

    @pytest.mark.asyncio
    async def test_transpose_down(self, pitch_tools) -> None:
        """C4 down a minor second is B3."""
        data = json.loads(await pitch_tools["theory_transpose"](pitch="C4", interval="m2", direction="down"))
        assert data["status"] == "success"
        assert data["pitch"]["name"] == "B3"

    @pytest.mark.asyncio
    async def test_transpose_below_c0(self, pitch_tools) -> None:
        """Results below C0 are an error."""
        data = json.loads(await pitch_tools["theory_transpose"](pitch="C", interval="M3", direction="down"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_transpose_invalid_direction(self, pitch_tools) -> None:
        """Direction must be up or down."""
        data = json.loads(await pitch_tools["theory_transpose"](pitch="C4", interval="M3", direction="sideways"))
        assert data["status"] == "error"
        assert "sideways" in data["message"]

    @pytest.mark.asyncio
    async def test_enharmonics(self, pitch_tools) -> None:
        """C♯4 has three spellings."""
        data = json.loads(await pitch_tools["theory_enharmonics"](pitch="C#4"))
        assert data["status"] == "success"
        assert data["enharmonics"] == ["C♯4", "D♭4", "B×3"]

    @pytest.mark.asyncio
    async def test_enharmonics_skip_spellings_below_c0(self, pitch_tools) -> None:
        """B♯-1 is not offered as a spelling of C0."""
        data = json.loads(await pitch_tools["theory_enharmonics"](pitch="C0"))
        assert data["status"] == "success"
        assert data["enharmonics"] == ["C", "D♭♭"]


class TestChordTools:
    """Tests for chord tools."""

    @pytest.mark.asyncio
    async def test_build_chord(self, chord_tools) -> None:
        """G7 tones and roles."""
        data = json.loads(await chord_tools["theory_build_chord"](symbol="G7"))
        assert data["status"] == "success"
        chord = data["chord"]
        assert chord["symbol"] == "G7"
        assert chord["class"] == "Seventh"
        assert [t["pitch"] for t in chord["tones"]] == ["G", "B", "D1", "F1"]
        assert [t["role"] for t in chord["tones"]] == ["root", "third", "fifth", "seventh"]

    @pytest.mark.asyncio
    async def test_build_inverted_chord(self, chord_tools) -> None:
        """Slash chords list the bass first."""
        data = json.loads(await chord_tools["theory_build_chord"](symbol="C/E"))
        chord = data["chord"]
        assert chord["inverted"] is True
        assert chord["bass"] == "E"
        assert chord["tones"][0] == {"pitch": "E", "role": "third"}

    @pytest.mark.asyncio
    async def test_build_invalid_chord(self, chord_tools) -> None:
        """Unparseable symbols are an error."""
        data = json.loads(await chord_tools["theory_build_chord"](symbol="Hm"))
        assert data["status"] == "error"


class TestInstrumentTools:
    """Tests for instrument tools."""

    @pytest.mark.asyncio
    async def test_list_instruments(self, instrument_tools) -> None:
        """The library instruments are listed."""
        data = json.loads(await instrument_tools["theory_list_instruments"]())
        assert data["status"] == "success"
        assert data["count"] == 4
        assert "ukulele" in [i["name"] for i in data["instruments"]]

    @pytest.mark.asyncio
    async def test_chord_charts(self, instrument_tools) -> None:
        """C on ukulele includes the open shape."""
        data = json.loads(await instrument_tools["theory_chord_charts"](symbol="C", instrument="ukulele"))
        assert data["status"] == "success"
        assert data["count"] == len(data["charts"])
        assert [3, 0, 0, 0] in [chart["frets"] for chart in data["charts"]]

    @pytest.mark.asyncio
    async def test_chord_charts_unknown_instrument(self, instrument_tools) -> None:
        """Unknown instruments are an error."""
        data = json.loads(await instrument_tools["theory_chord_charts"](symbol="C", instrument="banjo"))
        assert data["status"] == "error"
        assert "banjo" in data["message"]

    @pytest.mark.asyncio
    async def test_chord_charts_invalid_chord(self, instrument_tools) -> None:
        """Unparseable chords are an error."""
        data = json.loads(await instrument_tools["theory_chord_charts"](symbol="Xyz", instrument="ukulele"))
        assert data["status"] == "error"

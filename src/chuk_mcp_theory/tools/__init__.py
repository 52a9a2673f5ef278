"""
MCP tool implementations.

Tools are organized by domain:
- intervals - Interval description and arithmetic
- pitches - Pitch lookup, transposition and enharmonics
- chords - Chord symbols
- instruments - Instruments and chord charts
"""

from chuk_mcp_theory.tools.chords import register_chord_tools
from chuk_mcp_theory.tools.instruments import register_instrument_tools
from chuk_mcp_theory.tools.intervals import register_interval_tools
from chuk_mcp_theory.tools.pitches import register_pitch_tools

__all__ = [
    "register_chord_tools",
    "register_instrument_tools",
    "register_interval_tools",
    "register_pitch_tools",
]

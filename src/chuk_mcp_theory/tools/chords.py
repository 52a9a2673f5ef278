"""
Chord tools - MCP tools for building chords from symbols.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core import chord as _chord
from chuk_mcp_theory.core import pitch as _pitch
from chuk_mcp_theory.core.chord import Chord

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def describe_chord(chord: Chord) -> dict[str, Any]:
    """JSON-ready summary of a chord."""
    return {
        "symbol": _chord.to_string(chord),
        "type": chord.type,
        "class": chord.chord_class,
        "root": _pitch.name(chord.root),
        "bass": _pitch.name(chord.base),
        "inversion": chord.inversion,
        "inverted": _chord.is_inverted(chord),
        "tones": [
            {"pitch": _pitch.name(tone), "role": _chord.role_of(chord, tone).value}
            for tone in chord
        ],
    }


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_chord(symbol: str) -> str:
        """
        Build a chord from its symbol.

        Supported types: maj, min, aug, dim, sus2, sus4, 7, m7, M7, mM7,
        aug7, dim7, m7-5, 6, m6, 9, m9, 11. A slash bass ('C/E') picks
        the inversion.

        Args:
            symbol: Chord symbol, e.g. 'C', 'Am', 'F#m7', 'Bbmaj7', 'G7/B'

        Returns:
            JSON string with the chord tones in bass-up order

        Example:
            theory_build_chord(symbol="Dm7")
        """
        try:
            chord = _chord.from_string(symbol)
            if chord is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNPARSEABLE_CHORD.format(text=symbol),
                    }
                )

            return json.dumps({"status": "success", "chord": describe_chord(chord)})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_chord"] = theory_build_chord

    return tools

"""
Pitch tools - MCP tools for pitch lookup and transposition.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages, TransposeDirection
from chuk_mcp_theory.core import accidental as _accidental
from chuk_mcp_theory.core import interval as _interval
from chuk_mcp_theory.core import pitch as _pitch
from chuk_mcp_theory.core.pitch import Pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def describe_pitch(pitch: Pitch) -> dict[str, Any]:
    """JSON-ready summary of a pitch."""
    return {
        "name": _pitch.name(pitch),
        "step_name": pitch.step_name,
        "accidental": _accidental.nice_name(pitch.accidental),
        "octave": pitch.octave,
        "semitones_from_c0": _pitch.semitones_start_with_c0(pitch),
        "frequency": _pitch.frequency(pitch, 2),
        "midi": _pitch.to_midi_number(pitch),
        "piano_key": _pitch.to_piano_key_number(pitch),
    }


def _unparseable_pitch(text: str) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.UNPARSEABLE_PITCH.format(text=text)}
    )


def register_pitch_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_pitch(text: str) -> str:
        """
        Describe a pitch.

        Args:
            text: Pitch notation, e.g. 'C4', 'F#3', 'Bb2', 'E♭5'.
                Octave defaults to 0 when omitted.

        Returns:
            JSON string with frequency, MIDI number and piano key

        Example:
            theory_describe_pitch(text="A4")
        """
        try:
            pitch = _pitch.from_string(text)
            if pitch is None:
                return _unparseable_pitch(text)

            return json.dumps({"status": "success", **describe_pitch(pitch)})
        except Exception as e:
            logger.exception("Failed to describe pitch")
            return json.dumps({"status": "error", "message": str(e)})

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose(pitch: str, interval: str, direction: str = "up") -> str:
        """
        Transpose a pitch by an interval, keeping correct spelling.

        Args:
            pitch: Pitch notation, e.g. 'C4'
            interval: Interval notation, e.g. 'M3', 'perfect fifth'
            direction: 'up' or 'down'

        Returns:
            JSON string with the transposed pitch

        Example:
            theory_transpose(pitch="D4", interval="M3", direction="up")
        """
        try:
            start = _pitch.from_string(pitch)
            if start is None:
                return _unparseable_pitch(pitch)

            step = _interval.make_interval(interval)
            if step is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNPARSEABLE_INTERVAL.format(text=interval),
                    }
                )

            try:
                transpose_direction = TransposeDirection(direction)
            except ValueError:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Invalid direction: {direction}. Use 'up' or 'down'",
                    }
                )

            if transpose_direction == TransposeDirection.UP:
                result = _pitch.higher_pitch(start, step)
            else:
                result = _pitch.lower_pitch(start, step)

            if not _pitch.is_pitch(result):
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Transposing {pitch} {direction} by {interval} falls below C0",
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "from": _pitch.name(start),
                    "interval": _interval.to_string(step),
                    "direction": transpose_direction.value,
                    "pitch": describe_pitch(result),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose pitch")
            return json.dumps({"status": "error", "message": str(e)})

    @mcp.tool  # type: ignore[arg-type]
    async def theory_enharmonics(pitch: str) -> str:
        """
        List the spellings of a pitch (C#4 -> C♯4, D♭4, B×3).

        Args:
            pitch: Pitch notation

        Returns:
            JSON string with every spelling of the same sounding pitch

        Example:
            theory_enharmonics(pitch="G#3")
        """
        try:
            parsed = _pitch.from_string(pitch)
            if parsed is None:
                return _unparseable_pitch(pitch)

            # Spellings borrowed from below C0 (B♯-1 for C0) are not valid pitches
            spellings = [
                spelling
                for spelling in _pitch.enharmonic_notes(_pitch.semitones_start_with_c0(parsed))
                if _pitch.is_pitch(spelling)
            ]
            return json.dumps(
                {
                    "status": "success",
                    "pitch": _pitch.name(parsed),
                    "enharmonics": [_pitch.name(spelling) for spelling in spellings],
                }
            )
        except Exception as e:
            logger.exception("Failed to list enharmonics")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_pitch"] = theory_describe_pitch
    tools["theory_transpose"] = theory_transpose
    tools["theory_enharmonics"] = theory_enharmonics

    return tools

"""
Instrument tools - MCP tools for fretted instruments and chord charts.

Tools for listing instruments and finding every playable voicing of a
chord on one of them.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core import chord as _chord
from chuk_mcp_theory.core import pitch as _pitch
from chuk_mcp_theory.instruments import InstrumentLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_instrument_tools(
    mcp: ChukMCPServer,
    instrument_loader: InstrumentLoader,
) -> dict[str, Any]:
    """
    Register instrument tools with the MCP server.

    Args:
        mcp: The MCP server instance
        instrument_loader: The instrument loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_instruments() -> str:
        """
        List available instruments.

        Returns all instruments from the library and project with
        their tuning.

        Returns:
            JSON string with list of instrument summaries

        Example:
            theory_list_instruments()
        """
        try:
            instruments = instrument_loader.list_instruments()

            return json.dumps(
                {
                    "status": "success",
                    "instruments": [
                        {
                            "name": i.name,
                            "description": i.description,
                            "tuning": i.tuning,
                            "frets": i.frets,
                        }
                        for i in instruments
                    ],
                    "count": len(instruments),
                }
            )
        except Exception as e:
            logger.exception("Failed to list instruments")
            return json.dumps({"status": "error", "message": str(e)})

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_charts(symbol: str, instrument: str = "ukulele") -> str:
        """
        Find every playable voicing of a chord on an instrument.

        Each voicing assigns one chord tone to every string, at the lowest
        fret where it occurs. Fretted notes stay within the instrument's
        hand span.

        Args:
            symbol: Chord symbol, e.g. 'C', 'Am7', 'G/B'
            instrument: Instrument name (see theory_list_instruments)

        Returns:
            JSON string with the voicings, strings listed first string first

        Example:
            theory_chord_charts(symbol="F", instrument="ukulele")
        """
        try:
            definition = instrument_loader.get_instrument(instrument)
            if definition is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=instrument),
                    }
                )

            chord = _chord.from_string(symbol)
            if chord is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNPARSEABLE_CHORD.format(text=symbol),
                    }
                )

            charts = definition.fingerboard().chord_charts(chord)

            return json.dumps(
                {
                    "status": "success",
                    "chord": _chord.to_string(chord),
                    "instrument": definition.name,
                    "tuning": definition.tuning,
                    "charts": [
                        {
                            "frets": list(chart.frets),
                            "strings": [
                                {
                                    "string": item.string,
                                    "fret": item.fret,
                                    "pitch": _pitch.name(item.pitch),
                                    "role": item.role.value,
                                }
                                for item in chart
                            ],
                        }
                        for chart in charts
                    ],
                    "count": len(charts),
                }
            )
        except Exception as e:
            logger.exception("Failed to find chord charts")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_instruments"] = theory_list_instruments
    tools["theory_chord_charts"] = theory_chord_charts

    return tools

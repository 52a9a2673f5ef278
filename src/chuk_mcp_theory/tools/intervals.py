"""
Interval tools - MCP tools for interval analysis and arithmetic.

Tools for describing, inverting and stacking intervals written in
short ('M3', 'P5') or long ('minor sixth') notation.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core import interval as _interval
from chuk_mcp_theory.core import number as _number
from chuk_mcp_theory.core.interval import Interval

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def describe_interval(interval: Interval) -> dict[str, Any]:
    """JSON-ready summary of an interval."""
    return {
        "interval": _interval.to_string(interval),
        "name": _interval.to_nice_string(interval),
        "number": interval.number,
        "semitones": _interval.semitones(interval),
        "cents": _interval.cents(interval),
        "frequency_ratio": round(_interval.frequency_ratio(interval), 6),
        "compound": _number.is_compound(interval.number),
        "simple": _interval.to_string(_interval.simplify(interval)),
    }


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_interval(text: str) -> str:
        """
        Describe an interval.

        Args:
            text: Interval notation, short ('M3', 'P5', 'AA4') or long
                ('major third', 'perfect 5th', 'minor twenty-first')

        Returns:
            JSON string with size, name and simple form

        Example:
            theory_describe_interval(text="m6")
        """
        try:
            interval = _interval.make_interval(text)
            if interval is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNPARSEABLE_INTERVAL.format(text=text),
                    }
                )

            return json.dumps({"status": "success", **describe_interval(interval)})
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    @mcp.tool  # type: ignore[arg-type]
    async def theory_invert_interval(text: str) -> str:
        """
        Invert an interval (M3 -> m6, P4 -> P5).

        Args:
            text: Interval notation

        Returns:
            JSON string with the original and inverted interval

        Example:
            theory_invert_interval(text="M3")
        """
        try:
            interval = _interval.make_interval(text)
            if interval is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNPARSEABLE_INTERVAL.format(text=text),
                    }
                )

            inverted = _interval.invert(interval)
            return json.dumps(
                {
                    "status": "success",
                    "original": describe_interval(interval),
                    "inverted": describe_interval(inverted),
                }
            )
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    @mcp.tool  # type: ignore[arg-type]
    async def theory_combine_intervals(intervals: list[str]) -> str:
        """
        Stack intervals end to end.

        Each interval starts where the previous one ends, so M3 + m3
        is a perfect fifth.

        Args:
            intervals: Interval notations to stack, in order

        Returns:
            JSON string with the combined interval

        Example:
            theory_combine_intervals(intervals=["M3", "m3", "M3"])
        """
        try:
            if not intervals:
                return json.dumps({"status": "error", "message": "No intervals given"})

            parsed = []
            for text in intervals:
                interval = _interval.make_interval(text)
                if interval is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.UNPARSEABLE_INTERVAL.format(text=text),
                        }
                    )
                parsed.append(interval)

            combined = _interval.merge(*parsed)
            if not _interval.is_interval(combined):
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Intervals do not combine into a named interval: {intervals}",
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "intervals": list(intervals),
                    "combined": describe_interval(combined),
                }
            )
        except Exception as e:
            logger.exception("Failed to combine intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_interval"] = theory_describe_interval
    tools["theory_invert_interval"] = theory_invert_interval
    tools["theory_combine_intervals"] = theory_combine_intervals

    return tools

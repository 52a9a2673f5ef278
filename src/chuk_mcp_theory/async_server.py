#!/usr/bin/env python3
"""
Async Music Theory MCP Server using chuk-mcp-server

This server provides MCP tools for music theory arithmetic: intervals,
spelled pitches, chords, and chord voicings on fretted instruments.

The server provides tools for:
- Describing, inverting and stacking intervals
- Pitch lookup (frequency, MIDI, piano key), transposition and enharmonics
- Building chords from symbols
- Finding chord charts on ukulele, guitar and other fretted instruments
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.instruments import InstrumentLoader
from chuk_mcp_theory.tools import (
    register_chord_tools,
    register_instrument_tools,
    register_interval_tools,
    register_pitch_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
INSTRUMENTS_DIR = Path(os.environ.get("CHUK_THEORY_INSTRUMENTS_DIR", BASE_PATH / "instruments"))
INSTRUMENTS_LIBRARY_PATH = Path(__file__).parent / "instruments" / "library"

instrument_loader = InstrumentLoader(
    library_path=INSTRUMENTS_LIBRARY_PATH,
    project_path=INSTRUMENTS_DIR,
)

# Register all tools
interval_tools = register_interval_tools(mcp)
pitch_tools = register_pitch_tools(mcp)
chord_tools = register_chord_tools(mcp)
instrument_tools = register_instrument_tools(mcp, instrument_loader)

# Export tool functions for direct access
theory_describe_interval = interval_tools["theory_describe_interval"]
theory_invert_interval = interval_tools["theory_invert_interval"]
theory_combine_intervals = interval_tools["theory_combine_intervals"]

theory_describe_pitch = pitch_tools["theory_describe_pitch"]
theory_transpose = pitch_tools["theory_transpose"]
theory_enharmonics = pitch_tools["theory_enharmonics"]

theory_build_chord = chord_tools["theory_build_chord"]

theory_list_instruments = instrument_tools["theory_list_instruments"]
theory_chord_charts = instrument_tools["theory_chord_charts"]

logger.info("CHUK Music Theory MCP Server initialized")
logger.info(f"  Instrument library: {INSTRUMENTS_LIBRARY_PATH}")
logger.info(f"  Project instruments dir: {INSTRUMENTS_DIR}")

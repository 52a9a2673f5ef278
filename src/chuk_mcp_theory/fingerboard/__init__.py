"""
Fingerboard - chord voicings on fretted string instruments.
"""

from chuk_mcp_theory.fingerboard.models import ChordChart, ChordChartItem
from chuk_mcp_theory.fingerboard.search import Fingerboard

__all__ = [
    "ChordChart",
    "ChordChartItem",
    "Fingerboard",
]

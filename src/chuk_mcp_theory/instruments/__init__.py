"""
Instruments - fretted instrument definitions loaded from YAML.
"""

from chuk_mcp_theory.instruments.loader import InstrumentLoader
from chuk_mcp_theory.instruments.models import Instrument, InstrumentMetadata

__all__ = [
    "Instrument",
    "InstrumentLoader",
    "InstrumentMetadata",
]

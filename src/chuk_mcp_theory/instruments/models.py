"""
Instrument models - fretted instrument definitions.

Instruments are configuration: a tuning (open strings, first string
first), the neck length, a capo position and the hand span the voicing
search allows. They are loaded from YAML and turned into a Fingerboard.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core import pitch as _pitch
from chuk_mcp_theory.core.pitch import Pitch
from chuk_mcp_theory.fingerboard import Fingerboard


class Instrument(BaseModel):
    """A fretted string instrument."""

    name: str = Field(..., description="Instrument identifier")
    description: str = Field("", description="Human-readable description")
    tuning: list[str] = Field(
        ...,
        min_length=1,
        description="Open-string pitches, first string first (e.g. A4, E4, C4, G4)",
    )
    frets: int = Field(12, gt=0, description="Number of frets")
    capo: int = Field(0, ge=0, description="Capo fret, 0 = no capo")
    max_span: int = Field(3, ge=0, description="Largest fret distance between fretted notes")

    model_config = {"frozen": True}

    @field_validator("tuning")
    @classmethod
    def validate_tuning(cls, tuning: list[str]) -> list[str]:
        for text in tuning:
            if _pitch.from_string(text) is None:
                raise ValueError(ErrorMessages.INVALID_TUNING.format(pitch=text))
        return tuning

    @property
    def string_count(self) -> int:
        return len(self.tuning)

    def tuning_pitches(self) -> list[Pitch]:
        """Parsed open-string pitches."""
        return [_pitch.from_string(text) for text in self.tuning]  # type: ignore[misc]

    def fingerboard(self) -> Fingerboard:
        """Build the voicing search for this instrument."""
        return Fingerboard(
            self.tuning_pitches(),
            frets=self.frets,
            capo=self.capo,
            max_span=self.max_span,
        )


class InstrumentMetadata(BaseModel):
    """Lightweight instrument summary for listing."""

    name: str
    description: str
    tuning: list[str]
    frets: int

    model_config = {"frozen": True}

    @classmethod
    def from_instrument(cls, instrument: Instrument) -> InstrumentMetadata:
        """Create metadata from a full instrument."""
        return cls(
            name=instrument.name,
            description=instrument.description,
            tuning=list(instrument.tuning),
            frets=instrument.frets,
        )

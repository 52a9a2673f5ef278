"""
Instrument loader - discovers and loads instrument definitions.

Instruments can come from:
1. Built-in library (shipped with package)
2. Project instruments (user's project/instruments directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_theory.instruments.models import Instrument, InstrumentMetadata

logger = logging.getLogger(__name__)


class InstrumentLoader:
    """
    Discovers and loads instrument definitions.

    Instruments are loaded from YAML files in the library and project
    directories. Project instruments override library instruments with
    the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the instrument loader.

        Args:
            library_path: Path to built-in instrument library
            project_path: Path to project instruments directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Instrument] = {}

    def _directories(self) -> list[Path]:
        """Search directories, lowest precedence first."""
        directories = [self.library_path]
        if self.project_path:
            directories.append(self.project_path)
        return [directory for directory in directories if directory.exists()]

    def list_instruments(self) -> list[InstrumentMetadata]:
        """
        List all available instruments.

        Returns instruments from both library and project, with project
        instruments taking precedence.
        """
        instruments: dict[str, InstrumentMetadata] = {}
        for directory in self._directories():
            for path in sorted(directory.glob("*.yaml")):
                instrument = self._load_instrument_file(path)
                if instrument:
                    instruments[instrument.name] = InstrumentMetadata.from_instrument(instrument)
        return list(instruments.values())

    def get_instrument(self, name: str) -> Instrument | None:
        """
        Get an instrument by name.

        Project instruments take precedence over library instruments.

        Args:
            name: Instrument name (file stem)

        Returns:
            Instrument if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in reversed(self._directories()):
            path = directory / f"{name}.yaml"
            if path.exists() and (instrument := self._load_instrument_file(path)):
                self._cache[name] = instrument
                return instrument

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library instrument to the project for customization.

        Args:
            name: Instrument name

        Returns:
            Path to copied file, or None if not found

        Raises:
            ValueError: if no project path is configured or the file exists
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Instrument already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def clear_cache(self) -> None:
        """Forget loaded instruments so edited files are re-read."""
        self._cache.clear()

    def _load_instrument_file(self, path: Path) -> Instrument | None:
        """Load an instrument from a YAML file, skipping unusable files."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return Instrument.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError):
            logger.warning(f"Skipping invalid instrument file: {path}", exc_info=True)
            return None

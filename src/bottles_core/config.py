"""
Library configuration - where bottles and runners live on disk.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DATA_DIR_ENV = "BOTTLES_DATA_DIR"


def default_data_dir() -> Path:
    """BOTTLES_DATA_DIR, else $XDG_DATA_HOME/bottles, else ~/.local/share/bottles."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home).expanduser() / "bottles"

    return Path.home() / ".local" / "share" / "bottles"


class CoreConfig(BaseModel):
    """Data directory layout."""
    data_dir: Path = Field(default_factory=default_data_dir, description="Root of all bottles-core data")

    @classmethod
    def from_env(cls) -> CoreConfig:
        return cls(data_dir=default_data_dir())

    @property
    def bottles_dir(self) -> Path:
        """Holds bottles.json."""
        return self.data_dir / "bottles"

    @property
    def runners_dir(self) -> Path:
        """One subdirectory per installed runner."""
        return self.data_dir / "runners"

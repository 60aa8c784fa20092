"""
Bottle models.

A bottle is a named Wine prefix on disk plus the configuration used to
run things inside it. These models are what Persistence writes to the
catalog document.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, PrivateAttr


class BottleType(str, Enum):
    """What a bottle is meant for."""
    GAMING = "Gaming"
    SOFTWARE = "Software"
    CUSTOM = "Custom"


class BottleConfig(BaseModel):
    """Per-bottle overrides."""
    runner: Optional[str] = Field(default=None, description="Identifier of the runner to use")
    dxvk_version: Optional[str] = Field(default=None, description="DXVK version installed in the prefix")
    vkd3d_version: Optional[str] = Field(default=None, description="VKD3D-Proton version installed in the prefix")
    environment: dict[str, str] = Field(default_factory=dict, description="Extra environment for launched processes")


class Bottle(BaseModel):
    """
    A Windows-compatibility prefix and its configuration.

    Usage:
        bottle = Bottle(name="Steam", path="/home/user/Bottles/steam", kind=BottleType.GAMING)
        bottle.config.runner = "proton-ge-8"
        bottle.config.environment["DXVK_HUD"] = "1"

    The ``active`` flag is runtime state only. It is never written to the
    catalog and always starts out False on a loaded bottle.
    """
    name: str
    path: Path
    kind: BottleType = Field(default=BottleType.CUSTOM)
    config: BottleConfig = Field(default_factory=BottleConfig)

    _active: bool = PrivateAttr(default=False)

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = value

    def launch_environment(self) -> dict[str, str]:
        """Environment additions to pass to Runner.launch()."""
        return dict(self.config.environment)

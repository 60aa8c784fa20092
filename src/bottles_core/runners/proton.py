"""
Proton runner - Valve's gaming fork of Wine.

A Proton build ships a ``proton`` launcher script at the top and the
actual Wine tree under ``files/``. Outside of Steam it needs the
STEAM_COMPAT_* variables set by hand.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Mapping, Sequence

from bottles_core.runner import Runner, RunnerInfo, build_environment, run_to_completion, spawn
from bottles_core.runners.wine import Wine


def steam_compat_environment(prefix: Path | str) -> dict[str, str]:
    """Variables the proton script expects when not started by Steam."""
    return {
        "WINEPREFIX": str(prefix),
        "STEAM_COMPAT_DATA_PATH": str(prefix),
        "STEAM_COMPAT_CLIENT_INSTALL_PATH": "",
    }


class Proton(Runner):
    """
    A Proton installation: ``<directory>/proton`` plus ``<directory>/files/bin/wine``.

    The nested Wine takes on Proton's name, so anything displaying
    ``proton.wine.info.name`` shows e.g. "GE-Proton9-1" rather than "files".
    """

    EXECUTABLE = Path("proton")

    def __init__(self, path: Path | str):
        path = Path(path)
        info = RunnerInfo.discover(path, self.EXECUTABLE)
        wine = Wine(path / "files")
        wine.info.name = info.name

        super().__init__(info)
        self._wine = wine

    @property
    def wine(self) -> Wine:
        return self._wine

    def initialize(self, prefix: Path | str) -> None:
        """Run ``proton run wineboot`` against the prefix."""
        run_to_completion(
            [self.info.executable_path, "run", "wineboot"],
            build_environment(steam_compat_environment(prefix)),
        )

    def launch(
        self,
        executable: Path | str,
        args: Sequence[str],
        prefix: Path | str,
        env: Mapping[str, str] | None = None,
    ) -> subprocess.Popen:
        return spawn(
            [self.info.executable_path, "run", executable, *args],
            build_environment(steam_compat_environment(prefix), env),
        )

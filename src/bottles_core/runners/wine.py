"""
Wine runner - the base Windows API translator every other runner drives.
"""

from __future__ import annotations

import subprocess
from enum import Enum
from pathlib import Path
from typing import Mapping, Sequence

from bottles_core.runner import Runner, RunnerInfo, build_environment, run_to_completion, spawn


class PrefixArch(str, Enum):
    """Prefix architecture, as understood by WINEARCH."""
    WIN32 = "win32"
    WIN64 = "win64"      # Recommended


class WindowsVersion(str, Enum):
    """Windows version a prefix reports to applications (winecfg -v)."""
    WIN7 = "win7"
    WIN8 = "win8"
    WIN10 = "win10"


class Wine(Runner):
    """
    A Wine installation laid out as ``<directory>/bin/wine``.

    Usage:
        wine = Wine("/opt/wine-9.0")
        wine.initialize("/home/user/Bottles/office", arch=PrefixArch.WIN64)
        wine.set_windows_version("/home/user/Bottles/office", WindowsVersion.WIN10)
    """

    EXECUTABLE = Path("bin/wine")

    def __init__(self, path: Path | str):
        super().__init__(RunnerInfo.discover(path, self.EXECUTABLE))

    @property
    def wine(self) -> Wine:
        return self

    def initialize(self, prefix: Path | str, arch: PrefixArch | None = None) -> None:
        """Run ``wineboot --init`` in the prefix."""
        required = {"WINEPREFIX": str(prefix)}
        if arch is not None:
            required["WINEARCH"] = PrefixArch(arch).value

        run_to_completion(
            [self.info.executable_path, "wineboot", "--init"],
            build_environment(required),
        )

    def set_windows_version(self, prefix: Path | str, version: WindowsVersion) -> None:
        """Change the Windows version the prefix reports."""
        run_to_completion(
            [self.info.executable_path, "winecfg", "-v", WindowsVersion(version).value],
            build_environment({"WINEPREFIX": str(prefix)}),
        )

    def launch(
        self,
        executable: Path | str,
        args: Sequence[str],
        prefix: Path | str,
        env: Mapping[str, str] | None = None,
    ) -> subprocess.Popen:
        return spawn(
            [self.info.executable_path, executable, *args],
            build_environment({"WINEPREFIX": str(prefix)}, env),
        )

"""
GPTK runner - Apple's Game Porting Toolkit (macOS only).

GPTK pairs Wine with D3DMetal to run DirectX 11/12 games on macOS. It is
installed with the same layout as Proton (``proton`` launcher plus a
``files/`` Wine tree) and runs on Apple Silicon natively or on x86
through Rosetta 2. Importing this module anywhere else fails.
"""

from __future__ import annotations

import platform
import subprocess
import sys
from pathlib import Path
from typing import Mapping, Sequence

if sys.platform != "darwin":
    raise ImportError("The GPTK runner is only available on macOS")

from bottles_core.runner import Runner, RunnerInfo, build_environment, run_to_completion, spawn
from bottles_core.runners.proton import steam_compat_environment
from bottles_core.runners.wine import Wine

# arm64 is Apple Silicon; i386/x86_64 is what Rosetta 2 reports
SUPPORTED_ARCHITECTURES = frozenset({"arm64", "i386", "x86_64"})


class GPTK(Runner):
    """A Game Porting Toolkit installation."""

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

    def is_available(self) -> bool:
        if not super().is_available():
            return False
        return platform.machine() in SUPPORTED_ARCHITECTURES

    def initialize(self, prefix: Path | str) -> None:
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

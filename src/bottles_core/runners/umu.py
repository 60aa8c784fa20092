"""
UMU runner - the unified launcher wrapping Proton for non-Steam games.

umu-run picks its Proton from PROTONPATH. When that is unset it fetches
the latest UMU-Proton on its own before running anything, so a UMU
runner without a wrapped Proton is still usable, it just cannot hand out
a Wine until one has been chosen.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Mapping, Optional, Sequence

from bottles_core.errors import NotFoundError
from bottles_core.runner import Runner, RunnerInfo, build_environment, run_to_completion, spawn
from bottles_core.runners.proton import Proton
from bottles_core.runners.wine import Wine


def parse_umu_version(raw: str) -> str:
    """
    Pull the version out of ``umu-run --version`` output.

    The output looks like "umu-launcher version 1.2.3 (...)"; the version
    is the first whitespace-separated word starting with a digit.
    """
    for word in raw.split():
        if word[0].isdigit():
            return word
    return "unknown"


class UMU(Runner):
    """
    A umu-launcher installation laid out as ``<directory>/umu-run``.

    Usage:
        umu = UMU("/opt/umu", proton=Proton("/opt/GE-Proton9-1"))
        umu.initialize("/home/user/Bottles/games")
    """

    EXECUTABLE = Path("umu-run")

    def __init__(self, path: Path | str, proton: Optional[Proton] = None):
        info = RunnerInfo.discover(path, self.EXECUTABLE)
        info.version = parse_umu_version(info.version)

        super().__init__(info)
        self.proton = proton

    @property
    def wine(self) -> Wine:
        if self.proton is None:
            raise NotFoundError(
                f"UMU runner '{self.info.name}' has no Proton set, so there is no Wine to use"
            )
        return self.proton.wine

    def is_available(self) -> bool:
        if not super().is_available():
            return False
        return self.proton is None or self.proton.is_available()

    def initialize(self, prefix: Path | str) -> None:
        """Run ``umu-run wineboot`` to create the prefix."""
        run_to_completion(
            [self.info.executable_path, "wineboot"],
            build_environment(self._umu_environment(prefix)),
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
            build_environment(self._umu_environment(prefix), env),
        )

    def _umu_environment(self, prefix: Path | str) -> dict[str, str]:
        env = {"WINEPREFIX": str(prefix)}
        if self.proton is not None:
            env["PROTONPATH"] = str(self.proton.info.directory)
        return env

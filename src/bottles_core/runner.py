"""
Runner base - metadata and the common interface shared by all runners.

A runner is a compatibility layer installed in a directory: plain Wine,
Proton, UMU or (on macOS) GPTK. Each variant lives in
bottles_core.runners and implements the Runner interface defined here.
"""

from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Sequence

from loguru import logger

from bottles_core.errors import BottlesIOError, NotFoundError

if TYPE_CHECKING:
    from bottles_core.runners.wine import Wine


@dataclass
class RunnerInfo:
    """Metadata of an installed runner."""
    name: str                    # Usually the installation directory name
    version: str                 # Raw `--version` output, or the name if that was empty
    directory: Path              # Installation directory
    executable: Path             # Main executable, relative to directory

    @classmethod
    def discover(cls, directory: Path | str, executable: Path | str) -> RunnerInfo:
        """
        Validate a runner installation and probe its version.

        Args:
            directory: Base directory the runner is installed in
            executable: Path of the main executable relative to directory

        Raises:
            NotFoundError: directory or executable is missing
            BottlesIOError: the executable could not be run
        """
        directory = Path(directory)
        executable = Path(executable)

        if not directory.exists():
            raise NotFoundError(f"'{directory}' does not exist", directory)

        full_path = directory / executable
        if not full_path.is_file():
            raise NotFoundError(
                f"Executable '{executable}' not found in directory '{directory}'",
                full_path,
            )

        name = _display_name(directory)

        logger.debug("Probing version of {}", full_path)
        try:
            result = subprocess.run(
                [str(full_path), "--version"], stdin=subprocess.DEVNULL, capture_output=True
            )
        except OSError as e:
            raise BottlesIOError(f"Failed to run '{full_path} --version': {e}") from e

        # Kept verbatim, trailing newline included
        version = result.stdout.decode("utf-8", errors="replace") or name

        return cls(name=name, version=version, directory=directory, executable=executable)

    @property
    def executable_path(self) -> Path:
        """Full path of the main executable."""
        return self.directory / self.executable


class Runner(ABC):
    """
    Base class for compatibility runners.

    Runners are built from an installation directory and fail with
    NotFoundError when the expected layout isn't there:

        wine = Wine("/opt/wine-9.0")
        wine.initialize("/home/user/Bottles/office")
        child = wine.launch("notepad.exe", [], "/home/user/Bottles/office", {"WINEDEBUG": "-all"})
        child.wait()
    """

    def __init__(self, info: RunnerInfo):
        self._info = info

    @property
    def info(self) -> RunnerInfo:
        """Runner metadata. The returned object is mutable."""
        return self._info

    @property
    @abstractmethod
    def wine(self) -> Wine:
        """The Wine installation this runner ultimately drives."""
        pass

    def is_available(self) -> bool:
        """Check that the runner can still be executed."""
        return self.info.executable_path.is_file()

    @abstractmethod
    def initialize(self, prefix: Path | str) -> None:
        """Bootstrap a prefix and wait for it to finish."""
        pass

    @abstractmethod
    def launch(
        self,
        executable: Path | str,
        args: Sequence[str],
        prefix: Path | str,
        env: Mapping[str, str] | None = None,
    ) -> subprocess.Popen:
        """
        Start an executable inside the prefix.

        Args:
            executable: Windows executable to run
            args: Arguments for the executable
            prefix: Prefix to run it in
            env: Extra environment, applied after the runner's own variables

        Returns:
            The running child process. Waiting on it is up to the caller.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.info.directory)!r})"


def build_environment(
    required: Mapping[str, str],
    extra: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Inherited environment, then the runner's variables, then the caller's."""
    env = os.environ.copy()
    env.update(required)
    if extra:
        env.update(extra)
    return env


def run_to_completion(argv: Sequence[str | Path], env: Mapping[str, str]) -> None:
    """Run a command, wait for it and fail on a non-zero exit status."""
    command = [str(arg) for arg in argv]
    logger.debug("Running {}", command)
    try:
        result = subprocess.run(command, env=dict(env), capture_output=True)
    except OSError as e:
        raise BottlesIOError(f"Failed to run {command[0]}: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise BottlesIOError(
            f"{' '.join(command)} exited with status {result.returncode}"
            + (f": {stderr}" if stderr else "")
        )


def spawn(argv: Sequence[str | Path], env: Mapping[str, str]) -> subprocess.Popen:
    """Start a command without waiting for it."""
    command = [str(arg) for arg in argv]
    logger.debug("Spawning {}", command)
    try:
        return subprocess.Popen(command, env=dict(env))
    except OSError as e:
        raise BottlesIOError(f"Failed to launch {command[0]}: {e}") from e


def _display_name(directory: Path) -> str:
    name = directory.name
    if name in ("", ".."):
        return "unknown"
    try:
        # Undecodable bytes come back as lone surrogates
        name.encode("utf-8")
    except UnicodeEncodeError:
        return "unknown"
    return name

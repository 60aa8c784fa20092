"""
Runner discovery - work out which kind of runner a directory holds.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from bottles_core.errors import BottlesIOError, NotFoundError
from bottles_core.runner import Runner
from bottles_core.runners import UMU, Proton, Wine

# Checked in order; Proton also contains a bin/wine under files/, so the
# more specific layouts come first. GPTK looks exactly like Proton and
# is never guessed.
_LAYOUTS: list[tuple[Path, type[Runner]]] = [
    (UMU.EXECUTABLE, UMU),
    (Proton.EXECUTABLE, Proton),
    (Wine.EXECUTABLE, Wine),
]


def detect_runner(path: Path | str) -> Runner:
    """
    Build the runner matching the layout of ``path``.

    Raises:
        NotFoundError: the directory is missing or holds no known runner
        BottlesIOError: the runner's executable could not be run
    """
    path = Path(path).expanduser()
    if not path.is_dir():
        raise NotFoundError(f"'{path}' does not exist", path)

    for executable, runner_class in _LAYOUTS:
        if (path / executable).is_file():
            return runner_class(path)

    raise NotFoundError(f"No Wine, Proton or UMU installation found in '{path}'", path)


def discover_runners(directory: Path | str) -> list[Runner]:
    """Detect a runner in every subdirectory of ``directory``, sorted by name."""
    directory = Path(directory).expanduser()
    if not directory.is_dir():
        return []

    try:
        entries = sorted(p for p in directory.iterdir() if p.is_dir())
    except OSError as e:
        raise BottlesIOError(f"Failed to list {directory}: {e}") from e

    runners = []
    for entry in entries:
        try:
            runners.append(detect_runner(entry))
        except NotFoundError as e:
            logger.debug("Skipping {}: {}", entry, e)
    return runners

"""
Shared fixtures: fake runner installations built from shell scripts.

A fake executable prints a fixed version for ``--version``. Any other
invocation records its arguments and environment next to the script
(``<script>.args`` / ``<script>.env``) and exits with a chosen status,
or kills itself with a chosen signal.
"""

from __future__ import annotations

import shlex
import stat
from pathlib import Path

import pytest


SCRIPT = """\
#!/bin/sh
if [ "$1" = "--version" ]; then
    printf '%s' {version}
    exit 0
fi
printf '%s\\n' "$@" > {record}.args
env > {record}.env
{finish}
"""


class FakeExecutable:
    """Handle on a fake runner executable and what it recorded."""

    def __init__(self, path: Path):
        self.path = path

    @property
    def called(self) -> bool:
        return Path(f"{self.path}.args").exists()

    def args(self) -> list[str]:
        return Path(f"{self.path}.args").read_text().splitlines()

    def env(self) -> dict[str, str]:
        env = {}
        for line in Path(f"{self.path}.env").read_text().splitlines():
            key, sep, value = line.partition("=")
            if sep:
                env[key] = value
        return env


def write_executable(path: Path, version: str = "", status: int = 0, signal: str | None = None) -> FakeExecutable:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SCRIPT.format(
        version=shlex.quote(version),
        record=shlex.quote(str(path)),
        finish=f"kill -{signal} $$" if signal else f"exit {status}",
    ))
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return FakeExecutable(path)


@pytest.fixture
def make_wine(tmp_path):
    """Create ``<tmp>/<name>/bin/wine``."""
    def factory(
        name: str = "wine-9.0", version: str = "wine-9.0\n", status: int = 0, signal: str | None = None,
    ) -> Path:
        base = tmp_path / "runners" / name
        write_executable(base / "bin" / "wine", version, status, signal)
        return base
    return factory


@pytest.fixture
def make_proton(tmp_path):
    """Create ``<tmp>/<name>/proton`` and ``<tmp>/<name>/files/bin/wine``."""
    def factory(name: str = "GE-Proton9-1", version: str = "", status: int = 0) -> Path:
        base = tmp_path / "runners" / name
        write_executable(base / "proton", version, status)
        write_executable(base / "files" / "bin" / "wine", "wine-9.0 (Staging)\n")
        return base
    return factory


@pytest.fixture
def make_umu(tmp_path):
    """Create ``<tmp>/<name>/umu-run``."""
    def factory(
        name: str = "umu",
        version: str = "umu-launcher version 1.2.3 (3.12.4 (main, Jun  7 2024))\n",
        status: int = 0,
    ) -> Path:
        base = tmp_path / "runners" / name
        write_executable(base / "umu-run", version, status)
        return base
    return factory


@pytest.fixture
def recorder():
    """Read back what a fake executable recorded: recorder(path).args()"""
    return FakeExecutable


@pytest.fixture
def prefix(tmp_path) -> Path:
    return tmp_path / "prefix"

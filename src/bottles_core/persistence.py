"""
Bottle catalog persistence.

All bottles live in a single pretty-printed JSON document,
``<base>/bottles.json``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from bottles_core.bottle import Bottle
from bottles_core.errors import BottlesIOError

INDEX_FILENAME = "bottles.json"

_BOTTLE_LIST = TypeAdapter(list[Bottle])


class Persistence:
    """
    Load and store the bottle catalog under a base directory.

    Usage:
        store = Persistence("~/.local/share/bottles/bottles")
        bottles = store.load_bottles()
        bottles.append(Bottle(name="Office", path="/srv/bottles/office"))
        store.save_bottles(bottles)

    The base directory does not have to exist until the first save.
    Saving is a plain overwrite; concurrent writers race and the last
    one wins.
    """

    def __init__(self, base_path: Path | str):
        self.base_path = Path(base_path).expanduser()

    @property
    def index_file(self) -> Path:
        return self.base_path / INDEX_FILENAME

    def load_bottles(self) -> list[Bottle]:
        """Read the catalog. A missing catalog is an empty one."""
        path = self.index_file
        if not path.exists():
            logger.debug("No catalog at {}, starting empty", path)
            return []

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise BottlesIOError(f"Failed to read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise BottlesIOError(f"Bottle catalog {path} is not valid UTF-8: {e}") from e

        try:
            bottles = _BOTTLE_LIST.validate_python(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as e:
            raise BottlesIOError(f"Invalid bottle catalog {path}: {e}") from e

        logger.debug("Loaded {} bottle(s) from {}", len(bottles), path)
        return bottles

    def save_bottles(self, bottles: Sequence[Bottle]) -> None:
        """Write the full catalog, replacing whatever was there."""
        path = self.index_file
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
            content = _BOTTLE_LIST.dump_json(list(bottles), indent=2).decode("utf-8")
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise BottlesIOError(f"Failed to write {path}: {e}") from e

        logger.debug("Saved {} bottle(s) to {}", len(bottles), path)

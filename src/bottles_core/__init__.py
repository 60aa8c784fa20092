"""
bottles-core - Windows-compatibility bottles and the runners that fill them.

Example usage:
    from bottles_core import Bottle, BottleType, Persistence
    from bottles_core.runners import Proton

    store = Persistence("~/.local/share/bottles/bottles")
    bottles = store.load_bottles()

    bottle = Bottle(name="Steam", path="/home/user/Bottles/steam", kind=BottleType.GAMING)
    bottle.config.runner = "GE-Proton9-1"
    bottles.append(bottle)
    store.save_bottles(bottles)

    proton = Proton("/home/user/.local/share/bottles/runners/GE-Proton9-1")
    proton.initialize(bottle.path)
    child = proton.launch("steam.exe", [], bottle.path, bottle.launch_environment())
    child.wait()
"""

from loguru import logger

from bottles_core.bottle import Bottle, BottleConfig, BottleType
from bottles_core.errors import BottlesError, BottlesIOError, NotFoundError
from bottles_core.persistence import Persistence
from bottles_core.runner import Runner, RunnerInfo

__version__ = "0.1.0"
__all__ = [
    "Bottle",
    "BottleConfig",
    "BottleType",
    "Persistence",
    "Runner",
    "RunnerInfo",
    "BottlesError",
    "BottlesIOError",
    "NotFoundError",
]

logger.disable("bottles_core")

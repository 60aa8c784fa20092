"""Runner implementations."""

import sys

from bottles_core.runners.wine import PrefixArch, Wine, WindowsVersion
from bottles_core.runners.proton import Proton
from bottles_core.runners.umu import UMU

__all__ = ["Wine", "Proton", "UMU", "PrefixArch", "WindowsVersion"]

if sys.platform == "darwin":
    from bottles_core.runners.gptk import GPTK
    __all__.append("GPTK")

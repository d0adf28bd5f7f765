"""
PyFastNoise: seeded procedural noise and fractal combinators.

Submodules:
- noise: Permutation tables, noise configurations, base kernels, fractals
- misc: Logging setup and numpy export helpers
- cli: Command line entry points

Author: B.G.
"""

__version__ = "0.0.1"

from . import constants
from . import noise
from . import misc
from .errors import InvalidParameter

__all__ = ["constants", "noise", "misc", "InvalidParameter", "__version__"]

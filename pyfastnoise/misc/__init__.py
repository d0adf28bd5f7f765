"""
Miscellaneous Utilities for PyFastNoise

This module provides utility functions that don't fit into the noise module
itself: grid export and logging setup for scripts and the command line tools.

Available Functions:
- save_grid_numpy: Sample a configuration on a grid and save it as .npy
- setup_logging: Install a stdout handler for the pyfastnoise loggers

Author: B.G.
"""

from .grid_utils import save_grid_numpy
from .logging_utils import setup_logging

# Export public API
__all__ = [
    "save_grid_numpy",
    "setup_logging",
]

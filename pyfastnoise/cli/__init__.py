"""
Command Line Interface for PyFastNoise

This module provides command line utilities for PyFastNoise, enabling
quick sampling and export from the terminal without writing Python scripts.

Available Commands:
- noise_sample (pfn-sample): Print one noise sample at a 1D, 2D or 3D point
- noise_grid (pfn-grid): Sample a regular grid and save it as .npy

Author: B.G.
"""

_CLI_SUBMODULES = {
    "noise_sample": (".noise_commands", "noise_sample"),
    "noise_grid": (".noise_commands", "noise_grid"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj

"""
Regular-grid sampling for PyFastNoise.

Fills numpy arrays with samples of a configuration on an evenly spaced 1D
line or 2D grid (optionally a constant-z slice of 3D noise). Every cell is
independent of the others, so the arrays can be tiled or split freely.

Sampling is CPU-sequential: each cell is one sample() call in a Python
loop, with no batched or vectorized kernel. Large grids scale linearly with
the cell count.

Author: B.G.
"""

import numpy as np

from ..errors import InvalidParameter
from .fractal import sample


def _check_size(name, n):
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
        raise InvalidParameter(f"{name} must be a positive integer, got {n!r}")
    return int(n)


def noise_line(config, nx: int, dx: float = 1.0, x0: float = 0.0) -> np.ndarray:
    """
    Sample 1D noise at x0, x0 + dx, ..., x0 + (nx - 1) * dx.

    Returns:
        numpy.ndarray: float64 array of shape (nx,)
    """
    nx = _check_size("nx", nx)
    out = np.empty(nx, dtype=np.float64)
    for i in range(nx):
        out[i] = sample(config, x0 + i * dx)
    return out


def noise_grid(config, nx: int, ny: int, dx: float = 1.0, x0: float = 0.0,
               y0: float = 0.0, z: float = None) -> np.ndarray:
    """
    Sample noise on a regular 2D grid, one sample() call per cell on the CPU.

    Args:
        config: NoiseConfig to sample
        nx: Number of cells in x direction
        ny: Number of cells in y direction
        dx: Spacing between cells in noise-space units (default: 1.0)
        x0, y0: Coordinates of cell (0, 0) (default: 0.0)
        z: If given, sample the 3D noise slice at this height instead of 2D noise

    Returns:
        numpy.ndarray: float64 array of shape (ny, nx), row j holding y0 + j * dx

    Example:
        cfg = build_config(42, octaves=5, frequency=1.0 / 64.0)
        heights = noise_grid(cfg, 256, 256)
    """
    nx = _check_size("nx", nx)
    ny = _check_size("ny", ny)
    out = np.empty((ny, nx), dtype=np.float64)
    for j in range(ny):
        y = y0 + j * dx
        for i in range(nx):
            x = x0 + i * dx
            out[j, i] = sample(config, x, y) if z is None else sample(config, x, y, z)
    return out

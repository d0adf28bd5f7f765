"""
Miscellaneous Grid Utilities for PyFastNoise

Helpers for exporting sampled noise grids so they can be reused without
re-sampling, e.g. as heightmaps in other tools.

Key Features:
- Sample a configuration on a grid and save it as a .npy file

Dependencies:
- numpy: For array operations and file I/O

Author: B.G.
"""

import logging

import numpy as np

from ..noise import noise_grid

logger = logging.getLogger(__name__)


def save_grid_numpy(config, output_path, nx, ny, dx=1.0, x0=0.0, y0=0.0, z=None):
    """
    Sample a noise configuration on a regular grid and save it as a .npy file.

    Args:
        config (NoiseConfig): Configuration to sample
        output_path (str): Path for output .npy file
        nx (int): Number of cells in x direction
        ny (int): Number of cells in y direction
        dx (float): Grid spacing in noise-space units
        x0, y0 (float): Coordinates of cell (0, 0)
        z (float): Optional height of a 3D slice

    Returns:
        numpy.ndarray: The sampled grid of shape (ny, nx)

    Raises:
        InvalidParameter: If nx or ny are not positive integers
        OSError: If output file cannot be written

    Example:
        import pyfastnoise as pfn

        cfg = pfn.noise.build_config(42, octaves=6, frequency=1.0 / 64.0)
        pfn.misc.save_grid_numpy(cfg, 'heights.npy', 512, 512)

        # Later, load it back
        heights = np.load('heights.npy')

    Author: B.G.
    """
    grid = noise_grid(config, nx, ny, dx=dx, x0=x0, y0=y0, z=z)

    try:
        np.save(output_path, grid)
    except Exception as e:
        raise OSError(f"Failed to save numpy array to '{output_path}': {e}")

    logger.info("saved %dx%d noise grid to '%s'", ny, nx, output_path)
    logger.debug("value range: [%.4f, %.4f]", grid.min(), grid.max())
    return grid

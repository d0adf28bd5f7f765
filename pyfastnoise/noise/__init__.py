"""
Noise synthesis module for PyFastNoise.

Deterministic, seeded coherent noise for 1D, 2D and 3D coordinates, plus the
fractal combinators that stack several octaves of it. A configuration is
built once per seed and parameter set and is then read-only; every sampling
call is a pure function of that configuration and the coordinate.

Noise Types:
- Value: Hashed lattice values blended with a smooth interpolation curve
- Gradient: Perlin-style gradient noise
- Simplex: Gradient contributions on a simplex lattice

Fractal Types:
- fBm: Weighted sum of octaves
- Billow: Octaves folded with |v| * 2 - 1, giving puffy, cloud-like shapes
- Ridged: Inverted absolute octaves with signal-dependent weights

Usage:
    import pyfastnoise as pfn

    cfg = pfn.noise.build_config(42, octaves=4, lacunarity=2.0, gain=0.5)
    h = pfn.noise.sample2(cfg, 12.5, 3.75)

    # Same parameters, plain fBm on gradient noise
    cfg = pfn.noise.build_config(42, octaves=4, noise_type="gradient", fractal="fbm")
    heights = pfn.noise.noise_grid(cfg, 128, 128, dx=1.0 / 32.0)

Author: B.G.
"""

from .permutation import (
    PermutationTable,
    build_tables,
    fisher_yates_permutation,
)
from .config import NoiseConfig, build_config, fractal_bounding, random_config
from .kernels import base_noise, get_kernel
from .fractal import (
    BILLOW,
    FBM,
    RIDGED,
    OctaveTransform,
    accumulate,
    billow,
    fbm,
    get_transform,
    noise_fn,
    octave_amplitudes,
    ridged,
    sample,
    sample1,
    sample2,
    sample3,
    single,
)
from .grid import noise_grid, noise_line

# Export all noise generation functions
__all__ = [
    "PermutationTable", "build_tables", "fisher_yates_permutation",
    "NoiseConfig", "build_config", "fractal_bounding", "random_config",
    "base_noise", "get_kernel",
    "OctaveTransform", "FBM", "BILLOW", "RIDGED", "get_transform", "accumulate",
    "octave_amplitudes",
    "fbm", "billow", "ridged", "single",
    "sample", "sample1", "sample2", "sample3", "noise_fn",
    "noise_line", "noise_grid",
]

"""
Noise configuration for PyFastNoise.

A NoiseConfig bundles the seeded permutation tables with every fractal
synthesis parameter. It is validated once, at construction, and is immutable
afterwards, so a single instance can be shared by any number of threads
sampling concurrently.

Author: B.G.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Tuple

import numpy as np

from .. import constants as cte
from ..errors import InvalidParameter
from .permutation import PermutationSource, PermutationTable, build_tables

logger = logging.getLogger(__name__)


def fractal_bounding(gain: float, octaves: int) -> float:
    """
    Normalization constant of a fractal sum.

    The raw sum of ``octaves`` layers with amplitudes 1, gain, gain^2, ...
    peaks at sum(gain^i). Multiplying by the inverse of that total keeps the
    output magnitude independent of the octave count.

    Args:
        gain: Per-octave amplitude multiplier (> 0)
        octaves: Number of octaves (>= 1)

    Returns:
        float: (1 - gain) / (1 - gain^octaves), 1.0 for a single octave and
        1 / octaves in the gain == 1 limit

    Raises:
        InvalidParameter: If gain^(octaves - 1), the amplitude of the last
                          octave, is too large to be represented
    """
    if octaves == 1:
        return 1.0
    if gain == 1.0:
        return 1.0 / octaves
    if gain > 1.0 and (octaves - 1) * math.log(gain) > cte.MAX_LOG_AMPLITUDE:
        raise InvalidParameter(
            f"gain={gain} with octaves={octaves} overflows the octave amplitudes"
        )
    try:
        return (1.0 - gain) / (1.0 - gain ** octaves)
    except OverflowError:
        # gain^octaves alone may overflow while gain^(octaves - 1) does not
        return ((gain - 1.0) / gain) / (gain ** (octaves - 1) - 1.0 / gain)


@dataclass(frozen=True)
class NoiseConfig:
    """
    Immutable noise configuration.

    Build instances with build_config(); the constructor only checks that the
    tables and the bounding constant agree with the octave count and gain.

    Attributes:
        seed (int): Origin of all pseudo-randomness
        octaves (int): Number of fractal layers
        lacunarity (float): Per-octave frequency multiplier
        gain (float): Per-octave amplitude multiplier
        frequency (float): Base coordinate scale applied before the first octave
        normalize (bool): Rescale fractal output into [0, 1]
        noise_type (str): Base kernel, one of constants.NOISE_TYPES
        interpolation (str): Blending curve, one of constants.INTERPOLATIONS
        fractal (str): Default combinator used by sample(), one of constants.FRACTALS
        fractal_bounding (float): Precomputed normalization constant
        perm (tuple): One PermutationTable per octave
    """

    seed: int
    octaves: int
    lacunarity: float
    gain: float
    frequency: float
    normalize: bool
    noise_type: str
    interpolation: str
    fractal: str
    fractal_bounding: float
    perm: Tuple[PermutationTable, ...]

    def __post_init__(self):
        if len(self.perm) != self.octaves:
            raise InvalidParameter(
                f"expected {self.octaves} permutation tables, got {len(self.perm)}"
            )
        if self.fractal_bounding != fractal_bounding(self.gain, self.octaves):
            raise InvalidParameter("fractal_bounding does not match gain and octaves")

    @property
    def table_size(self) -> int:
        return self.perm[0].size


def _check_int(name, value, minimum=None):
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise InvalidParameter(f"{name} must be >= {minimum}, got {value}")
    return int(value)


def _check_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameter(f"{name} must be finite and > 0, got {value}")
    return value


def _check_choice(name, value, choices):
    if value not in choices:
        raise InvalidParameter(f"{name} must be one of {choices}, got {value!r}")
    return value


def build_config(seed: int, octaves: int = cte.DEFAULT_OCTAVES,
                 lacunarity: float = cte.DEFAULT_LACUNARITY, gain: float = cte.DEFAULT_GAIN,
                 frequency: float = cte.DEFAULT_FREQUENCY, normalize: bool = cte.DEFAULT_NORMALIZE,
                 table_size: int = cte.DEFAULT_TABLE_SIZE,
                 noise_type: str = cte.DEFAULT_NOISE_TYPE,
                 interpolation: str = cte.DEFAULT_INTERPOLATION,
                 fractal: str = cte.DEFAULT_FRACTAL,
                 permutation_source: PermutationSource = None) -> NoiseConfig:
    """
    Validate parameters and build an immutable NoiseConfig.

    All parameters are checked before any table is built, so a configuration
    either validates fully or is never produced.

    Args:
        seed: Integer seed for the permutation tables
        octaves: Number of fractal layers (>= 1, default: 6)
        lacunarity: Per-octave frequency multiplier (> 0, default: 2.0)
        gain: Per-octave amplitude multiplier (> 0, default: 0.5)
        frequency: Base coordinate scale (> 0, default: 1.0)
        normalize: If True, fractal output lies in [0, 1] (default: True)
        table_size: Entries per permutation table (> 0, default: 256)
        noise_type: "value", "gradient" or "simplex" (default: "value")
        interpolation: "linear", "hermite" or "quintic" (default: "hermite")
                       Ignored by simplex noise
        fractal: Combinator used by sample(): "fbm", "billow", "ridged"
                 or "none" (default: "billow")
        permutation_source: Callable (seed, size) -> permutation, defaults
                            to a seeded Fisher-Yates shuffle

    Returns:
        NoiseConfig

    Raises:
        InvalidParameter: If any parameter is out of range

    Example:
        cfg = build_config(42, octaves=4, normalize=False)
        value = sample1(cfg, 0.37)
    """
    seed = _check_int("seed", seed)
    octaves = _check_int("octaves", octaves, 1)
    table_size = _check_int("table_size", table_size, 1)
    lacunarity = _check_positive("lacunarity", lacunarity)
    gain = _check_positive("gain", gain)
    frequency = _check_positive("frequency", frequency)
    noise_type = _check_choice("noise_type", noise_type, cte.NOISE_TYPES)
    interpolation = _check_choice("interpolation", interpolation, cte.INTERPOLATIONS)
    fractal = _check_choice("fractal", fractal, cte.FRACTALS)

    bounding = fractal_bounding(gain, octaves)
    tables = build_tables(seed, octaves, table_size, permutation_source)

    logger.debug(
        "noise config: seed=%d octaves=%d lacunarity=%g gain=%g frequency=%g "
        "normalize=%s type=%s interp=%s fractal=%s table_size=%d bounding=%.6g",
        seed, octaves, lacunarity, gain, frequency, normalize,
        noise_type, interpolation, fractal, table_size, bounding,
    )

    return NoiseConfig(
        seed=seed,
        octaves=octaves,
        lacunarity=lacunarity,
        gain=gain,
        frequency=frequency,
        normalize=bool(normalize),
        noise_type=noise_type,
        interpolation=interpolation,
        fractal=fractal,
        fractal_bounding=bounding,
        perm=tables,
    )


def random_config(seed: int, **overrides) -> NoiseConfig:
    """
    Build a random but reproducible configuration.

    Draws the kernel, interpolation, fractal type and tuning parameters from
    a generator seeded with ``seed``; the same seed always gives the same
    configuration. Any build_config keyword can be forced via ``overrides``.

    Example:
        cfg = random_config(7, normalize=False)
    """
    seed = _check_int("seed", seed)
    rng = np.random.RandomState(seed & cte.SEED_MASK)

    params = {
        "noise_type": cte.NOISE_TYPES[rng.randint(len(cte.NOISE_TYPES))],
        "interpolation": cte.INTERPOLATIONS[rng.randint(len(cte.INTERPOLATIONS))],
        "fractal": cte.FRACTALS[rng.randint(len(cte.FRACTALS))],
        "octaves": int(rng.randint(1, 9)),
        "lacunarity": float(rng.uniform(1.5, 2.5)),
        "gain": float(rng.uniform(0.3, 0.7)),
    }
    params.update(overrides)
    return build_config(seed, **params)

"""
Fractal combinators for PyFastNoise.

All fractal types share one octave loop: the coordinate is scaled by the base
frequency, then each further octave multiplies every axis by the lacunarity,
multiplies the amplitude by the gain, and adds the transformed base-noise
sample of its own permutation table. Variants only differ by the per-octave
transform (and, for ridged noise, the weighting rule):

- fBm: identity
- Billow: |v| * 2 - 1, folds the signal into rounded, cloud-like lobes
- Ridged: 1 - |v| with weights damped by the previous octave's signal

The accumulated sum is multiplied by the configuration's fractal bounding
constant and, when normalize is set, mapped from [-1, 1] to [0, 1].

Author: B.G.
"""

from .. import constants as cte
from ..errors import InvalidParameter
from .kernels import INTERPOLATORS, get_kernel


class OctaveTransform:
    """
    Per-octave transform of the plain fractal sum (fBm).

    Subclasses override transform() to reshape each base-noise sample and
    weight() to change how much an octave contributes.
    """

    name = "fbm"

    def transform(self, v: float) -> float:
        return v

    def weight(self, amplitude: float, previous: float) -> float:
        """
        Weight of the current octave.

        Args:
            amplitude: gain^i for octave i
            previous: Transformed sample of octave i - 1
        """
        return amplitude

    def __repr__(self):
        return f"<OctaveTransform {self.name}>"


class BillowTransform(OctaveTransform):
    name = "billow"

    def transform(self, v: float) -> float:
        return abs(v) * 2.0 - 1.0


class RidgedTransform(OctaveTransform):
    """
    Ridged multifractal transform.

    Each octave is weighted by the previous octave's signal clamped to
    [0, 1], so detail accumulates on the ridges and stays out of the valleys.
    Ridged sums are non-negative, so normalized output lies in [0.5, 1].
    """

    name = "ridged"

    def transform(self, v: float) -> float:
        return 1.0 - abs(v)

    def weight(self, amplitude: float, previous: float) -> float:
        return amplitude * min(max(previous, 0.0), 1.0)


FBM = OctaveTransform()
BILLOW = BillowTransform()
RIDGED = RidgedTransform()

TRANSFORMS = {
    "fbm": FBM,
    "billow": BILLOW,
    "ridged": RIDGED,
}


def get_transform(name):
    """
    Look up the OctaveTransform of a fractal type.

    Raises:
        InvalidParameter: If name is not "fbm", "billow" or "ridged"
    """
    transform = TRANSFORMS.get(name)
    if transform is None:
        raise InvalidParameter(f"unknown fractal type {name!r}, expected one of {tuple(TRANSFORMS)}")
    return transform


def _in_range(coords):
    for c in coords:
        if not -cte.MAX_COORDINATE <= c <= cte.MAX_COORDINATE:
            return False
    return True


def _finish(config, total):
    scaled = total * config.fractal_bounding
    if config.normalize:
        return (scaled + 1.0) * 0.5
    return scaled


def accumulate(config, transform, coords):
    """
    Shared octave-accumulation routine.

    Args:
        config: NoiseConfig
        transform: OctaveTransform applied to every base-noise sample
        coords: Tuple of one to three finite coordinates

    Returns:
        float: Bounded fractal value, in [0, 1] when config.normalize is set

    An octave whose scaled coordinates leave [-MAX_COORDINATE, MAX_COORDINATE]
    (including overflow to infinity) adds nothing and leaves the ridged
    weighting signal unchanged.
    """
    kernel = get_kernel(config.noise_type, len(coords))
    interp = INTERPOLATORS[config.interpolation]
    perm = config.perm
    lacunarity = config.lacunarity
    gain = config.gain

    coords = tuple(c * config.frequency for c in coords)
    signal = 1.0
    total = 0.0
    amplitude = 1.0

    for i in range(config.octaves):
        if i:
            coords = tuple(c * lacunarity for c in coords)
            amplitude *= gain
        if not _in_range(coords):
            continue
        weight = transform.weight(amplitude, signal)
        signal = transform.transform(kernel(perm[i], *coords, interp))
        total += signal * weight

    return _finish(config, total)


def octave_amplitudes(config):
    """Nominal amplitude of every octave, following the accumulation recursion."""
    amplitudes = [1.0]
    for _ in range(1, config.octaves):
        amplitudes.append(amplitudes[-1] * config.gain)
    return tuple(amplitudes)


def fbm(config, *coords):
    """Fractal Brownian motion: plain weighted sum of octaves."""
    return accumulate(config, FBM, coords)


def billow(config, *coords):
    """Billow noise: octaves folded with |v| * 2 - 1 before summing."""
    return accumulate(config, BILLOW, coords)


def ridged(config, *coords):
    """Ridged multifractal noise."""
    return accumulate(config, RIDGED, coords)


def single(config, *coords):
    """
    One base-noise sample of the first octave table at coords * frequency.

    Ignores octaves, lacunarity and gain; normalize maps [-1, 1] to [0, 1].
    """
    kernel = get_kernel(config.noise_type, len(coords))
    scaled = tuple(c * config.frequency for c in coords)
    if not _in_range(scaled):
        v = 0.0
    else:
        v = kernel(config.perm[0], *scaled, INTERPOLATORS[config.interpolation])
    return (v + 1.0) * 0.5 if config.normalize else v


def sample(config, *coords):
    """
    Sample the configured fractal type at one to three coordinates.

    Coordinates must be finite; non-finite input gives an unspecified result.
    Octaves whose scaled coordinates overflow are dropped from the sum.

    Raises:
        InvalidParameter: If called with zero or more than three coordinates
    """
    if config.fractal == "none":
        return single(config, *coords)
    return accumulate(config, get_transform(config.fractal), coords)


def sample1(config, x):
    return sample(config, x)


def sample2(config, x, y):
    return sample(config, x, y)


def sample3(config, x, y, z):
    return sample(config, x, y, z)


def noise_fn(config):
    """
    Bind a configuration into a plain sampling function.

    Example:
        terrain = noise_fn(build_config(3, fractal="ridged"))
        h = terrain(10.5, 4.25)
    """
    def _noise(*coords):
        return sample(config, *coords)

    return _noise

"""
Single-octave noise kernels for PyFastNoise.

Every kernel maps a 1D, 2D or 3D coordinate to a continuous, deterministic
value in [-1, 1] using one permutation table. Three kernel families are
provided:

- Value noise: pseudo-random lattice values blended with a smooth curve
- Gradient noise: Perlin-style dot products with hashed lattice gradients
- Simplex noise: radially attenuated gradient contributions on a simplex grid

Coordinates must be finite; lattice hashing wraps modulo the table size, so
negative and very large coordinates are handled without special cases.

Author: B.G.
"""

import math

from .. import constants as cte
from ..errors import InvalidParameter

# 8-direction 2D gradient vectors
GRADIENTS_2D = (
    (1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),  # Diagonal gradients
    (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0),    # Axis-aligned gradients
)

# 12 cube-edge 3D gradient vectors
GRADIENTS_3D = (
    (1.0, 1.0, 0.0), (-1.0, 1.0, 0.0), (1.0, -1.0, 0.0), (-1.0, -1.0, 0.0),
    (1.0, 0.0, 1.0), (-1.0, 0.0, 1.0), (1.0, 0.0, -1.0), (-1.0, 0.0, -1.0),
    (0.0, 1.0, 1.0), (0.0, -1.0, 1.0), (0.0, 1.0, -1.0), (0.0, -1.0, -1.0),
)

# Gradient noise peaks at |g| * sqrt(N) / 2; these bring each range to [-1, 1]
GRADIENT1_SCALE = 2.0
GRADIENT3_SCALE = 1.0 / math.sqrt(1.5)

# Simplex skew/unskew factors and output scales
F2 = 0.5 * (math.sqrt(3.0) - 1.0)
G2 = (3.0 - math.sqrt(3.0)) / 6.0
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0
SIMPLEX1_SCALE = 0.395
SIMPLEX2_SCALE = 70.0
SIMPLEX3_SCALE = 76.0


def linear(t: float) -> float:
    return t


def hermite(t: float) -> float:
    """Cubic smoothstep: 3t^2 - 2t^3"""
    return t * t * (3.0 - 2.0 * t)


def quintic(t: float) -> float:
    """Improved Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


INTERPOLATORS = {
    "linear": linear,
    "hermite": hermite,
    "quintic": quintic,
}


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b by factor t."""
    return a + t * (b - a)


def _clamp(v: float) -> float:
    return -1.0 if v < -1.0 else (1.0 if v > 1.0 else v)


# ---------------------------------------------------------------------------
# Value noise
# ---------------------------------------------------------------------------

def value1(table, x, interp=hermite):
    x0 = math.floor(x)
    xs = interp(x - x0)
    v = table.values
    return lerp(v[table.hash1(x0)], v[table.hash1(x0 + 1)], xs)


def value2(table, x, y, interp=hermite):
    x0 = math.floor(x)
    y0 = math.floor(y)
    x1 = x0 + 1
    y1 = y0 + 1
    xs = interp(x - x0)
    ys = interp(y - y0)
    v = table.values

    # Bottom edge then top edge
    xf0 = lerp(v[table.hash2(x0, y0)], v[table.hash2(x1, y0)], xs)
    xf1 = lerp(v[table.hash2(x0, y1)], v[table.hash2(x1, y1)], xs)
    return lerp(xf0, xf1, ys)


def value3(table, x, y, z, interp=hermite):
    x0 = math.floor(x)
    y0 = math.floor(y)
    z0 = math.floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1
    xs = interp(x - x0)
    ys = interp(y - y0)
    zs = interp(z - z0)
    v = table.values

    xf00 = lerp(v[table.hash3(x0, y0, z0)], v[table.hash3(x1, y0, z0)], xs)
    xf10 = lerp(v[table.hash3(x0, y1, z0)], v[table.hash3(x1, y1, z0)], xs)
    xf01 = lerp(v[table.hash3(x0, y0, z1)], v[table.hash3(x1, y0, z1)], xs)
    xf11 = lerp(v[table.hash3(x0, y1, z1)], v[table.hash3(x1, y1, z1)], xs)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)
    return lerp(yf0, yf1, zs)


# ---------------------------------------------------------------------------
# Gradient noise
# ---------------------------------------------------------------------------

def _grad2(h, dx, dy):
    gx, gy = GRADIENTS_2D[h & 7]
    return gx * dx + gy * dy


def _grad3(h, dx, dy, dz):
    gx, gy, gz = GRADIENTS_3D[h % 12]
    return gx * dx + gy * dy + gz * dz


def gradient1(table, x, interp=hermite):
    x0 = math.floor(x)
    xd0 = x - x0
    xd1 = xd0 - 1.0
    xs = interp(xd0)
    v = table.values

    # 1D gradients are the lattice values themselves
    n0 = v[table.hash1(x0)] * xd0
    n1 = v[table.hash1(x0 + 1)] * xd1
    return lerp(n0, n1, xs) * GRADIENT1_SCALE


def gradient2(table, x, y, interp=hermite):
    x0 = math.floor(x)
    y0 = math.floor(y)
    x1 = x0 + 1
    y1 = y0 + 1
    xd0 = x - x0
    yd0 = y - y0
    xd1 = xd0 - 1.0
    yd1 = yd0 - 1.0
    xs = interp(xd0)
    ys = interp(yd0)

    xf0 = lerp(_grad2(table.hash2(x0, y0), xd0, yd0), _grad2(table.hash2(x1, y0), xd1, yd0), xs)
    xf1 = lerp(_grad2(table.hash2(x0, y1), xd0, yd1), _grad2(table.hash2(x1, y1), xd1, yd1), xs)
    return lerp(xf0, xf1, ys)


def gradient3(table, x, y, z, interp=hermite):
    x0 = math.floor(x)
    y0 = math.floor(y)
    z0 = math.floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1
    xd0 = x - x0
    yd0 = y - y0
    zd0 = z - z0
    xd1 = xd0 - 1.0
    yd1 = yd0 - 1.0
    zd1 = zd0 - 1.0
    xs = interp(xd0)
    ys = interp(yd0)
    zs = interp(zd0)
    h = table.hash3

    xf00 = lerp(_grad3(h(x0, y0, z0), xd0, yd0, zd0), _grad3(h(x1, y0, z0), xd1, yd0, zd0), xs)
    xf10 = lerp(_grad3(h(x0, y1, z0), xd0, yd1, zd0), _grad3(h(x1, y1, z0), xd1, yd1, zd0), xs)
    xf01 = lerp(_grad3(h(x0, y0, z1), xd0, yd0, zd1), _grad3(h(x1, y0, z1), xd1, yd0, zd1), xs)
    xf11 = lerp(_grad3(h(x0, y1, z1), xd0, yd1, zd1), _grad3(h(x1, y1, z1), xd1, yd1, zd1), xs)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)
    return lerp(yf0, yf1, zs) * GRADIENT3_SCALE


# ---------------------------------------------------------------------------
# Simplex noise
# ---------------------------------------------------------------------------

def simplex1(table, x, interp=None):
    i0 = math.floor(x)
    x0 = x - i0
    x1 = x0 - 1.0

    n = 0.0
    for h, d in ((table.hash1(i0), x0), (table.hash1(i0 + 1), x1)):
        t = 1.0 - d * d
        t *= t
        g = 1.0 + (h & 7)
        if h & 8:
            g = -g
        n += t * t * g * d
    return _clamp(SIMPLEX1_SCALE * n)


def simplex2(table, x, y, interp=None):
    # Skew input space to find the simplex cell
    s = (x + y) * F2
    i = math.floor(x + s)
    j = math.floor(y + s)

    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    n = 0.0
    corners = (
        (table.hash2(i, j), x0, y0),
        (table.hash2(i + i1, j + j1), x1, y1),
        (table.hash2(i + 1, j + 1), x2, y2),
    )
    for h, dx, dy in corners:
        t = 0.5 - dx * dx - dy * dy
        if t > 0.0:
            t *= t
            n += t * t * _grad2(h, dx, dy)
    return _clamp(SIMPLEX2_SCALE * n)


def simplex3(table, x, y, z, interp=None):
    s = (x + y + z) * F3
    i = math.floor(x + s)
    j = math.floor(y + s)
    k = math.floor(z + s)

    t = (i + j + k) * G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Rank the offsets to pick the traversal order through the simplex
    if x0 >= y0:
        if y0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
        elif x0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
    else:
        if y0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
        elif x0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

    corners = (
        (table.hash3(i, j, k), x0, y0, z0),
        (table.hash3(i + i1, j + j1, k + k1), x0 - i1 + G3, y0 - j1 + G3, z0 - k1 + G3),
        (table.hash3(i + i2, j + j2, k + k2),
         x0 - i2 + 2.0 * G3, y0 - j2 + 2.0 * G3, z0 - k2 + 2.0 * G3),
        (table.hash3(i + 1, j + 1, k + 1),
         x0 - 1.0 + 3.0 * G3, y0 - 1.0 + 3.0 * G3, z0 - 1.0 + 3.0 * G3),
    )

    n = 0.0
    for h, dx, dy, dz in corners:
        # radius^2 of 0.5 keeps each contribution inside its own simplex neighbourhood
        t = 0.5 - dx * dx - dy * dy - dz * dz
        if t > 0.0:
            t *= t
            n += t * t * _grad3(h, dx, dy, dz)
    return _clamp(SIMPLEX3_SCALE * n)


KERNELS = {
    ("value", 1): value1,
    ("value", 2): value2,
    ("value", 3): value3,
    ("gradient", 1): gradient1,
    ("gradient", 2): gradient2,
    ("gradient", 3): gradient3,
    ("simplex", 1): simplex1,
    ("simplex", 2): simplex2,
    ("simplex", 3): simplex3,
}


def get_kernel(noise_type: str, dims: int):
    """
    Look up the kernel for a noise type and coordinate dimension.

    Raises:
        InvalidParameter: For unknown noise types or dimensions outside 1..3
    """
    kernel = KERNELS.get((noise_type, dims))
    if kernel is None:
        raise InvalidParameter(
            f"no {noise_type!r} kernel for {dims} dimension(s); "
            f"supported dimensions are 1..{cte.MAX_DIMENSIONS}"
        )
    return kernel


def base_noise(config, table, *coords):
    """
    Sample one octave of the configured kernel at ``coords``.

    Args:
        config: NoiseConfig providing noise_type and interpolation
        table: PermutationTable of the octave being sampled
        *coords: One, two or three finite coordinates, each of magnitude at
                 most constants.MAX_COORDINATE

    Returns:
        float in [-1, 1]
    """
    kernel = get_kernel(config.noise_type, len(coords))
    return kernel(table, *coords, INTERPOLATORS[config.interpolation])

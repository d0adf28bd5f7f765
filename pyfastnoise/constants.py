"""
Package-wide constants for PyFastNoise.

Default synthesis parameters and the names accepted for noise kernels,
interpolation curves and fractal combinators.

Author: B.G.
"""

import math
import sys

# Permutation tables
DEFAULT_TABLE_SIZE = 256
SEED_MASK = 0xFFFFFFFF  # numpy RandomState only accepts 32-bit seeds

# Fractal synthesis defaults
DEFAULT_OCTAVES = 6
DEFAULT_LACUNARITY = 2.0
DEFAULT_GAIN = 0.5
DEFAULT_FREQUENCY = 1.0
DEFAULT_NORMALIZE = True

# Kernel selection
NOISE_TYPES = ("value", "gradient", "simplex")
INTERPOLATIONS = ("linear", "hermite", "quintic")
FRACTALS = ("fbm", "billow", "ridged", "none")

DEFAULT_NOISE_TYPE = "value"
DEFAULT_INTERPOLATION = "hermite"
DEFAULT_FRACTAL = "billow"

# Supported coordinate dimensions
MAX_DIMENSIONS = 3

# Numeric range
# Octaves whose scaled coordinates exceed this magnitude contribute nothing
MAX_COORDINATE = 1e300
# Largest log(gain^(octaves - 1)) accepted by build_config
MAX_LOG_AMPLITUDE = math.log(sys.float_info.max) - 1.0

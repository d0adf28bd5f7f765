"""
Exceptions raised by PyFastNoise.

Author: B.G.
"""


class InvalidParameter(ValueError):
    """
    Raised when a noise configuration or sampling request is built from
    out-of-range parameters.

    Validation only happens at construction time; a configuration that was
    built successfully never raises during sampling.
    """

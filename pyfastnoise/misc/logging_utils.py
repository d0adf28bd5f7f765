"""
Logging setup for PyFastNoise command line tools.

Library modules only create loggers; handlers are installed here, on demand,
by the CLI or by scripts that want to see the package's log output.

Author: B.G.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level=logging.INFO):
    """
    Configure the root logger to print to stdout.

    Args:
        level: Logging level for the pyfastnoise loggers (default: INFO)
    """
    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # drop handlers from earlier calls
    )
    logging.getLogger("pyfastnoise").setLevel(level)

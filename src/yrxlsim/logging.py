"""Logging configuration for the yrxlsim command line.

The library logs through loguru but stays disabled on import, so embedding
applications see nothing unless they opt in. The CLI calls
``configure_logging`` to route yrxlsim records to stderr.
"""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


def configure_logging(verbose: bool = False) -> None:
    """Enable yrxlsim logging on a single stderr sink.

    Args:
        verbose: Log DEBUG records (each applied fill operation) instead of
                 only warnings and errors
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=LOG_FORMAT,
        colorize=sys.stderr.isatty(),
    )
    logger.enable("yrxlsim")

"""
Logging configuration for the export converter
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "negra_coref"


def setup_logging(
    level: Optional[str] = None,
    verbose: bool = False,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging for the converter and return the package logger.

    Only the ``negra_coref`` logger is raised to DEBUG in verbose mode;
    everything else stays at WARNING so third-party chatter is kept out.

    Args:
        level: Log level for the package (DEBUG, INFO, WARNING, ERROR)
        verbose: If True, enable DEBUG level logging for the package
        format_string: Custom format string for log messages
    """
    if verbose:
        level = "DEBUG"
    elif level is None:
        level = "WARNING"

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # stdout may carry the converted corpus
    logging.basicConfig(
        level=logging.WARNING,
        format=format_string,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper()))
    return package_logger

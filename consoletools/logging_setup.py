"""
Logging setup for ConsoleTools.

The library only logs debug details and settings warnings; user-facing
messages are printed to the console. Applications opt in with
configure_logging().
"""

import logging

PACKAGE_LOGGER = "consoletools"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(verbose: bool = False):
    """Send library log records to stderr (DEBUG when verbose, else WARNING)."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

"""Logger configuration for the command line entry point.

Only stdlib logging is used. Records go to stderr so standard output carries
nothing but the card.
"""

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """Route all records at ``level`` and above to stderr.

    Args:
        level: Minimum level emitted, e.g. ``logging.DEBUG`` for ``--verbose``.
    """
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,  # repeated CLI invocations in one process replace the handler
    )

"""Root logger setup for the ``hijri-periods`` command line."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Send log records to stderr so stdout carries only the JSON result.

    At the default WARNING level only time-zone fallbacks and weekly bound
    fallbacks show up. DEBUG adds every Hijri month scan. Pass ``force=True`` to
    reconfigure an already initialised root logger.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )

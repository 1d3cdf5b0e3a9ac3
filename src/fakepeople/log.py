from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = '{time:HH:mm:ss} | {level: <8} | {message}'


def configure_logging(verbose: bool = False, sink=None) -> None:
    """Replace loguru's default handler with a single stderr sink."""
    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        level='DEBUG' if verbose else 'INFO',
        format=LOG_FORMAT,
        colorize=sink is None,
    )

"""Bulk generation shared by the command-line tool and the HTTP API.

This module provides:
- generate_random: a function yielding independent, non-monotonic Ulyses
- generate_monotonic: a function yielding ordered Ulyses, waiting out overflows
"""

import logging
import time

from .core import Ulys
from .generator import Generator
from .utils.errors import MonotonicOverflowError

logger = logging.getLogger(__name__)


def generate_random(count):
    """Yields ``count`` one-shot Ulyses with no ordering guarantee within a millisecond."""
    for _ in range(count):
        yield Ulys.new()


def generate_monotonic(count, generator=None, sleep_ms=1):
    """Yields ``count`` strictly increasing Ulyses from ``generator``.

    On overflow the failed attempt is not counted: the loop sleeps for
    ``sleep_ms`` and tries again once the clock has moved on.

    Args:
        count (int): How many Ulyses to produce
        generator (Generator): The generator to drive, a fresh one if omitted
        sleep_ms (int): How long to wait after an overflow
    """
    generator = generator or Generator()
    produced = 0
    while produced < count:
        try:
            ulys = generator.generate()
        except MonotonicOverflowError:
            logger.warning("Failed to create new ulys due to overflow, sleeping %d ms", sleep_ms)
            time.sleep(sleep_ms / 1000)
            continue
        produced += 1
        yield ulys

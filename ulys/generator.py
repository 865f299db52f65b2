"""A module for handling monotonic Ulys generation.

This module provides:
- Generator: a class that spits out strictly increasing Ulyses
"""

import logging
from collections.abc import Callable
from datetime import datetime
from threading import Lock
from typing import Optional

from . import time_utils
from .core import RandomSource, Ulys
from .utils.errors import MonotonicOverflowError

logger = logging.getLogger(__name__)


class Generator:
    """A class that spits out strictly increasing Ulyses.

    When the clock has moved past the last issued Ulys, a fresh one is drawn.
    Otherwise (same millisecond, or the clock went backwards) the last one is
    incremented, so ordering holds even without fresh randomness.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """Sets reference variables for enforcing order.

        Args:
            clock (Callable): Returns the current datetime, ``time_utils.now`` if omitted
        """
        self.clock = clock or time_utils.now
        self._previous = Ulys.nil()
        self.lock = Lock()

    @property
    def previous(self) -> Ulys:
        """The last Ulys issued, nil before the first call."""
        return self._previous

    def generate(
        self,
        moment: Optional[datetime] = None,
        source: Optional[RandomSource] = None,
    ) -> Ulys:
        """Generates a Ulys larger than any this generator issued before.

        Args:
            moment (datetime): The time to embed, the clock reading if omitted
            source (RandomSource): Where to draw random bits from,
                a ``SystemRandom`` if omitted

        Returns:
            Ulys: The new identifier

        Raises:
            MonotonicOverflowError: If the random bits of the previous Ulys are
                all ones and the clock hasn't advanced. Nothing changes, so it
                is safe to retry once the clock ticks.
        """
        with self.lock:
            if moment is None:
                moment = self.clock()
            last_ms = self._previous.timestamp_ms
            if time_utils.to_millis(moment) <= last_ms:
                following = self._previous.increment()
                if following is None:
                    logger.debug("Random bits exhausted at %d ms", last_ms)
                    raise MonotonicOverflowError()
                self._previous = following
                return following
            fresh = Ulys.from_datetime(moment, source)
            self._previous = fresh
            return fresh

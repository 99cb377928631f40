"""
Time-sortable identifiers.

Format: 8 char base62 millisecond timestamp + 8 char random segment.
Calls that land in the same millisecond increment the previous random
segment instead of drawing a new one, so output from one generator is
strictly increasing in issue order.
"""

import threading
from collections import namedtuple

from core.errors import IdOverflowError
from idgen.alphabet import decode_base62, increment_base62, is_base62, pad_base62
from idgen.random_id import RandomSegmentGenerator
from internal.logging import get_logger
from utils.timestamp import now_millis

TIMESTAMP_WIDTH = 8
RANDOM_WIDTH = 8

SortableParts = namedtuple("SortableParts", ["timestamp_ms", "random"])


class SortableIdGenerator:
    """A single generation authority: one clock, one sequencing state."""

    def __init__(self, random_generator=None, clock=now_millis, timestamp_width=TIMESTAMP_WIDTH, random_width=RANDOM_WIDTH):
        if isinstance(timestamp_width, bool) or not isinstance(timestamp_width, int) or timestamp_width < TIMESTAMP_WIDTH:
            raise ValueError(f"timestamp_width must be an integer >= {TIMESTAMP_WIDTH}, got {timestamp_width!r}")
        if isinstance(random_width, bool) or not isinstance(random_width, int) or random_width <= 0:
            raise ValueError(f"random_width must be a positive integer, got {random_width!r}")
        self.random_generator = random_generator or RandomSegmentGenerator()
        self.clock = clock
        self.timestamp_width = timestamp_width
        self.random_width = random_width
        self._lock = threading.Lock()
        self._last_timestamp = None
        self._last_random = ""
        self._log = get_logger()
        self.issued = 0
        self.fresh = 0
        self.incremented = 0
        self.overflows = 0

    @property
    def length(self):
        return self.timestamp_width + self.random_width

    def generate(self):
        """Return the next identifier; raises IdOverflowError if the millisecond is exhausted."""
        with self._lock:
            now = self.clock()
            prefix = pad_base62(now, self.timestamp_width)

            if now == self._last_timestamp:
                segment = increment_base62(self._last_random)
                if segment is None:
                    self.overflows += 1
                    self._log.warn("sortable id overflow", timestamp_ms=now, issued=self.issued)
                    raise IdOverflowError("too many sortable ids generated in the same millisecond",
                                          timestamp_ms=now)
                self.incremented += 1
            else:
                segment = self.random_generator.generate(self.random_width)
                self._last_timestamp = now
                self.fresh += 1

            self._last_random = segment
            self.issued += 1

        return prefix + segment

    def stats(self):
        with self._lock:
            return {
                "issued": self.issued,
                "fresh": self.fresh,
                "incremented": self.incremented,
                "overflows": self.overflows,
            }


def parse_sortable_id(text, timestamp_width=TIMESTAMP_WIDTH):
    """Split an identifier into its decoded millisecond timestamp and random segment."""
    if not isinstance(text, str) or len(text) <= timestamp_width or not is_base62(text):
        raise ValueError(f"not a sortable id: {text!r}")
    return SortableParts(decode_base62(text[:timestamp_width]), text[timestamp_width:])

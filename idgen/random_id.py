"""
Uniform random base62 strings.

Bytes come from a secure source in batches. Bytes above 247 are rejected so
that `byte % 62` maps evenly onto the alphabet (4 full cycles of 62 fit in 256).
"""

import os
import threading

from core.errors import InvalidLengthError, RandomSourceError
from idgen.alphabet import ALPHABET, BASE
from internal.logging import get_logger

DEFAULT_LENGTH = 16
DEFAULT_BATCH_SIZE = 40
MAX_ACCEPTED_BYTE = BASE * (256 // BASE) - 1


def check_length(length):
    """Reject anything that is not a positive int."""
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"length must be an integer, got {type(length).__name__}", length=length)
    if length <= 0:
        raise InvalidLengthError(f"length must be positive, got {length}", length=length)


class RandomSegmentGenerator:
    """Owns a batch of secure random bytes and a cursor into it."""

    def __init__(self, batch_size=DEFAULT_BATCH_SIZE, source=os.urandom):
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size <= 0:
            raise ValueError(f"batch_size must be a positive integer, got {batch_size!r}")
        self.batch_size = batch_size
        self._source = source
        self._lock = threading.Lock()
        self._bytes = b""
        self._position = 0
        self._log = get_logger()
        self.refills = 0
        self.bytes_consumed = 0
        self.bytes_rejected = 0
        self.symbols_emitted = 0

    def _refill(self):
        try:
            batch = self._source(self.batch_size)
        except (OSError, NotImplementedError) as exc:
            self._log.error("random source failed", error=exc, requested=self.batch_size)
            raise RandomSourceError("secure random source unavailable",
                                    requested=self.batch_size, cause=exc) from exc
        if not batch:
            self._log.error("random source returned no bytes", requested=self.batch_size)
            raise RandomSourceError("secure random source returned no bytes", requested=self.batch_size)

        self._bytes = bytes(batch)
        self._position = 0
        self.refills += 1
        self._log.debug("random buffer refilled", size=len(self._bytes), refills=self.refills)

    def generate(self, length=DEFAULT_LENGTH):
        """Return `length` symbols drawn uniformly from the alphabet."""
        check_length(length)

        chars = []
        with self._lock:
            while len(chars) < length:
                if self._position >= len(self._bytes):
                    self._refill()
                byte = self._bytes[self._position]
                self._position += 1
                self.bytes_consumed += 1
                if byte <= MAX_ACCEPTED_BYTE:
                    chars.append(ALPHABET[byte % BASE])
                else:
                    self.bytes_rejected += 1
            self.symbols_emitted += length

        return "".join(chars)

    def stats(self):
        with self._lock:
            return {
                "refills": self.refills,
                "bytes_consumed": self.bytes_consumed,
                "bytes_rejected": self.bytes_rejected,
                "symbols_emitted": self.symbols_emitted,
            }

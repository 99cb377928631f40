"""Deterministic clock and byte source for generator tests."""


class FrozenClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now=1_700_000_000_000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms=1):
        self.now += ms


class ScriptedSource:
    """Byte source that hands out prepared batches in order."""

    def __init__(self, *batches):
        self.batches = [bytes(batch) for batch in batches]
        self.calls = []

    def __call__(self, size):
        self.calls.append(size)
        return self.batches.pop(0)

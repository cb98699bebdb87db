"""Half-overlapping sliding window over a stream of sample blocks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class SlidingWindow:
    """Builds windows of ``length`` samples: the previous half block then the new one.

    Each call to :meth:`push` takes ``length // 2`` new samples. Before any
    history exists the older half is zero.
    """

    def __init__(self, length: int) -> None:
        if length < 2 or length % 2:
            raise ValueError(f"window length must be a positive even number, got {length}")
        self.length = length
        self._delay: deque[float] = deque([0.0] * (length // 2))

    def push(self, block: Iterable[float]) -> list[float]:
        """Feed one half-window of samples and return the full window."""
        new = list(block)
        if len(new) != self.length // 2:
            raise ValueError(f"expected {self.length // 2} samples, got {len(new)}")
        delayed = []
        for sample in new:
            delayed.append(self._delay.popleft())
            self._delay.append(sample)
        return delayed + new
"""
Identifier generation for entity kinds.

Each entity kind owns one generator; identifiers start at 1, increase by one
per call and are never reused. There is no reset: a new ClinicContext gets
new generators.
"""

import itertools
import threading


class IdentifierGenerator:
    """Monotonically increasing integer identifiers for one entity kind."""

    def __init__(self, kind: str):
        self.kind = kind
        self._counter = itertools.count(1)
        self._last_issued = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            self._last_issued = next(self._counter)
            return self._last_issued

    @property
    def last_issued(self) -> int:
        """Most recently issued identifier, 0 before the first call."""
        return self._last_issued

    def __repr__(self) -> str:
        return f"IdentifierGenerator(kind={self.kind!r}, last_issued={self._last_issued})"

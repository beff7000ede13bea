"""Connectivity check for topologies given as relation bit vectors."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class ConnectivityChecker:
    """Checks whether a relation bit vector describes a connected topology.

    Bit ``k`` stands for the relation between objects ``i < j`` in the order
    (0,1), (0,2), ..., (0,n-1), (1,2), ..., (n-2,n-1).
    """

    def __init__(self, num_objects: int) -> None:
        self.num_objects = num_objects

    def _index(self, a: int, b: int) -> int:
        low, high = min(a, b), max(a, b)
        n = self.num_objects
        return low * n - low * (low + 1) // 2 + (high - low) - 1

    def is_connected(self, bits: Sequence[bool]) -> bool:
        """Return whether every object is reachable through the set relations."""
        n = self.num_objects
        if len(bits) != (n - 1) * n // 2:
            logger.warning("Bitvector does not represent the relations properly.")
            return False
        if n == 0:
            return False

        ones = sum(1 for bit in bits if bit)
        if ones < n - 1:
            return False
        if ones == len(bits):
            return True

        # Any start works: in a connected graph every node has a relation.
        seen = {0}
        to_visit = deque([0])
        while to_visit:
            current = to_visit.popleft()
            for other in range(n):
                if other != current and other not in seen and bits[self._index(current, other)]:
                    seen.add(other)
                    to_visit.append(other)
        return len(seen) == n
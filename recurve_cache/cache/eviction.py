"""
Cost Eviction Policy Module

This module implements the most-costly-first eviction policy.

Eviction Concept:
- A store violates the policy when it holds more than count_limit entries
  or its total cost exceeds total_cost_limit (a limit of 0 is unlimited)
- While violated, the entry with the highest cost is removed
- Among equal costs the entry nearest the BEGINNING of the store
  (the least recently added) goes first
"""

import logging
from typing import List, Optional

from .store import Cost, CostStore

logger = logging.getLogger(__name__)


class CacheInvariantError(AssertionError):
    """Eviction was required but the store had nothing left to evict."""


class CostEvictionPolicy:
    """
    Most-costly-first eviction with count and total cost limits.

    Usage:
        policy = CostEvictionPolicy(count_limit=2)
        store.put("a", 1, cost=1)
        store.put("b", 2, cost=10)
        store.put("c", 3, cost=1)
        policy.evict(store)  # Returns ["b"]

    Attributes:
        count_limit: Maximum number of entries (0 = unlimited)
        total_cost_limit: Maximum sum of entry costs (0 = unlimited)
    """

    def __init__(self, count_limit: int = 0, total_cost_limit: Cost = 0):
        self.count_limit = count_limit
        self.total_cost_limit = total_cost_limit

    def is_bounded(self) -> bool:
        """True if at least one limit is set."""
        return self.count_limit > 0 or self.total_cost_limit > 0

    def should_evict(self, store: CostStore) -> bool:
        """
        Check whether the store currently violates either limit.

        Args:
            store: The store to check

        Returns:
            True if an entry must be evicted
        """
        if 0 < self.count_limit < store.size():
            return True
        return 0 < self.total_cost_limit < store.total_cost

    def select_victim(self, store: CostStore) -> Optional[str]:
        """
        Find the key to evict next without removing it.

        Scans in insertion order and keeps the first entry holding the
        maximum cost, so ties resolve to the least recently added key.

        Returns:
            The victim key, or None if the store is empty

        Time Complexity: O(n)
        """
        victim = None
        max_cost: Cost = 0

        for key, entry in store.items():
            if victim is None or entry.cost > max_cost:
                victim = key
                max_cost = entry.cost

        return victim

    def evict(self, store: CostStore) -> List[str]:
        """
        Evict entries until neither limit is violated.

        Args:
            store: The store to trim

        Returns:
            Evicted keys, in eviction order

        Raises:
            CacheInvariantError: If a limit is violated by an empty store
        """
        evicted: List[str] = []

        while self.should_evict(store):
            victim = self.select_victim(store)
            if victim is None:
                logger.error(
                    f"Eviction required with empty store "
                    f"(count_limit={self.count_limit}, total_cost_limit={self.total_cost_limit})"
                )
                raise CacheInvariantError("eviction required but no entry to evict")

            entry = store.pop(victim)
            logger.debug(f"Evicted {victim} (cost={entry.cost})")
            evicted.append(victim)

        return evicted

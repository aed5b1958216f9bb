"""
Bounded Cost-Aware Cache Module

This module implements the public cache built on CostStore and
CostEvictionPolicy.

Every mutation that can break a limit (set, set_count_limit,
set_total_cost_limit) finishes with an eviction pass, so both limits hold
whenever a call returns.

Keys must be non-empty strings. Invalid keys are never an error: lookups
miss, removals report False and writes are ignored.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..config.settings import settings
from .eviction import CostEvictionPolicy
from .store import Cost, CostStore

logger = logging.getLogger(__name__)


def is_valid_key(key: Any) -> bool:
    """A key is valid if it is a non-empty string."""
    return isinstance(key, str) and key != ""


def _check_number(value: Any, name: str, integer: bool = False) -> None:
    """Reject non-numeric, negative and NaN costs/limits."""
    allowed = (int,) if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, allowed):
        kind = "an integer" if integer else "a number"
        raise TypeError(f"{name} must be {kind}, got {type(value).__name__}")
    if not value >= 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class Cache:
    """
    In-memory key-value cache bounded by entry count and total cost.

    When either limit is exceeded, the most costly entry is evicted,
    repeatedly, until both limits hold again. Among entries of equal cost
    the least recently added one is evicted first. Setting an existing key
    counts as adding it again.

    Usage:
        cache = Cache(count_limit=2)
        cache.set("a", 1, cost=1)
        cache.set("b", 2, cost=10)
        cache.set("c", 3, cost=1)
        cache.get("b")  # None, evicted as the most costly entry

    Attributes:
        A limit of 0 means unlimited. Limits are read and changed through
        get_count_limit/set_count_limit and
        get_total_cost_limit/set_total_cost_limit.
    """

    def __init__(self, count_limit: Optional[int] = None, total_cost_limit: Optional[Cost] = None):
        """
        Initialize the cache.

        Args:
            count_limit: Maximum number of entries
                         (default from settings.DEFAULT_COUNT_LIMIT)
            total_cost_limit: Maximum sum of entry costs
                              (default from settings.DEFAULT_TOTAL_COST_LIMIT)

        Raises:
            TypeError: If a limit is not a number
            ValueError: If a limit is negative
        """
        if count_limit is None:
            count_limit = settings.DEFAULT_COUNT_LIMIT
        if total_cost_limit is None:
            total_cost_limit = settings.DEFAULT_TOTAL_COST_LIMIT

        _check_number(count_limit, "count_limit", integer=True)
        _check_number(total_cost_limit, "total_cost_limit")

        self._store = CostStore()
        self._policy = CostEvictionPolicy(count_limit, total_cost_limit)

        self._hits = 0
        self._misses = 0
        self._evictions = 0

    # ------------------------------------------------------------------
    # Key/value operations
    # ------------------------------------------------------------------

    def get(self, key: str) -> Optional[Any]:
        """
        Retrieve the value for a given key.

        Entries and their order are never changed, but a valid key
        updates the hit/miss counters reported by get_stats().

        Returns:
            The value if present, None for a missing or invalid key
        """
        if not is_valid_key(key):
            return None

        entry = self._store.get_entry(key)
        if entry is None:
            self._misses += 1
            return None

        self._hits += 1
        return entry.value

    def set(self, key: str, value: Any, cost: Cost = 0) -> None:
        """
        Insert or replace a value, then evict while a limit is exceeded.

        Args:
            key: The key to store (ignored if not a non-empty string)
            value: The value to associate with the key
            cost: Non-negative eviction weight, 0 if omitted

        Raises:
            TypeError: If cost is not a number
            ValueError: If cost is negative

        Replacing a key moves it to the most recently added position,
        even when value and cost are unchanged. The new entry itself may
        be evicted if it is the most costly one.
        """
        if not is_valid_key(key):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Ignoring set for invalid key {key!r}")
            return

        _check_number(cost, "cost")

        self._store.put(key, value, cost)
        self._evict()

    def remove(self, key: str) -> bool:
        """
        Remove a key.

        Returns:
            True if the key existed, False otherwise (including invalid keys)
        """
        if not is_valid_key(key):
            return False
        return self._store.delete(key)

    def exists(self, key: str) -> bool:
        """Check if a live entry exists for key."""
        return is_valid_key(key) and self._store.contains(key)

    def clear(self) -> None:
        """Remove all entries. Limits are kept."""
        self._store.clear()

    def get_cost(self, key: str) -> Optional[Cost]:
        """Get the cost stored with key, or None if absent."""
        if not is_valid_key(key):
            return None
        entry = self._store.get_entry(key)
        return entry.cost if entry is not None else None

    # ------------------------------------------------------------------
    # Limits
    # ------------------------------------------------------------------

    def get_count_limit(self) -> int:
        """Get the maximum entry count (0 = unlimited)."""
        return self._policy.count_limit

    def set_count_limit(self, value: int) -> None:
        """
        Change the maximum entry count and evict down to it.

        Raises:
            TypeError: If value is not an integer
            ValueError: If value is negative
        """
        _check_number(value, "count_limit", integer=True)
        logger.debug(f"count_limit {self._policy.count_limit} -> {value}")
        self._policy.count_limit = value
        self._evict()

    def get_total_cost_limit(self) -> Cost:
        """Get the maximum total cost (0 = unlimited)."""
        return self._policy.total_cost_limit

    def set_total_cost_limit(self, value: Cost) -> None:
        """
        Change the maximum total cost and evict down to it.

        Raises:
            TypeError: If value is not a number
            ValueError: If value is negative
        """
        _check_number(value, "total_cost_limit")
        logger.debug(f"total_cost_limit {self._policy.total_cost_limit} -> {value}")
        self._policy.total_cost_limit = value
        self._evict()

    def _evict(self) -> None:
        if not self._policy.is_bounded():
            return
        evicted = self._policy.evict(self._store)
        self._evictions += len(evicted)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def for_each(self, visit: Callable[[Any, str], Optional[bool]]) -> None:
        """
        Call visit(value, key) for every entry in insertion order.

        Traversal stops as soon as visit returns False. Key order is
        captured when the call starts; keys removed while visiting are
        skipped.
        """
        for key in self._store.keys():
            entry = self._store.get_entry(key)
            if entry is None:
                continue
            if visit(entry.value, key) is False:
                break

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Lazily yield (key, value) pairs in insertion order."""
        for key in self._store.keys():
            entry = self._store.get_entry(key)
            if entry is not None:
                yield key, entry.value

    def keys(self) -> List[str]:
        """Get all keys in insertion order (oldest first)."""
        return self._store.keys()

    def __iter__(self) -> Iterator[str]:
        return iter(self._store.keys())

    def __contains__(self, key: object) -> bool:
        return self.exists(key)

    def __len__(self) -> int:
        return self._store.size()

    def size(self) -> int:
        """Get current number of entries."""
        return self._store.size()

    def total_cost(self) -> Cost:
        """Get the sum of all entry costs."""
        return self._store.total_cost

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the cache.

        Returns:
            Dictionary containing:
            - size, total_cost: current contents
            - count_limit, total_cost_limit: configured limits
            - hits, misses: get() outcomes for valid keys
            - evictions: entries removed by the eviction policy
            - count_utilization, cost_utilization: fraction of each limit
              in use (0 when that limit is unlimited)
        """
        size = self._store.size()
        total_cost = self._store.total_cost
        count_limit = self._policy.count_limit
        total_cost_limit = self._policy.total_cost_limit

        return {
            "size": size,
            "total_cost": total_cost,
            "count_limit": count_limit,
            "total_cost_limit": total_cost_limit,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "count_utilization": size / count_limit if count_limit > 0 else 0,
            "cost_utilization": total_cost / total_cost_limit if total_cost_limit > 0 else 0,
        }

    def reset_stats(self) -> None:
        """Zero the hit, miss and eviction counters."""
        self._hits = 0
        self._misses = 0
        self._evictions = 0

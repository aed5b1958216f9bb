"""
Ordered Cost Store Module

This module implements the ordered key -> (value, cost) storage that
backs the cache.

Ordering:
- Entries are kept in insertion order (oldest at the BEGINNING)
- Re-inserting an existing key drops its old position; it moves to the END
- Eviction tie-breaks rely on this order, so nothing else may reorder it

The store trusts its inputs. Key and cost validation happen in Cache.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple, Union

Cost = Union[int, float]


@dataclass
class CacheEntry:
    """A cached value and the cost it was stored with."""

    value: Any
    cost: Cost = 0


class CostStore:
    """
    Insertion-ordered key-value store.

    This class provides O(1) average-case time complexity for:
    - put: Insert or replace an entry (replacement moves it to the end)
    - get_entry: Retrieve an entry by key
    - delete / pop: Remove an entry

    total_cost is O(n): it is summed from the entries on every call so it
    can never drift from the stored costs.

    Internal Storage:
        Uses OrderedDict for O(1) operations with insertion ordering.
        Format: key -> CacheEntry(value, cost)
    """

    def __init__(self):
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()

    def put(self, key: str, value: Any, cost: Cost = 0) -> None:
        """
        Insert or replace an entry.

        Args:
            key: The key to store
            value: The value to associate with the key
            cost: Non-negative eviction weight

        Time Complexity: O(1) average

        A replaced entry is discarded entirely, including its position,
        so the key becomes the most recently inserted one.
        """
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(value, cost)

    def get_entry(self, key: str) -> Optional[CacheEntry]:
        """Return the entry for key, or None if not present."""
        return self._entries.get(key)

    def delete(self, key: str) -> bool:
        """
        Delete an entry.

        Returns:
            True if the key was present, False otherwise
        """
        if key not in self._entries:
            return False
        del self._entries[key]
        return True

    def pop(self, key: str) -> CacheEntry:
        """
        Remove and return the entry for key.

        Raises:
            KeyError: If key is not present
        """
        return self._entries.pop(key)

    def contains(self, key: str) -> bool:
        """Check if key is present."""
        return key in self._entries

    def keys(self) -> List[str]:
        """Keys in insertion order (oldest first)."""
        return list(self._entries.keys())

    def items(self) -> Iterator[Tuple[str, CacheEntry]]:
        """Iterate (key, entry) pairs in insertion order."""
        return iter(self._entries.items())

    @property
    def total_cost(self) -> Cost:
        """Sum of the costs of all stored entries."""
        return sum(entry.cost for entry in self._entries.values())

    def size(self) -> int:
        """Get the current number of entries."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

"""Cache module for recurve-cache."""

from .cache import Cache, is_valid_key
from .eviction import CacheInvariantError, CostEvictionPolicy
from .store import CacheEntry, CostStore

__all__ = [
    "Cache",
    "CacheEntry",
    "CacheInvariantError",
    "CostEvictionPolicy",
    "CostStore",
    "is_valid_key",
]

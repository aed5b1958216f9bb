"""
recurve-cache: Bounded Cost-Aware Cache

An in-memory key/value cache limited by item count and by total cost.
When a limit is exceeded the most costly entries are evicted first,
oldest insertion first among equal costs.
"""

from .cache.cache import Cache

__version__ = "1.0.0"

__all__ = ["Cache"]

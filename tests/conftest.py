"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from recurve_cache.cache.cache import Cache
from recurve_cache.cache.eviction import CostEvictionPolicy
from recurve_cache.cache.store import CostStore


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> CostStore:
    """Create a fresh, empty CostStore."""
    return CostStore()


@pytest.fixture
def filled_store() -> CostStore:
    """Create a CostStore holding a(1), b(10), c(1), in that order."""
    s = CostStore()
    s.put("a", 1, 1)
    s.put("b", 2, 10)
    s.put("c", 3, 1)
    return s


# ============================================================================
# Eviction Policy Fixtures
# ============================================================================

@pytest.fixture
def policy() -> CostEvictionPolicy:
    """Create an unbounded eviction policy."""
    return CostEvictionPolicy()


# ============================================================================
# Cache Fixtures
# ============================================================================

@pytest.fixture
def cache() -> Cache:
    """Create an unlimited Cache."""
    return Cache(count_limit=0, total_cost_limit=0)


@pytest.fixture
def count_limited_cache() -> Cache:
    """Create a Cache limited to 2 entries."""
    return Cache(count_limit=2)


@pytest.fixture
def cost_limited_cache() -> Cache:
    """Create a Cache limited to a total cost of 5."""
    return Cache(total_cost_limit=5)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )

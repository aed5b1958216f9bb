"""
recurve-cache Configuration Settings

Default limits and logging options, overridable through environment
variables. The limit variables are read each time Settings is built.
"""

import os
from dataclasses import dataclass, field
from typing import Union

Cost = Union[int, float]


def _env_count(name: str) -> int:
    """Read a non-fractional limit from the environment (unset = 0)."""
    raw = os.environ.get(name, "0").strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_cost(name: str) -> Cost:
    """Read a cost limit from the environment, int if it has no fraction."""
    raw = os.environ.get(name, "0").strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class Settings:
    """Cache configuration settings."""

    # Eviction limits (0 means unlimited)
    DEFAULT_COUNT_LIMIT: int = field(
        default_factory=lambda: _env_count("RECURVE_CACHE_COUNT_LIMIT")
    )
    DEFAULT_TOTAL_COST_LIMIT: Cost = field(
        default_factory=lambda: _env_cost("RECURVE_CACHE_TOTAL_COST_LIMIT")
    )

    # Logging settings
    DEBUG: bool = os.environ.get("RECURVE_CACHE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("RECURVE_CACHE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()

"""
Configuration Management for Record Search

Sensible defaults with optional environment variable overrides.
"""

import os
from typing import Optional


class StoreConfig:
    """Record store configuration"""

    DEFAULT_INITIAL_CAPACITY = 100  # Key index buckets before the first resize
    DEFAULT_LOAD_FACTOR = 0.75  # Occupancy ratio that triggers a resize

    def __init__(self, initial_capacity: Optional[int] = None,
                 load_factor_threshold: Optional[float] = None):
        # Explicit arguments win over the environment
        self.initial_capacity = initial_capacity if initial_capacity is not None else self._get_int_env(
            "RECORD_SEARCH_INITIAL_CAPACITY", self.DEFAULT_INITIAL_CAPACITY
        )
        self.load_factor_threshold = load_factor_threshold if load_factor_threshold is not None else self._get_float_env(
            "RECORD_SEARCH_LOAD_FACTOR", self.DEFAULT_LOAD_FACTOR
        )

        self._validate_config()

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer from environment variable with fallback"""
        try:
            value = os.environ.get(key)
            if value is not None:
                return int(value)
        except (ValueError, TypeError):
            pass
        return default

    def _get_float_env(self, key: str, default: float) -> float:
        """Get float from environment variable with fallback"""
        try:
            value = os.environ.get(key)
            if value is not None:
                return float(value)
        except (ValueError, TypeError):
            pass
        return default

    def _validate_config(self):
        """Validate configuration values"""
        if self.initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        if not 0.0 < self.load_factor_threshold <= 1.0:
            raise ValueError("load_factor_threshold must be between 0.0 and 1.0")

    def __repr__(self) -> str:
        return (
            f"StoreConfig("
            f"initial_capacity={self.initial_capacity}, "
            f"load_factor_threshold={self.load_factor_threshold})"
        )


# Global configuration instance
_config: Optional[StoreConfig] = None


def get_store_config() -> StoreConfig:
    """Get global store configuration instance"""
    global _config
    if _config is None:
        _config = StoreConfig()
    return _config


def reset_config():
    """Reset configuration (mainly for testing)"""
    global _config
    _config = None


# Environment documentation
CONFIG_DOCS = """
Record Search Configuration Environment Variables:

- RECORD_SEARCH_INITIAL_CAPACITY: Initial key index bucket count (default: 100)
- RECORD_SEARCH_LOAD_FACTOR: Resize threshold 0.0-1.0 (default: 0.75)

Example usage:
    export RECORD_SEARCH_INITIAL_CAPACITY=1024
    export RECORD_SEARCH_LOAD_FACTOR=0.5
"""

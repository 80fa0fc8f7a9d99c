"""
Errors raised by litespeed_cache.
"""
from typing import Any


class ConfigurationError(Exception):
    """Raised when a cache policy is given an unsupported value."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)

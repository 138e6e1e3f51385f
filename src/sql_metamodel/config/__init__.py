"""Configuration management for sql_metamodel.

Usage:
    >>> from sql_metamodel.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from sql_metamodel.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]

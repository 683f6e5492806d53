"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, TRANSPORTS

__all__ = [
    "ConfigManager",
    "Config",
    "TRANSPORTS",
]

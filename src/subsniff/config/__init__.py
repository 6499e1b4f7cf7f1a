"""Configuration for subsniff."""

from subsniff.config.config import ConfigManager, config

__all__ = ["ConfigManager", "config"]

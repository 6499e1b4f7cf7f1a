"""Configuration management for subtitle decoding and format sniffing."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from subsniff.exceptions import ConfigurationError

DEFAULT_CONFIDENCE_THRESHOLD = 50
DEFAULT_LINE_ENDING_WINDOW = 80
DEFAULT_LATIN1_MIN_PERCENT = 1.0
DEFAULT_SNIFF_WINDOW = 4096


class ConfigManager:
    """Manages tunables read from environment variables."""

    def __init__(self) -> None:
        """Initialize the configuration manager."""
        self.env_file = self._load_environment()

    def _load_environment(self) -> Optional[Path]:
        """
        Load environment variables in order of precedence:
        1. Current working directory .env
        2. User home directory .env
        3. ~/.config/subsniff/.env, then /etc/subsniff/.env
        4. System environment variables only

        Returns:
            Path of the loaded .env file, or None if none was found
        """
        home_dir = Path.home()
        candidates = [
            Path.cwd() / ".env",
            home_dir / ".env",
            home_dir / ".config" / "subsniff" / ".env",
            Path("/etc/subsniff/.env"),  # Linux system-wide
        ]

        for env_path in candidates:
            if env_path.exists():
                load_dotenv(env_path)
                return env_path

        # Fall back to system environment variables only
        return None

    def get_config_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get configuration value with fallback."""
        return os.getenv(key, default)

    def get_int_config_value(self, key: str, default: int) -> int:
        """Get integer configuration value with fallback."""
        value = self.get_config_value(key)
        if value is None or value.strip() == "":
            return default
        try:
            return int(value)
        except ValueError as e:
            error_message = "Invalid integer value for %s: %s" % (key, value)
            raise ConfigurationError(error_message, key) from e

    def get_float_config_value(self, key: str, default: float) -> float:
        """Get float configuration value with fallback."""
        value = self.get_config_value(key)
        if value is None or value.strip() == "":
            return default
        try:
            return float(value)
        except ValueError as e:
            error_message = "Invalid float value for %s: %s" % (key, value)
            raise ConfigurationError(error_message, key) from e

    @property
    def confidence_threshold(self) -> int:
        """Detector confidence (0-100) above which its verdict is trusted."""
        return self.get_int_config_value(
            "SUBSNIFF_CONFIDENCE_THRESHOLD", DEFAULT_CONFIDENCE_THRESHOLD
        )

    @property
    def line_ending_window(self) -> int:
        """Number of leading characters sampled to pick the line ending style."""
        window = self.get_int_config_value(
            "SUBSNIFF_LINE_ENDING_WINDOW", DEFAULT_LINE_ENDING_WINDOW
        )
        if window <= 0:
            raise ConfigurationError(
                "SUBSNIFF_LINE_ENDING_WINDOW must be positive, got %d" % window,
                "SUBSNIFF_LINE_ENDING_WINDOW",
            )
        return window

    @property
    def latin1_min_percent(self) -> float:
        """Share of Swedish accented bytes that marks input as Latin-1."""
        return self.get_float_config_value(
            "SUBSNIFF_LATIN1_MIN_PERCENT", DEFAULT_LATIN1_MIN_PERCENT
        )

    @property
    def sniff_window(self) -> int:
        """Number of leading characters the format signatures inspect."""
        window = self.get_int_config_value("SUBSNIFF_SNIFF_WINDOW", DEFAULT_SNIFF_WINDOW)
        if window <= 0:
            raise ConfigurationError(
                "SUBSNIFF_SNIFF_WINDOW must be positive, got %d" % window,
                "SUBSNIFF_SNIFF_WINDOW",
            )
        return window


# Global configuration instance
config = ConfigManager()

"""
Configuration system for minish

Provides environment variable-based configuration for default settings.
"""

import os
from typing import Optional


DEFAULT_PROMPT = "$ "


def _get_version() -> str:
    """Get package version"""
    try:
        from minish import __version__
        return __version__
    except ImportError:
        return "unknown"


class Config:
    """Global configuration for minish"""

    def __init__(self):
        self._load_from_environment()

    def _load_from_environment(self):
        """Load configuration from environment variables"""

        # Logging configuration
        self.log_level = os.getenv('MINISH_LOG_LEVEL', 'ERROR').upper()

        # Prompt printed before each read
        self.prompt = self._parse_str_env('MINISH_PROMPT', DEFAULT_PROMPT)

    def _parse_str_env(self, key: str, default: Optional[str]) -> Optional[str]:
        """Parse string environment variable, treating empty values as unset"""
        value = os.getenv(key)
        if not value:
            return default
        return value

    def reload(self):
        """Reload configuration from environment variables and sync with logging"""
        self._load_from_environment()

        from .logging import init_logging_from_env
        init_logging_from_env(self)

    def get_summary(self) -> dict:
        """Get a summary of current configuration"""
        # Get actual current log level from logging module
        from .logging import get_log_level_string
        current_log_level = get_log_level_string()

        return {
            'version': _get_version(),
            'log_level': current_log_level,
            'prompt': self.prompt,
        }


# Global configuration instance
config = Config()


def get_config() -> Config:
    """Get the global configuration instance"""
    return config


def reload_config():
    """Reload configuration from environment variables"""
    config.reload()


def print_config():
    """Print current configuration in a readable format"""
    print("=" * 60)
    print("MINISH CONFIGURATION")
    print("=" * 60)

    summary = config.get_summary()

    print(f"Version: {summary['version']}")

    print("\nLOGGING:")
    print(f"  MINISH_LOG_LEVEL = {summary['log_level']}")

    print("\nPROMPT:")
    print(f"  MINISH_PROMPT = {summary['prompt']!r}")

    print("\n" + "=" * 60)
    print("Set environment variables to customize these defaults")
    print("Example: export MINISH_LOG_LEVEL=DEBUG")
    print("=" * 60)

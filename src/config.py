#!/usr/bin/env python3
"""
Configuration Management for Card Fusion.

This module provides a configuration system with default settings and
environment variable overrides via .env file support.

Usage:
    from config import config

    catalog = catalog_service.load_from(config.CATALOG_SOURCE)
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent


class Config:
    """
    Base configuration class with default game settings.

    All configuration values can be overridden via environment variables
    or .env file.
    """

    def __init__(self):
        """Initialize configuration, loading .env file if it exists."""
        # Load .env file from project root (parent of src directory)
        env_path = PROJECT_ROOT / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        self._load_config()

    def _load_config(self):
        """Load all configuration values with environment overrides."""
        # ================================
        # CATALOG SETTINGS
        # ================================
        # Path (relative to project root) or http(s) URL of the catalog document
        self.CATALOG_SOURCE = self._get_env("CATALOG_SOURCE", "data/gamedata.json")
        self.CATALOG_FETCH_TIMEOUT = self._get_float_env("CATALOG_FETCH_TIMEOUT", 5.0)

        # ================================
        # GAME RULE SETTINGS
        # ================================
        # Whether the same element may sit in both slots at once
        self.ALLOW_DUPLICATE_SELECTION = self._get_bool_env("ALLOW_DUPLICATE_SELECTION", True)
        # Resolve through the precomputed recipe index instead of a linear scan
        self.USE_RECIPE_INDEX = self._get_bool_env("USE_RECIPE_INDEX", True)

        # ================================
        # LOGGING AND DEBUG SETTINGS
        # ================================
        self.LOG_LEVEL = self._get_env("LOG_LEVEL", "INFO")
        self.ENABLE_DEBUG_LOGS = self._get_bool_env("ENABLE_DEBUG_LOGS", False)
        self.ENABLE_TIMING_LOGS = self._get_bool_env("ENABLE_TIMING_LOGS", True)

    def _get_env(self, key: str, default: str) -> str:
        """Get string environment variable with default."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer environment variable with default."""
        try:
            return int(os.getenv(key, str(default)))
        except (ValueError, TypeError):
            return default

    def _get_float_env(self, key: str, default: float) -> float:
        """Get float environment variable with default."""
        try:
            return float(os.getenv(key, str(default)))
        except (ValueError, TypeError):
            return default

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get boolean environment variable with default."""
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on", "enabled")

    @property
    def effective_log_level(self) -> str:
        """Get log level, forced to DEBUG when debug logs are enabled."""
        return "DEBUG" if self.ENABLE_DEBUG_LOGS else self.LOG_LEVEL.upper()

    def resolve_catalog_location(self, location: str = None) -> str:
        """Get catalog location with relative file paths anchored at the project root.

        Args:
            location: Path or URL; defaults to CATALOG_SOURCE

        Returns:
            URL unchanged, or an absolute file path
        """
        location = location or self.CATALOG_SOURCE
        if location.startswith(("http://", "https://")):
            return location

        path = Path(location)
        if not path.is_absolute() and not path.exists():
            path = PROJECT_ROOT / path
        return str(path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dict for logging/debugging."""
        return {key: value for key, value in self.__dict__.items() if not key.startswith("_")}


class DevelopmentConfig(Config):
    """Development environment configuration with debug settings."""

    def _load_config(self):
        """Load base config then apply development overrides."""
        super()._load_config()

        self.LOG_LEVEL = self._get_env("LOG_LEVEL", "DEBUG")
        self.ENABLE_DEBUG_LOGS = self._get_bool_env("ENABLE_DEBUG_LOGS", True)
        # Linear scan keeps lookups easy to follow while authoring catalogs
        self.USE_RECIPE_INDEX = self._get_bool_env("USE_RECIPE_INDEX", False)


class ProductionConfig(Config):
    """Production environment configuration."""

    def _load_config(self):
        """Load base config then apply production overrides."""
        super()._load_config()

        self.LOG_LEVEL = self._get_env("LOG_LEVEL", "WARNING")
        self.ENABLE_DEBUG_LOGS = self._get_bool_env("ENABLE_DEBUG_LOGS", False)
        self.ENABLE_TIMING_LOGS = self._get_bool_env("ENABLE_TIMING_LOGS", False)


# ================================
# CONFIGURATION FACTORY
# ================================


def get_config() -> Config:
    """Get appropriate configuration based on environment.

    Returns:
        Configuration instance based on CARD_FUSION_ENV environment variable
    """
    env = os.getenv("CARD_FUSION_ENV", "default")

    if env == "development":
        return DevelopmentConfig()
    elif env == "production":
        return ProductionConfig()
    else:
        return Config()


# Global configuration instance
config = get_config()

"""Configuration module for Playlist Time Calculator."""

from .settings import CatalogConfig, DisplayConfig, ImportConfig, LoggingConfig, Settings

__all__ = ["CatalogConfig", "DisplayConfig", "ImportConfig", "LoggingConfig", "Settings"]

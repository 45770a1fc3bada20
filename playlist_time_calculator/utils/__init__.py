"""Utility modules for Playlist Time Calculator."""

from .logger import get_logger, setup_logger
from .platform import get_config_dir, is_windows

__all__ = ["get_logger", "setup_logger", "get_config_dir", "is_windows"]

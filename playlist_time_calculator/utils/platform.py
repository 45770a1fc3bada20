"""Platform-specific utilities for locating configuration files."""

import os
import sys
from pathlib import Path

APP_DIR_NAME = 'playlist-time-calculator'


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform == 'win32' or os.name == 'nt'


def is_macos() -> bool:
    """Check if running on macOS."""
    return sys.platform == 'darwin'


def get_config_dir(create: bool = True) -> Path:
    """Get the configuration directory based on the platform.

    Args:
        create: Create the directory if it does not exist yet

    Returns:
        Path: Configuration directory path
            - Windows: %APPDATA%/playlist-time-calculator
            - macOS: ~/Library/Application Support/playlist-time-calculator
            - Linux: ~/.config/playlist-time-calculator
    """
    if is_windows():
        base = Path(os.environ.get('APPDATA', Path.home()))
    elif is_macos():
        base = Path.home() / 'Library' / 'Application Support'
    else:  # Linux and others
        base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    config_dir = base / APP_DIR_NAME
    if create:
        config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir

"""Configuration management for Playlist Time Calculator."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml

from ..core.importer import DEFAULT_PLACEHOLDER_ARTIST, DEFAULT_PLACEHOLDER_NAME
from ..core.timecode import DEFAULT_TIME_FORMAT
from ..utils.platform import get_config_dir


@dataclass
class DisplayConfig:
    """Display configuration."""

    time_format: str = DEFAULT_TIME_FORMAT

    def __post_init__(self):
        """Validate the clock format."""
        if not isinstance(self.time_format, str) or '%' not in self.time_format:
            raise ValueError("time_format must be a strftime format, e.g. '%H:%M'")
        try:
            datetime(2000, 1, 1).strftime(self.time_format)
        except ValueError as e:
            raise ValueError(f"Invalid time_format: {e}") from e


@dataclass
class ImportConfig:
    """Text import configuration."""

    placeholder_name: str = DEFAULT_PLACEHOLDER_NAME
    placeholder_artist: str = DEFAULT_PLACEHOLDER_ARTIST

    def __post_init__(self):
        """Validate placeholders."""
        if not isinstance(self.placeholder_name, str) or not self.placeholder_name:
            raise ValueError("placeholder_name must be a non-empty string")
        try:
            self.placeholder_name.format(index=1)
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            raise ValueError(
                f"placeholder_name may only use the {{index}} field: {e}"
            ) from e
        if not isinstance(self.placeholder_artist, str) or not self.placeholder_artist:
            raise ValueError("placeholder_artist must be a non-empty string")


@dataclass
class CatalogConfig:
    """Playlist source configuration."""

    library_path: Optional[Path] = None
    credential: Optional[str] = None

    def __post_init__(self):
        """Expand the library path."""
        if isinstance(self.library_path, str):
            self.library_path = Path(self.library_path).expanduser()


@dataclass
class LoggingConfig:
    """Logging configuration."""

    path: Optional[Path] = None
    level: str = "WARNING"
    max_size_mb: int = 10
    backup_count: int = 5

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.path, str):
            self.path = Path(self.path).expanduser()

        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.level, str) or self.level.upper() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")

        if not isinstance(self.max_size_mb, int) or self.max_size_mb < 1:
            raise ValueError("max_size_mb must be an integer >= 1")

        if not isinstance(self.backup_count, int) or self.backup_count < 0:
            raise ValueError("backup_count must be an integer >= 0")


@dataclass
class Settings:
    """Main settings container."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    importer: ImportConfig = field(default_factory=ImportConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: Path) -> 'Settings':
        """Load settings from YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            Settings instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping: {config_path}")

        return cls(
            display=DisplayConfig(**(data.get('display') or {})),
            importer=ImportConfig(**(data.get('importer') or {})),
            catalog=CatalogConfig(**(data.get('catalog') or {})),
            logging=LoggingConfig(**(data.get('logging') or {})),
        )

    @classmethod
    def from_file_or_default(cls, config_path: Optional[Path] = None) -> 'Settings':
        """Load settings from file or return defaults.

        Args:
            config_path: Path to configuration file (optional)

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = get_config_dir(create=False) / 'config.yaml'

        if config_path.exists():
            try:
                return cls.from_file(config_path)
            except Exception as e:
                logging.warning(f"Failed to load config from {config_path}: {e}")
                logging.warning("Using default configuration")
                return cls()
        else:
            logging.debug(f"Config file not found at {config_path}, using defaults")
            return cls()

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save settings to YAML file.

        Args:
            config_path: Path to save configuration (default: config.yaml in config dir)
        """
        if config_path is None:
            config_path = get_config_dir() / 'config.yaml'

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            'display': {
                'time_format': self.display.time_format
            },
            'importer': {
                'placeholder_name': self.importer.placeholder_name,
                'placeholder_artist': self.importer.placeholder_artist
            },
            'catalog': {
                'library_path': str(self.catalog.library_path) if self.catalog.library_path else None,
                'credential': self.catalog.credential
            },
            'logging': {
                'path': str(self.logging.path) if self.logging.path else None,
                'level': self.logging.level,
                'max_size_mb': self.logging.max_size_mb,
                'backup_count': self.logging.backup_count
            }
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)

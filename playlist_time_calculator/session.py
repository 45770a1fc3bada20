"""Stateful playlist session used by front ends."""

import logging
from datetime import datetime, time
from pathlib import Path
from typing import List, Optional, Union

from .config.settings import Settings
from .core.catalog import PlaylistCatalog, PlaylistSource, YamlPlaylistSource
from .core.importer import PlaylistImporter
from .core.report import PlaylistReport, build_report
from .core.timecode import parse_clock_time
from .models.playlist import Playlist, TimeSettings
from .models.remote import RemotePlaylist, ServiceResult
from .models.song import Song
from .utils.logger import get_logger

TimeInput = Union[time, str, None]


class PlaylistSession:
    """Owns the editable song list and time settings of one playlist.

    The timing functions are stateless; this class holds the mutable state
    between edits and re-runs them on demand.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
        source: Optional[PlaylistSource] = None
    ):
        """Initialize the session.

        Args:
            settings: Settings instance (defaults are used if None)
            logger: Logger instance
            source: Playlist source; when None, a YAML library from the
                settings is used if one is configured
        """
        self.settings = settings or Settings()
        self.logger = logger or get_logger("session")

        self.playlist = Playlist()
        self.time_settings = TimeSettings()
        self.importer = PlaylistImporter(
            placeholder_name=self.settings.importer.placeholder_name,
            placeholder_artist=self.settings.importer.placeholder_artist,
            logger=self.logger
        )

        if source is None and self.settings.catalog.library_path:
            source = YamlPlaylistSource(self.settings.catalog.library_path)
        self.catalog: Optional[PlaylistCatalog] = (
            PlaylistCatalog(source, self.logger) if source is not None else None
        )

    @property
    def songs(self) -> List[Song]:
        return self.playlist.songs

    def import_text(self, raw_text: str) -> int:
        """Replace the songs with those parsed from pasted text.

        Args:
            raw_text: Pasted playlist data

        Returns:
            Number of imported songs; 0 means nothing was recognized and the
            current songs were kept
        """
        records = self.importer.parse(raw_text)
        if not records:
            self.logger.info("Nothing to import, keeping current songs")
            return 0

        self.playlist.replace_songs(record.to_song() for record in records)
        self.logger.info(f"Imported {len(records)} song(s) from text")
        return len(records)

    def connect(self, credential: Optional[str] = None) -> ServiceResult[bool]:
        """Authenticate with the playlist source.

        Args:
            credential: Credential to use (defaults to the configured one)
        """
        if self.catalog is None:
            return ServiceResult.failure("No playlist source configured")
        return self.catalog.authenticate(credential or self.settings.catalog.credential)

    def disconnect(self) -> None:
        if self.catalog is not None:
            self.catalog.disconnect()

    def remote_playlists(self) -> ServiceResult[List[RemotePlaylist]]:
        if self.catalog is None:
            return ServiceResult.failure("No playlist source configured")
        return self.catalog.list_playlists()

    def import_remote_playlist(self, playlist_id: str) -> ServiceResult[int]:
        """Replace the songs with the tracks of a remote playlist.

        An empty playlist leaves the current songs untouched.

        Returns:
            Result with the number of imported songs, or a failure message
        """
        if self.catalog is None:
            return ServiceResult.failure("No playlist source configured")

        result = self.catalog.fetch_songs(playlist_id)
        if not result.ok:
            return ServiceResult.failure(result.error)

        if self.playlist.replace_songs(result.value):
            self.logger.info(f"Imported {len(result.value)} song(s) from playlist {playlist_id}")
        else:
            self.logger.info(f"Playlist {playlist_id} has no tracks, keeping current songs")
        return ServiceResult.success(len(result.value))

    def _to_time(self, value: TimeInput) -> Optional[time]:
        if isinstance(value, str):
            parsed = parse_clock_time(value)
            if parsed is None and value.strip():
                self.logger.warning(f"Ignoring unrecognized time of day: {value!r}")
            return parsed
        return value

    def set_start_time(self, value: TimeInput) -> None:
        self.time_settings.start_time = self._to_time(value)

    def set_target_end_time(self, value: TimeInput) -> None:
        self.time_settings.target_end_time = self._to_time(value)

    def add_song(self, name: str = "", artist: str = "", duration: str = "") -> Song:
        song = self.playlist.add_song()
        self.playlist.update_song(song.id, name=name, artist=artist, duration=duration)
        return song

    def remove_song(self, song_id: str) -> None:
        self.playlist.remove_song(song_id)

    def update_song(self, song_id: str, **changes) -> Optional[Song]:
        return self.playlist.update_song(song_id, **changes)

    def toggle_song(self, song_id: str) -> Optional[Song]:
        return self.playlist.toggle_song(song_id)

    def report(self, now: Optional[datetime] = None) -> PlaylistReport:
        """Compute the timing results for the current songs and settings."""
        return build_report(
            self.playlist.songs,
            self.time_settings,
            now=now,
            time_format=self.settings.display.time_format
        )


def load_session(config_path: Optional[Path] = None, **kwargs) -> PlaylistSession:
    """Create a session from a configuration file (or defaults)."""
    return PlaylistSession(settings=Settings.from_file_or_default(config_path), **kwargs)

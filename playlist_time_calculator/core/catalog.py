"""Access to playlists held by an external playlist source."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..models.remote import RemotePlaylist, RemoteTrack, ServiceResult
from ..models.song import Song
from .errors import AuthenticationError, ServiceError

MISSING_CREDENTIAL = "Client ID is required"
NOT_AUTHENTICATED = "Not authenticated"


class PlaylistSource(ABC):
    """A provider of playlists and their tracks."""

    @abstractmethod
    def authenticate(self, credential: str) -> None:
        """Authenticate with the source.

        Raises:
            AuthenticationError: If the credential is rejected
            ServiceError: If the source cannot be reached
        """

    @abstractmethod
    def list_playlists(self) -> List[RemotePlaylist]:
        """Return the playlists available to the authenticated user."""

    @abstractmethod
    def get_tracks(self, playlist_id: str) -> List[RemoteTrack]:
        """Return the tracks of a playlist (empty if unknown)."""


class YamlPlaylistSource(PlaylistSource):
    """Playlist source backed by a local YAML library export.

    Expected layout::

        credential: optional-secret
        playlists:
          - id: road-trip
            name: Road Trip Mix
            tracks:
              - {name: Life is a Highway, artist: Tom Cochrane, duration_ms: 275000}
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()
        self._data: Optional[Dict[str, Any]] = None

    def _load(self) -> Dict[str, Any]:
        if self._data is not None:
            return self._data

        if not self.path.exists():
            raise ServiceError(f"Library file not found: {self.path}")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ServiceError(f"Failed to read library {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ServiceError(f"Invalid library format in {self.path}")

        self._data = data
        return data

    def _playlists(self) -> List[Dict[str, Any]]:
        playlists = self._load().get('playlists') or []
        if not isinstance(playlists, list):
            raise ServiceError(f"Invalid library format in {self.path}: playlists must be a list")
        return [p for p in playlists if isinstance(p, dict)]

    def _tracks(self, entry: Dict[str, Any]) -> List[Dict[str, Any]]:
        tracks = entry.get('tracks') or []
        if not isinstance(tracks, list):
            raise ServiceError(f"Invalid library format in {self.path}: tracks must be a list")
        return [track for track in tracks if isinstance(track, dict)]

    def authenticate(self, credential: str) -> None:
        expected = self._load().get('credential')
        if expected is not None and str(expected) != credential:
            raise AuthenticationError("Invalid credential")

    def list_playlists(self) -> List[RemotePlaylist]:
        playlists = []
        for entry in self._playlists():
            tracks = self._tracks(entry)
            try:
                track_count = int(entry.get('track_count', len(tracks)))
            except (TypeError, ValueError) as e:
                raise ServiceError(f"Invalid track count in {self.path}: {e}") from e
            playlists.append(RemotePlaylist(
                id=str(entry.get('id', '')),
                name=str(entry.get('name', '')),
                track_count=track_count
            ))
        return playlists

    def get_tracks(self, playlist_id: str) -> List[RemoteTrack]:
        for entry in self._playlists():
            if str(entry.get('id', '')) != playlist_id:
                continue
            try:
                return [
                    RemoteTrack(
                        name=str(track.get('name', '')),
                        artist=str(track.get('artist') or ''),
                        duration_ms=int(track.get('duration_ms') or 0)
                    )
                    for track in self._tracks(entry)
                ]
            except (TypeError, ValueError) as e:
                raise ServiceError(f"Invalid track data in {self.path}: {e}") from e
        return []


class PlaylistCatalog:
    """Authenticated access to a playlist source.

    Every call returns a ServiceResult; failures carry a message for the
    user and are never retried.
    """

    def __init__(self, source: PlaylistSource, logger: logging.Logger):
        """Initialize playlist catalog.

        Args:
            source: Playlist source to read from
            logger: Logger instance
        """
        self.source = source
        self.logger = logger
        self.authenticated = False
        self.playlists: List[RemotePlaylist] = []

    def authenticate(self, credential: Optional[str]) -> ServiceResult[bool]:
        """Authenticate and load the playlist list.

        Args:
            credential: Client ID or other secret expected by the source

        Returns:
            Successful result with True, or a failure message
        """
        if not credential:
            return ServiceResult.failure(MISSING_CREDENTIAL)

        try:
            self.source.authenticate(credential)
            self.authenticated = True
            self.playlists = self.source.list_playlists()
        except AuthenticationError as e:
            self.logger.warning(f"Authentication rejected: {e}")
            self.disconnect()
            return ServiceResult.failure(f"Failed to connect: {e}")
        except ServiceError as e:
            self.logger.error(f"Failed to connect to playlist source: {e}")
            self.disconnect()
            return ServiceResult.failure(f"Failed to connect: {e}")

        self.logger.info(f"Connected, {len(self.playlists)} playlist(s) available")
        return ServiceResult.success(True)

    def disconnect(self) -> None:
        self.authenticated = False
        self.playlists = []

    def list_playlists(self) -> ServiceResult[List[RemotePlaylist]]:
        if not self.authenticated:
            return ServiceResult.failure(NOT_AUTHENTICATED)
        return ServiceResult.success(list(self.playlists))

    def get_tracks(self, playlist_id: str) -> ServiceResult[List[RemoteTrack]]:
        """Fetch the tracks of a playlist.

        Args:
            playlist_id: Playlist ID

        Returns:
            Result with the tracks (empty for an unknown playlist)
        """
        if not self.authenticated:
            return ServiceResult.failure(NOT_AUTHENTICATED)

        try:
            tracks = self.source.get_tracks(playlist_id)
        except ServiceError as e:
            self.logger.error(f"Failed to fetch tracks for playlist {playlist_id}: {e}")
            return ServiceResult.failure(f"Network error: {e}")

        self.logger.debug(f"Fetched {len(tracks)} track(s) from playlist {playlist_id}")
        return ServiceResult.success(tracks)

    def fetch_songs(self, playlist_id: str) -> ServiceResult[List[Song]]:
        """Fetch a playlist and convert its tracks to songs."""
        result = self.get_tracks(playlist_id)
        if not result.ok:
            return ServiceResult.failure(result.error)
        return ServiceResult.success([track.to_song() for track in result.value])

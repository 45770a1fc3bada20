"""Models for playlists fetched from an external playlist source."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..core.timecode import seconds_to_time_string
from .song import Song

T = TypeVar("T")


@dataclass
class RemotePlaylist:
    """Playlist summary as listed by a playlist source."""

    id: str
    name: str
    track_count: int = 0


@dataclass
class RemoteTrack:
    """Track metadata as returned by a playlist source."""

    name: str
    artist: str = ""
    duration_ms: int = 0  # Duration in milliseconds

    def to_song(self) -> Song:
        """Convert to a selected Song, truncating to whole seconds."""
        return Song(
            name=self.name,
            artist=self.artist,
            duration=seconds_to_time_string(self.duration_ms // 1000),
            selected=True
        )


@dataclass
class ServiceResult(Generic[T]):
    """Outcome of a playlist source call: a value or a failure message."""

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> 'ServiceResult[T]':
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, message: str) -> 'ServiceResult[T]':
        return cls(ok=False, error=message)

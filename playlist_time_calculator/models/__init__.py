"""Data models for Playlist Time Calculator."""

from .playlist import Playlist, TimeSettings
from .remote import RemotePlaylist, RemoteTrack, ServiceResult
from .song import ImportRecord, Song

__all__ = [
    "ImportRecord",
    "Playlist",
    "RemotePlaylist",
    "RemoteTrack",
    "ServiceResult",
    "Song",
    "TimeSettings",
]

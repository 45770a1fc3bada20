"""Playlist data models."""

from dataclasses import dataclass, field
from datetime import time
from typing import Iterable, List, Optional

from ..core.timecode import format_time_input
from .song import Song


@dataclass
class TimeSettings:
    """Optional start and target end times of day for a playlist."""

    start_time: Optional[time] = None
    target_end_time: Optional[time] = None


@dataclass
class Playlist:
    """Mutable, ordered list of songs that never becomes empty."""

    songs: List[Song] = field(default_factory=lambda: [Song()])

    def __post_init__(self):
        """Ensure a new playlist starts with at least one song."""
        self.songs = list(self.songs)
        self._ensure_not_empty()

    def __len__(self) -> int:
        return len(self.songs)

    def __iter__(self):
        return iter(self.songs)

    def _ensure_not_empty(self) -> None:
        if not self.songs:
            self.songs.append(Song())

    def find(self, song_id: str) -> Optional[Song]:
        for song in self.songs:
            if song.id == song_id:
                return song
        return None

    def add_song(self, song: Optional[Song] = None) -> Song:
        """Append a song (an empty one by default) and return it."""
        song = song or Song()
        self.songs.append(song)
        return song

    def remove_song(self, song_id: str) -> None:
        """Remove a song by id.

        Removing the last song leaves a fresh empty one in its place.
        """
        self.songs = [song for song in self.songs if song.id != song_id]
        self._ensure_not_empty()

    def update_song(
        self,
        song_id: str,
        name: Optional[str] = None,
        artist: Optional[str] = None,
        duration: Optional[str] = None,
        selected: Optional[bool] = None
    ) -> Optional[Song]:
        """Edit fields of a song in place; unknown ids are ignored.

        Duration input is normalized with ``format_time_input``.
        """
        song = self.find(song_id)
        if song is None:
            return None

        if name is not None:
            song.name = name
        if artist is not None:
            song.artist = artist
        if duration is not None:
            song.duration = format_time_input(duration)
        if selected is not None:
            song.selected = selected
        return song

    def toggle_song(self, song_id: str) -> Optional[Song]:
        song = self.find(song_id)
        if song is None:
            return None
        return self.update_song(song_id, selected=not song.selected)

    def replace_songs(self, songs: Iterable[Song]) -> bool:
        """Swap in a new song list; an empty list leaves the playlist untouched.

        Returns:
            True if the songs were replaced
        """
        songs = list(songs)
        if not songs:
            return False
        self.songs = songs
        return True

    @property
    def selected_count(self) -> int:
        return sum(1 for song in self.songs if song.selected)

    @property
    def has_valid_songs(self) -> bool:
        """True if at least one selected song has a usable duration."""
        return any(song.selected and song.has_valid_duration for song in self.songs)

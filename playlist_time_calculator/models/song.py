"""Song data models."""

import uuid
from dataclasses import dataclass, field

from ..core.timecode import parse_time_to_seconds


@dataclass
class Song:
    """A playlist entry.

    ``duration`` is stored exactly as entered; validity is derived, never
    enforced.
    """

    name: str = ""
    artist: str = ""
    duration: str = ""  # "M:SS" or "H:MM:SS"
    selected: bool = True
    id: str = field(default_factory=lambda: uuid.uuid4().hex, compare=False)

    @property
    def duration_in_seconds(self) -> int:
        return parse_time_to_seconds(self.duration)

    @property
    def has_valid_duration(self) -> bool:
        """True when the duration is non-empty and parses to more than 0 seconds."""
        return bool(self.duration) and self.duration_in_seconds > 0


@dataclass
class ImportRecord:
    """A song guessed from one line of pasted text."""

    name: str = ""
    artist: str = ""
    duration: str = ""

    def to_song(self) -> Song:
        return Song(
            name=self.name,
            artist=self.artist,
            duration=self.duration,
            selected=True
        )

"""Duration parsing, formatting and playlist timing arithmetic.

Durations are plain strings in ``M:SS`` / ``H:MM:SS`` form. Every function
here is pure apart from the optional read of the current time; malformed
input degrades to a default value instead of raising.

Functions that work on songs only need objects exposing ``duration`` (str)
and ``selected`` (bool) attributes.
"""

import re
from datetime import datetime, time, timedelta
from typing import Iterable, NamedTuple, Optional, Union

DEFAULT_TIME_FORMAT = "%H:%M"
ZERO_DURATION = "0:00"

# One or two digits, colon, two digits, optional colon plus two digits.
TIME_PATTERN = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$", re.ASCII)
LOOSE_TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}(?::\d{2})?", re.ASCII)
CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$", re.ASCII)

WallTime = Union[time, datetime]


class TimeDifference(NamedTuple):
    """Gap between the playlist length and the time left until a target."""

    difference: int
    playlist_too_long: bool


class SongCountStats(NamedTuple):
    """Song counts for a playlist."""

    total: int
    selected: int


def parse_time_to_seconds(text: Optional[str]) -> int:
    """Convert ``MM:SS`` or ``H:MM:SS`` text to seconds.

    Parsing is permissive: there is no range check on minutes or seconds
    (``"5:99"`` gives 399). Empty input, a non-numeric part or a part count
    other than two or three gives 0.
    """
    if text is None:
        return 0
    cleaned = text.strip()
    if not cleaned:
        return 0

    parts = cleaned.split(':')
    if not all(part.isascii() and part.isdigit() for part in parts):
        return 0
    values = [int(part) for part in parts]

    if len(values) == 2:
        return values[0] * 60 + values[1]
    if len(values) == 3:
        return values[0] * 3600 + values[1] * 60 + values[2]
    return 0


def seconds_to_time_string(seconds: int) -> str:
    """Render seconds as ``H:MM:SS`` when there are hours, otherwise ``M:SS``."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def is_valid_time_format(text: Optional[str]) -> bool:
    """Strict check for ``M:SS``, ``MM:SS`` or ``H:MM:SS`` style text."""
    if text is None:
        return False
    return TIME_PATTERN.match(text) is not None


def format_time_input(text: str) -> str:
    """Normalize valid duration input, pass anything else through untouched.

    ``"05:05"`` becomes ``"5:05"``; ``"abc"`` stays ``"abc"``.
    """
    cleaned = text.strip()
    if not is_valid_time_format(cleaned):
        return text
    return seconds_to_time_string(parse_time_to_seconds(cleaned))


def calculate_total_duration(songs: Iterable) -> int:
    """Sum of the durations of the selected songs, in seconds."""
    return sum(
        parse_time_to_seconds(song.duration)
        for song in songs
        if song.selected
    )


def formatted_total_duration(songs: Iterable) -> str:
    return seconds_to_time_string(calculate_total_duration(songs))


def _bind_to_day(value: WallTime, now: datetime) -> datetime:
    """Attach today's date to a bare time-of-day."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(now.date(), value)


def _format_clock(moment: datetime, time_format: str) -> str:
    return moment.strftime(time_format)


def calculate_end_time_from_now(
    songs: Iterable,
    now: Optional[datetime] = None,
    time_format: str = DEFAULT_TIME_FORMAT
) -> str:
    """Clock time at which the selected songs finish when started now."""
    now = now or datetime.now()
    end = now + timedelta(seconds=calculate_total_duration(songs))
    return _format_clock(end, time_format)


def calculate_end_time(
    songs: Iterable,
    start_time: WallTime,
    now: Optional[datetime] = None,
    time_format: str = DEFAULT_TIME_FORMAT
) -> str:
    """Clock time at which the selected songs finish from ``start_time``.

    Crossing midnight is not reported; the result is a clock-face value.
    """
    start = _bind_to_day(start_time, now or datetime.now())
    end = start + timedelta(seconds=calculate_total_duration(songs))
    return _format_clock(end, time_format)


def time_until_target(target_time: WallTime, now: Optional[datetime] = None) -> int:
    """Seconds from now until the next occurrence of ``target_time``.

    A target at or before the current moment is taken to mean the same time
    tomorrow, so the result is never negative.
    """
    now = now or datetime.now()
    target = _bind_to_day(target_time, now)
    if target <= now:
        target = target + timedelta(days=1)
    return int((target - now).total_seconds())


def calculate_time_difference(
    songs: Iterable,
    target_time: WallTime,
    now: Optional[datetime] = None
) -> TimeDifference:
    """Compare the playlist length with the time left until ``target_time``.

    Equal lengths count as fitting: ``playlist_too_long`` uses a strict
    comparison.
    """
    total = calculate_total_duration(songs)
    until = time_until_target(target_time, now=now)
    return TimeDifference(
        difference=abs(until - total),
        playlist_too_long=total > until
    )


def average_song_length(songs: Iterable) -> str:
    """Average length of selected songs that have a usable duration."""
    durations = [
        parse_time_to_seconds(song.duration)
        for song in songs
        if song.selected and song.duration and parse_time_to_seconds(song.duration) > 0
    ]
    if not durations:
        return ZERO_DURATION
    return seconds_to_time_string(sum(durations) // len(durations))


def song_count_stats(songs: Iterable) -> SongCountStats:
    songs = list(songs)
    return SongCountStats(
        total=len(songs),
        selected=sum(1 for song in songs if song.selected)
    )


def parse_clock_time(text: Optional[str]) -> Optional[time]:
    """Parse a wall-clock ``HH:MM`` or ``HH:MM:SS`` value.

    Returns None for empty or out-of-range input.
    """
    if not text:
        return None
    match = CLOCK_PATTERN.match(text.strip())
    if not match:
        return None
    hours, minutes, seconds = match.groups()
    try:
        return time(int(hours), int(minutes), int(seconds or 0))
    except ValueError:
        return None

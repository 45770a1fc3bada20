"""Aggregate playlist timing results."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..models.playlist import TimeSettings
from . import timecode


@dataclass
class PlaylistReport:
    """Every timing value shown for a playlist.

    Target-dependent fields are None when no target end time is set, and
    ``end_time_from_start`` is None without a start time.
    """

    total_duration: str
    total_seconds: int
    end_time_from_now: str
    average_song_length: str
    total_songs: int
    selected_songs: int
    end_time_from_start: Optional[str] = None
    time_until_target: Optional[str] = None
    time_until_target_seconds: Optional[int] = None
    time_difference: Optional[str] = None
    time_difference_seconds: Optional[int] = None
    playlist_too_long: Optional[bool] = None

    @property
    def end_time(self) -> str:
        return self.end_time_from_start or self.end_time_from_now

    @property
    def end_time_label(self) -> str:
        return "From start time" if self.end_time_from_start else "From now"

    @property
    def has_target(self) -> bool:
        return self.time_until_target is not None


def build_report(
    songs: Iterable,
    time_settings: Optional[TimeSettings] = None,
    now: Optional[datetime] = None,
    time_format: str = timecode.DEFAULT_TIME_FORMAT
) -> PlaylistReport:
    """Compute all timing results for ``songs`` from a single clock reading.

    Args:
        songs: Songs to report on (only selected ones count towards time)
        time_settings: Optional start and target end times
        now: Current moment (defaults to ``datetime.now()``)
        time_format: strftime format for clock-face values

    Returns:
        PlaylistReport instance
    """
    songs = list(songs)
    time_settings = time_settings or TimeSettings()
    now = now or datetime.now()

    total_seconds = timecode.calculate_total_duration(songs)
    stats = timecode.song_count_stats(songs)

    report = PlaylistReport(
        total_duration=timecode.seconds_to_time_string(total_seconds),
        total_seconds=total_seconds,
        end_time_from_now=timecode.calculate_end_time_from_now(
            songs, now=now, time_format=time_format
        ),
        average_song_length=timecode.average_song_length(songs),
        total_songs=stats.total,
        selected_songs=stats.selected,
    )

    if time_settings.start_time is not None:
        report.end_time_from_start = timecode.calculate_end_time(
            songs, time_settings.start_time, now=now, time_format=time_format
        )

    if time_settings.target_end_time is not None:
        until = timecode.time_until_target(time_settings.target_end_time, now=now)
        difference = timecode.calculate_time_difference(
            songs, time_settings.target_end_time, now=now
        )
        report.time_until_target_seconds = until
        report.time_until_target = timecode.seconds_to_time_string(until)
        report.time_difference_seconds = difference.difference
        report.time_difference = timecode.seconds_to_time_string(difference.difference)
        report.playlist_too_long = difference.playlist_too_long

    return report

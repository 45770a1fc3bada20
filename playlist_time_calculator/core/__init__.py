"""Core functionality for Playlist Time Calculator.

Only the leaf modules are re-exported here; ``importer``, ``report`` and
``catalog`` depend on the models package and are imported from their own
modules.
"""

from .errors import AuthenticationError, PlaylistCalculatorError, ServiceError
from .timecode import (
    average_song_length,
    calculate_end_time,
    calculate_end_time_from_now,
    calculate_time_difference,
    calculate_total_duration,
    format_time_input,
    formatted_total_duration,
    is_valid_time_format,
    parse_clock_time,
    parse_time_to_seconds,
    seconds_to_time_string,
    song_count_stats,
    time_until_target,
)

__all__ = [
    "AuthenticationError",
    "PlaylistCalculatorError",
    "ServiceError",
    "average_song_length",
    "calculate_end_time",
    "calculate_end_time_from_now",
    "calculate_time_difference",
    "calculate_total_duration",
    "format_time_input",
    "formatted_total_duration",
    "is_valid_time_format",
    "parse_clock_time",
    "parse_time_to_seconds",
    "seconds_to_time_string",
    "song_count_stats",
    "time_until_target",
]

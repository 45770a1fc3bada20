"""Playlist Time Calculator: playlist durations, end times and text import."""

__version__ = "0.1.0"

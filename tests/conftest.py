"""Shared fixtures for Playlist Time Calculator tests."""

import logging
from datetime import datetime

import pytest
import yaml

from playlist_time_calculator.models.song import Song


@pytest.fixture
def now():
    """A fixed 'current moment': noon on a known day."""
    return datetime(2026, 10, 19, 12, 0, 0)


@pytest.fixture
def logger():
    return logging.getLogger("playlist_time_calculator.tests")


@pytest.fixture
def sample_songs():
    """Five songs totalling 29:41, all selected."""
    return [
        Song(name="Bohemian Rhapsody", artist="Queen", duration="5:55"),
        Song(name="Hotel California", artist="Eagles", duration="6:30"),
        Song(name="Stairway to Heaven", artist="Led Zeppelin", duration="8:02"),
        Song(name="Don't Stop Believin'", artist="Journey", duration="4:11"),
        Song(name="Sweet Child O' Mine", artist="Guns N' Roses", duration="5:03"),
    ]


@pytest.fixture
def library_file(tmp_path):
    """A YAML playlist library with a credential and two playlists."""
    path = tmp_path / "library.yaml"
    data = {
        'credential': 'client-123',
        'playlists': [
            {
                'id': 'chill',
                'name': 'Chill Vibes',
                'tracks': [
                    {'name': 'Weightless', 'artist': 'Marconi Union', 'duration_ms': 485000},
                    {'name': 'Watermark', 'artist': 'Enya', 'duration_ms': 343000},
                ],
            },
            {
                'id': 'empty',
                'name': 'Nothing Yet',
                'tracks': [],
            },
        ],
    }
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(data, f)
    return path

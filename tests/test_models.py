"""Tests for song, playlist and remote track models."""

from playlist_time_calculator.models import (
    ImportRecord,
    Playlist,
    RemoteTrack,
    ServiceResult,
    Song,
    TimeSettings,
)


class TestSong:
    """Tests for Song derived properties."""

    def test_defaults(self):
        song = Song()
        assert song.name == ""
        assert song.selected is True
        assert song.duration_in_seconds == 0
        assert song.has_valid_duration is False

    def test_valid_duration(self):
        song = Song(duration="3:45")
        assert song.duration_in_seconds == 225
        assert song.has_valid_duration is True

    def test_unparseable_duration_is_stored_as_is(self):
        song = Song(duration="three minutes")
        assert song.duration == "three minutes"
        assert song.duration_in_seconds == 0
        assert song.has_valid_duration is False

    def test_zero_duration_is_not_valid(self):
        assert Song(duration="0:00").has_valid_duration is False

    def test_ids_are_unique_and_ignored_in_equality(self):
        a = Song(name="A", duration="1:00")
        b = Song(name="A", duration="1:00")
        assert a.id != b.id
        assert a == b


class TestPlaylist:
    """Tests for Playlist editing rules."""

    def test_starts_with_one_empty_song(self):
        playlist = Playlist()
        assert len(playlist) == 1
        assert playlist.songs[0] == Song()

    def test_empty_song_list_is_refilled(self):
        assert len(Playlist(songs=[])) == 1

    def test_removing_last_song_leaves_a_fresh_one(self):
        playlist = Playlist(songs=[Song(name="Only", duration="3:00")])
        only = playlist.songs[0]

        playlist.remove_song(only.id)

        assert len(playlist) == 1
        assert playlist.songs[0].id != only.id
        assert playlist.songs[0] == Song()

    def test_remove_song(self):
        a, b = Song(name="A"), Song(name="B")
        playlist = Playlist(songs=[a, b])
        playlist.remove_song(a.id)
        assert playlist.songs == [b]

    def test_remove_unknown_id_is_ignored(self):
        playlist = Playlist(songs=[Song(name="A")])
        playlist.remove_song("missing")
        assert [s.name for s in playlist] == ["A"]

    def test_add_song(self):
        playlist = Playlist()
        added = playlist.add_song(Song(name="New"))
        assert playlist.songs[-1] is added
        assert len(playlist) == 2

    def test_update_song_normalizes_duration(self):
        playlist = Playlist()
        song = playlist.songs[0]

        playlist.update_song(song.id, name="Track", artist="Band", duration="05:05")

        assert song.name == "Track"
        assert song.artist == "Band"
        assert song.duration == "5:05"

    def test_update_song_keeps_invalid_duration(self):
        playlist = Playlist()
        song = playlist.songs[0]
        playlist.update_song(song.id, duration="5:5")
        assert song.duration == "5:5"

    def test_update_unknown_song(self):
        assert Playlist().update_song("missing", name="x") is None

    def test_toggle_song(self):
        playlist = Playlist()
        song = playlist.songs[0]
        playlist.toggle_song(song.id)
        assert song.selected is False
        playlist.toggle_song(song.id)
        assert song.selected is True

    def test_replace_songs(self):
        playlist = Playlist()
        assert playlist.replace_songs([Song(name="A"), Song(name="B")]) is True
        assert [s.name for s in playlist] == ["A", "B"]

    def test_replace_with_nothing_keeps_songs(self):
        playlist = Playlist(songs=[Song(name="Keep")])
        assert playlist.replace_songs([]) is False
        assert [s.name for s in playlist] == ["Keep"]

    def test_counts(self):
        playlist = Playlist(songs=[
            Song(duration="3:00"),
            Song(duration="", selected=True),
            Song(duration="4:00", selected=False),
        ])
        assert playlist.selected_count == 2
        assert playlist.has_valid_songs is True
        assert Playlist().has_valid_songs is False


class TestConversions:
    """Tests for conversions into Song."""

    def test_import_record_to_song(self):
        song = ImportRecord(name="A", artist="B", duration="3:00").to_song()
        assert song == Song(name="A", artist="B", duration="3:00", selected=True)

    def test_remote_track_to_song(self):
        song = RemoteTrack(name="Weightless", artist="Marconi Union", duration_ms=485000).to_song()
        assert song.duration == "8:05"
        assert song.selected is True

    def test_remote_track_truncates_milliseconds(self):
        assert RemoteTrack(name="x", duration_ms=3723999).to_song().duration == "1:02:03"

    def test_time_settings_default_to_none(self):
        settings = TimeSettings()
        assert settings.start_time is None
        assert settings.target_end_time is None


class TestServiceResult:
    """Tests for ServiceResult constructors."""

    def test_success(self):
        result = ServiceResult.success([1, 2])
        assert result.ok is True
        assert result.value == [1, 2]
        assert result.error is None

    def test_failure(self):
        result = ServiceResult.failure("Not authenticated")
        assert result.ok is False
        assert result.value is None
        assert result.error == "Not authenticated"

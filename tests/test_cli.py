"""Tests for the command-line interface."""

import pytest
import yaml
from typer.testing import CliRunner

from playlist_time_calculator.cli import app, read_text, validate_clock

runner = CliRunner()


@pytest.fixture
def playlist_file(tmp_path):
    path = tmp_path / "playlist.csv"
    path.write_text("Bohemian Rhapsody, Queen, 5:55\nHotel California, Eagles, 6:30\n", encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path):
    """Isolated configuration so the user's own config is never read."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({'logging': {'level': 'ERROR'}}), encoding="utf-8")
    return path


class TestHelpers:
    """Tests for CLI helper functions."""

    def test_read_text_from_file(self, playlist_file):
        assert read_text(str(playlist_file)).startswith("Bohemian Rhapsody")

    def test_validate_clock(self):
        assert validate_clock("14:30") == "14:30"
        assert validate_clock(None) is None


class TestCalculate:
    """Tests for the calculate command."""

    def test_shows_total(self, playlist_file, config_file):
        result = runner.invoke(app, ["calculate", str(playlist_file), "-c", str(config_file)])
        assert result.exit_code == 0
        assert "Total Playlist Duration" in result.output
        assert "12:25" in result.output
        assert "Hotel California" in result.output

    def test_with_target(self, playlist_file, config_file):
        result = runner.invoke(
            app,
            ["calculate", str(playlist_file), "--start", "20:00", "--target", "20:10", "-c", str(config_file)]
        )
        assert result.exit_code == 0
        assert "20:12" in result.output
        assert "Time Until Target" in result.output

    def test_deselect(self, playlist_file, config_file):
        result = runner.invoke(
            app,
            ["calculate", str(playlist_file), "--deselect", "1", "-c", str(config_file)]
        )
        assert result.exit_code == 0
        assert "6:30" in result.output
        assert "1 of 2" in result.output

    def test_stdin(self, config_file):
        result = runner.invoke(app, ["calculate", "-", "-c", str(config_file)], input="Some Song 4:30\n")
        assert result.exit_code == 0
        assert "4:30" in result.output

    def test_nothing_to_import(self, tmp_path, config_file):
        empty = tmp_path / "empty.txt"
        empty.write_text("\n  \n", encoding="utf-8")
        result = runner.invoke(app, ["calculate", str(empty), "-c", str(config_file)])
        assert result.exit_code == 1
        assert "No songs found" in result.output

    def test_invalid_time_of_day(self, playlist_file, config_file):
        result = runner.invoke(
            app,
            ["calculate", str(playlist_file), "--target", "25:99", "-c", str(config_file)]
        )
        assert result.exit_code != 0

    def test_missing_file(self, tmp_path, config_file):
        result = runner.invoke(app, ["calculate", str(tmp_path / "nope.txt"), "-c", str(config_file)])
        assert result.exit_code != 0


class TestOtherCommands:
    """Tests for parse, duration, catalog and config commands."""

    def test_parse(self, playlist_file, config_file):
        result = runner.invoke(app, ["parse", str(playlist_file), "-c", str(config_file)])
        assert result.exit_code == 0
        assert "Queen" in result.output

    def test_parse_nothing(self, config_file):
        result = runner.invoke(app, ["parse", "-", "-c", str(config_file)], input="a, b\n")
        assert result.exit_code == 0
        assert "Nothing to import" in result.output

    def test_duration(self):
        result = runner.invoke(app, ["duration", "05:05"])
        assert result.exit_code == 0
        assert "Seconds: 305" in result.output
        assert "Normalized: 5:05" in result.output

    def test_list_playlists(self, library_file, config_file):
        result = runner.invoke(
            app,
            ["list-playlists", "--library", str(library_file), "--credential", "client-123",
             "-c", str(config_file)]
        )
        assert result.exit_code == 0
        assert "Chill Vibes" in result.output

    def test_list_playlists_bad_credential(self, library_file, config_file):
        result = runner.invoke(
            app,
            ["list-playlists", "--library", str(library_file), "--credential", "nope",
             "-c", str(config_file)]
        )
        assert result.exit_code == 1
        assert "Failed to connect" in result.output

    def test_import_playlist(self, library_file, config_file):
        result = runner.invoke(
            app,
            ["import-playlist", "chill", "--library", str(library_file), "--credential", "client-123",
             "-c", str(config_file)]
        )
        assert result.exit_code == 0
        assert "Weightless" in result.output
        assert "13:48" in result.output

    def test_import_empty_playlist(self, library_file, config_file):
        result = runner.invoke(
            app,
            ["import-playlist", "empty", "--library", str(library_file), "--credential", "client-123",
             "-c", str(config_file)]
        )
        assert result.exit_code == 1
        assert "has no tracks" in result.output

    def test_init_config(self, tmp_path):
        output = tmp_path / "out" / "config.yaml"
        result = runner.invoke(app, ["init-config", "--output", str(output)])
        assert result.exit_code == 0
        assert yaml.safe_load(output.read_text(encoding="utf-8"))['display']['time_format'] == "%H:%M"

    def test_init_config_keeps_existing(self, config_file):
        result = runner.invoke(app, ["init-config", "--output", str(config_file)], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert yaml.safe_load(config_file.read_text(encoding="utf-8")) == {'logging': {'level': 'ERROR'}}

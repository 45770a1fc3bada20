"""Command-line interface for Playlist Time Calculator."""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .config.settings import Settings
from .core.catalog import YamlPlaylistSource
from .core.importer import PlaylistImporter
from .core.report import PlaylistReport
from .core.timecode import (
    format_time_input,
    is_valid_time_format,
    parse_clock_time,
    parse_time_to_seconds,
)
from .models.song import Song
from .session import PlaylistSession
from .utils.logger import setup_logger
from .utils.platform import get_config_dir

app = typer.Typer(help="Playlist Time Calculator")
console = Console()


def get_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings from file or defaults."""
    return Settings.from_file_or_default(config_path)


def get_session(
    config_path: Optional[Path] = None,
    library: Optional[Path] = None
) -> PlaylistSession:
    """Create a playlist session with logging configured from settings."""
    settings = get_settings(config_path)
    logger = setup_logger(
        log_file=settings.logging.path,
        level=settings.logging.level,
        max_size_mb=settings.logging.max_size_mb,
        backup_count=settings.logging.backup_count
    )
    source = YamlPlaylistSource(library) if library else None
    return PlaylistSession(settings=settings, logger=logger, source=source)


def read_text(source: str) -> str:
    """Read pasted playlist data from a file, or stdin when ``source`` is '-'."""
    if source == '-':
        return sys.stdin.read()

    path = Path(source).expanduser()
    if not path.exists():
        raise typer.BadParameter(f"File not found: {path}")
    return path.read_text(encoding='utf-8')


def validate_clock(value: Optional[str]) -> Optional[str]:
    """Typer callback rejecting malformed HH:MM values."""
    if value is not None and parse_clock_time(value) is None:
        raise typer.BadParameter(f"Expected a time of day like 14:30, got {value!r}")
    return value


def render_songs(songs: List[Song]) -> Table:
    table = Table(title="Songs")
    table.add_column("#", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Artist")
    table.add_column("Duration", justify="right")
    table.add_column("Selected")

    for position, song in enumerate(songs, start=1):
        duration = song.duration if song.has_valid_duration else f"[red]{song.duration or '-'}[/red]"
        table.add_row(
            str(position),
            song.name,
            song.artist,
            duration,
            "[green]yes[/green]" if song.selected else "[dim]no[/dim]"
        )
    return table


def render_report(report: PlaylistReport) -> Table:
    table = Table(title="Results", show_header=False)
    table.add_column("Result", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Total Playlist Duration", report.total_duration)
    table.add_row(f"Will End At ({report.end_time_label})", report.end_time)

    if report.has_target:
        table.add_row("Time Until Target", report.time_until_target)
        if report.playlist_too_long:
            table.add_row("Playlist Too Long By", f"[red]{report.time_difference}[/red]")
        else:
            table.add_row("Time To Fill", f"[green]{report.time_difference}[/green]")

    table.add_row("Average Song Length", report.average_song_length)
    table.add_row("Songs Selected", f"{report.selected_songs} of {report.total_songs}")
    return table


@app.command()
def calculate(
    source: str = typer.Argument(..., help="File with playlist data, or '-' for stdin"),
    start: Optional[str] = typer.Option(
        None,
        "--start",
        "-s",
        help="Start time of day (HH:MM)",
        callback=validate_clock
    ),
    target: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="Target end time of day (HH:MM)",
        callback=validate_clock
    ),
    deselect: Optional[List[int]] = typer.Option(
        None,
        "--deselect",
        "-x",
        help="1-based position of a song to leave out (repeatable)"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file"
    )
):
    """Import pasted playlist data and show its timing."""
    session = get_session(config)
    text = read_text(source)

    if session.import_text(text) == 0:
        console.print("[yellow]No songs found in the input[/yellow]")
        raise typer.Exit(1)

    for position in deselect or []:
        if not 1 <= position <= len(session.songs):
            console.print(f"[yellow]Ignoring song position {position}: out of range[/yellow]")
            continue
        song = session.songs[position - 1]
        if song.selected:
            session.toggle_song(song.id)

    session.set_start_time(start)
    session.set_target_end_time(target)

    console.print(render_songs(session.songs))
    console.print(render_report(session.report()))


@app.command()
def parse(
    source: str = typer.Argument(..., help="File with playlist data, or '-' for stdin"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file"
    )
):
    """Show how pasted playlist data is interpreted."""
    settings = get_settings(config)
    importer = PlaylistImporter(
        placeholder_name=settings.importer.placeholder_name,
        placeholder_artist=settings.importer.placeholder_artist
    )
    records = importer.parse(read_text(source))

    if not records:
        console.print("[yellow]Nothing to import[/yellow]")
        return

    console.print(render_songs([record.to_song() for record in records]))


@app.command()
def duration(
    value: str = typer.Argument(..., help="Duration such as 3:45 or 1:02:03")
):
    """Show how a duration value is parsed and normalized."""
    valid = is_valid_time_format(value.strip())
    console.print(f"Seconds: {parse_time_to_seconds(value)}")
    console.print(f"Normalized: {format_time_input(value)}")
    console.print(
        "Format: [green]valid[/green]" if valid else "Format: [yellow]not M:SS or H:MM:SS[/yellow]"
    )


@app.command(name="list-playlists")
def list_playlists(
    library: Optional[Path] = typer.Option(
        None,
        "--library",
        "-l",
        help="YAML playlist library (overrides configuration)"
    ),
    credential: Optional[str] = typer.Option(
        None,
        "--credential",
        help="Client ID for the playlist source"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file"
    )
):
    """List playlists available from the playlist source."""
    session = get_session(config, library)

    result = session.connect(credential)
    if not result.ok:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    playlists = session.remote_playlists().value or []
    if not playlists:
        console.print("[yellow]No playlists available[/yellow]")
        return

    table = Table(title="Playlists")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Tracks", justify="right")

    for playlist in playlists:
        table.add_row(playlist.id, playlist.name, str(playlist.track_count))

    console.print(table)


@app.command(name="import-playlist")
def import_playlist(
    playlist_id: str = typer.Argument(..., help="Playlist ID"),
    start: Optional[str] = typer.Option(
        None,
        "--start",
        "-s",
        help="Start time of day (HH:MM)",
        callback=validate_clock
    ),
    target: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="Target end time of day (HH:MM)",
        callback=validate_clock
    ),
    library: Optional[Path] = typer.Option(
        None,
        "--library",
        "-l",
        help="YAML playlist library (overrides configuration)"
    ),
    credential: Optional[str] = typer.Option(
        None,
        "--credential",
        help="Client ID for the playlist source"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file"
    )
):
    """Import a playlist from the playlist source and show its timing."""
    session = get_session(config, library)

    result = session.connect(credential)
    if not result.ok:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    imported = session.import_remote_playlist(playlist_id)
    if not imported.ok:
        console.print(f"[red]Error: {imported.error}[/red]")
        raise typer.Exit(1)
    if imported.value == 0:
        console.print(f"[yellow]Playlist {playlist_id} has no tracks[/yellow]")
        raise typer.Exit(1)

    session.set_start_time(start)
    session.set_target_end_time(target)

    console.print(render_songs(session.songs))
    console.print(render_report(session.report()))


@app.command()
def init_config(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path for config file"
    )
):
    """Initialize a configuration file with defaults."""
    if output is None:
        output = get_config_dir() / 'config.yaml'

    if output.exists():
        overwrite = typer.confirm(
            f"Config file already exists at {output}. Overwrite?",
            default=False
        )
        if not overwrite:
            console.print("[yellow]Cancelled[/yellow]")
            return

    settings = Settings()
    settings.save(output)

    console.print(f"[green]Configuration file created: {output}[/green]")
    console.print("\nEdit this file to customize your settings")


if __name__ == "__main__":
    app()

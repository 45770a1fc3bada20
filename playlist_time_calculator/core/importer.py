"""Heuristic import of pasted playlist text.

Each non-blank line is matched against an ordered rule table; the first
rule whose trigger fires extracts ``(name, artist, duration)`` and no lower
rule is tried. The importer never raises: unusable lines are dropped and
the worst case is an empty result.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from ..models.song import ImportRecord
from ..utils.logger import get_logger
from .timecode import LOOSE_TIME_PATTERN, is_valid_time_format

DEFAULT_PLACEHOLDER_NAME = "Song {index}"
DEFAULT_PLACEHOLDER_ARTIST = "Unknown Artist"

Fields = Tuple[str, str, str]
EMPTY_FIELDS: Fields = ("", "", "")


def _first_duration(parts: Sequence[str]) -> str:
    """First field that is a strictly valid duration, or empty."""
    return next((part for part in parts if is_valid_time_format(part)), "")


def _extract_delimited(line: str) -> Fields:
    parts = [part.strip().replace('"', '') for part in line.split(',')]
    if len(parts) < 3:
        return EMPTY_FIELDS
    return parts[0], parts[1], _first_duration(parts)


def _separator_for(line: str) -> Optional[str]:
    if '\t' in line:
        return '\t'
    if ' - ' in line:
        return ' - '
    return None


def _extract_separated(line: str) -> Fields:
    separator = _separator_for(line)
    parts = [part.strip() for part in line.split(separator)]
    if len(parts) < 2:
        return EMPTY_FIELDS
    return parts[0], parts[1], _first_duration(parts)


def _extract_freeform(line: str) -> Fields:
    match = LOOSE_TIME_PATTERN.search(line)
    if not match:
        return line, "", ""
    name = (line[:match.start()] + line[match.end():]).strip()
    return name, "", match.group(0)


@dataclass(frozen=True)
class ImportRule:
    """One line format: a trigger and the extraction applied when it fires."""

    kind: str
    trigger: Callable[[str], bool]
    extractor: Callable[[str], Fields]

    def applies(self, line: str) -> bool:
        return self.trigger(line)

    def extract(self, line: str) -> Fields:
        return self.extractor(line)


DELIMITED = ImportRule("delimited", lambda line: ',' in line, _extract_delimited)
SEPARATED = ImportRule(
    "separated",
    lambda line: _separator_for(line) is not None,
    _extract_separated
)
FREEFORM = ImportRule("freeform", lambda line: True, _extract_freeform)

# Priority order matters: first matching rule wins.
DEFAULT_RULES: Tuple[ImportRule, ...] = (DELIMITED, SEPARATED, FREEFORM)


class PlaylistImporter:
    """Parses CSV, tab/dash separated or free text into import records."""

    def __init__(
        self,
        rules: Sequence[ImportRule] = DEFAULT_RULES,
        placeholder_name: str = DEFAULT_PLACEHOLDER_NAME,
        placeholder_artist: str = DEFAULT_PLACEHOLDER_ARTIST,
        logger: Optional[logging.Logger] = None
    ):
        """Initialize importer.

        Args:
            rules: Ordered rule table (first match wins)
            placeholder_name: Name used when none is found; ``{index}`` is
                replaced by the 1-based line number
            placeholder_artist: Artist used when none is found
            logger: Logger instance
        """
        self.rules = tuple(rules)
        self.placeholder_name = placeholder_name
        self.placeholder_artist = placeholder_artist
        self.logger = logger or get_logger("importer")

    def match_rule(self, line: str) -> ImportRule:
        """Return the highest-priority rule that applies to ``line``."""
        for rule in self.rules:
            if rule.applies(line):
                return rule
        return FREEFORM

    def parse_line(self, line: str, index: int) -> Optional[ImportRecord]:
        """Parse one trimmed, non-blank line.

        Args:
            line: Line text
            index: 1-based position among non-blank lines

        Returns:
            ImportRecord, or None if nothing usable was found
        """
        rule = self.match_rule(line)
        name, artist, duration = rule.extract(line)

        if not name and not duration:
            self.logger.debug(f"Dropping line {index} ({rule.kind}): {line!r}")
            return None

        return ImportRecord(
            name=name or self.placeholder_name.format(index=index),
            artist=artist or self.placeholder_artist,
            duration=duration
        )

    def parse(self, raw_text: Optional[str]) -> List[ImportRecord]:
        """Parse pasted playlist text into records, in input order."""
        if not raw_text:
            return []

        lines = [line.strip() for line in raw_text.splitlines()]
        lines = [line for line in lines if line]

        records = []
        for index, line in enumerate(lines, start=1):
            record = self.parse_line(line, index)
            if record is not None:
                records.append(record)

        self.logger.debug(f"Parsed {len(records)} of {len(lines)} line(s)")
        return records


def parse_playlist_text(raw_text: Optional[str]) -> List[ImportRecord]:
    """Parse text with the default rules and placeholders."""
    return PlaylistImporter().parse(raw_text)

"""Long-listing formatter for directory entries.

Renders an Entry as fixed-width styled segments in the conventional
long-listing layout::

    2    -rw-r--r--     1       user    4.0 K Jan 07 01-26 14:03 notes.txt

Every field before the name is padded to a fixed width, so the column
where the name starts is the same for every row of a listing.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import NamedTuple

from rich.text import Text

from dirctl.core.config import EngineConfig
from dirctl.listing.models import Entry

_MONTHS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# 1024-based units; each gets its own style for the numeric part
_SIZE_UNITS: tuple[str, ...] = ("B", "K", "M", "G", "T", "P", "E")
_SIZE_STYLES: dict[str, str] = {
    "B": "dired.size.bytes",
    "K": "dired.size.kilo",
    "M": "dired.size.mega",
    "G": "dired.size.giga",
}
_HUGE_SIZE_STYLE = "dired.size.huge"

OWNER_WIDTH = 10
SIZE_WIDTH = 6
TIME_WIDTH = 11

# Spaces between the nine fields that precede the name
NAME_FIELD_SEPARATORS = 9

STYLE_NORMAL = "dired.normal"
STYLE_DIM = "dired.dim"
STYLE_USERNAME = "dired.username"
STYLE_SIZE_UNIT = "dired.size_unit"
STYLE_MONTH = "dired.month"
STYLE_DAY = "dired.day"
STYLE_TIME = "dired.time"
STYLE_DIRECTORY = "dired.directory"
STYLE_DOTFILE = "dired.dotfile"
STYLE_FILE = "dired.file"


class StyledSegment(NamedTuple):
    """A piece of text with the semantic style it should be shown in."""

    text: str
    style: str


class FormattedEntry(NamedTuple):
    """Formatter output for one entry.

    Attributes:
        segments: Styled segments in display order, separators included.
        name_column: Zero-based column where the name starts.
    """

    segments: tuple[StyledSegment, ...]
    name_column: int

    @property
    def plain(self) -> str:
        return "".join(segment.text for segment in self.segments)

    def to_text(self) -> Text:
        """Build a Rich Text line from the segments."""
        text = Text()
        for segment in self.segments:
            text.append(segment.text, style=segment.style)
        return text


def human_size(size_bytes: int) -> tuple[str, str]:
    """Scale a byte count with 1024-based units.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Tuple of (value, unit), e.g. ("512", "B") or ("4.0", "K").
    """
    if size_bytes < 1024:
        return str(size_bytes), "B"

    size = float(size_bytes)
    unit_index = 0
    # Step on the rounded value so 1048575 renders as 1.0 M, not 1024.0 K
    while round(size, 1) >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    return f"{size:.1f}", _SIZE_UNITS[unit_index]


def format_time(modified_at: datetime, now: datetime) -> str:
    """Format the time-or-year field.

    Files last modified in an earlier calendar year show the year
    (``YYYY  HH:MM``); all others show month-year and time
    (``MM-YY HH:MM``).
    """
    if modified_at.year < now.year:
        return modified_at.strftime("%Y  %H:%M")
    return modified_at.strftime("%m-%y %H:%M")


class EntryFormatter:
    """Formats entries as long-listing rows.

    Args:
        config: Engine configuration (the separator appended to directories).
        now: Reference time for the year comparison. Defaults to the
            current local time at each call.
    """

    def __init__(self, config: EngineConfig | None = None, now: datetime | None = None) -> None:
        self._config = config or EngineConfig()
        self._now = now

    def format(self, entry: Entry) -> FormattedEntry:
        """Render an entry into styled segments and its name column.

        Args:
            entry: Entry to render.

        Returns:
            FormattedEntry with the segments and the name column.
        """
        now = self._now or datetime.now()
        size_value, size_unit = human_size(entry.size_bytes)
        owner = entry.owner_name or (str(entry.owner_id) if entry.owner_id >= 0 else "")

        if entry.modified_at is not None:
            month = _MONTHS[entry.modified_at.month - 1]
            day = f"{entry.modified_at.day:02d}"
            ftime = format_time(entry.modified_at, now)
        else:
            month, day, ftime = " " * 3, " " * 2, " " * TIME_WIDTH

        fields = (
            StyledSegment(f"{entry.id:<4d}", STYLE_DIM),
            StyledSegment(entry.permissions.symbolic(entry.kind), STYLE_NORMAL),
            StyledSegment(f"{entry.link_count:5d}", STYLE_DIM),
            StyledSegment(f"{owner[:OWNER_WIDTH]:>{OWNER_WIDTH}}", STYLE_USERNAME),
            StyledSegment(
                f"{size_value:>{SIZE_WIDTH}}",
                _SIZE_STYLES.get(size_unit, _HUGE_SIZE_STYLE),
            ),
            StyledSegment(size_unit, STYLE_SIZE_UNIT),
            StyledSegment(month, STYLE_MONTH),
            StyledSegment(day, STYLE_DAY),
            StyledSegment(ftime, STYLE_TIME),
        )
        name_column = sum(len(field.text) for field in fields) + NAME_FIELD_SEPARATORS

        space = StyledSegment(" ", STYLE_NORMAL)
        segments: list[StyledSegment] = []
        for field in fields:
            segments.extend((field, space))
        segments.extend(self._name_segments(entry))

        return FormattedEntry(segments=tuple(segments), name_column=name_column)

    def format_all(self, entries: Iterable[Entry]) -> list[FormattedEntry]:
        return [self.format(entry) for entry in entries]

    def _name_segments(self, entry: Entry) -> tuple[StyledSegment, ...]:
        if entry.is_directory:
            return (
                StyledSegment(entry.name, STYLE_DIRECTORY),
                StyledSegment(self._config.path_separator, STYLE_NORMAL),
            )
        if entry.is_hidden:
            return (StyledSegment(entry.name, STYLE_DOTFILE),)
        return (StyledSegment(entry.name, STYLE_FILE),)

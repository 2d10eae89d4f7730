"""TimeEntry class for representing Toggl time entries."""
from datetime import datetime, timedelta
from typing import Optional, Dict, Any, List

from ..utils.date_utils import parse_timestamp, format_rfc822
from ..utils.format_utils import format_duration


class TimeEntry:
    """Class representing a Toggl time entry."""

    def __init__(self, entry_data: Dict[str, Any]):
        """Initialize a TimeEntry.

        Args:
            entry_data: Raw entry data from the Toggl API

        Raises:
            KeyError: If the entry has no id or start time
            ValueError: If a timestamp cannot be parsed
        """
        self.raw_data = entry_data
        self.id = int(entry_data["id"])
        self.guid = entry_data.get("guid")
        self.wid = entry_data.get("wid")
        self.pid = entry_data.get("pid")
        self.billable = bool(entry_data.get("billable", False))
        self.description = entry_data.get("description") or ""
        self.duronly = bool(entry_data.get("duronly", False))
        self.uid = entry_data.get("uid")
        self.workspace_id = entry_data.get("workspace_id") or entry_data.get("wid")

        # Time information
        self.start = parse_timestamp(entry_data["start"])
        self.stop = parse_timestamp(entry_data.get("stop"))
        self.duration = int(entry_data.get("duration") or 0)
        self.at = parse_timestamp(entry_data.get("at"))

    @classmethod
    def from_list(cls, raw_entries: List[Dict[str, Any]]) -> List["TimeEntry"]:
        """Convert a decoded API response into TimeEntry objects."""
        return [cls(e) for e in raw_entries]

    @property
    def is_running(self) -> bool:
        """Whether the entry is still being tracked.

        Toggl marks running entries with a negative duration and no stop.
        """
        return self.duration < 0 or self.stop is None

    @property
    def elapsed(self) -> Optional[timedelta]:
        """Get the authoritative duration, stop - start.

        Returns:
            Elapsed time, or None for a running entry
        """
        if self.stop is None:
            return None
        return self.stop - self.start

    def start_in(self, tz) -> datetime:
        return self.start.astimezone(tz)

    @property
    def start_rfc822(self) -> str:
        """Get the start time formatted in the entry's own zone."""
        return format_rfc822(self.start)

    def __str__(self) -> str:
        return f"{self.description} ({self.start} -> {self.stop})"

    def __repr__(self) -> str:
        return f"TimeEntry(id={self.id}, start={self.start!r}, stop={self.stop!r})"

    def to_row(self) -> List[Any]:
        """Convert to a plain table row (id, description, start, duration)."""
        elapsed = self.elapsed
        return [
            self.id,
            self.description,
            self.start_rfc822,
            format_duration(elapsed) if elapsed is not None else "running",
        ]

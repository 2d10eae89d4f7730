"""Date utility functions for toggler."""
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

RFC822 = "%d %b %y %H:%M"


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an RFC3339 timestamp from the Toggl API.

    Args:
        value: Timestamp string, e.g. "2024-03-01T09:00:00+00:00" or "...Z"

    Returns:
        Timezone-aware datetime keeping the sender's offset, or None if empty
    """
    if not value:
        return None
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_rfc822(dt: datetime) -> str:
    """Format an aware datetime like Go's time.RFC822.

    UTC is shown as "UTC", any other offset numerically, e.g. "+0100".
    """
    offset = dt.utcoffset()
    zone = "UTC" if not offset else dt.strftime("%z")
    return f"{dt.strftime(RFC822)} {zone}"


def rfc3339(dt: datetime) -> str:
    """Format an aware datetime as an RFC3339 string with second precision.

    Args:
        dt: Datetime to format

    Returns:
        RFC3339 string
    """
    return dt.replace(microsecond=0).isoformat()


def lookback_range(timeframe: timedelta, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Get the (start, end) window reaching `timeframe` back from now.

    Args:
        timeframe: Length of the lookback window
        now: Reference point (defaults to the current UTC time)

    Returns:
        Tuple of (start, end)
    """
    end = now or datetime.now(timezone.utc)
    return end - timeframe, end


def load_timezone(name: str) -> ZoneInfo:
    """Resolve an IANA time zone name.

    Args:
        name: IANA name such as "Europe/Zurich"

    Returns:
        ZoneInfo for the name

    Raises:
        ValueError: If the name is not a known time zone
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ValueError(f"unknown time zone {name!r}") from e

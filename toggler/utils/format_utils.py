"""Formatting utility functions for toggler."""
import re
from datetime import timedelta

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(h|ms|m|s|us|µs)")

# largest duration Go can represent, (2**63 - 1) nanoseconds
MAX_DURATION = timedelta(microseconds=(2**63 - 1) // 1000)

_UNIT_SECONDS = {
    "h": 3600,
    "m": 60,
    "s": 1,
    "ms": 0.001,
    "us": 0.000001,
    "µs": 0.000001,
}


def format_duration(duration: timedelta) -> str:
    """Format a timedelta the way Go prints a time.Duration.

    Args:
        duration: Duration to format

    Returns:
        Duration string such as "47m0s", "2h30m0s" or "0s"
    """
    micros = (duration.days * 86400 + duration.seconds) * 1_000_000 + duration.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000_000:
        if micros < 1000:
            return f"{sign}{micros}µs"
        return f"{sign}{_trim_fraction(micros, 1000)}ms"

    total_seconds, frac = divmod(micros, 1_000_000)
    h, rest = divmod(total_seconds, 3600)
    m, s = divmod(rest, 60)
    seconds = _trim_fraction(s * 1_000_000 + frac, 1_000_000)

    if h:
        return f"{sign}{h}h{m}m{seconds}s"
    if m:
        return f"{sign}{m}m{seconds}s"
    return f"{sign}{seconds}s"


def _trim_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{frac:0{width}d}".rstrip("0")


def parse_duration(value: str) -> timedelta:
    """Parse a Go-style duration string into a timedelta.

    Accepts a sequence of decimal numbers with unit suffixes, e.g. "5m",
    "1h30m", "720h", "90s" or "1.5h". A bare "0" is also accepted.

    Args:
        value: Duration string

    Returns:
        Parsed duration

    Raises:
        ValueError: If the string is not a valid duration or exceeds MAX_DURATION
    """
    text = (value or "").strip()
    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {value!r}")

    pos = 0
    seconds = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != pos:
            raise ValueError(f"invalid duration {value!r}")
        number, unit = match.groups()
        seconds += float(number) * _UNIT_SECONDS[unit]
        pos = match.end()

    if pos != len(text):
        raise ValueError(f"invalid duration {value!r}")
    if seconds > MAX_DURATION.total_seconds():
        raise ValueError(f"duration {value!r} out of range")
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise ValueError(f"duration {value!r} out of range") from e

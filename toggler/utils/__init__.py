"""Utility modules for toggler."""

from .date_utils import parse_timestamp, rfc3339, lookback_range, load_timezone, format_rfc822
from .format_utils import format_duration, parse_duration

__all__ = [
    'parse_timestamp', 'rfc3339', 'lookback_range', 'load_timezone', 'format_rfc822',
    'format_duration', 'parse_duration',
]

"""Rounding of time entry durations to a fixed granularity."""
from datetime import timedelta
from typing import Iterable, Iterator, NamedTuple

from .time_entry import TimeEntry

_ONE = timedelta(microseconds=1)


class RoundedEntry(NamedTuple):
    entry: TimeEntry
    old_duration: timedelta
    new_duration: timedelta

    @property
    def new_seconds(self) -> int:
        return int(self.new_duration.total_seconds())


def round_up(duration: timedelta, granularity: timedelta) -> timedelta:
    """Round a duration to a multiple of granularity, never going below it.

    Rounds half-up to the nearest multiple; if that lands below the input,
    one more granularity step is added. A non-positive granularity leaves
    the duration unchanged.

    Args:
        duration: Duration to round
        granularity: Rounding step, e.g. 5 minutes

    Returns:
        Rounded duration, always >= duration
    """
    step = granularity // _ONE
    if step <= 0:
        return duration

    value = duration // _ONE
    q, r = divmod(value, step)
    rounded = q * step
    if 2 * r >= step:
        rounded += step
    if rounded < value:
        rounded += step
    return rounded * _ONE


def round_entries(entries: Iterable[TimeEntry], granularity: timedelta) -> Iterator[RoundedEntry]:
    """Select the entries whose duration changes when rounded up.

    Running entries, zero-length entries and entries already on a
    granularity boundary are skipped.

    Args:
        entries: Fetched time entries
        granularity: Rounding step

    Yields:
        RoundedEntry for every entry that needs an update
    """
    for entry in entries:
        if entry.is_running:
            continue

        old_duration = entry.elapsed
        new_duration = round_up(old_duration, granularity)
        if not old_duration or old_duration == new_duration:
            continue

        yield RoundedEntry(entry, old_duration, new_duration)

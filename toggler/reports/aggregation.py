"""Day and month aggregation of time entries."""
from collections import defaultdict
from datetime import datetime, timedelta, tzinfo
from typing import Dict, Iterable, List, NamedTuple

from .time_entry import TimeEntry

DAY_LAYOUT = "%Y-%m-%d"
MONTH_LAYOUT = "%Y-%m"


class SummaryTime(NamedTuple):
    start: datetime
    duration: timedelta


def aggregate(entries: Iterable[TimeEntry], layout: str, tz: tzinfo) -> List[SummaryTime]:
    """Group entries by calendar bucket and sum their durations.

    Entries are bucketed by their start time formatted with `layout` in the
    entry's own offset. Within a bucket, starts are converted to `tz`
    and the earliest one is kept; durations are summed as stop - start.
    Running entries are left out.

    Args:
        entries: Time entries to aggregate
        layout: strftime layout of the bucket key (DAY_LAYOUT or MONTH_LAYOUT)
        tz: Display time zone

    Returns:
        One SummaryTime per bucket, sorted ascending by start
    """
    buckets: Dict[str, List[TimeEntry]] = defaultdict(list)
    for entry in entries:
        if entry.stop is None:
            continue
        buckets[entry.start.strftime(layout)].append(entry)

    agg = []
    for bucket in buckets.values():
        group_start = None
        group_duration = timedelta(0)

        for entry in bucket:
            start = entry.start_in(tz)

            # absolute elapsed time, not the wall-clock difference in tz
            group_duration += entry.elapsed
            if group_start is None or start < group_start:
                group_start = start

        agg.append(SummaryTime(group_start, group_duration))

    # dict order is not relied upon; sorted() is stable for equal starts
    return sorted(agg, key=lambda s: s.start)

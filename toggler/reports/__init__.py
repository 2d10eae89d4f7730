"""Report generation modules for toggler."""

from .time_entry import TimeEntry
from .rounding import RoundedEntry, round_up, round_entries
from .aggregation import SummaryTime, aggregate, DAY_LAYOUT, MONTH_LAYOUT
from .report_generator import ReportGenerator

__all__ = [
    'TimeEntry', 'RoundedEntry', 'round_up', 'round_entries',
    'SummaryTime', 'aggregate', 'DAY_LAYOUT', 'MONTH_LAYOUT', 'ReportGenerator',
]

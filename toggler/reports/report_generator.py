"""ReportGenerator class for rendering toggler tables."""
from datetime import timedelta
from io import StringIO
from typing import Any, List, Sequence
from tabulate import tabulate

from .aggregation import SummaryTime
from .rounding import RoundedEntry
from ..utils.format_utils import format_duration

ROUND_HEADERS = ["ID", "Description", "Start Time", "Old Duration", "New Duration"]
MONTH_HEADERS = ["Month", "Duration"]


class ReportGenerator:
    """Class for rendering tables from rounded entries and aggregates."""

    def __init__(self, tablefmt: str = "github"):
        self.tablefmt = tablefmt

    def _render(self, rows: Sequence[Sequence[Any]], headers: List[str]) -> str:
        output = StringIO()
        print(tabulate(rows, headers=headers, tablefmt=self.tablefmt), file=output)
        return output.getvalue()

    @staticmethod
    def rounding_row(rounded: RoundedEntry, applied: bool) -> List[Any]:
        """Build the table row for a rounded entry.

        Args:
            rounded: Entry together with its old and new duration
            applied: Whether the new duration was written back

        Returns:
            Row with the new duration, or "-" if it was not applied
        """
        row = rounded.entry.to_row()
        row.append(format_duration(rounded.new_duration) if applied else "-")
        return row

    def rounding_report(self, rows: Sequence[Sequence[Any]]) -> str:
        """Render the rounding table."""
        return self._render(rows, ROUND_HEADERS)

    def day_report(self, aggregates: Sequence[SummaryTime], lunch_break: timedelta) -> str:
        """Render the per-day summary table.

        The end time assumes one contiguous working block starting at the
        first entry, extended by the lunch break.

        Args:
            aggregates: Per-day aggregates
            lunch_break: Break added to the end time

        Returns:
            Rendered table
        """
        headers = ["Day", "Start Time", f"End Time ({format_duration(lunch_break)} Lunch)", "Duration"]
        rows = [
            [
                agg.start.strftime("%a %d. %b %Y"),
                agg.start.strftime("%H:%M"),
                (agg.start + agg.duration + lunch_break).strftime("%H:%M"),
                format_duration(agg.duration),
            ]
            for agg in aggregates
        ]
        return self._render(rows, headers)

    def month_report(self, aggregates: Sequence[SummaryTime]) -> str:
        """Render the per-month table."""
        rows = [[agg.start.strftime("%b %Y"), format_duration(agg.duration)] for agg in aggregates]
        return self._render(rows, MONTH_HEADERS)

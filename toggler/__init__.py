"""
toggler: A CLI tool for rounding and summarizing Toggl Track time entries.

- Fetches time entries from the Toggl Track API
- Rounds durations up to a granularity and optionally writes them back
- Summarizes by day (with start/end times) and by month
- Can be used as a CLI (via `python -m toggler` or `toggler` if installed as a package)
"""

__version__ = "0.1.0"

"""Main module for the toggler package."""
import os
import sys
import argparse
from datetime import timedelta
from typing import Callable, Dict, List, Optional
from dotenv import load_dotenv

from .api.client import TogglClient, TogglAPIError
from .config import Config, ConfigError, DEFAULT_ROUNDING, DEFAULT_TIMEFRAME, DEFAULT_LUNCH_BREAK, DEFAULT_TIMEZONE
from .reports.time_entry import TimeEntry
from .reports.rounding import round_entries
from .reports.aggregation import aggregate, DAY_LAYOUT, MONTH_LAYOUT
from .reports.report_generator import ReportGenerator
from .utils.date_utils import lookback_range
from .utils.format_utils import parse_duration, format_duration

# --- Environment Setup ---
def load_environment():
    """Load environment variables from the toggler.env file, if present."""
    env_file = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'toggler.env')
    if os.path.exists(env_file):
        load_dotenv(env_file)

# --- CLI Logic ---
def duration_arg(value: str) -> timedelta:
    """argparse type for Go-style durations such as 5m or 720h."""
    try:
        return parse_duration(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns:
        Parser with the round, summary and aggregation subcommands
    """
    parser = argparse.ArgumentParser(
        description="Round and summarize your Toggl Track time entries.",
        epilog="""
Examples:
    # Preview which entries of the last 30 days would be rounded to 5 minutes
  toggler round
    ---
    # Round entries of the last week to 15 minutes and write the changes back
  toggler round --apply --rounding 15m --timeframe 168h
    ---
    # Show start, end and total time per working day in Zurich time
  toggler summary --lunchbreak 30m --timezone Europe/Zurich
    ---
    # Show total time per month of the last year
  toggler aggregation --timeframe 8760h
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="toggler"
    )
    parser.add_argument('--api-token', '--api_token', dest='api_token', default=os.getenv("TOGGL_API_TOKEN"),
                        help='API token for Toggl (default: $TOGGL_API_TOKEN)')
    subparsers = parser.add_subparsers(dest='command', metavar='command')

    timeframe_help = f'Time frame before now (default: {format_duration(DEFAULT_TIMEFRAME)})'
    timezone_help = f'IANA time zone, e.g. Europe/Berlin (default: {DEFAULT_TIMEZONE})'

    round_parser = subparsers.add_parser('round', help='Round your time entries in Toggl')
    round_parser.add_argument('--apply', action='store_true', help='Apply rounding changes')
    round_parser.add_argument('--rounding', type=duration_arg, default=DEFAULT_ROUNDING,
                              help=f'Rounding granularity (default: {format_duration(DEFAULT_ROUNDING)})')
    round_parser.add_argument('--timeframe', type=duration_arg, default=DEFAULT_TIMEFRAME, help=timeframe_help)

    summary_parser = subparsers.add_parser('summary', help='Summary of working days')
    summary_parser.add_argument('--timeframe', type=duration_arg, default=DEFAULT_TIMEFRAME, help=timeframe_help)
    summary_parser.add_argument('--lunchbreak', type=duration_arg, default=DEFAULT_LUNCH_BREAK,
                                help=f'Time taken for lunch (default: {format_duration(DEFAULT_LUNCH_BREAK)})')
    summary_parser.add_argument('--timezone', default=DEFAULT_TIMEZONE, help=timezone_help)

    aggregation_parser = subparsers.add_parser('aggregation', help='Total time per month')
    aggregation_parser.add_argument('--timeframe', type=duration_arg, default=DEFAULT_TIMEFRAME, help=timeframe_help)
    aggregation_parser.add_argument('--timezone', default=DEFAULT_TIMEZONE, help=timezone_help)

    return parser

# --- Commands ---
def round_command(config: Config, client: TogglClient, entries: List[TimeEntry], generator: ReportGenerator) -> str:
    """Round entries up and optionally write the new durations back.

    A failing write-back raises and aborts the run before anything is printed.
    """
    rows = []
    for rounded in round_entries(entries, config.rounding):
        if config.apply:
            client.update_duration(rounded.entry.workspace_id, rounded.entry.id, rounded.new_seconds)
        rows.append(generator.rounding_row(rounded, config.apply))
    return generator.rounding_report(rows)

def summary_command(config: Config, client: TogglClient, entries: List[TimeEntry], generator: ReportGenerator) -> str:
    aggregates = aggregate(entries, DAY_LAYOUT, config.timezone)
    return generator.day_report(aggregates, config.lunch_break)

def aggregation_command(config: Config, client: TogglClient, entries: List[TimeEntry], generator: ReportGenerator) -> str:
    aggregates = aggregate(entries, MONTH_LAYOUT, config.timezone)
    return generator.month_report(aggregates)

COMMANDS: Dict[str, Callable[[Config, TogglClient, List[TimeEntry], ReportGenerator], str]] = {
    'round': round_command,
    'summary': summary_command,
    'aggregation': aggregation_command,
}

def fetch_entries(client: TogglClient, timeframe: timedelta) -> List[TimeEntry]:
    """Fetch and decode the time entries of the lookback window.

    Raises:
        TogglAPIError: If the request fails or an entry cannot be decoded
    """
    start, end = lookback_range(timeframe)
    raw_entries = client.get_time_entries(start, end)
    try:
        return TimeEntry.from_list(raw_entries)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise TogglAPIError(f"Could not decode time entries: {e!r}") from e

def run(config: Config, client: Optional[TogglClient] = None) -> None:
    """Fetch, transform and print the report for the configured command.

    Args:
        config: Invocation settings
        client: API client (optional, built from the token otherwise)
    """
    client = client or TogglClient(config.api_token)
    entries = fetch_entries(client, config.timeframe)
    if not entries:
        print(f"\n⚠️  No time entries found in the last {format_duration(config.timeframe)}")
        return

    print(f"📊 Found {len(entries)} time entries")

    report = COMMANDS[config.command](config, client, entries, ReportGenerator())
    print(report)

def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    # Load environment variables
    load_environment()

    # Parse command line arguments
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    try:
        config = Config.from_args(args)
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(2)

    try:
        run(config)
    except TogglAPIError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()

"""Per-invocation configuration for toggler."""
import argparse
from dataclasses import dataclass
from datetime import timedelta, tzinfo
from typing import Optional

from .utils.date_utils import load_timezone

DEFAULT_ROUNDING = timedelta(minutes=5)
DEFAULT_TIMEFRAME = timedelta(hours=24 * 30)
DEFAULT_LUNCH_BREAK = timedelta(hours=1)
DEFAULT_TIMEZONE = "Europe/Zurich"


class ConfigError(Exception):
    """Raised when the command line does not describe a runnable invocation."""


@dataclass(frozen=True)
class Config:
    """Settings of one invocation, built once and passed to the command."""
    api_token: str
    command: str
    timeframe: timedelta = DEFAULT_TIMEFRAME
    apply: bool = False
    rounding: timedelta = DEFAULT_ROUNDING
    lunch_break: timedelta = DEFAULT_LUNCH_BREAK
    timezone: Optional[tzinfo] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        """Build the configuration from parsed command line arguments.

        Args:
            args: Parsed arguments (see `toggler.__main__.build_parser`)

        Returns:
            Config for the selected command

        Raises:
            ConfigError: If the token is missing or a value is invalid
        """
        if not args.api_token:
            raise ConfigError("Set TOGGL_API_TOKEN in your environment or toggler.env, or pass --api-token.")

        tz = None
        tz_name = getattr(args, "timezone", None)
        if tz_name is not None:
            try:
                tz = load_timezone(tz_name)
            except ValueError as e:
                raise ConfigError(str(e)) from e

        rounding = getattr(args, "rounding", DEFAULT_ROUNDING)
        if rounding <= timedelta(0):
            raise ConfigError("--rounding must be a positive duration")

        return cls(
            api_token=args.api_token,
            command=args.command,
            timeframe=getattr(args, "timeframe", DEFAULT_TIMEFRAME),
            apply=getattr(args, "apply", False),
            rounding=rounding,
            lunch_break=getattr(args, "lunchbreak", DEFAULT_LUNCH_BREAK),
            timezone=tz,
        )

"""Time utilities (operating timezone)."""

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

UK = ZoneInfo("Europe/London")


def localize(naive: datetime, wall_clock_tz: tzinfo, target_tz: tzinfo = UK) -> datetime:
    """
    Interpret a naive wall-clock datetime in wall_clock_tz and convert it to target_tz.
    """
    if naive.tzinfo is not None:
        return naive.astimezone(target_tz)
    return naive.replace(tzinfo=wall_clock_tz).astimezone(target_tz)


def to_zone(dt: datetime, tz: tzinfo, naive_assumed_tz: tzinfo = timezone.utc) -> datetime:
    """Convert datetime to tz; naive values are read as naive_assumed_tz."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=naive_assumed_tz)
    return dt.astimezone(tz)


def add_elapsed(dt: datetime, delta: timedelta) -> datetime:
    """
    Add real elapsed time to an aware datetime, keeping its zone.
    Plain `dt + delta` on a zoned value moves the wall clock, which is
    an hour off when the span crosses a clock change.
    """
    return (dt.astimezone(timezone.utc) + delta).astimezone(dt.tzinfo)


def within(start: datetime, instant: datetime, end: datetime) -> bool:
    """start <= instant <= end, compared as absolute instants."""
    return (
        start.astimezone(timezone.utc)
        <= instant.astimezone(timezone.utc)
        <= end.astimezone(timezone.utc)
    )

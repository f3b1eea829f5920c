"""
Local date/time parsing.

Customer dates arrive as locale-formatted wall-clock strings. They are
parsed with the profile's format, pinned to the profile's zone and
normalized into the operating timezone.
"""

from datetime import datetime

from refund_engine.domain.models import (
    Err,
    InvalidDateTime,
    Ok,
    RefundRules,
    Result,
    TimezoneProfile,
)
from refund_engine.utils.time import localize


def parse_local_date(
    date_str: str,
    profile: TimezoneProfile,
    rules: RefundRules,
) -> Result[datetime]:
    """Midnight of a locale-formatted date in the customer's zone"""
    try:
        naive = datetime.strptime(date_str.strip(), profile.date_format)
    except (ValueError, AttributeError):
        return Err(InvalidDateTime(str(date_str), profile.date_format))
    return Ok(localize(naive, profile.zone, rules.operating_zone))


def parse_local_datetime(
    date_str: str,
    time_str: str,
    profile: TimezoneProfile,
    rules: RefundRules,
) -> Result[datetime]:
    """Date + time-of-day in the customer's zone, as an operating-zone instant"""
    pattern = f"{profile.date_format} {rules.time_format}"
    value = f"{date_str} {time_str}"
    try:
        naive = datetime.strptime(f"{date_str.strip()} {time_str.strip()}", pattern)
    except (ValueError, AttributeError):
        return Err(InvalidDateTime(value, pattern))
    return Ok(localize(naive, profile.zone, rules.operating_zone))

"""
Business hours of the support organisation.

Both rules are evaluated on the instant's wall clock in the operating
timezone. Hours are half-open: open_hour:00 is in-hours, close_hour:00
is out-of-hours.
"""

import logging
from datetime import datetime, time, timedelta
from typing import Optional

from refund_engine.domain.models import (
    Err,
    InHoursInstant,
    Ok,
    RefundRules,
    Result,
)
from refund_engine.domain.services.config_engine import get_default_rules
from refund_engine.utils.time import to_zone

logger = logging.getLogger(__name__)

SATURDAY = 5
FRIDAY = 4


def _is_weekend(local: datetime) -> bool:
    return local.weekday() >= SATURDAY


def is_out_of_hours(instant: datetime, rules: Optional[RefundRules] = None) -> Result[bool]:
    """Weekends are always out-of-hours; weekdays outside [open, close) are too"""
    rules = rules or get_default_rules()
    local = to_zone(instant, rules.operating_zone)

    if _is_weekend(local):
        return Ok(True)
    return Ok(local.hour < rules.open_hour or local.hour >= rules.close_hour)


def next_business_day_9am(instant: datetime, rules: Optional[RefundRules] = None) -> Result[datetime]:
    """
    Next business-day opening for an out-of-hours instant.

    - Saturday / Sunday           -> Monday opening
    - Weekday before opening      -> same day opening
    - Mon-Thu at/after closing    -> next day opening
    - Friday at/after closing     -> Monday opening

    A weekday in-hours instant has no defined rollforward and fails
    with InHoursInstant.
    """
    rules = rules or get_default_rules()
    local = to_zone(instant, rules.operating_zone)

    if _is_weekend(local):
        days_ahead = 7 - local.weekday()
    elif local.hour < rules.open_hour:
        days_ahead = 0
    elif local.hour >= rules.close_hour:
        days_ahead = 3 if local.weekday() == FRIDAY else 1
    else:
        return Err(InHoursInstant(local))

    target_day = local.date() + timedelta(days=days_ahead)
    opening = datetime.combine(target_day, time(rules.open_hour), tzinfo=rules.operating_zone)
    logger.debug("ROLLFORWARD | from=%s to=%s", local.isoformat(), opening.isoformat())
    return Ok(opening)

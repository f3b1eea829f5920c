"""
Effective request time.

Web requests count from the moment they were made. Phone requests made
outside business hours count from the next business-day opening.
"""

from datetime import datetime
from typing import NamedTuple, Optional

from refund_engine.domain.models import (
    Err,
    Ok,
    RefundRules,
    RequestSource,
    Result,
    ReversalRequest,
    TimezoneProfile,
    UnknownSource,
)
from refund_engine.domain.services.business_hours import is_out_of_hours, next_business_day_9am
from refund_engine.domain.services.config_engine import get_default_rules
from refund_engine.domain.services.local_time import parse_local_datetime
from refund_engine.domain.services.timezone_resolver import resolve

_SOURCES = {source.value: source for source in RequestSource}


def parse_source(label: str) -> Result[RequestSource]:
    source = _SOURCES.get(label)
    if source is None:
        return Err(UnknownSource(label))
    return Ok(source)


class RequestTimes(NamedTuple):
    """Request instant as made, and the instant it counts from"""
    requested_at: datetime
    effective_at: datetime


def resolve_request_times(
    request: ReversalRequest,
    profile: TimezoneProfile,
    rules: RefundRules,
) -> Result[RequestTimes]:
    """Parse the request once and apply the channel's rollforward policy"""
    requested_at = parse_local_datetime(request.request_date, request.request_time, profile, rules)
    if isinstance(requested_at, Err):
        return requested_at

    source = parse_source(request.source)
    if isinstance(source, Err):
        return source

    if source.value is RequestSource.WEB_APP:
        return Ok(RequestTimes(requested_at.value, requested_at.value))

    # Phone: only staffed hours count
    out_of_hours = is_out_of_hours(requested_at.value, rules)
    if isinstance(out_of_hours, Err):
        return out_of_hours
    if not out_of_hours.value:
        return Ok(RequestTimes(requested_at.value, requested_at.value))

    opening = next_business_day_9am(requested_at.value, rules)
    if isinstance(opening, Err):
        return opening
    return Ok(RequestTimes(requested_at.value, opening.value))


def get_effective_request_time(
    request: ReversalRequest,
    rules: Optional[RefundRules] = None,
) -> Result[datetime]:
    rules = rules or get_default_rules()

    profile = resolve(request.customer_tz, rules)
    if isinstance(profile, Err):
        return profile

    times = resolve_request_times(request, profile.value, rules)
    if isinstance(times, Err):
        return times
    return Ok(times.value.effective_at)

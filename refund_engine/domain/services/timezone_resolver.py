"""Customer timezone label -> TimezoneProfile lookup."""

from typing import Optional

from refund_engine.domain.models import (
    Err,
    Ok,
    RefundRules,
    Result,
    TimezoneProfile,
    UnknownTimezone,
)
from refund_engine.domain.services.config_engine import get_default_rules


def resolve(customer_tz: str, rules: Optional[RefundRules] = None) -> Result[TimezoneProfile]:
    """
    Exact-match lookup of a customer-facing timezone label.
    There is no default zone: unknown labels fail with UnknownTimezone.
    """
    rules = rules or get_default_rules()
    profile = rules.timezones.get(customer_tz)
    if profile is None:
        return Err(UnknownTimezone(customer_tz))
    return Ok(profile)

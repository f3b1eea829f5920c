"""Terms-of-service cohort classification by signup date."""

from typing import Optional

from refund_engine.domain.models import (
    Err,
    Ok,
    RefundRules,
    Result,
    ReversalRequest,
    TimezoneProfile,
    TosCohort,
)
from refund_engine.domain.services.config_engine import get_default_rules
from refund_engine.domain.services.local_time import parse_local_date
from refund_engine.domain.services.timezone_resolver import resolve


def is_new_tos(request: ReversalRequest, rules: Optional[RefundRules] = None) -> Result[bool]:
    """
    True when the customer signed up at or after the new-terms epoch.

    The signup date is midnight in the customer's own zone; the comparison
    is between absolute instants, so customers in different zones are
    measured against the same moment.
    """
    cohort = tos_cohort(request, rules)
    if isinstance(cohort, Err):
        return cohort
    return Ok(cohort.value is TosCohort.NEW)


def tos_cohort(request: ReversalRequest, rules: Optional[RefundRules] = None) -> Result[TosCohort]:
    rules = rules or get_default_rules()

    profile = resolve(request.customer_tz, rules)
    if isinstance(profile, Err):
        return profile
    return classify_signup(request, profile.value, rules)


def classify_signup(
    request: ReversalRequest,
    profile: TimezoneProfile,
    rules: RefundRules,
) -> Result[TosCohort]:
    """Cohort for an already resolved customer timezone"""
    signed_up_at = parse_local_date(request.signup_date, profile, rules)
    if isinstance(signed_up_at, Err):
        return signed_up_at

    if signed_up_at.value >= rules.new_terms_epoch:
        return Ok(TosCohort.NEW)
    return Ok(TosCohort.OLD)

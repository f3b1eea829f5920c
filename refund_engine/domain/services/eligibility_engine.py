"""
ELIGIBILITY ENGINE
Decide whether a reversal request is inside its refund window

FLOW:
customer timezone -> investment instant -> effective request instant
-> ToS cohort -> window (source x cohort) -> verdict

RULES:
✅ Short-circuit on the first failure, returned unchanged
✅ Window is closed at both ends: [investment, investment + window]
✅ No state between calls
"""

import logging
from datetime import timedelta
from typing import Optional

from refund_engine.domain.models import (
    EligibilityDecision,
    Err,
    Ok,
    RefundRules,
    Result,
    ReversalRequest,
)
from refund_engine.domain.services.config_engine import get_default_rules
from refund_engine.domain.services.local_time import parse_local_datetime
from refund_engine.domain.services.request_time_resolver import parse_source, resolve_request_times
from refund_engine.domain.services.timezone_resolver import resolve
from refund_engine.domain.services.tos_classifier import classify_signup
from refund_engine.utils.time import add_elapsed, within

logger = logging.getLogger(__name__)


def evaluate_refund_request(
    request: ReversalRequest,
    rules: Optional[RefundRules] = None,
) -> Result[EligibilityDecision]:
    """Full decision for one request, or the first failure met"""
    rules = rules or get_default_rules()

    profile = resolve(request.customer_tz, rules)
    if isinstance(profile, Err):
        return _failed(request, profile)

    investment_at = parse_local_datetime(
        request.investment_date, request.investment_time, profile.value, rules
    )
    if isinstance(investment_at, Err):
        return _failed(request, investment_at)

    times = resolve_request_times(request, profile.value, rules)
    if isinstance(times, Err):
        return _failed(request, times)

    cohort = classify_signup(request, profile.value, rules)
    if isinstance(cohort, Err):
        return _failed(request, cohort)

    source = parse_source(request.source)
    if isinstance(source, Err):
        return _failed(request, source)

    window_hours = rules.window_hours(source.value, cohort.value)
    deadline = add_elapsed(investment_at.value, timedelta(hours=window_hours))
    eligible = within(investment_at.value, times.value.effective_at, deadline)

    decision = EligibilityDecision(
        name=request.name,
        source=source.value,
        cohort=cohort.value,
        window_hours=window_hours,
        investment_at=investment_at.value,
        requested_at=times.value.requested_at,
        effective_request_at=times.value.effective_at,
        eligible=eligible,
    )

    logger.info(
        "REFUND_ELIGIBILITY | name=%s source=%s cohort=%s window_h=%d effective=%s eligible=%s",
        request.name,
        source.value.value,
        cohort.value.value,
        window_hours,
        decision.effective_request_at.isoformat(),
        eligible,
    )
    return Ok(decision)


def determine_refund_eligibility(
    request: ReversalRequest,
    rules: Optional[RefundRules] = None,
) -> Result[bool]:
    decision = evaluate_refund_request(request, rules)
    if isinstance(decision, Err):
        return decision
    return Ok(decision.value.eligible)


def _failed(request: ReversalRequest, failure: Err) -> Err:
    logger.warning(
        "REFUND_ELIGIBILITY_FAILED | name=%s kind=%s detail=%s",
        request.name,
        failure.error.kind,
        failure.error.message,
    )
    return failure

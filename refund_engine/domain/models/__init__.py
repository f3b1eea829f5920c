"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums
    RequestSource,
    TosCohort,

    # Entities
    EligibilityDecision,
    ReversalRequest,
    TimezoneProfile,
)
from .result import (
    Err,
    EvaluationError,
    InHoursInstant,
    InvalidDateTime,
    Ok,
    Result,
    UnknownSource,
    UnknownTimezone,
    unwrap_or,
)
from .rules import RefundRules

__all__ = [
    # Enums
    "RequestSource",
    "TosCohort",

    # Entities
    "EligibilityDecision",
    "ReversalRequest",
    "TimezoneProfile",
    "RefundRules",

    # Results
    "Err",
    "EvaluationError",
    "InHoursInstant",
    "InvalidDateTime",
    "Ok",
    "Result",
    "UnknownSource",
    "UnknownTimezone",
    "unwrap_or",
]

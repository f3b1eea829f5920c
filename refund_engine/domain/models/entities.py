"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from zoneinfo import ZoneInfo

from refund_engine.utils.time import add_elapsed


class RequestSource(str, Enum):
    """Channel through which a reversal was requested"""
    WEB_APP = "web app"
    PHONE = "phone"


class TosCohort(str, Enum):
    """Terms of service a customer signed up under"""
    OLD = "old"
    NEW = "new"


@dataclass(frozen=True)
class ReversalRequest:
    """Investment reversal request - Immutable"""
    name: str
    customer_tz: str
    signup_date: str
    source: str
    investment_date: str
    investment_time: str
    request_date: str
    request_time: str


@dataclass(frozen=True)
class TimezoneProfile:
    """Customer locale: IANA zone plus the date format used in that locale"""
    label: str
    iana_zone: str
    date_format: str

    def __post_init__(self):
        if not self.label:
            raise ValueError("Timezone label cannot be empty")
        if not self.date_format:
            raise ValueError(f"Date format missing for timezone {self.label}")

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.iana_zone)


@dataclass(frozen=True)
class EligibilityDecision:
    """
    Final verdict for one reversal request, with the inputs that produced it.
    All instants are aware and expressed in the operating timezone.
    """
    name: str
    source: RequestSource
    cohort: TosCohort
    window_hours: int
    investment_at: datetime
    requested_at: datetime
    effective_request_at: datetime
    eligible: bool

    @property
    def deadline(self) -> datetime:
        return add_elapsed(self.investment_at, timedelta(hours=self.window_hours))

    @property
    def rolled_forward(self) -> bool:
        return self.effective_request_at != self.requested_at

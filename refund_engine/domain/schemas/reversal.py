from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from refund_engine.domain.models import EligibilityDecision, ReversalRequest


class ReversalRequestIn(BaseModel):
    """
    One reversal record. Accepts the engine's camelCase keys or the
    display headers used by the reversal table.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(validation_alias=AliasChoices("name", "Name"))
    customer_tz: str = Field(
        validation_alias=AliasChoices("customerTZ", "customer_tz", "Customer Location (timezone)")
    )
    signup_date: str = Field(validation_alias=AliasChoices("signupDate", "signup_date", "Sign up date"))
    source: str = Field(validation_alias=AliasChoices("source", "Request Source"))
    investment_date: str = Field(
        validation_alias=AliasChoices("investmentDate", "investment_date", "Investment Date")
    )
    investment_time: str = Field(
        validation_alias=AliasChoices("investmentTime", "investment_time", "Investment Time")
    )
    request_date: str = Field(
        validation_alias=AliasChoices("requestDate", "request_date", "Refund Request Date")
    )
    request_time: str = Field(
        validation_alias=AliasChoices("requestTime", "request_time", "Refund Request Time")
    )

    def to_domain(self) -> ReversalRequest:
        return ReversalRequest(**self.model_dump())


class EligibilityResponse(BaseModel):
    name: str
    eligible: bool
    source: str
    cohort: str
    window_hours: int
    investment_at: datetime
    requested_at: datetime
    effective_request_at: datetime
    deadline: datetime
    rolled_forward: bool

    @classmethod
    def from_decision(cls, decision: EligibilityDecision) -> "EligibilityResponse":
        return cls(
            name=decision.name,
            eligible=decision.eligible,
            source=decision.source.value,
            cohort=decision.cohort.value,
            window_hours=decision.window_hours,
            investment_at=decision.investment_at,
            requested_at=decision.requested_at,
            effective_request_at=decision.effective_request_at,
            deadline=decision.deadline,
            rolled_forward=decision.rolled_forward,
        )


class ReversalRow(BaseModel):
    """Table row: the record as submitted plus its verdict"""
    name: str
    customer_tz: str
    signup_date: str
    source: str
    investment_date: str
    investment_time: str
    request_date: str
    request_time: str
    eligible: bool
    status: str  # eligible, not_eligible, unknown
    error_kind: Optional[str] = None
    error_message: Optional[str] = None

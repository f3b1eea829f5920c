"""
DOMAIN MODELS — RESULT

Every engine operation returns either Ok(value) or Err(error).
Expected failures (unknown timezone, unknown source, malformed input)
travel as values; they are never raised.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class EvaluationError:
    """Base class for recoverable, request-scoped failures"""
    kind: ClassVar[str] = "evaluation_error"

    @property
    def message(self) -> str:
        return self.kind


@dataclass(frozen=True)
class UnknownTimezone(EvaluationError):
    label: str
    kind: ClassVar[str] = "unknown_timezone"

    @property
    def message(self) -> str:
        return f"Unknown timezone: {self.label}"


@dataclass(frozen=True)
class UnknownSource(EvaluationError):
    label: str
    kind: ClassVar[str] = "unknown_source"

    @property
    def message(self) -> str:
        return f"Unknown request source: {self.label}"


@dataclass(frozen=True)
class InvalidDateTime(EvaluationError):
    value: str
    pattern: str
    kind: ClassVar[str] = "invalid_datetime"

    @property
    def message(self) -> str:
        return f"Cannot parse '{self.value}' with format '{self.pattern}'"


@dataclass(frozen=True)
class InHoursInstant(EvaluationError):
    """Rollforward was asked to move an instant that is already in business hours"""
    instant: datetime
    kind: ClassVar[str] = "in_hours_instant"

    @property
    def message(self) -> str:
        return f"{self.instant.isoformat()} is inside business hours"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    is_ok: ClassVar[bool] = True
    is_err: ClassVar[bool] = False


@dataclass(frozen=True)
class Err:
    error: EvaluationError
    is_ok: ClassVar[bool] = False
    is_err: ClassVar[bool] = True


Result = Union[Ok[T], Err]


def unwrap_or(result: Result[T], default: T) -> T:
    """Value of an Ok, or default for an Err"""
    if isinstance(result, Ok):
        return result.value
    return default

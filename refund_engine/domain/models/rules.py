"""
DOMAIN MODELS — REFUND RULES

Read-only policy tables consumed by the eligibility engine.
Built by the ConfigEngine from YAML, or directly in tests.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional
from zoneinfo import ZoneInfo

from .entities import RequestSource, TimezoneProfile, TosCohort


@dataclass(frozen=True)
class RefundRules:
    """Timezone table, operating hours, ToS epoch and refund windows"""
    timezones: Dict[str, TimezoneProfile]
    refund_windows: Dict[RequestSource, Dict[TosCohort, int]]
    new_terms_effective_at: datetime
    operating_timezone: str = "Europe/London"
    open_hour: int = 9
    close_hour: int = 17
    time_format: str = "%H:%M"
    _zone: Optional[ZoneInfo] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not 0 <= self.open_hour < self.close_hour <= 24:
            raise ValueError(
                f"Invalid business hours: open={self.open_hour} close={self.close_hour}"
            )
        for source in RequestSource:
            windows = self.refund_windows.get(source)
            if windows is None:
                raise ValueError(f"Refund windows missing for source: {source.value}")
            for cohort in TosCohort:
                hours = windows.get(cohort)
                if hours is None or hours < 0:
                    raise ValueError(
                        f"Refund window missing or negative for {source.value}/{cohort.value}"
                    )
        object.__setattr__(self, "_zone", ZoneInfo(self.operating_timezone))

    @property
    def operating_zone(self) -> ZoneInfo:
        return self._zone

    @property
    def new_terms_epoch(self) -> datetime:
        """ToS epoch as an aware instant in the operating timezone"""
        if self.new_terms_effective_at.tzinfo is not None:
            return self.new_terms_effective_at.astimezone(self.operating_zone)
        return self.new_terms_effective_at.replace(tzinfo=self.operating_zone)

    def window_hours(self, source: RequestSource, cohort: TosCohort) -> int:
        return self.refund_windows[source][cohort]

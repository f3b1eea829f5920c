"""
Configuration API Routes
Expose timezone table and refund windows
"""

from fastapi import APIRouter, HTTPException
from typing import Dict, List
from pydantic import BaseModel

router = APIRouter()


# Response models
class TimezoneInfo(BaseModel):
    label: str
    iana_zone: str
    date_format: str


class RefundWindowsInfo(BaseModel):
    operating_timezone: str
    open_hour: int
    close_hour: int
    new_terms_effective_at: str
    windows: Dict[str, Dict[str, int]]  # source -> cohort -> hours


@router.get("/timezones", response_model=List[TimezoneInfo])
async def get_timezones():
    """
    Get the customer timezones the engine recognises
    """
    from refund_engine.main import config_engine

    if config_engine is None:
        raise HTTPException(status_code=500, detail="Configuration not loaded")

    return [
        TimezoneInfo(
            label=profile.label,
            iana_zone=profile.iana_zone,
            date_format=profile.date_format,
        )
        for profile in config_engine.timezones.values()
    ]


@router.get("/refund-windows", response_model=RefundWindowsInfo)
async def get_refund_windows():
    """
    Get refund window hours per request source and ToS cohort
    """
    from refund_engine.main import config_engine

    if config_engine is None:
        raise HTTPException(status_code=500, detail="Configuration not loaded")

    rules = config_engine.rules
    windows = {
        source.value: {cohort.value: hours for cohort, hours in cohorts.items()}
        for source, cohorts in rules.refund_windows.items()
    }
    return RefundWindowsInfo(
        operating_timezone=rules.operating_timezone,
        open_hour=rules.open_hour,
        close_hour=rules.close_hour,
        new_terms_effective_at=rules.new_terms_epoch.isoformat(),
        windows=windows,
    )

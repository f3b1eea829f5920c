from datetime import datetime
from pathlib import Path
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport

from refund_engine.config import DEFAULT_CONFIG_DIR, DEFAULT_REVERSALS_FILE
from refund_engine.domain.models import (
    RefundRules,
    RequestSource,
    ReversalRequest,
    TimezoneProfile,
    TosCohort,
)
from refund_engine.domain.services.config_engine import ConfigEngine
import refund_engine.main as app_main


@pytest.fixture(scope="session")
def config_engine() -> ConfigEngine:
    engine = ConfigEngine(DEFAULT_CONFIG_DIR)
    engine.load_all()
    return engine


@pytest.fixture(scope="session")
def rules(config_engine) -> RefundRules:
    return config_engine.rules


@pytest.fixture()
def make_request():
    """Build a ReversalRequest, overriding only the fields a test cares about"""
    def _make(**overrides) -> ReversalRequest:
        fields = dict(
            name="Test Customer",
            customer_tz="Europe (GMT)",
            signup_date="15/03/2021",
            source="web app",
            investment_date="08/07/2025",
            investment_time="10:00",
            request_date="08/07/2025",
            request_time="11:00",
        )
        fields.update(overrides)
        return ReversalRequest(**fields)

    return _make


@pytest.fixture()
def synthetic_rules() -> RefundRules:
    """A made-up locale and window table, independent of the packaged YAML"""
    return RefundRules(
        timezones={
            "Mars (MST)": TimezoneProfile(
                label="Mars (MST)",
                iana_zone="America/Phoenix",
                date_format="%Y-%m-%d",
            ),
        },
        refund_windows={
            RequestSource.WEB_APP: {TosCohort.OLD: 2, TosCohort.NEW: 3},
            RequestSource.PHONE: {TosCohort.OLD: 1, TosCohort.NEW: 1},
        },
        new_terms_effective_at=datetime(2022, 6, 1),
        operating_timezone="America/Phoenix",
        open_hour=8,
        close_hour=18,
    )


@pytest.fixture()
def reversals_file() -> Path:
    return DEFAULT_REVERSALS_FILE


@pytest.fixture()
async def client(config_engine) -> AsyncGenerator[AsyncClient, None]:
    # ASGITransport does not run the lifespan, so install the engine directly
    previous = app_main.config_engine
    app_main.config_engine = config_engine
    transport = ASGITransport(app=app_main.app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app_main.config_engine = previous

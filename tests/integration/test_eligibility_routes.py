import pytest

SCENARIO_A = {
    "name": "Emma Smith",
    "customerTZ": "US (PST)",
    "signupDate": "1/2/2020",
    "source": "phone",
    "investmentDate": "1/2/2021",
    "investmentTime": "06:00",
    "requestDate": "1/2/2021",
    "requestTime": "09:00",
}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_check_returns_detailed_decision(client):
    resp = await client.post("/api/v1/eligibility/check", json=SCENARIO_A)
    assert resp.status_code == 200
    data = resp.json()
    assert data["eligible"] is True
    assert data["cohort"] == "new"
    assert data["source"] == "phone"
    assert data["window_hours"] == 24
    assert data["rolled_forward"] is True
    assert data["effective_request_at"].startswith("2021-02-02T09:00:00")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_check_reports_unknown_source_as_422(client):
    resp = await client.post("/api/v1/eligibility/check", json={**SCENARIO_A, "source": "unknown"})
    assert resp.status_code == 422
    assert resp.json()["detail"] == {
        "kind": "unknown_source",
        "message": "Unknown request source: unknown",
    }


@pytest.mark.asyncio
@pytest.mark.integration
async def test_check_rejects_incomplete_payload(client):
    resp = await client.post("/api/v1/eligibility/check", json={"name": "Nobody"})
    assert resp.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_reversal_table(client):
    resp = await client.get("/api/v1/eligibility/reversals")
    assert resp.status_code == 200
    rows = resp.json()
    assert len(rows) == 8
    statuses = {row["name"]: row["status"] for row in rows}
    assert statuses["Emma Smith"] == "eligible"
    assert statuses["Oliver Brown"] == "not_eligible"
    assert statuses["Noah Davis"] == "unknown"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_config_routes(client):
    resp = await client.get("/api/v1/config/timezones")
    assert resp.status_code == 200
    labels = {tz["label"] for tz in resp.json()}
    assert labels == {"US (PST)", "US (EST)", "Europe (CET)", "Europe (GMT)"}

    resp = await client.get("/api/v1/config/refund-windows")
    assert resp.status_code == 200
    data = resp.json()
    assert data["operating_timezone"] == "Europe/London"
    assert data["windows"]["phone"]["new"] == 24
    assert data["windows"]["web app"]["old"] == 8


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["config_loaded"] is True

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from refund_engine.domain.models import (
    Err,
    InvalidDateTime,
    Ok,
    RequestSource,
    UnknownSource,
    UnknownTimezone,
)
from refund_engine.domain.services.request_time_resolver import (
    get_effective_request_time,
    parse_source,
)

LONDON = ZoneInfo("Europe/London")


@pytest.mark.unit
def test_web_requests_are_never_moved(rules, make_request):
    request = make_request(source="web app", request_date="11/07/2025", request_time="20:00")

    assert get_effective_request_time(request, rules) == Ok(datetime(2025, 7, 11, 20, 0, tzinfo=LONDON))


@pytest.mark.unit
def test_phone_request_in_hours_is_unchanged(rules, make_request):
    request = make_request(source="phone", request_date="08/07/2025", request_time="13:30")

    assert get_effective_request_time(request, rules).value == datetime(2025, 7, 8, 13, 30, tzinfo=LONDON)


@pytest.mark.unit
def test_phone_request_friday_evening_counts_from_monday(rules, make_request):
    request = make_request(source="phone", request_date="11/07/2025", request_time="20:00")

    assert get_effective_request_time(request, rules).value == datetime(2025, 7, 14, 9, 0, tzinfo=LONDON)


@pytest.mark.unit
def test_business_hours_follow_london_not_the_customer(rules, make_request):
    # 09:00 in Los Angeles is 17:00 in London: closed
    request = make_request(
        customer_tz="US (PST)", source="phone", request_date="1/2/2021", request_time="09:00"
    )

    assert get_effective_request_time(request, rules).value == datetime(2021, 2, 2, 9, 0, tzinfo=LONDON)


@pytest.mark.unit
def test_result_is_expressed_in_the_operating_timezone(rules, make_request):
    request = make_request(customer_tz="US (EST)", request_date="08/07/2025", request_time="10:00")

    effective = get_effective_request_time(request, rules).value

    assert effective.tzinfo.key == "Europe/London"
    assert (effective.hour, effective.minute) == (15, 0)


@pytest.mark.unit
def test_unknown_source_fails(rules, make_request):
    result = get_effective_request_time(make_request(source="unknown"), rules)

    assert result == Err(UnknownSource("unknown"))
    assert result.error.message == "Unknown request source: unknown"


@pytest.mark.unit
def test_unknown_timezone_fails_before_source_is_checked(rules, make_request):
    result = get_effective_request_time(make_request(customer_tz="Mars", source="fax"), rules)
    assert result == Err(UnknownTimezone("Mars"))


@pytest.mark.unit
@pytest.mark.parametrize("request_time", ["25:00", "9am", ""])
def test_malformed_request_time_is_a_parse_failure(rules, make_request, request_time):
    result = get_effective_request_time(make_request(request_time=request_time), rules)

    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidDateTime)
    assert result.error.pattern == "%d/%m/%Y %H:%M"


@pytest.mark.unit
def test_parse_source_is_exact_match():
    assert parse_source("phone") == Ok(RequestSource.PHONE)
    assert parse_source("web app") == Ok(RequestSource.WEB_APP)
    assert parse_source("Phone") == Err(UnknownSource("Phone"))
    assert parse_source("web_app") == Err(UnknownSource("web_app"))


@pytest.mark.unit
def test_injected_operating_hours_apply(synthetic_rules, make_request):
    # 07:30 is before the synthetic 08:00 opening
    request = make_request(
        customer_tz="Mars (MST)",
        signup_date="2023-01-01",
        source="phone",
        request_date="2025-07-08",
        request_time="07:30",
    )

    effective = get_effective_request_time(request, synthetic_rules).value

    assert effective == datetime(2025, 7, 8, 8, 0, tzinfo=ZoneInfo("America/Phoenix"))


@pytest.mark.unit
def test_request_times_keep_the_instant_as_made(rules, make_request):
    from refund_engine.domain.services.request_time_resolver import resolve_request_times

    request = make_request(source="phone", request_date="11/07/2025", request_time="20:00")
    profile = rules.timezones["Europe (GMT)"]

    times = resolve_request_times(request, profile, rules).value

    assert times.requested_at == datetime(2025, 7, 11, 20, 0, tzinfo=LONDON)
    assert times.effective_at == datetime(2025, 7, 14, 9, 0, tzinfo=LONDON)

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import BaseModel

from telecrm.api.utils.datetimes import UtcDatetime
from telecrm.domain.base import as_naive_utc


class Payload(BaseModel):
    at: UtcDatetime


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2026-10-20T09:00:00+09:00", datetime(2026, 10, 20, 0, 0)),
        ("2026-10-20T09:00:00Z", datetime(2026, 10, 20, 9, 0)),
        ("2026-10-19T22:15:00-05:00", datetime(2026, 10, 20, 3, 15)),
        ("2026-10-20T09:00:00", datetime(2026, 10, 20, 9, 0)),
    ],
)
def test_request_datetime_is_naive_utc(raw, expected):
    value = Payload(at=raw).at

    assert value == expected
    assert value.tzinfo is None


def test_as_naive_utc_keeps_naive_and_none():
    naive = datetime(2026, 1, 1, 12, 0)

    assert as_naive_utc(naive) is naive
    assert as_naive_utc(None) is None


def test_as_naive_utc_crosses_date_boundary():
    aware = datetime(2026, 1, 1, 3, 0, tzinfo=timezone(timedelta(hours=9)))

    assert as_naive_utc(aware) == datetime(2025, 12, 31, 18, 0)

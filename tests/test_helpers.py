from datetime import datetime, timedelta, timezone

import pytest

from termle.utils.helpers import current_day


@pytest.mark.parametrize("now,expected", [
    (datetime(2021, 6, 19, 0, 0, tzinfo=timezone.utc), 0),
    (datetime(2021, 6, 19, 23, 59, tzinfo=timezone.utc), 0),
    (datetime(2021, 6, 20, 0, 0, tzinfo=timezone.utc), 1),
    (datetime(2021, 6, 20, 18, 30, tzinfo=timezone.utc), 1),
    (datetime(2022, 6, 19, 12, 0, tzinfo=timezone.utc), 365),
])
def test_current_day(now, expected):
    assert current_day(now) == expected


def test_naive_datetime_is_utc():
    assert current_day(datetime(2021, 6, 20, 6, 0)) == 1


def test_other_timezones_use_utc_date():
    # 01:00 on the 20th in UTC+2 is still the 19th in UTC
    plus_two = timezone(timedelta(hours=2))
    assert current_day(datetime(2021, 6, 20, 1, 0, tzinfo=plus_two)) == 0


def test_defaults_to_now():
    assert current_day() == current_day(datetime.now(timezone.utc))

"""
时间工具函数测试
"""
from datetime import date, datetime

import pytest
import pytz

from lifebalance.utils.time_utils import (
    day_bounds,
    format_duration,
    format_time,
    parse_date,
    parse_datetime,
    round_half_up,
    to_local_naive,
)


class TestFormatting:

    def test_format_time(self):
        assert format_time(480) == "8h 0m"
        assert format_time(0) == "0h 0m"
        assert format_time(135) == "2h 15m"

    def test_format_duration_under_an_hour(self):
        assert format_duration(45) == "45m"
        assert format_duration(0) == "0m"

    def test_format_duration_over_an_hour(self):
        assert format_duration(60) == "1h 0m"
        assert format_duration(90) == "1h 30m"

    @pytest.mark.parametrize("value, expected", [
        (2.5, 3),
        (1.49, 1),
        (0.5, 1),
        (0.0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestDayBounds:

    def test_day_is_midnight_to_midnight(self):
        assert day_bounds("2025-03-14") == ("2025-03-14 00:00:00", "2025-03-15 00:00:00")

    def test_month_end_rolls_over(self):
        assert day_bounds(date(2025, 2, 28)) == ("2025-02-28 00:00:00", "2025-03-01 00:00:00")

    def test_parse_date_accepts_datetime(self):
        assert parse_date(datetime(2025, 3, 14, 23, 59)) == date(2025, 3, 14)

    def test_parse_date_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_date("14/03/2025")


class TestTimezoneConversion:

    def test_aware_datetime_is_converted_to_local(self):
        value = pytz.utc.localize(datetime(2025, 3, 14, 0, 30))
        assert to_local_naive(value, "Asia/Shanghai") == datetime(2025, 3, 14, 8, 30)

    def test_naive_datetime_is_kept(self):
        value = datetime(2025, 3, 14, 9, 15, 42, 123456)
        assert to_local_naive(value, "Asia/Shanghai") == datetime(2025, 3, 14, 9, 15, 42)

    def test_parse_datetime_round_trip_format(self):
        assert parse_datetime("2025-03-14 07:30:00") == datetime(2025, 3, 14, 7, 30)

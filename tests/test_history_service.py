"""
HistoryService 测试
"""
from datetime import date, datetime, timedelta
from unittest.mock import Mock

import pytest

from lifebalance.data.init_categories import DEFAULT_CATEGORIES
from lifebalance.server.schemas.time_entry_schemas import TimeEntry
from lifebalance.server.services.history_service import (
    HistoryService,
    default_start_date,
    format_range_label,
    format_table_label,
    navigate_week,
    window_dates,
)


class TestWindowHelpers:

    def test_default_start_date(self):
        assert default_start_date(today=date(2025, 3, 14), days=7) == date(2025, 3, 8)

    def test_window_dates(self):
        dates = window_dates("2025-03-08", 7)
        assert dates[0] == date(2025, 3, 8)
        assert dates[-1] == date(2025, 3, 14)
        assert len(dates) == 7

    def test_navigate_prev(self):
        result = navigate_week("2025-03-08", "prev", days=7)
        assert result.start_date == "2025-03-01"
        assert result.end_date == "2025-03-07"

    def test_navigate_next(self):
        result = navigate_week("2025-03-08", "next", days=7)
        assert result.start_date == "2025-03-15"
        assert result.end_date == "2025-03-21"

    def test_navigate_rejects_unknown_direction(self):
        with pytest.raises(ValueError):
            navigate_week("2025-03-08", "sideways")

    def test_labels(self):
        assert format_range_label(date(2025, 3, 8), date(2025, 3, 14)) == "Mar 8 - Mar 14, 2025"
        assert format_table_label(date(2025, 3, 14)) == "Fri, Mar 14"


class TestHistoryService:

    def setup_method(self):
        self.time_entry_service = Mock()
        self.category_service = Mock()
        self.category_service.get_category_index.return_value = {
            category.id: category for category in DEFAULT_CATEGORIES
        }
        self.service = HistoryService(self.time_entry_service, self.category_service)

    def _entry(self, entry_id, category_id, start, minutes):
        return TimeEntry(
            id=entry_id,
            category_id=category_id,
            start_time=start,
            end_time=start + timedelta(minutes=minutes),
            duration=minutes,
        )

    def test_week_history(self):
        self.time_entry_service.get_entries_between_dates.return_value = [
            self._entry("1", "work", datetime(2025, 3, 10, 9, 0), 90),
            self._entry("2", "sleep", datetime(2025, 3, 10, 0, 0), 450),
            self._entry("3", "family", datetime(2025, 3, 14, 19, 0), 29),
        ]

        result = self.service.get_week_history("2025-03-08", days=7)

        self.time_entry_service.get_entries_between_dates.assert_called_once_with(date(2025, 3, 8), 7)
        assert result.start_date == "2025-03-08"
        assert result.end_date == "2025-03-14"
        assert result.range_label == "Mar 8 - Mar 14, 2025"
        assert len(result.days) == 7
        assert len(result.chart_data) == 7

        monday = result.days[2]
        assert monday.date == "2025-03-10"
        assert monday.heading_label == "Monday, March 10"
        assert monday.total_minutes == 540
        assert monday.work_label == "1h 30m"
        assert monday.entry_count == 2

        # 图表按小时四舍五入
        assert result.chart_data[2].date == "03/10"
        assert result.chart_data[2].work == 2
        assert result.chart_data[2].sleep == 8
        assert result.chart_data[6].personal == 0

        assert result.days[0].total_minutes == 0
        assert result.days[0].total_label == "0h 0m"

    def test_rejects_empty_window(self):
        with pytest.raises(ValueError):
            self.service.get_week_history("2025-03-08", days=0)

"""
SummaryService 测试
"""
from datetime import date
from unittest.mock import patch

from lifebalance.server.schemas.time_entry_schemas import LogActivityRequest
from lifebalance.server.services.category_service import CategoryService
from lifebalance.server.services.summary_service import (
    SummaryService,
    build_group_progress,
    day_percentage,
    format_day_heading,
)
from lifebalance.server.services.time_entry_service import TimeEntryService


class TestProgressHelpers:

    def test_day_percentage(self):
        assert day_percentage(480) == 33.33
        assert day_percentage(1440) == 100.0

    def test_remaining_label(self):
        progress = build_group_progress("personal", 60, 480)
        assert progress.remaining_minutes == 420
        assert progress.over_minutes == 0
        assert progress.status_label == "7h 0m remaining"
        assert progress.target_percentage == 13

    def test_over_label(self):
        progress = build_group_progress("work", 525, 480)
        assert progress.over_minutes == 45
        assert progress.status_label == "0h 45m over"

    def test_format_day_heading(self):
        assert format_day_heading(date(2025, 3, 14)) == "Friday, March 14"


class TestSummaryService:

    def setup_method(self):
        self.time_entry_service = TimeEntryService()
        self.category_service = CategoryService()
        self.service = SummaryService(self.time_entry_service, self.category_service)

    def test_daily_summary(self, seeded_db):
        for category_id, end_time, duration in (
            ("sleep", "07:00", 420),
            ("work", "17:00", 480),
            ("family", "19:00", 60),
            ("fitness", "20:00", 30),
        ):
            self.time_entry_service.log_activity(LogActivityRequest(
                category_id=category_id, date="2025-03-14", end_time=end_time, duration=duration
            ))

        summary = self.service.get_daily_summary("2025-03-14")

        assert summary.date == "2025-03-14"
        assert summary.date_label == "Friday, March 14"
        assert summary.distribution.work == 480
        assert summary.distribution.personal == 90
        assert summary.distribution.sleep == 420
        assert summary.total_minutes == 990
        assert summary.rule_breakdown.as_dict() == {"3F": 90, "3H": 0, "3S": 420, "other": 480}
        assert summary.categories == {"sleep": 420, "work": 480, "family": 60, "fitness": 30}

        progress = {item.group: item for item in summary.progress}
        assert progress["work"].status_label == "0h 0m over"
        assert progress["sleep"].status_label == "1h 0m remaining"

    def test_empty_day(self, seeded_db):
        summary = self.service.get_daily_summary(date(2025, 3, 14))
        assert summary.total_minutes == 0
        assert [item.status_label for item in summary.progress] == ["8h 0m remaining"] * 3

    def test_uses_entries_for_requested_day(self):
        with patch.object(
            self.time_entry_service, 'get_entries_for_date'
        ) as mock_entries, patch.object(
            self.category_service, 'get_category_index'
        ) as mock_index:
            mock_entries.return_value = []
            mock_index.return_value = {}

            self.service.get_time_distribution("2025-03-14")

            mock_entries.assert_called_once_with("2025-03-14")
            mock_index.assert_called_once()

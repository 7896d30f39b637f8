"""
Time Aggregator 单元测试
"""
from datetime import datetime, timedelta

from lifebalance.data.init_categories import DEFAULT_CATEGORIES
from lifebalance.server.schemas.category_schemas import ActivityCategory
from lifebalance.server.schemas.time_entry_schemas import TimeEntry
from lifebalance.server.services.time_aggregator import (
    aggregate,
    bucket_by_rule,
    build_category_index,
    compute_category_totals,
    compute_daily_distributions,
    compute_rule_breakdown,
    compute_time_distribution,
    group_entries_by_date,
)


def make_entry(entry_id, category_id, start, minutes):
    end = start + timedelta(minutes=minutes) if minutes is not None else None
    return TimeEntry(
        id=entry_id,
        category_id=category_id,
        start_time=start,
        end_time=end,
        duration=minutes,
    )


class TestTimeDistribution:

    def setup_method(self):
        self.categories = DEFAULT_CATEGORIES
        self.day = datetime(2025, 3, 14, 8, 0)

    def test_work_and_family_example(self):
        entries = [
            make_entry("1", "work", self.day, 480),
            make_entry("2", "family", self.day + timedelta(hours=9), 60),
        ]
        result = compute_time_distribution(entries, self.categories)

        assert result.work == 480
        assert result.personal == 60
        assert result.sleep == 0
        assert result.total == 540

    def test_active_entry_is_not_counted(self):
        entries = [
            make_entry("1", "sleep", self.day, 420),
            make_entry("2", "work", self.day + timedelta(hours=8), None),
        ]
        result = compute_time_distribution(entries, self.categories)

        assert result.sleep == 420
        assert result.work == 0

    def test_unknown_category_is_dropped(self):
        entries = [
            make_entry("1", "hobby", self.day, 30),
            make_entry("2", "deleted-category", self.day, 90),
        ]
        result = compute_time_distribution(entries, self.categories)

        assert result.total == 30

    def test_result_does_not_depend_on_order(self):
        entries = [
            make_entry(str(i), category.id, self.day + timedelta(minutes=i), 10 + i)
            for i, category in enumerate(self.categories)
        ]
        forward = compute_time_distribution(entries, self.categories)
        backward = compute_time_distribution(list(reversed(entries)), self.categories)

        assert forward == backward
        assert forward.total == sum(entry.duration for entry in entries)

    def test_empty_input(self):
        result = compute_time_distribution([], self.categories)
        assert result.total == 0

    def test_sum_includes_other_group(self):
        misc = ActivityCategory(id="commute", name="Commute", color="#999999", group="other", rule="other")
        categories = list(self.categories) + [misc]
        entries = [
            make_entry("1", "work", self.day, 300),
            make_entry("2", "commute", self.day, 40),
            make_entry("3", "ghost", self.day, 15),
        ]
        result = compute_time_distribution(entries, categories)

        assert result.other == 40
        assert result.total == 340


class TestRuleBreakdown:

    def setup_method(self):
        self.day = datetime(2025, 3, 14, 6, 0)

    def test_rules_and_other(self):
        entries = [
            make_entry("1", "fitness", self.day, 45),
            make_entry("2", "head", self.day, 20),
            make_entry("3", "sleep", self.day, 480),
            make_entry("4", "work", self.day, 300),
        ]
        result = compute_rule_breakdown(entries, DEFAULT_CATEGORIES)

        assert result.as_dict() == {"3F": 45, "3H": 20, "3S": 480, "other": 300}

    def test_unknown_category_is_not_counted_as_other(self):
        entries = [
            make_entry("1", "work", self.day, 60),
            make_entry("2", "ghost", self.day, 45),
        ]
        result = compute_rule_breakdown(entries, DEFAULT_CATEGORIES)

        assert result.as_dict() == {"3F": 0, "3H": 0, "3S": 0, "other": 60}

    def test_bucket_by_rule_falls_back_to_other(self):
        category = ActivityCategory(id="misc", name="Misc", color="#123456", group="other", rule="other")
        assert bucket_by_rule(category) == "other"

    def test_category_totals(self):
        entries = [
            make_entry("1", "family", self.day, 30),
            make_entry("2", "family", self.day, 15),
            make_entry("3", "social", self.day, 60),
        ]
        assert compute_category_totals(entries, DEFAULT_CATEGORIES) == {"family": 45, "social": 60}


class TestAggregate:

    def test_initial_buckets_are_zero_filled(self):
        index = build_category_index(DEFAULT_CATEGORIES)
        result = aggregate([], index, lambda category: category.group, ("work", "sleep"))
        assert result == {"work": 0, "sleep": 0}

    def test_build_category_index_accepts_mapping(self):
        index = build_category_index(DEFAULT_CATEGORIES)
        assert build_category_index(index) == index


class TestMultiDay:

    def setup_method(self):
        self.dates = ["2025-03-13", "2025-03-14"]

    def test_group_entries_by_date(self):
        entries = [
            make_entry("1", "work", datetime(2025, 3, 14, 9, 0), 60),
            make_entry("2", "work", datetime(2025, 3, 16, 9, 0), 60),
        ]
        grouped = group_entries_by_date(entries, self.dates)

        assert grouped["2025-03-13"] == []
        assert [entry.id for entry in grouped["2025-03-14"]] == ["1"]
        assert "2025-03-16" in grouped

    def test_daily_distributions(self):
        entries = [
            make_entry("1", "sleep", datetime(2025, 3, 13, 0, 0), 420),
            make_entry("2", "work", datetime(2025, 3, 14, 9, 0), 480),
            make_entry("3", "family", datetime(2025, 3, 14, 23, 30), 60),
        ]
        result = compute_daily_distributions(entries, DEFAULT_CATEGORIES, self.dates)

        assert result["2025-03-13"].sleep == 420
        assert result["2025-03-13"].work == 0
        # 跨零点的记录按开始日期归属
        assert result["2025-03-14"].personal == 60
        assert result["2025-03-14"].work == 480

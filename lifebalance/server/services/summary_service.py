"""
Summary 服务层

单日 8-8-8 仪表盘数据：分组进度、3F/3H/3S 占比、分类合计
"""
from datetime import date
from typing import List, Union

from lifebalance.config.settings import BALANCE_GROUPS, BALANCE_RULES, MINUTES_PER_DAY
from lifebalance.config.settings_manager import settings
from lifebalance.server.schemas.summary_schemas import (
    DailySummaryResponse,
    GroupProgress,
    RuleBreakdown,
    RuleProgress,
    TimeDistribution,
)
from lifebalance.server.services.category_service import CategoryService
from lifebalance.server.services.time_aggregator import (
    build_category_index,
    compute_category_totals,
    compute_rule_breakdown,
    compute_time_distribution,
)
from lifebalance.server.services.time_entry_service import TimeEntryService
from lifebalance.utils.time_utils import DATE_FORMAT, format_time, parse_date, round_half_up


def day_percentage(minutes: int) -> float:
    """占全天 24 小时的百分比"""
    return round(minutes / MINUTES_PER_DAY * 100, 2)


def build_group_progress(group: str, minutes: int, target_minutes: int) -> GroupProgress:
    """单个分组相对目标的进度"""
    remaining = max(target_minutes - minutes, 0)
    over = max(minutes - target_minutes, 0)
    if minutes < target_minutes:
        status_label = f"{format_time(remaining)} remaining"
    else:
        status_label = f"{format_time(over)} over"

    return GroupProgress(
        group=group,
        minutes=minutes,
        target_minutes=target_minutes,
        day_percentage=day_percentage(minutes),
        target_percentage=round_half_up(minutes / target_minutes * 100) if target_minutes else 0,
        remaining_minutes=remaining,
        over_minutes=over,
        status_label=status_label,
        time_label=format_time(minutes),
    )


def build_rule_progress(breakdown: RuleBreakdown) -> List[RuleProgress]:
    totals = breakdown.as_dict()
    return [
        RuleProgress(
            rule=rule,
            minutes=totals[rule],
            day_percentage=day_percentage(totals[rule]),
            time_label=format_time(totals[rule]),
        )
        for rule in BALANCE_RULES
    ]


def format_day_heading(day: date) -> str:
    """'Friday, March 14'"""
    return f"{day:%A}, {day:%B} {day.day}"


class SummaryService:
    """单日汇总服务"""

    def __init__(self, time_entry_service: TimeEntryService = None, category_service: CategoryService = None):
        self.time_entry_service = time_entry_service or TimeEntryService()
        self.category_service = category_service or CategoryService()

    def get_time_distribution(self, day: Union[str, date]) -> TimeDistribution:
        entries = self.time_entry_service.get_entries_for_date(day)
        return compute_time_distribution(entries, self.category_service.get_category_index())

    def get_rule_breakdown(self, day: Union[str, date]) -> RuleBreakdown:
        entries = self.time_entry_service.get_entries_for_date(day)
        return compute_rule_breakdown(entries, self.category_service.get_category_index())

    def get_daily_summary(self, day: Union[str, date]) -> DailySummaryResponse:
        """
        获取单日汇总

        Args:
            day: 查询日期（YYYY-MM-DD 或 date）

        Returns:
            DailySummaryResponse: 分组进度、规则占比、分类合计
        """
        day = parse_date(day)
        entries = self.time_entry_service.get_entries_for_date(day)
        index = build_category_index(self.category_service.get_category_index())

        distribution = compute_time_distribution(entries, index)
        breakdown = compute_rule_breakdown(entries, index)
        target = settings.daily_target_minutes

        total_minutes = distribution.total
        return DailySummaryResponse(
            date=day.strftime(DATE_FORMAT),
            date_label=format_day_heading(day),
            distribution=distribution,
            rule_breakdown=breakdown,
            categories=compute_category_totals(entries, index),
            total_minutes=total_minutes,
            total_label=format_time(total_minutes),
            progress=[
                build_group_progress(group, getattr(distribution, group), target)
                for group in BALANCE_GROUPS
            ],
            rules=build_rule_progress(breakdown),
        )

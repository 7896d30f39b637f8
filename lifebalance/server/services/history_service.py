"""
History 服务层

7 天窗口的每日分布、柱状图数据和表格数据
"""
from datetime import date, timedelta
from typing import List, Optional, Union

from lifebalance.config.settings_manager import settings
from lifebalance.server.schemas.history_schemas import (
    ChartPoint,
    HistoryDay,
    HistoryWeekResponse,
    NavigateWeekResponse,
)
from lifebalance.server.services.category_service import CategoryService
from lifebalance.server.services.summary_service import format_day_heading
from lifebalance.server.services.time_aggregator import (
    compute_daily_distributions,
    group_entries_by_date,
)
from lifebalance.server.services.time_entry_service import TimeEntryService
from lifebalance.utils.time_utils import (
    DATE_FORMAT,
    format_time,
    now_local,
    parse_date,
    round_half_up,
)


def default_start_date(today: Optional[date] = None, days: Optional[int] = None) -> date:
    """默认窗口：以今天结尾的最近 days 天"""
    if today is None:
        today = now_local(settings.local_timezone).date()
    if days is None:
        days = settings.history_days
    return today - timedelta(days=days - 1)


def window_dates(start_date: Union[str, date], days: int) -> List[date]:
    start_date = parse_date(start_date)
    return [start_date + timedelta(days=offset) for offset in range(days)]


def navigate_week(start_date: Union[str, date], direction: str, days: Optional[int] = None) -> NavigateWeekResponse:
    """
    窗口前后翻页

    Raises:
        ValueError: direction 不是 prev / next
    """
    if direction not in ("prev", "next"):
        raise ValueError(f"direction 只能是 prev 或 next: {direction}")
    if days is None:
        days = settings.history_days

    step = -days if direction == "prev" else days
    new_start = parse_date(start_date) + timedelta(days=step)
    return NavigateWeekResponse(
        direction=direction,
        start_date=new_start.strftime(DATE_FORMAT),
        end_date=(new_start + timedelta(days=days - 1)).strftime(DATE_FORMAT),
    )


def format_range_label(start: date, end: date) -> str:
    """'Mar 8 - Mar 14, 2025'"""
    return f"{start:%b} {start.day} - {end:%b} {end.day}, {end.year}"


def format_table_label(day: date) -> str:
    """'Fri, Mar 14'"""
    return f"{day:%a}, {day:%b} {day.day}"


class HistoryService:
    """历史窗口服务"""

    def __init__(self, time_entry_service: TimeEntryService = None, category_service: CategoryService = None):
        self.time_entry_service = time_entry_service or TimeEntryService()
        self.category_service = category_service or CategoryService()

    def get_week_history(
        self,
        start_date: Union[str, date, None] = None,
        days: Optional[int] = None
    ) -> HistoryWeekResponse:
        """
        获取窗口内每天的汇总

        Args:
            start_date: 窗口首日，None 则为今天往前 days-1 天
            days: 窗口天数，默认 settings.history_days

        Returns:
            HistoryWeekResponse: 每日分布 + 柱状图数据
        """
        if days is None:
            days = settings.history_days
        if days < 1:
            raise ValueError("窗口天数必须大于 0")
        start = parse_date(start_date) if start_date else default_start_date(days=days)
        dates = window_dates(start, days)

        entries = self.time_entry_service.get_entries_between_dates(start, days)
        index = self.category_service.get_category_index()
        grouped = group_entries_by_date(entries, dates)
        distributions = compute_daily_distributions(entries, index, dates)

        history_days: List[HistoryDay] = []
        chart_data: List[ChartPoint] = []
        for day in dates:
            key = day.strftime(DATE_FORMAT)
            distribution = distributions[key]
            total = distribution.total

            history_days.append(HistoryDay(
                date=key,
                heading_label=format_day_heading(day),
                table_label=format_table_label(day),
                chart_label=day.strftime("%m/%d"),
                distribution=distribution,
                total_minutes=total,
                total_label=format_time(total),
                work_label=format_time(distribution.work),
                personal_label=format_time(distribution.personal),
                sleep_label=format_time(distribution.sleep),
                entry_count=len(grouped.get(key, [])),
            ))
            chart_data.append(ChartPoint(
                date=day.strftime("%m/%d"),
                work=round_half_up(distribution.work / 60),
                personal=round_half_up(distribution.personal / 60),
                sleep=round_half_up(distribution.sleep / 60),
            ))

        return HistoryWeekResponse(
            start_date=dates[0].strftime(DATE_FORMAT),
            end_date=dates[-1].strftime(DATE_FORMAT),
            range_label=format_range_label(dates[0], dates[-1]),
            days=history_days,
            chart_data=chart_data,
        )

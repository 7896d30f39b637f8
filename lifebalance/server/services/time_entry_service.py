"""
TimeEntry 服务层

- 手动记录活动（结束时刻 + 时长）
- 开始 / 停止计时（idle -> active -> idle）
- 按日期查询、删除
"""
import re
import uuid
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Union

from lifebalance.config.settings import UNKNOWN_CATEGORY_COLOR, UNKNOWN_CATEGORY_NAME
from lifebalance.config.settings_manager import settings
from lifebalance.server.providers import (
    category_provider as default_category_provider,
    time_entry_provider as default_time_entry_provider,
)
from lifebalance.server.schemas.category_schemas import ActivityCategory
from lifebalance.server.schemas.time_entry_schemas import (
    LogActivityRequest,
    TimeEntry,
    TimeEntryItem,
    TimeEntryListResponse,
)
from lifebalance.utils import get_logger
from lifebalance.utils.time_utils import (
    DATE_FORMAT,
    day_bounds,
    format_duration,
    now_local,
    parse_date,
    to_local_naive,
)

logger = get_logger(__name__)

_CLOCK_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def parse_clock_time(value: str) -> tuple:
    """'HH:MM' -> (hour, minute)"""
    match = _CLOCK_PATTERN.match((value or "").strip())
    if not match:
        raise ValueError("Please enter a valid time")
    return int(match.group(1)), int(match.group(2))


def compute_time_range(day: date, end_clock: str, duration: int) -> tuple:
    """日期 + 结束时刻 + 时长 -> (start_time, end_time)"""
    hour, minute = parse_clock_time(end_clock)
    end_time = datetime.combine(day, datetime.min.time()).replace(hour=hour, minute=minute)
    try:
        start_time = end_time - timedelta(minutes=duration)
    except OverflowError:
        raise ValueError("Please enter a valid duration")
    return start_time, end_time


def format_clock(value: datetime) -> str:
    """datetime -> 'h:mm AM'"""
    return value.strftime("%I:%M %p").lstrip("0")


def format_time_range(entry: TimeEntry) -> str:
    """活动日志中的时间范围，如 '6:45 AM - 7:30 AM'；进行中为 'ongoing'"""
    if entry.end_time is None:
        return "ongoing"
    return f"{format_clock(entry.start_time)} - {format_clock(entry.end_time)}"


class TimeEntryService:
    """时间记录服务"""

    def __init__(self, time_entry_provider=None, category_provider=None):
        if time_entry_provider is None:
            time_entry_provider = default_time_entry_provider
        if category_provider is None:
            category_provider = default_category_provider
        self.time_entry_provider = time_entry_provider
        self.category_provider = category_provider

    # ========================================================================
    # 查询
    # ========================================================================

    def _now(self) -> datetime:
        return now_local(settings.local_timezone)

    def _category_index(self) -> Dict[str, ActivityCategory]:
        return {category.id: category for category in self.category_provider.load_categories()}

    def to_item(self, entry: TimeEntry, index: Dict[str, ActivityCategory]) -> TimeEntryItem:
        """附带分类名称和颜色，未知分类使用占位值"""
        category = index.get(entry.category_id)
        return TimeEntryItem(
            id=entry.id,
            category_id=entry.category_id,
            category_name=category.name if category else UNKNOWN_CATEGORY_NAME,
            category_color=category.color if category else UNKNOWN_CATEGORY_COLOR,
            start_time=entry.start_time,
            end_time=entry.end_time,
            duration=entry.duration,
            duration_label=format_duration(entry.duration) if entry.duration is not None else "In progress",
            time_range_label=format_time_range(entry),
            description=entry.description,
        )

    def get_entries_for_date(self, day: Union[str, date]) -> List[TimeEntry]:
        """start_time 落在当天 [00:00, 次日 00:00) 的全部记录"""
        start_time, end_time = day_bounds(day)
        return self.time_entry_provider.get_entries_between(start_time, end_time)

    def get_entries_between_dates(self, start_day: Union[str, date], days: int) -> List[TimeEntry]:
        """从 start_day 起连续 days 天的记录"""
        start_time, _ = day_bounds(start_day)
        _, end_time = day_bounds(parse_date(start_day) + timedelta(days=days - 1))
        return self.time_entry_provider.get_entries_between(start_time, end_time)

    def list_entries(self, day: Union[str, date], completed_only: bool = False) -> TimeEntryListResponse:
        """
        活动日志

        Args:
            day: 查询日期
            completed_only: 仅返回已结束的记录
        """
        entries = self.get_entries_for_date(day)
        if completed_only:
            entries = [entry for entry in entries if entry.end_time is not None]

        index = self._category_index()
        items = [self.to_item(entry, index) for entry in entries]
        return TimeEntryListResponse(
            date=parse_date(day).strftime(DATE_FORMAT),
            data=items,
            total=len(items)
        )

    def get_active_entry(self) -> Optional[TimeEntryItem]:
        entry = self.time_entry_provider.get_active_entry()
        if entry is None:
            return None
        return self.to_item(entry, self._category_index())

    # ========================================================================
    # 手动记录
    # ========================================================================

    def _validate_category(self, category_id: Optional[str]) -> ActivityCategory:
        if not category_id:
            raise ValueError("Please select a category")
        category = self.category_provider.get_category(category_id)
        if category is None:
            raise ValueError(f"Unknown category: {category_id}")
        return category

    @staticmethod
    def _validate_duration(duration) -> int:
        if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
            raise ValueError("Please enter a valid duration")
        return duration

    def preview_time_range(self, day: Union[str, date], end_clock: str, duration: int) -> str:
        """表单中的时间范围预览，如 '6:45 AM - 7:30 AM'"""
        duration = self._validate_duration(duration)
        start_time, end_time = compute_time_range(parse_date(day), end_clock, duration)
        return f"{format_clock(start_time)} - {format_clock(end_time)}"

    def log_activity(self, request: LogActivityRequest) -> TimeEntryItem:
        """
        手动记录一条已完成的活动

        Raises:
            ValueError: 分类缺失/不存在、时长非正数、时刻格式错误
            RuntimeError: 写入数据库失败
        """
        category = self._validate_category(request.category_id)
        duration = self._validate_duration(request.duration)
        start_time, end_time = compute_time_range(request.date, request.end_time, duration)

        entry = TimeEntry(
            id=str(uuid.uuid4()),
            category_id=category.id,
            start_time=start_time,
            end_time=end_time,
            duration=duration,
            description=request.description.strip(),
        )
        if not self.time_entry_provider.create_entry(entry):
            raise RuntimeError("保存活动记录失败")

        logger.info(f"已记录 {category.name} 活动 {duration} 分钟")
        return self.to_item(entry, {category.id: category})

    def add_entry(self, entry: TimeEntry) -> TimeEntry:
        """
        写入一条完整的记录（导入或测试使用）

        带时区的时间会先转换为本地时间；进行中的记录只能通过 start_activity 创建

        Raises:
            ValueError: end_time 为空
            RuntimeError: 写入数据库失败
        """
        if entry.end_time is None:
            raise ValueError("add_entry 只接受已结束的记录，请使用 start_activity 开始计时")
        tz_name = settings.local_timezone
        entry = entry.model_copy(update={
            'start_time': to_local_naive(entry.start_time, tz_name),
            'end_time': to_local_naive(entry.end_time, tz_name),
        })
        if not self.time_entry_provider.create_entry(entry):
            raise RuntimeError("保存活动记录失败")
        return entry

    # ========================================================================
    # 开始 / 停止计时
    # ========================================================================

    def start_activity(
        self,
        category_id: str,
        description: str = "",
        now: Optional[datetime] = None
    ) -> TimeEntryItem:
        """
        开始计时，已有进行中的活动时先将其停止

        Raises:
            ValueError: 分类缺失或不存在
        """
        category = self._validate_category(category_id)
        now = to_local_naive(now, settings.local_timezone) if now else self._now()

        if self.time_entry_provider.get_active_entry() is not None:
            self.stop_activity(now=now)

        entry = TimeEntry(
            id=str(uuid.uuid4()),
            category_id=category.id,
            start_time=now,
            end_time=None,
            duration=None,
            description=(description or "").strip(),
        )
        if not self.time_entry_provider.create_entry(entry):
            raise RuntimeError("开始计时失败")

        logger.info(f"开始计时: {category.name}")
        return self.to_item(entry, {category.id: category})

    def stop_activity(self, now: Optional[datetime] = None) -> Optional[TimeEntryItem]:
        """
        停止当前计时，duration 取整到分钟（向下取整）

        Returns:
            结束后的记录；当前没有进行中的活动时返回 None
        """
        active = self.time_entry_provider.get_active_entry()
        if active is None:
            return None

        now = to_local_naive(now, settings.local_timezone) if now else self._now()
        end_time = max(now, active.start_time)
        duration = int((end_time - active.start_time).total_seconds() // 60)

        if not self.time_entry_provider.finish_entry(active.id, end_time, duration):
            raise RuntimeError("停止计时失败")

        logger.info(f"停止计时: {active.category_id}, {duration} 分钟")
        finished = active.model_copy(update={'end_time': end_time, 'duration': duration})
        return self.to_item(finished, self._category_index())

    # ========================================================================
    # 删除
    # ========================================================================

    def delete_entry(self, entry_id: str) -> bool:
        """
        删除记录；删除进行中的记录后即回到 idle 状态

        Returns:
            bool: 记录不存在时返回 False

        Raises:
            RuntimeError: 删除失败
        """
        if self.time_entry_provider.get_entry(entry_id) is None:
            return False
        if not self.time_entry_provider.delete_entry(entry_id):
            raise RuntimeError(f"删除时间记录 {entry_id} 失败")

        logger.info(f"已删除时间记录 {entry_id}")
        return True

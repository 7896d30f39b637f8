"""
时间工具函数

- 时长格式化（"8h 0m" / "45m"）
- 时区转换：带时区的 datetime 统一转为本地时区的 naive datetime 存储
- 日期边界计算（本地自然日，零点到零点）
"""
import math
from datetime import datetime, date, timedelta
from typing import Tuple, Union

import pytz

# 数据库中时间字段的存储格式（本地时间）
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


def format_time(minutes: int) -> str:
    """分钟数 -> "Xh Ym"，用于汇总卡片和历史表格"""
    minutes = int(minutes)
    hours = minutes // 60
    mins = minutes % 60
    return f"{hours}h {mins}m"


def format_duration(minutes: int) -> str:
    """分钟数 -> 不足一小时显示 "Xm"，否则 "Xh Ym"（活动日志）"""
    minutes = int(minutes)
    if minutes < 60:
        return f"{minutes}m"
    return format_time(minutes)


def to_local_naive(value: datetime, tz_name: str) -> datetime:
    """
    转换为本地时区的 naive datetime

    Args:
        value: 任意 datetime；naive 值视为已是本地时间
        tz_name: 本地时区名称，如 'Asia/Shanghai'
    """
    if value.tzinfo is None:
        return value.replace(microsecond=0)
    local_tz = pytz.timezone(tz_name)
    return value.astimezone(local_tz).replace(tzinfo=None, microsecond=0)


def parse_date(value: Union[str, date, datetime]) -> date:
    """接受 'YYYY-MM-DD' 字符串、date 或 datetime，返回 date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, DATE_FORMAT).date()


def day_bounds(day: Union[str, date, datetime]) -> Tuple[str, str]:
    """
    本地自然日的时间范围 [当日 00:00:00, 次日 00:00:00)

    Returns:
        (start, end) 两个 DATETIME_FORMAT 字符串，end 为开区间
    """
    start = datetime.combine(parse_date(day), datetime.min.time())
    end = start + timedelta(days=1)
    return start.strftime(DATETIME_FORMAT), end.strftime(DATETIME_FORMAT)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


def parse_datetime(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.strptime(value, DATETIME_FORMAT)


def round_half_up(value: float) -> int:
    """四舍五入到整数（0.5 进位，与前端 Math.round 一致）"""
    return int(math.floor(value + 0.5))


def now_local(tz_name: str) -> datetime:
    """当前本地时间（naive，精确到秒）"""
    return to_local_naive(datetime.now(pytz.utc), tz_name)

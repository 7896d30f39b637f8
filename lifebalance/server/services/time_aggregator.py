"""
Time Aggregator - 纯函数模块

把时间记录按分类维度（group / rule / category）和本地日期聚合为分钟数，
供 SummaryService 和 HistoryService 使用。无副作用，结果与输入顺序无关。

聚合策略：
- duration 为 None（进行中）的记录不计入
- 引用未知分类的记录直接丢弃，不计入 other
- 按 rule 聚合时，已知分类的 rule 不属于 3F/3H/3S 则归入 other
"""

from collections import defaultdict
from datetime import date, datetime
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Union

from lifebalance.config.settings import (
    BALANCE_RULES,
    CATEGORY_GROUPS,
    CATEGORY_RULES,
    RULE_OTHER,
)
from lifebalance.server.schemas.category_schemas import ActivityCategory
from lifebalance.server.schemas.summary_schemas import RuleBreakdown, TimeDistribution
from lifebalance.server.schemas.time_entry_schemas import TimeEntry
from lifebalance.utils.time_utils import DATE_FORMAT, parse_date, to_local_naive

BucketKeyFn = Callable[[ActivityCategory], Hashable]
CategoryCatalog = Union[Iterable[ActivityCategory], Mapping[str, ActivityCategory]]
DateLike = Union[str, date, datetime]


# ============================================================================
# 分桶函数
# ============================================================================

def bucket_by_group(category: ActivityCategory) -> str:
    """888 分组：work / personal / sleep / other"""
    return category.group


def bucket_by_rule(category: ActivityCategory) -> str:
    """3F / 3H / 3S，其余归入 other"""
    if category.rule in BALANCE_RULES:
        return category.rule
    return RULE_OTHER


def bucket_by_category(category: ActivityCategory) -> str:
    """按分类 ID"""
    return category.id


# ============================================================================
# 单窗口聚合
# ============================================================================

def build_category_index(categories: CategoryCatalog) -> Dict[str, ActivityCategory]:
    """分类列表 -> {id: 分类}；已是映射时原样返回"""
    if isinstance(categories, Mapping):
        return dict(categories)
    return {category.id: category for category in categories}


def aggregate(
    entries: Iterable[TimeEntry],
    categories: CategoryCatalog,
    bucket_key_fn: BucketKeyFn,
    initial_buckets: Iterable[Hashable] = (),
) -> Dict[Hashable, int]:
    """
    按分类派生的桶汇总时长

    Args:
        entries: 已按时间窗口过滤的时间记录
        categories: 分类目录（列表或 {id: 分类}）
        bucket_key_fn: 分类 -> 桶名
        initial_buckets: 需要补 0 的桶名

    Returns:
        Dict[桶名, 分钟数]
    """
    index = build_category_index(categories)
    totals: Dict[Hashable, int] = defaultdict(int)
    for key in initial_buckets:
        totals[key] = 0

    for entry in entries:
        if entry.duration is None:
            continue
        category = index.get(entry.category_id)
        if category is None:
            continue
        totals[bucket_key_fn(category)] += entry.duration

    return dict(totals)


def compute_time_distribution(
    entries: Iterable[TimeEntry],
    categories: CategoryCatalog,
) -> TimeDistribution:
    """work / personal / sleep（及 other）分钟数"""
    totals = aggregate(entries, categories, bucket_by_group, CATEGORY_GROUPS)
    return TimeDistribution(**totals)


def compute_rule_breakdown(
    entries: Iterable[TimeEntry],
    categories: CategoryCatalog,
) -> RuleBreakdown:
    """3F / 3H / 3S / other 分钟数"""
    totals = aggregate(entries, categories, bucket_by_rule, CATEGORY_RULES)
    return RuleBreakdown.model_validate(totals)


def compute_category_totals(
    entries: Iterable[TimeEntry],
    categories: CategoryCatalog,
) -> Dict[str, int]:
    """categoryId -> 分钟数（仅包含有记录的分类）"""
    return aggregate(entries, categories, bucket_by_category)


# ============================================================================
# 多日聚合
# ============================================================================

def _date_key(value: DateLike) -> str:
    return parse_date(value).strftime(DATE_FORMAT)


def entry_local_date(entry: TimeEntry, tz_name: Optional[str] = None) -> str:
    """
    记录所属的本地自然日（按 start_time）

    带时区的 start_time 需要传入 tz_name 才会先转换为本地时间
    """
    start = entry.start_time
    if start.tzinfo is not None and tz_name:
        start = to_local_naive(start, tz_name)
    return start.strftime(DATE_FORMAT)


def group_entries_by_date(
    entries: Iterable[TimeEntry],
    dates: Optional[Iterable[DateLike]] = None,
    tz_name: Optional[str] = None,
) -> Dict[str, List[TimeEntry]]:
    """
    按本地日期分组

    Args:
        entries: 时间记录
        dates: 需要预先占位的日期（无记录时为空列表）
        tz_name: 本地时区名称，仅用于带时区的 start_time

    Returns:
        Dict['YYYY-MM-DD', List[TimeEntry]]
    """
    grouped: Dict[str, List[TimeEntry]] = {}
    for day in dates or ():
        grouped[_date_key(day)] = []

    for entry in entries:
        grouped.setdefault(entry_local_date(entry, tz_name), []).append(entry)

    return grouped


def aggregate_by_date(
    entries: Iterable[TimeEntry],
    categories: CategoryCatalog,
    bucket_key_fn: BucketKeyFn,
    dates: Optional[Iterable[DateLike]] = None,
    initial_buckets: Iterable[Hashable] = (),
    tz_name: Optional[str] = None,
) -> Dict[str, Dict[Hashable, int]]:
    """先按本地日期分组，再对每一天执行 aggregate"""
    index = build_category_index(categories)
    initial_buckets = tuple(initial_buckets)
    grouped = group_entries_by_date(entries, dates, tz_name)
    return {
        day: aggregate(day_entries, index, bucket_key_fn, initial_buckets)
        for day, day_entries in grouped.items()
    }


def compute_daily_distributions(
    entries: Iterable[TimeEntry],
    categories: CategoryCatalog,
    dates: Iterable[DateLike],
    tz_name: Optional[str] = None,
) -> Dict[str, TimeDistribution]:
    """窗口内每一天的 TimeDistribution，无记录的日期全部为 0"""
    per_day = aggregate_by_date(
        entries, categories, bucket_by_group, dates, CATEGORY_GROUPS, tz_name
    )
    return {day: TimeDistribution(**totals) for day, totals in per_day.items()}

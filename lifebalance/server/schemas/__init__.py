from .category_schemas import ActivityCategory, CategoryListResponse, CreateCategoryRequest
from .time_entry_schemas import (
    TimeEntry,
    TimeEntryItem,
    TimeEntryListResponse,
    LogActivityRequest,
    StartActivityRequest,
    ActiveEntryResponse,
)
from .summary_schemas import TimeDistribution, RuleBreakdown, DailySummaryResponse
from .history_schemas import HistoryWeekResponse, NavigateWeekResponse
from .common_schemas import StandardResponse

__all__ = [
    "ActivityCategory",
    "CategoryListResponse",
    "CreateCategoryRequest",
    "TimeEntry",
    "TimeEntryItem",
    "TimeEntryListResponse",
    "LogActivityRequest",
    "StartActivityRequest",
    "ActiveEntryResponse",
    "TimeDistribution",
    "RuleBreakdown",
    "DailySummaryResponse",
    "HistoryWeekResponse",
    "NavigateWeekResponse",
    "StandardResponse",
]

"""
Business logic services

- Service 类通过单例导出，在 API 层复用
- time_aggregator 作为纯函数模块导入
"""

from .category_service import CategoryService
from .time_entry_service import TimeEntryService
from .summary_service import SummaryService
from .history_service import HistoryService
from . import time_aggregator

# 单例实例
category_service = CategoryService()
time_entry_service = TimeEntryService()
summary_service = SummaryService(time_entry_service, category_service)
history_service = HistoryService(time_entry_service, category_service)

__all__ = [
    "CategoryService",
    "TimeEntryService",
    "SummaryService",
    "HistoryService",
    "category_service",
    "time_entry_service",
    "summary_service",
    "history_service",
    "time_aggregator",
]

"""
API路由模块
"""

from .category_api import router as category_router
from .time_entry_api import router as time_entry_router, activity_router
from .summary_api import router as summary_router
from .history_api import router as history_router

__all__ = [
    "category_router",
    "time_entry_router",
    "activity_router",
    "summary_router",
    "history_router",
]

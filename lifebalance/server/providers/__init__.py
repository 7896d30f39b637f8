"""
Server Providers 模块

统一导出所有数据提供者的懒加载单例
"""
from lifebalance.utils import LazySingleton

from .category_provider import CategoryProvider
from .time_entry_provider import TimeEntryProvider

# 创建懒加载单例
category_provider = LazySingleton(CategoryProvider)
time_entry_provider = LazySingleton(TimeEntryProvider)

__all__ = [
    "CategoryProvider",
    "TimeEntryProvider",
    "category_provider",
    "time_entry_provider",
]

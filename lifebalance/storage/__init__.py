"""
存储模块
"""
from lifebalance.utils import LazySingleton
from .database_manager import DatabaseManager

# ==================== 全局单例实例 ====================

# LifeBalance 数据库（读写，使用连接池；路径取自 settings.db_path）
db_manager = LazySingleton(DatabaseManager, use_pool=True, pool_size=5)

# ==================== 基础数据提供者 ====================
from .base_providers import BaseDataProvider

__all__ = [
    "DatabaseManager",
    "db_manager",
    "BaseDataProvider",
]

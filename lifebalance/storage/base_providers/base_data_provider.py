"""
LifeBalance 基础数据提供者
封装数据库访问的公共部分，供各模块 Provider 继承使用
"""
import sqlite3
import logging
from typing import Any, Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)


class BaseDataProvider:
    """
    基础数据提供者

    特点：
    - 未传入 db_manager 时使用全局单例
    - 提供行数据转换的通用方法
    - 当前用户 ID 来自配置（认证由外部身份服务负责）
    """

    def __init__(self, db_manager=None, user_id: Optional[str] = None):
        """
        Args:
            db_manager: DatabaseManager 实例，None 则使用全局单例
            user_id: 数据所属用户，None 则使用 settings.user_id
        """
        if db_manager is None:
            from lifebalance.storage import db_manager as global_db_manager
            self.db = global_db_manager
        else:
            self.db = db_manager

        if user_id is None:
            from lifebalance.config.settings_manager import settings
            user_id = settings.user_id
        self.user_id = user_id

    @staticmethod
    def _rows_to_dicts(rows: List[sqlite3.Row]) -> List[Dict[str, Any]]:
        """sqlite3.Row 列表 -> dict 列表"""
        return [dict(row) for row in rows]

    @staticmethod
    def _df_to_dicts(df: pd.DataFrame) -> List[Dict[str, Any]]:
        """DataFrame -> dict 列表，NaN 统一转为 None"""
        if df is None or df.empty:
            return []
        df = df.astype(object).where(df.notna(), None)
        return df.to_dict(orient='records')

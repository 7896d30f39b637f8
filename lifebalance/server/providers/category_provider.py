"""
活动分类数据提供者
"""
import sqlite3
from typing import Any, Dict, List, Optional

from lifebalance.server.schemas.category_schemas import ActivityCategory
from lifebalance.storage import BaseDataProvider
from lifebalance.utils import get_logger

logger = get_logger(__name__)

TABLE_NAME = 'activity_category'


def _row_to_category(row: Dict[str, Any]) -> ActivityCategory:
    return ActivityCategory(
        id=str(row['id']),
        name=row['name'],
        color=row['color'],
        group=row['group_name'],
        rule=row['rule'],
        description=row.get('description') or "",
    )


class CategoryProvider(BaseDataProvider):
    """
    分类目录的读写

    分类目录不区分用户，所有用户共享同一套分类
    """

    def load_categories(self) -> List[ActivityCategory]:
        """按显示顺序加载全部分类"""
        df = self.db.query(TABLE_NAME, order_by='order_index ASC, created_at ASC')
        return [_row_to_category(row) for row in self._df_to_dicts(df)]

    def get_category(self, category_id: str) -> Optional[ActivityCategory]:
        row = self.db.get_by_id(TABLE_NAME, 'id', category_id)
        if row is None:
            return None
        return _row_to_category(row)

    def count_categories(self) -> int:
        return self.db.count(TABLE_NAME)

    def create_category(self, category: ActivityCategory, order_index: Optional[int] = None) -> bool:
        """
        新增分类，order_index 缺省时排在末尾

        Returns:
            bool: 是否写入成功
        """
        if order_index is None:
            order_index = self.count_categories()
        try:
            self.db.insert(TABLE_NAME, {
                'id': category.id,
                'name': category.name,
                'color': category.color,
                'group_name': category.group,
                'rule': category.rule,
                'description': category.description,
                'order_index': order_index,
            })
            return True
        except sqlite3.Error as e:
            logger.error(f"创建分类 {category.id} 失败: {e}")
            return False

    def insert_categories(self, categories: List[ActivityCategory]) -> int:
        """批量写入分类（用于初始化默认目录）"""
        rows = [
            {
                'id': category.id,
                'name': category.name,
                'color': category.color,
                'group_name': category.group,
                'rule': category.rule,
                'description': category.description,
                'order_index': order_index,
            }
            for order_index, category in enumerate(categories)
        ]
        return self.db.insert_many(TABLE_NAME, rows)

"""
时间记录数据提供者
提供 time_entries 表的 CRUD 操作，所有查询都限定在当前用户
"""
import sqlite3
from datetime import datetime
from typing import Any, Dict, List, Optional

from lifebalance.server.schemas.time_entry_schemas import TimeEntry
from lifebalance.storage import BaseDataProvider
from lifebalance.utils import get_logger
from lifebalance.utils.time_utils import format_datetime, parse_datetime

logger = get_logger(__name__)

TABLE_NAME = 'time_entries'


def _row_to_entry(row: Dict[str, Any]) -> TimeEntry:
    end_time = row.get('end_time')
    duration = row.get('duration')
    return TimeEntry(
        id=row['id'],
        category_id=row['category_id'],
        start_time=parse_datetime(row['start_time']),
        end_time=parse_datetime(end_time) if end_time else None,
        duration=int(duration) if duration is not None else None,
        description=row.get('description') or "",
    )


class TimeEntryProvider(BaseDataProvider):
    """
    时间记录数据提供者

    时间以本地 naive 字符串（YYYY-MM-DD HH:MM:SS）存储，字符串比较即时间比较
    """

    def get_entries_between(self, start_time: str, end_time: str) -> List[TimeEntry]:
        """
        查询 start_time 落在 [start_time, end_time) 内的记录

        Args:
            start_time: 开始时间（含）
            end_time: 结束时间（不含）
        """
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"""
                SELECT * FROM {TABLE_NAME}
                WHERE user_id = ? AND start_time >= ? AND start_time < ?
                ORDER BY start_time ASC
                """,
                (self.user_id, start_time, end_time)
            )
            rows = self._rows_to_dicts(cursor.fetchall())

        return [_row_to_entry(row) for row in rows]

    def get_entry(self, entry_id: str) -> Optional[TimeEntry]:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT * FROM {TABLE_NAME} WHERE id = ? AND user_id = ?",
                (entry_id, self.user_id)
            )
            row = cursor.fetchone()

        return _row_to_entry(dict(row)) if row else None

    def get_active_entry(self) -> Optional[TimeEntry]:
        """当前进行中的记录（end_time 为 NULL），最多一条"""
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"""
                SELECT * FROM {TABLE_NAME}
                WHERE user_id = ? AND end_time IS NULL
                ORDER BY start_time DESC
                LIMIT 1
                """,
                (self.user_id,)
            )
            row = cursor.fetchone()

        return _row_to_entry(dict(row)) if row else None

    def create_entry(self, entry: TimeEntry) -> bool:
        """
        写入新记录

        Returns:
            bool: 是否写入成功
        """
        try:
            self.db.insert(TABLE_NAME, {
                'id': entry.id,
                'user_id': self.user_id,
                'category_id': entry.category_id,
                'start_time': format_datetime(entry.start_time),
                'end_time': format_datetime(entry.end_time) if entry.end_time else None,
                'duration': entry.duration,
                'description': entry.description or None,
            })
            logger.info(f"新增时间记录 {entry.id} ({entry.category_id})")
            return True
        except sqlite3.Error as e:
            logger.error(f"新增时间记录失败: {e}")
            return False

    def finish_entry(self, entry_id: str, end_time: datetime, duration: int) -> bool:
        """结束进行中的记录，写入 end_time 与 duration"""
        try:
            affected = self.db.update(
                TABLE_NAME,
                {'end_time': format_datetime(end_time), 'duration': duration},
                where={'id': entry_id, 'user_id': self.user_id}
            )
            return affected > 0
        except sqlite3.Error as e:
            logger.error(f"结束时间记录 {entry_id} 失败: {e}")
            return False

    def delete_entry(self, entry_id: str) -> bool:
        """删除记录，不存在时返回 False"""
        try:
            affected = self.db.delete(TABLE_NAME, where={'id': entry_id, 'user_id': self.user_id})
            return affected > 0
        except sqlite3.Error as e:
            logger.error(f"删除时间记录 {entry_id} 失败: {e}")
            return False

"""
DatabaseManager 测试
"""
import pytest

from lifebalance.config.database import TABLE_CONFIGS
from lifebalance.storage import DatabaseManager


class TestDatabaseManager:

    @pytest.fixture(autouse=True)
    def _manager(self, tmp_path):
        self.db = DatabaseManager(DB_PATH=str(tmp_path / "nested" / "db.sqlite"), use_pool=True, pool_size=2)
        yield
        self.db.close()

    def test_tables_are_created(self):
        with self.db.get_connection() as conn:
            rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
        names = {row[0] for row in rows}
        assert set(TABLE_CONFIGS) <= names

    def test_crud(self):
        row = {
            'id': 'e1', 'user_id': 'u', 'category_id': 'work',
            'start_time': '2025-03-14 09:00:00', 'end_time': None, 'duration': None,
        }
        assert self.db.insert('time_entries', row) == 1
        assert self.db.count('time_entries', where={'user_id': 'u'}) == 1

        updated = self.db.update(
            'time_entries',
            {'end_time': '2025-03-14 10:00:00', 'duration': 60},
            where={'id': 'e1'}
        )
        assert updated == 1
        assert self.db.get_by_id('time_entries', 'id', 'e1')['duration'] == 60

        assert self.db.delete('time_entries', where={'id': 'e1'}) == 1
        assert self.db.get_by_id('time_entries', 'id', 'e1') is None

    def test_check_constraint_rolls_back(self):
        import sqlite3

        with pytest.raises(sqlite3.IntegrityError):
            self.db.insert('time_entries', {
                'id': 'bad', 'user_id': 'u', 'category_id': 'work',
                'start_time': '2025-03-14 09:00:00', 'end_time': '2025-03-14 08:00:00', 'duration': 0,
            })
        assert self.db.count('time_entries') == 0

    def test_query_returns_dataframe(self):
        self.db.insert_many('activity_category', [
            {'id': 'b', 'name': 'B', 'color': '#000', 'order_index': 1},
            {'id': 'a', 'name': 'A', 'color': '#fff', 'order_index': 0},
        ])
        df = self.db.query('activity_category', columns=['id'], order_by='order_index ASC')
        assert list(df['id']) == ['a', 'b']

"""
SQLite数据库操作模块
用于管理 LifeBalance 的本地数据存储

配置驱动：表结构来自 lifebalance.config.database.TABLE_CONFIGS
"""
import sqlite3
import pandas as pd
from pathlib import Path
from typing import Dict, List, Optional, Any
from contextlib import contextmanager
from queue import Queue, Empty, Full
import threading
import atexit
import logging

from lifebalance.config.database import TABLE_CONFIGS

logger = logging.getLogger(__name__)


class DatabaseManager:
    """数据库管理器 - 配置驱动"""

    def __init__(self, DB_PATH: Optional[str] = None, use_pool: bool = False, pool_size: int = 5):
        """
        初始化数据库管理器

        Args:
            DB_PATH: 数据库文件路径，None 则使用 settings.db_path
            use_pool: 是否启用连接池
            pool_size: 连接池大小（默认 5）
        """
        if DB_PATH is None:
            from lifebalance.config.settings_manager import settings
            DB_PATH = settings.db_path
        self.DB_PATH = str(DB_PATH)
        self.use_pool = use_pool
        self.pool_size = pool_size

        # 连接池相关
        self._connection_pool = None
        self._pool_lock = threading.Lock()

        Path(self.DB_PATH).parent.mkdir(parents=True, exist_ok=True)

        if self.use_pool:
            self._init_connection_pool()
            # 注册程序退出时关闭连接池
            atexit.register(self.close)

        self.init_database()

    def _init_connection_pool(self):
        """初始化连接池"""
        logger.info(f"初始化连接池，大小: {self.pool_size}")
        self._connection_pool = Queue(maxsize=self.pool_size)

        for _ in range(self.pool_size):
            self._connection_pool.put(self._create_connection())

    def _create_connection(self) -> sqlite3.Connection:
        """创建新的数据库连接"""
        conn = sqlite3.connect(self.DB_PATH, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # 启用字典式访问
        return conn

    def _get_pooled_connection(self) -> sqlite3.Connection:
        """从连接池获取连接，池空或连接失效时创建新连接"""
        try:
            conn = self._connection_pool.get(timeout=1.0)
            try:
                conn.execute("SELECT 1")
                return conn
            except sqlite3.Error:
                logger.warning("连接池中的连接失效，创建新连接")
                return self._create_connection()
        except Empty:
            logger.warning("连接池已空，创建临时连接")
            return self._create_connection()

    def _return_pooled_connection(self, conn: sqlite3.Connection):
        """将连接归还到连接池，池已满则直接关闭"""
        try:
            self._connection_pool.put_nowait(conn)
        except Full:
            conn.close()

    def close(self):
        """关闭连接池，释放所有连接"""
        with self._pool_lock:
            if self._connection_pool is None:
                return

            closed_count = 0
            while not self._connection_pool.empty():
                try:
                    conn = self._connection_pool.get_nowait()
                    conn.close()
                    closed_count += 1
                except Empty:
                    break

            logger.info(f"连接池已关闭，共关闭 {closed_count} 个连接")
            self._connection_pool = None
            self.use_pool = False

    @contextmanager
    def get_connection(self):
        """
        获取数据库连接的上下文管理器

        正常退出时提交，异常时回滚并继续抛出

        Yields:
            sqlite3.Connection: 数据库连接对象
        """
        pooled = self.use_pool and self._connection_pool is not None
        conn = self._get_pooled_connection() if pooled else self._create_connection()
        try:
            yield conn
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"数据库操作失败，已回滚: {e}")
            raise
        finally:
            if pooled:
                self._return_pooled_connection(conn)
            else:
                conn.close()

    def init_database(self):
        """初始化数据库，根据配置创建所有表"""
        try:
            with self.get_connection() as conn:
                cursor = conn.cursor()
                for config in TABLE_CONFIGS.values():
                    self._create_table_from_config(cursor, config)

                logger.info(f"数据库初始化成功，共创建 {len(TABLE_CONFIGS)} 个表")

        except Exception as e:
            logger.error(f"数据库初始化失败: {e}")
            raise

    def _create_table_from_config(self, cursor: sqlite3.Cursor, config: dict):
        """
        根据配置创建表及索引

        Args:
            cursor: 数据库游标
            config: 表配置字典
        """
        table_name = config['table_name']
        column_definitions = []
        for col_name, col_config in config['columns'].items():
            col_def = f"{col_name} {col_config['type']}"
            if col_config.get('constraints'):
                col_def += " " + " ".join(col_config['constraints'])
            column_definitions.append(col_def)

        if config.get('timestamps', False):
            column_definitions.append("created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP")

        all_constraints = column_definitions + config.get('table_constraints', [])
        cursor.execute(f"""
        CREATE TABLE IF NOT EXISTS {table_name} (
            {', '.join(all_constraints)}
        );
        """)
        logger.debug(f"表 '{table_name}' 已就绪")

        for index in config.get('indexes', []):
            cursor.execute(f"""
            CREATE INDEX IF NOT EXISTS {index['name']}
            ON {table_name}({', '.join(index['columns'])});
            """)

    # ==================== 通用查询操作 (READ) ====================

    def query(self,
              table_name: str,
              columns: List[str] = None,
              where: Dict[str, Any] = None,
              order_by: str = None,
              limit: int = None) -> pd.DataFrame:
        """
        通用查询方法

        Args:
            table_name: 表名
            columns: 要查询的列名列表，None 表示所有列
            where: 查询条件字典，例如 {'group_name': 'personal'}
            order_by: 排序字段，例如 'order_index ASC'
            limit: 限制返回行数

        Returns:
            pd.DataFrame: 查询结果

        Example:
            df = db.query('activity_category',
                          columns=['id', 'name'],
                          where={'rule': '3F'},
                          order_by='order_index ASC')
        """
        try:
            select_cols = ', '.join(columns) if columns else '*'
            sql = f"SELECT {select_cols} FROM {table_name}"
            params = []

            if where:
                where_clauses = []
                for key, value in where.items():
                    where_clauses.append(f"{key} = ?")
                    params.append(value)
                sql += " WHERE " + " AND ".join(where_clauses)

            if order_by:
                sql += f" ORDER BY {order_by}"

            if limit:
                sql += f" LIMIT {int(limit)}"

            with self.get_connection() as conn:
                df = pd.read_sql_query(sql, conn, params=params)
                logger.debug(f"查询成功: {table_name}, 返回 {len(df)} 行数据")
                return df

        except Exception as e:
            logger.error(f"查询失败: {e}")
            raise

    def get_by_id(self, table_name: str, id_column: str, id_value: Any) -> Optional[Dict]:
        """
        根据ID查询单条记录

        Returns:
            Optional[Dict]: 记录字典，如果不存在返回 None
        """
        df = self.query(table_name, where={id_column: id_value}, limit=1)
        if df.empty:
            return None
        return df.iloc[0].to_dict()

    def count(self, table_name: str, where: Dict[str, Any] = None) -> int:
        """统计记录数"""
        sql = f"SELECT COUNT(*) FROM {table_name}"
        params = []
        if where:
            sql += " WHERE " + " AND ".join(f"{key} = ?" for key in where.keys())
            params = list(where.values())
        with self.get_connection() as conn:
            return conn.execute(sql, params).fetchone()[0]

    # ==================== 通用插入操作 (CREATE) ====================

    def insert(self, table_name: str, data: Dict[str, Any]) -> int:
        """
        插入单条记录

        Returns:
            int: 受影响的行数
        """
        try:
            columns = ', '.join(data.keys())
            placeholders = ', '.join(['?' for _ in data])
            sql = f"INSERT INTO {table_name} ({columns}) VALUES ({placeholders})"

            with self.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(sql, list(data.values()))
                logger.debug(f"插入成功: {table_name}")
                return cursor.rowcount

        except Exception as e:
            logger.error(f"插入失败: {e}")
            raise

    def insert_many(self, table_name: str, data_list: List[Dict[str, Any]]) -> int:
        """
        批量插入记录

        Returns:
            int: 受影响的行数
        """
        if not data_list:
            return 0

        try:
            # 使用第一条数据确定列名
            columns = list(data_list[0].keys())
            placeholders = ', '.join(['?' for _ in columns])
            sql = f"INSERT INTO {table_name} ({', '.join(columns)}) VALUES ({placeholders})"
            values_list = [[row.get(col) for col in columns] for row in data_list]

            with self.get_connection() as conn:
                cursor = conn.cursor()
                cursor.executemany(sql, values_list)
                logger.info(f"批量插入成功: {table_name}, {cursor.rowcount} 行")
                return cursor.rowcount

        except Exception as e:
            logger.error(f"批量插入失败: {e}")
            raise

    # ==================== 通用更新操作 (UPDATE) ====================

    def update(self,
               table_name: str,
               data: Dict[str, Any],
               where: Dict[str, Any]) -> int:
        """
        根据条件更新记录

        Returns:
            int: 受影响的行数
        """
        try:
            set_str = ', '.join(f"{key} = ?" for key in data.keys())
            where_str = ' AND '.join(f"{key} = ?" for key in where.keys())
            sql = f"UPDATE {table_name} SET {set_str} WHERE {where_str}"
            params = list(data.values()) + list(where.values())

            with self.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(sql, params)
                logger.debug(f"更新成功: {table_name}, {cursor.rowcount} 行")
                return cursor.rowcount

        except Exception as e:
            logger.error(f"更新失败: {e}")
            raise

    # ==================== 通用删除操作 (DELETE) ====================

    def delete(self, table_name: str, where: Dict[str, Any]) -> int:
        """
        根据条件删除记录

        Returns:
            int: 受影响的行数
        """
        try:
            where_str = ' AND '.join(f"{key} = ?" for key in where.keys())
            sql = f"DELETE FROM {table_name} WHERE {where_str}"

            with self.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(sql, list(where.values()))
                logger.info(f"删除成功: {table_name}, {cursor.rowcount} 行")
                return cursor.rowcount

        except Exception as e:
            logger.error(f"删除失败: {e}")
            raise

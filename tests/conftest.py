"""
测试公共夹具

导入 lifebalance 之前先把配置文件和数据库指向临时目录，
避免测试读写项目根目录下的 settings.yaml / lifebalance.db
"""
import os
import tempfile

import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="lifebalance-test-")
os.environ["LIFEBALANCE_CONFIG_PATH"] = os.path.join(_TMP_DIR, "settings.yaml")
os.environ["LIFEBALANCE_DB_PATH"] = os.path.join(_TMP_DIR, "lifebalance.db")
os.environ["LIFEBALANCE_TIMEZONE"] = "UTC"

from lifebalance.data.init_categories import init_default_categories  # noqa: E402
from lifebalance.server.providers import (  # noqa: E402
    CategoryProvider,
    TimeEntryProvider,
    category_provider,
    time_entry_provider,
)
from lifebalance.storage import DatabaseManager  # noqa: E402


@pytest.fixture
def db(tmp_path):
    """每个测试使用独立的临时数据库"""
    manager = DatabaseManager(DB_PATH=str(tmp_path / "test.db"))
    category_provider.override(CategoryProvider(db_manager=manager, user_id="test-user"))
    time_entry_provider.override(TimeEntryProvider(db_manager=manager, user_id="test-user"))
    yield manager
    category_provider.reset()
    time_entry_provider.reset()


@pytest.fixture
def seeded_db(db):
    """写入默认分类目录"""
    init_default_categories()
    return db

"""
配置管理器 - 负责读取和修改 settings.yaml 配置

读取优先级:
1. 环境变量 (LIFEBALANCE_DB_PATH / LIFEBALANCE_USER_ID / LIFEBALANCE_TIMEZONE)
2. settings.yaml 配置文件
3. DEFAULTS 默认值

配置文件默认位于本目录，可通过 LIFEBALANCE_CONFIG_PATH 指定其他位置
"""

import os
import yaml
from pathlib import Path
from typing import Any, Optional, List, Dict

from lifebalance.config.settings import (
    LOCAL_TIMEZONE,
    DAILY_TARGET_MINUTES,
    HISTORY_WINDOW_DAYS,
)

CONFIG_PATH_ENV = 'LIFEBALANCE_CONFIG_PATH'

# 项目根目录（lifebalance 包的上一级）
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class SettingsManager:
    """配置管理器单例"""

    _instance: Optional['SettingsManager'] = None
    _config: Dict[str, Any] = {}
    _config_path: Path

    # 环境变量映射 (yaml_key -> env_var_name)
    ENV_VAR_MAPPING = {
        'db_path': 'LIFEBALANCE_DB_PATH',
        'user_id': 'LIFEBALANCE_USER_ID',
        'local_timezone': 'LIFEBALANCE_TIMEZONE',
    }

    # 默认配置值
    DEFAULTS = {
        'user_id': 'local-user',
        'db_path': '',
        'local_timezone': LOCAL_TIMEZONE,
        'daily_target_minutes': DAILY_TARGET_MINUTES,
        'history_days': HISTORY_WINDOW_DAYS,
        'cors_origins': [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:8080",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
            "http://127.0.0.1:8080",
        ],
    }

    def __new__(cls) -> 'SettingsManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """初始化配置管理器"""
        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            self._config_path = Path(env_path)
        else:
            self._config_path = Path(__file__).parent / 'settings.yaml'
        self._load_config()

    def _load_config(self) -> None:
        """从 YAML 文件加载配置"""
        if self._config_path.exists():
            with open(self._config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
        else:
            self._config = {}
            # 如果配置文件不存在，创建空配置文件
            self._save_config()

    def _save_config(self) -> None:
        """保存配置到 YAML 文件"""
        self._config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self._config_path, 'w', encoding='utf-8') as f:
            yaml.dump(
                self._config,
                f,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False
            )

    @property
    def config_path(self) -> Path:
        return self._config_path

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置值

        优先级: 环境变量 > yaml配置 > 默认值

        Args:
            key: 配置键名
            default: 默认值 (如果未提供，使用 DEFAULTS 中的值)
        """
        # 1. 检查环境变量
        if key in self.ENV_VAR_MAPPING:
            env_value = os.getenv(self.ENV_VAR_MAPPING[key])
            if env_value:
                return env_value

        # 2. 检查 yaml 配置
        if key in self._config and self._config[key] is not None:
            return self._config[key]

        # 3. 返回默认值
        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        设置配置值

        Args:
            key: 配置键名
            value: 配置值
            save: 是否立即保存到文件
        """
        self._config[key] = value
        if save:
            self._save_config()

    def update(self, updates: Dict[str, Any], save: bool = True) -> None:
        """批量更新配置"""
        if updates:
            self._config.update(updates)
            if save:
                self._save_config()

    def reload(self) -> None:
        """重新加载配置文件"""
        self._load_config()

    def get_all(self) -> Dict[str, Any]:
        """
        获取所有配置 (合并默认值与环境变量覆盖)

        Returns:
            完整的配置字典
        """
        result = self.DEFAULTS.copy()
        result.update({k: v for k, v in self._config.items() if v is not None})

        for key, env_var in self.ENV_VAR_MAPPING.items():
            env_value = os.getenv(env_var)
            if env_value:
                result[key] = env_value

        result['db_path'] = self.db_path
        return result

    # ===================== 便捷属性访问 =====================

    @property
    def user_id(self) -> str:
        return self.get('user_id')

    @property
    def db_path(self) -> str:
        # 未配置时放在项目根目录
        path = self.get('db_path')
        if not path:
            return str(PROJECT_ROOT / 'lifebalance.db')
        return path

    @property
    def local_timezone(self) -> str:
        return self.get('local_timezone')

    @property
    def daily_target_minutes(self) -> int:
        return int(self.get('daily_target_minutes'))

    @property
    def history_days(self) -> int:
        return int(self.get('history_days'))

    @property
    def cors_origins(self) -> List[str]:
        return self.get('cors_origins')


# 全局单例实例
settings = SettingsManager()

"""
懒加载单例代理

Provider / Service 在模块级以代理形式导出，首次访问属性时才实例化，
避免导入 server 模块时就打开数据库连接。
"""

import threading
from typing import TypeVar, Generic, Type, Any, Optional

T = TypeVar('T')

_PROXY_FIELDS = ('_cls', '_args', '_kwargs', '_instance', '_lock')


class LazySingleton(Generic[T]):
    """
    懒加载单例代理类

    用法：
        time_entry_provider = LazySingleton(TimeEntryProvider)
        time_entry_provider.get_entries_between(...)  # 首次访问时创建实例

    测试中可通过 override() 注入使用临时数据库的实例，reset() 恢复懒加载。
    """

    def __init__(self, cls: Type[T], *args, **kwargs):
        object.__setattr__(self, '_cls', cls)
        object.__setattr__(self, '_args', args)
        object.__setattr__(self, '_kwargs', kwargs)
        object.__setattr__(self, '_instance', None)
        object.__setattr__(self, '_lock', threading.Lock())

    def _ensure_initialized(self) -> T:
        """双重检查锁定，保证只创建一个实例"""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    instance = self._cls(*self._args, **self._kwargs)
                    object.__setattr__(self, '_instance', instance)
        return self._instance

    def override(self, instance: T) -> None:
        """直接替换被代理的实例"""
        with self._lock:
            object.__setattr__(self, '_instance', instance)

    def reset(self) -> Optional[T]:
        """丢弃当前实例，下次访问时重新创建；返回被丢弃的实例"""
        with self._lock:
            old = self._instance
            object.__setattr__(self, '_instance', None)
        return old

    def __getattr__(self, name: str) -> Any:
        return getattr(self._ensure_initialized(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _PROXY_FIELDS:
            object.__setattr__(self, name, value)
        else:
            setattr(self._ensure_initialized(), name, value)

    def __call__(self, *args, **kwargs) -> Any:
        return self._ensure_initialized()(*args, **kwargs)

    def __repr__(self) -> str:
        if self._instance is None:
            return f"<LazySingleton({self._cls.__name__}) - not initialized>"
        return repr(self._instance)

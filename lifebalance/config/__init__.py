"""
配置模块

运行期可修改的配置通过 settings_manager.settings 访问
"""
from .settings import *
from .database import *

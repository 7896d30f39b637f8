"""
LifeBalance Server - FastAPI 主应用程序
"""

from contextlib import asynccontextmanager
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lifebalance import __version__
from lifebalance.config.settings import SERVER_HOST, SERVER_PORT
from lifebalance.config.settings_manager import settings
from lifebalance.data.init_categories import init_default_categories
from lifebalance.server.api import (
    activity_router,
    category_router,
    history_router,
    summary_router,
    time_entry_router,
)
from lifebalance.utils import get_logger

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理

    启动时初始化数据库和默认分类
    注：数据库表结构在 DatabaseManager 首次使用时创建
    """
    logger.info("正在初始化 LifeBalance 数据库...")
    try:
        init_default_categories()
        logger.info("✅ 数据库初始化成功")
    except Exception as e:
        logger.error(f"❌ 数据库初始化失败: {e}")
        raise

    yield


app = FastAPI(
    lifespan=lifespan,
    title="LifeBalance 888 API",
    version=__version__,
    description="""
    ## LifeBalance 888 后端 API 服务

    按 8-8-8 规则（工作 / 个人 / 睡眠 各 8 小时）记录和统计每天的时间分配。

    ### 功能模块

    - **Categories**: 活动分类目录（分组 + 3F/3H/3S 规则）
    - **Time Entries**: 活动日志，手动记录和删除
    - **Activity Tracking**: 开始 / 停止计时
    - **Summary**: 单日分布、目标进度、规则占比
    - **History**: 7 天历史窗口和柱状图数据
    """,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(category_router, prefix=API_PREFIX)
app.include_router(time_entry_router, prefix=API_PREFIX)
app.include_router(activity_router, prefix=API_PREFIX)
app.include_router(summary_router, prefix=API_PREFIX)
app.include_router(history_router, prefix=API_PREFIX)


@app.get("/", tags=["Root"])
async def root():
    """
    API 根路径

    返回服务基本信息和可用端点导航
    """
    return {
        "service": "LifeBalance 888 API",
        "version": __version__,
        "status": "running",
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_spec": "/openapi.json"
        },
        "endpoints": {
            "categories": f"{API_PREFIX}/categories",
            "entries": f"{API_PREFIX}/entries",
            "activity": f"{API_PREFIX}/activity",
            "summary": f"{API_PREFIX}/summary/daily",
            "history": f"{API_PREFIX}/history/week"
        }
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """健康检查端点"""
    return {
        "status": "healthy",
        "service": "lifebalance-api",
        "version": __version__
    }


def run():
    """命令行入口：lifebalance-server"""
    import uvicorn

    # 开发时设置 LIFEBALANCE_DEV=1 启用热重载
    is_dev_mode = os.environ.get("LIFEBALANCE_DEV", "0") == "1"
    if is_dev_mode:
        uvicorn.run(
            "lifebalance.server.main:app",
            host=SERVER_HOST,
            port=SERVER_PORT,
            reload=True,
            reload_dirs=["lifebalance"],
            reload_excludes=["__pycache__", "*.pyc", ".git", "*.db"],
            log_level="info"
        )
    else:
        uvicorn.run(
            app,
            host=SERVER_HOST,
            port=SERVER_PORT,
            log_level="info"
        )


if __name__ == "__main__":
    run()

"""
History API - 7 天历史窗口
"""
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Query

from lifebalance.server.schemas.history_schemas import HistoryWeekResponse, NavigateWeekResponse
from lifebalance.server.services import history_service
from lifebalance.server.services.history_service import navigate_week

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

router = APIRouter(prefix="/history", tags=["History"])


@router.get("/week", response_model=HistoryWeekResponse, summary="获取历史窗口数据")
async def get_week_history(
    start_date: Optional[str] = Query(
        None,
        description="窗口首日 (YYYY-MM-DD 格式)，缺省为今天往前 6 天",
        pattern=DATE_PATTERN
    ),
    days: Optional[int] = Query(None, description="窗口天数，缺省使用配置值", ge=1, le=31)
):
    """
    每天的 work / personal / sleep 分布、合计，以及柱状图数据（小时）

    **示例：**
    - `/api/v1/history/week?start_date=2025-03-08`
    """
    try:
        return history_service.get_week_history(start_date, days)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"获取历史数据失败: {str(e)}")


@router.get("/navigate", response_model=NavigateWeekResponse, summary="历史窗口翻页")
async def navigate_history(
    start_date: str = Query(..., description="当前窗口首日 (YYYY-MM-DD 格式)", pattern=DATE_PATTERN),
    direction: Literal["prev", "next"] = Query(..., description="prev / next")
):
    try:
        return navigate_week(start_date, direction)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

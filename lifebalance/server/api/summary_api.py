"""
Summary API - 单日 8-8-8 汇总
"""

from fastapi import APIRouter, HTTPException, Query

from lifebalance.server.schemas.summary_schemas import DailySummaryResponse
from lifebalance.server.services import summary_service

router = APIRouter(prefix="/summary", tags=["Summary"])


@router.get("/daily", response_model=DailySummaryResponse, summary="获取单日汇总")
async def get_daily_summary(
    date: str = Query(..., description="查询日期 (YYYY-MM-DD 格式)", pattern=r"^\d{4}-\d{2}-\d{2}$")
):
    """
    获取单日汇总

    **返回内容：**
    - `distribution`: work / personal / sleep 分钟数
    - `rule_breakdown`: 3F / 3H / 3S / other 分钟数
    - `progress`: 各分组相对 8 小时目标的进度
    - `categories`: 每个分类的分钟数
    """
    try:
        return summary_service.get_daily_summary(date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"获取汇总失败: {str(e)}")

"""
Time Entry API

- /entries - 活动日志查询、手动记录、删除
- /activity - 开始 / 停止计时
"""

from fastapi import APIRouter, HTTPException, Path, Query

from lifebalance.server.schemas.common_schemas import StandardResponse
from lifebalance.server.schemas.time_entry_schemas import (
    ActiveEntryResponse,
    LogActivityRequest,
    StartActivityRequest,
    TimeEntryItem,
    TimeEntryListResponse,
)
from lifebalance.server.services import time_entry_service

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

router = APIRouter(prefix="/entries", tags=["Time Entry"])
activity_router = APIRouter(prefix="/activity", tags=["Activity Tracking"])


# ============================================================================
# /entries
# ============================================================================

@router.get("", response_model=TimeEntryListResponse, summary="获取某天的活动记录")
async def get_entries(
    date: str = Query(..., description="查询日期 (YYYY-MM-DD 格式)", pattern=DATE_PATTERN),
    completed_only: bool = Query(False, description="仅返回已结束的活动")
):
    try:
        return time_entry_service.list_entries(date, completed_only=completed_only)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"获取活动记录失败: {str(e)}")


@router.get("/preview", summary="预览手动记录的时间范围")
async def preview_entry(
    date: str = Query(..., description="活动日期 (YYYY-MM-DD 格式)", pattern=DATE_PATTERN),
    end_time: str = Query(..., description="结束时刻 HH:MM"),
    duration: int = Query(30, description="时长（分钟），必须为正数", ge=1)
):
    try:
        return {"label": time_entry_service.preview_time_range(date, end_time, duration)}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("", response_model=TimeEntryItem, summary="手动记录活动")
async def log_activity(request: LogActivityRequest):
    """
    手动记录一条已完成的活动

    以结束时刻和时长推算开始时间：start_time = date end_time - duration
    """
    try:
        return time_entry_service.log_activity(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"记录活动失败: {str(e)}")


@router.delete("/{entry_id}", response_model=StandardResponse, summary="删除活动记录")
async def delete_entry(
    entry_id: str = Path(..., description="记录ID")
):
    try:
        deleted = time_entry_service.delete_entry(entry_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"删除活动记录失败: {str(e)}")
    if not deleted:
        raise HTTPException(status_code=404, detail="记录不存在")
    return StandardResponse(success=True, message="Activity deleted", data={"id": entry_id})


# ============================================================================
# /activity
# ============================================================================

@activity_router.get("/active", response_model=ActiveEntryResponse, summary="获取进行中的活动")
async def get_active_activity():
    try:
        return ActiveEntryResponse(active=time_entry_service.get_active_entry())
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"获取进行中的活动失败: {str(e)}")


@activity_router.post("/start", response_model=TimeEntryItem, summary="开始计时")
async def start_activity(request: StartActivityRequest):
    """
    开始计时

    已有进行中的活动时会先自动停止
    """
    try:
        return time_entry_service.start_activity(request.category_id, request.description)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"开始计时失败: {str(e)}")


@activity_router.post("/stop", response_model=TimeEntryItem, summary="停止计时")
async def stop_activity():
    try:
        item = time_entry_service.stop_activity()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"停止计时失败: {str(e)}")
    if item is None:
        raise HTTPException(status_code=404, detail="当前没有进行中的活动")
    return item

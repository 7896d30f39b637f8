"""
时间记录 Schema 定义
"""

from datetime import date as date_type, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class TimeEntry(BaseModel):
    """
    时间记录

    进行中的活动 end_time / duration 为 None；
    结束后 duration = end_time - start_time（分钟）
    """
    id: str = Field(..., description="记录ID")
    category_id: str = Field(..., description="分类ID")
    start_time: datetime = Field(..., description="开始时间（本地时间）")
    end_time: Optional[datetime] = Field(default=None, description="结束时间，进行中为 None")
    duration: Optional[int] = Field(default=None, description="时长（分钟），进行中为 None")
    description: str = Field(default="", description="活动描述")

    @model_validator(mode="after")
    def _check_time_order(self) -> "TimeEntry":
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("end_time 不能早于 start_time")
        return self

    @property
    def is_active(self) -> bool:
        return self.end_time is None


class TimeEntryItem(BaseModel):
    """活动日志条目（附带分类显示信息）"""
    id: str
    category_id: str
    category_name: str = Field(..., description="分类名称，未知分类为 Unknown")
    category_color: str = Field(..., description="分类颜色，未知分类为 #ccc")
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: Optional[int] = None
    duration_label: str = Field(..., description="时长显示，进行中为 In progress")
    time_range_label: str = Field(default="", description="时间范围，如 '6:45 AM - 7:30 AM'，进行中为 ongoing")
    description: str = ""


class TimeEntryListResponse(BaseModel):
    """GET /entries 响应"""
    date: str
    data: List[TimeEntryItem]
    total: int


class LogActivityRequest(BaseModel):
    """
    手动记录活动

    以结束时刻 + 时长描述：start_time = date end_time - duration
    """
    category_id: Optional[str] = Field(default=None, description="分类ID")
    description: str = Field(default="", description="活动描述（可选）")
    date: date_type = Field(..., description="活动日期")
    end_time: str = Field(..., description="结束时刻 HH:MM")
    duration: int = Field(default=30, description="时长（分钟），必须为正数")

    class Config:
        json_schema_extra = {
            "example": {
                "category_id": "fitness",
                "description": "Morning run",
                "date": "2025-03-14",
                "end_time": "07:30",
                "duration": 45
            }
        }


class StartActivityRequest(BaseModel):
    """开始计时请求"""
    category_id: str = Field(..., min_length=1, description="分类ID")
    description: str = Field(default="", description="活动描述（可选）")


class ActiveEntryResponse(BaseModel):
    """当前进行中的活动"""
    active: Optional[TimeEntryItem] = None

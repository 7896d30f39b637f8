"""
历史记录 Schema 定义（7 天窗口）
"""

from typing import List, Literal

from pydantic import BaseModel, Field

from lifebalance.server.schemas.summary_schemas import TimeDistribution


class HistoryDay(BaseModel):
    """窗口内某一天的汇总"""
    date: str = Field(..., description="YYYY-MM-DD")
    heading_label: str = Field(..., description="如 'Friday, March 14'")
    table_label: str = Field(..., description="如 'Fri, Mar 14'")
    chart_label: str = Field(..., description="如 '03/14'")
    distribution: TimeDistribution
    total_minutes: int
    total_label: str
    work_label: str
    personal_label: str
    sleep_label: str
    entry_count: int


class ChartPoint(BaseModel):
    """柱状图数据点（单位：小时，四舍五入）"""
    date: str
    work: int
    personal: int
    sleep: int


class HistoryWeekResponse(BaseModel):
    """GET /history/week 响应"""
    start_date: str
    end_date: str
    range_label: str = Field(..., description="如 'Mar 8 - Mar 14, 2025'")
    days: List[HistoryDay]
    chart_data: List[ChartPoint]


class NavigateWeekResponse(BaseModel):
    """窗口翻页结果"""
    direction: Literal["prev", "next"]
    start_date: str
    end_date: str

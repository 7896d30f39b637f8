"""
汇总 Schema 定义

TimeDistribution / RuleBreakdown 为派生数据，不落库
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class TimeDistribution(BaseModel):
    """按 888 分组汇总的分钟数"""
    work: int = Field(default=0, description="工作（分钟）")
    personal: int = Field(default=0, description="个人（分钟）")
    sleep: int = Field(default=0, description="睡眠（分钟）")
    other: int = Field(default=0, description="group 为 other 的分类（分钟）")

    @property
    def total(self) -> int:
        return self.work + self.personal + self.sleep + self.other


class RuleBreakdown(BaseModel):
    """按 3F/3H/3S 规则汇总的分钟数"""
    model_config = ConfigDict(populate_by_name=True)

    rule_3f: int = Field(default=0, alias="3F", description="Family, Finances, Fitness")
    rule_3h: int = Field(default=0, alias="3H", description="Health, Hobby, Head")
    rule_3s: int = Field(default=0, alias="3S", description="Social, Sleep, Spirituality")
    other: int = Field(default=0, description="其他")

    def as_dict(self) -> Dict[str, int]:
        return self.model_dump(by_alias=True)


class GroupProgress(BaseModel):
    """单个分组相对 8 小时目标的进度"""
    group: str
    minutes: int
    target_minutes: int
    day_percentage: float = Field(..., description="占全天 24 小时的百分比")
    target_percentage: int = Field(..., description="相对目标的完成百分比（四舍五入）")
    remaining_minutes: int
    over_minutes: int
    status_label: str = Field(..., description="如 '2h 30m remaining' / '0h 45m over'")
    time_label: str


class RuleProgress(BaseModel):
    """单个平衡规则的占比"""
    rule: str
    minutes: int
    day_percentage: float
    time_label: str


class DailySummaryResponse(BaseModel):
    """GET /summary/daily 响应"""
    date: str
    date_label: str = Field(..., description="如 'Friday, March 14'")
    distribution: TimeDistribution
    rule_breakdown: RuleBreakdown
    categories: Dict[str, int] = Field(default_factory=dict, description="categoryId -> 分钟")
    total_minutes: int
    total_label: str
    progress: List[GroupProgress]
    rules: List[RuleProgress]

"""
活动分类 Schema 定义

分类由两个维度组织：
- group: 888 规则分组（work / personal / sleep / other）
- rule: 3F / 3H / 3S 平衡规则（other 表示不属于任何一组）
"""

from typing import List, Literal

from pydantic import BaseModel, Field

CategoryGroup = Literal["work", "personal", "sleep", "other"]
CategoryRule = Literal["3F", "3H", "3S", "other"]

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class ActivityCategory(BaseModel):
    """活动分类"""
    id: str = Field(..., description="分类唯一标识符")
    name: str = Field(..., description="分类名称")
    color: str = Field(..., description="分类颜色（十六进制格式）")
    group: CategoryGroup = Field(default="other", description="888 规则分组")
    rule: CategoryRule = Field(default="other", description="3F/3H/3S 平衡规则")
    description: str = Field(default="", description="分类说明")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "family",
                "name": "Family",
                "color": "#FF8C42",
                "group": "personal",
                "rule": "3F",
                "description": "Time spent with family"
            }
        }


class CategoryListResponse(BaseModel):
    """GET /categories 响应"""
    data: List[ActivityCategory]


class CreateCategoryRequest(BaseModel):
    """创建分类请求（id 由服务端生成）"""
    name: str = Field(..., min_length=1, description="分类名称")
    color: str = Field(..., pattern=HEX_COLOR_PATTERN, description="分类颜色，如 #4361EE")
    group: CategoryGroup = Field(default="other", description="888 规则分组")
    rule: CategoryRule = Field(default="other", description="3F/3H/3S 平衡规则")
    description: str = Field(default="", description="分类说明")

"""
Category 服务层

分类目录的查询与新增
"""
import uuid
from typing import Dict, Optional

from lifebalance.server.providers import category_provider as default_category_provider
from lifebalance.server.schemas.category_schemas import (
    ActivityCategory,
    CategoryListResponse,
    CreateCategoryRequest,
)
from lifebalance.utils import get_logger

logger = get_logger(__name__)


class CategoryService:
    """分类管理服务"""

    def __init__(self, category_provider=None):
        if category_provider is None:
            category_provider = default_category_provider
        self.category_provider = category_provider

    def get_categories(self) -> CategoryListResponse:
        return CategoryListResponse(data=self.category_provider.load_categories())

    def get_category(self, category_id: str) -> Optional[ActivityCategory]:
        return self.category_provider.get_category(category_id)

    def get_category_index(self) -> Dict[str, ActivityCategory]:
        """{id: 分类}，供聚合使用"""
        return {category.id: category for category in self.category_provider.load_categories()}

    def create_category(self, request: CreateCategoryRequest) -> ActivityCategory:
        """
        新增分类（id 使用 uuid4 生成）

        Raises:
            RuntimeError: 写入数据库失败
        """
        category = ActivityCategory(
            id=str(uuid.uuid4()),
            name=request.name.strip(),
            color=request.color,
            group=request.group,
            rule=request.rule,
            description=request.description,
        )
        if not self.category_provider.create_category(category):
            raise RuntimeError(f"创建分类 {category.name} 失败")

        logger.info(f"新增分类 {category.name} ({category.id})")
        return category

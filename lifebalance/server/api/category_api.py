"""
Category API - 分类目录接口
"""

from fastapi import APIRouter, HTTPException, Path

from lifebalance.server.schemas.category_schemas import (
    ActivityCategory,
    CategoryListResponse,
    CreateCategoryRequest,
)
from lifebalance.server.services import category_service

router = APIRouter(prefix="/categories", tags=["Category"])


@router.get("", response_model=CategoryListResponse, summary="获取分类目录")
async def get_categories():
    try:
        return category_service.get_categories()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"获取分类失败: {str(e)}")


@router.get("/{category_id}", response_model=ActivityCategory, summary="获取单个分类")
async def get_category(
    category_id: str = Path(..., description="分类ID")
):
    category = category_service.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="分类不存在")
    return category


@router.post("", response_model=ActivityCategory, summary="新增分类")
async def create_category(request: CreateCategoryRequest):
    """
    新增分类

    请求体:
    - **name**: 分类名称
    - **color**: 分类颜色（十六进制，如 #4361EE）
    - **group**: work / personal / sleep / other
    - **rule**: 3F / 3H / 3S / other
    - **description**: 说明（可选）
    """
    try:
        return category_service.create_category(request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"创建分类失败: {str(e)}")

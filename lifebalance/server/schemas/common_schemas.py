"""
通用 Schema 定义

存放跨模块共享的通用数据模型
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


class StandardResponse(BaseModel):
    """通用响应模型"""
    success: bool = Field(..., description="操作是否成功")
    data: Optional[Dict[str, Any]] = Field(default=None, description="响应数据")
    message: Optional[str] = Field(default=None, description="响应消息")

"""
File: course_admin/domains/categories/schemas.py
Description: 分类领域 Pydantic 模型 (Schema)

输入模型只负责"接收"：字段全部可选、类型宽松，
真正的业务校验 (必填 / 长度 / 唯一 / 正整数) 由 rules.py 中的规则表完成，
以保证错误文案统一且一次返回全部字段错误。
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from course_admin.core.response import CamelModel

# ------------------------------------------------------------------------------
# Input Schemas (输入模型)
# ------------------------------------------------------------------------------


class CategoryCreate(CamelModel):
    name: str | None = Field(default=None, description="分类名称 (唯一)")
    rank: int | str | None = Field(default=None, description="排序 (正整数，默认 1)")


class CategoryUpdate(CategoryCreate):
    """仅传入的字段参与校验与更新"""


# ------------------------------------------------------------------------------
# Output Schemas (输出模型)
# ------------------------------------------------------------------------------


class CategoryRead(CamelModel):
    id: UUID
    name: str
    rank: int
    created_at: datetime
    updated_at: datetime

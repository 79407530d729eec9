"""
File: course_admin/domains/articles/schemas.py
Description: 文章领域 Pydantic 模型 (Schema)
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from course_admin.core.response import CamelModel


class ArticleCreate(CamelModel):
    title: str | None = Field(default=None, description="标题")
    content: str | None = Field(default=None, description="正文")


class ArticleUpdate(ArticleCreate):
    """仅传入的字段参与校验与更新"""


class ArticleRead(CamelModel):
    id: UUID
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

"""
File: course_admin/domains/courses/schemas.py
Description: 课程领域 Pydantic 模型 (Schema)

1. CourseCreate / CourseUpdate: 接收 camelCase 请求体 (categoryId / likesCount ...)
2. CourseRead: 响应模型，关联的分类与用户以摘要对象嵌套返回，不返回外键列
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from course_admin.core.response import CamelModel

# ------------------------------------------------------------------------------
# Input Schemas (输入模型)
# ------------------------------------------------------------------------------


class CourseCreate(CamelModel):
    category_id: str | None = Field(default=None, description="分类ID")
    user_id: str | None = Field(default=None, description="讲师用户ID")
    name: str | None = Field(default=None, description="课程名称")
    image: str | None = Field(default=None, description="封面图片URL")
    recommended: bool | str | None = Field(default=None, description="是否推荐")
    introductory: bool | str | None = Field(default=None, description="是否入门课程")
    content: str | None = Field(default=None, description="课程介绍")
    likes_count: int | str | None = Field(default=None, description="点赞数")
    chapters_count: int | str | None = Field(default=None, description="章节数")


class CourseUpdate(CourseCreate):
    """仅传入的字段参与校验与更新"""


# ------------------------------------------------------------------------------
# Output Schemas (输出模型)
# ------------------------------------------------------------------------------


class CategorySummary(CamelModel):
    id: UUID
    name: str


class UserSummary(CamelModel):
    id: UUID
    username: str


class CourseRead(CamelModel):
    id: UUID
    name: str
    image: str | None = None
    recommended: bool
    introductory: bool
    content: str | None = None
    likes_count: int
    chapters_count: int
    created_at: datetime
    updated_at: datetime

    category: CategorySummary | None = None
    user: UserSummary | None = None

"""
File: course_admin/db/models/course.py
Description: 课程模型

课程通过外键关联分类 (category_id) 与讲师用户 (user_id)。
读取时通过 JOIN 取回分类/用户的摘要信息，不在课程表中冗余存储。

注意：
relationship 使用 lazy="raise"，禁止异步会话下的隐式懒加载，
需要关联数据时必须在查询中显式 joinedload。
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from course_admin.db.models.base import UUIDModel

if TYPE_CHECKING:
    from course_admin.db.models.category import Category
    from course_admin.db.models.user import User


class Course(UUIDModel):
    """
    课程
    """

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return "courses"

    __table_args__ = (
        CheckConstraint("likes_count >= 0", name="likes_count_non_negative"),
        CheckConstraint("chapters_count >= 0", name="chapters_count_non_negative"),
    )

    # --------------------------------------------------------------------------
    # 外键关联
    # --------------------------------------------------------------------------

    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="分类ID",
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="讲师用户ID",
    )

    # --------------------------------------------------------------------------
    # 课程信息
    # --------------------------------------------------------------------------

    name: Mapped[str] = mapped_column(String(45), nullable=False, comment="课程名称")

    image: Mapped[str | None] = mapped_column(
        String(255), nullable=True, comment="封面图片URL"
    )

    recommended: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
        comment="是否推荐",
    )

    introductory: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
        comment="是否入门课程",
    )

    content: Mapped[str | None] = mapped_column(Text, nullable=True, comment="课程介绍")

    likes_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"), comment="点赞数"
    )

    chapters_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"), comment="章节数"
    )

    category: Mapped["Category"] = relationship(back_populates="courses", lazy="raise")

    user: Mapped["User"] = relationship(back_populates="courses", lazy="raise")

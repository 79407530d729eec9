"""
File: course_admin/db/models/category.py
Description: 课程分类模型

rank 为展示排序键 (正整数，升序)，name 数据库级唯一。
分类与课程为 1:N 关系；存在课程时禁止删除分类 (应用层校验 + 外键 RESTRICT)。
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from course_admin.db.models.base import UUIDModel

if TYPE_CHECKING:
    from course_admin.db.models.course import Course


class Category(UUIDModel):
    """
    课程分类
    """

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return "categories"

    __table_args__ = (CheckConstraint("rank > 0", name="rank_positive"),)

    name: Mapped[str] = mapped_column(
        String(45), unique=True, nullable=False, comment="分类名称"
    )

    rank: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default=text("1"),
        comment="排序 (升序)",
    )

    courses: Mapped[list["Course"]] = relationship(
        back_populates="category", lazy="raise", passive_deletes="all"
    )

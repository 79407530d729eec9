"""
File: course_admin/db/models/article.py
Description: 文章模型
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from course_admin.db.models.base import UUIDModel


class Article(UUIDModel):
    @declared_attr.directive
    def __tablename__(cls) -> str:
        return "articles"

    title: Mapped[str] = mapped_column(String(45), nullable=False, comment="标题")

    content: Mapped[str] = mapped_column(Text, nullable=False, comment="正文")

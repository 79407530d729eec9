"""
File: course_admin/db/models/__init__.py
Description: ORM 模型注册表

导入所有业务模型，供 Alembic (env.py) 与 Database.create_all 发现 metadata。

注意：
每当新增一个 Model 文件，必须在此处导入，
否则 Alembic autogenerate 无法检测到新表。
"""

from course_admin.db.models.article import Article
from course_admin.db.models.base import Base, TimestampMixin, UUIDBase, UUIDModel
from course_admin.db.models.category import Category
from course_admin.db.models.course import Course
from course_admin.db.models.setting import Setting
from course_admin.db.models.user import User

__all__ = [
    # 基类
    "Base",
    "UUIDBase",
    "UUIDModel",
    "TimestampMixin",
    # 业务模型
    "Article",
    "Category",
    "Course",
    "Setting",
    "User",
]

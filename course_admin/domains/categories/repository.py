"""
File: course_admin/domains/categories/repository.py
Description: 分类领域仓储层 (Repository)

继承通用 BaseRepository，扩展删除前的引用检查查询。
"""

import uuid

from sqlalchemy import select

from course_admin.db.models.category import Category
from course_admin.db.models.course import Course
from course_admin.db.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    async def has_courses(self, category_id: uuid.UUID) -> bool:
        """分类下是否仍有课程"""
        stmt = select(Course.id).where(Course.category_id == category_id).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None

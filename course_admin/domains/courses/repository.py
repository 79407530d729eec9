"""
File: course_admin/domains/courses/repository.py
Description: 课程领域仓储层 (Repository)

课程的列表与详情查询通过 LEFT OUTER JOIN 一次性取回分类与讲师用户，
避免异步会话下的懒加载 (relationship 为 lazy="raise")。
"""

from sqlalchemy import Select, select
from sqlalchemy.orm import joinedload

from course_admin.db.models.course import Course
from course_admin.db.repositories.base import BaseRepository


class CourseRepository(BaseRepository[Course]):
    def base_select(self) -> Select[tuple[Course]]:
        return select(Course).options(
            joinedload(Course.category),
            joinedload(Course.user),
        )

"""
File: course_admin/domains/courses/dependencies.py
Description: 课程领域依赖注入 (DI)

依赖链：
DBSession → CourseRepository → CourseService → CourseServiceDep
"""

from typing import Annotated

from fastapi import Depends

from course_admin.api.deps import DBSession
from course_admin.db.models.course import Course
from course_admin.domains.courses.repository import CourseRepository
from course_admin.domains.courses.service import CourseService


async def get_course_repository(session: DBSession) -> CourseRepository:
    return CourseRepository(model=Course, session=session)


CourseRepoDep = Annotated[CourseRepository, Depends(get_course_repository)]


async def get_course_service(repo: CourseRepoDep) -> CourseService:
    return CourseService(repo=repo)


CourseServiceDep = Annotated[CourseService, Depends(get_course_service)]

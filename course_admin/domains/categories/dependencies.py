"""
File: course_admin/domains/categories/dependencies.py
Description: 分类领域依赖注入 (DI)

依赖链：
DBSession → CategoryRepository → CategoryService → CategoryServiceDep
"""

from typing import Annotated

from fastapi import Depends

from course_admin.api.deps import DBSession
from course_admin.db.models.category import Category
from course_admin.domains.categories.repository import CategoryRepository
from course_admin.domains.categories.service import CategoryService


async def get_category_repository(session: DBSession) -> CategoryRepository:
    return CategoryRepository(model=Category, session=session)


CategoryRepoDep = Annotated[CategoryRepository, Depends(get_category_repository)]


async def get_category_service(repo: CategoryRepoDep) -> CategoryService:
    return CategoryService(repo=repo)


# Router 中只需写: service: CategoryServiceDep
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]

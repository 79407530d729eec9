"""
File: course_admin/domains/categories/service.py
Description: 分类领域服务 (业务逻辑层)

在通用 CRUD 流程之上增加：
1. 列表默认按 rank 升序、id 升序排列
2. 删除前检查分类下是否仍有课程，有则拒绝删除 (Conflict)
"""

from course_admin.core.exceptions import ConflictException
from course_admin.core.pagination import Contains, QueryBuilder
from course_admin.db.models.category import Category
from course_admin.domains.categories.constants import CategoryConflict
from course_admin.domains.categories.repository import CategoryRepository
from course_admin.domains.categories.rules import CATEGORY_RULES
from course_admin.domains.crud_service import CRUDService


class CategoryService(CRUDService[Category]):
    entity_name = "category"
    entity_label = "分类"
    rules = CATEGORY_RULES
    query = QueryBuilder(
        filters=(Contains("name", Category.name),),
        order_by=(Category.rank.asc(), Category.id.asc()),
    )

    repo: CategoryRepository

    def __init__(self, repo: CategoryRepository):
        super().__init__(repo)

    async def before_delete(self, db_obj: Category) -> None:
        # 检查与删除之间不加锁，并发新增课程时由外键 RESTRICT 兜底
        if await self.repo.has_courses(db_obj.id):
            raise ConflictException(CategoryConflict.HAS_COURSES)

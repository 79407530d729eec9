"""
File: course_admin/domains/courses/service.py
Description: 课程领域服务

列表过滤参数：
- categoryId / userId: 精确匹配 (非法 UUID 不匹配任何记录)
- name: 模糊搜索
- recommended / introductory: 布尔过滤 ('true' / '1' 为真)
"""

from course_admin.core.pagination import (
    Contains,
    Equals,
    Flag,
    QueryBuilder,
    to_uuid,
)
from course_admin.db.models.course import Course
from course_admin.domains.courses.rules import COURSE_RULES
from course_admin.domains.crud_service import CRUDService


class CourseService(CRUDService[Course]):
    entity_name = "course"
    entity_label = "课程"
    rules = COURSE_RULES
    query = QueryBuilder(
        filters=(
            Equals("categoryId", Course.category_id, coerce=to_uuid),
            Equals("userId", Course.user_id, coerce=to_uuid),
            Contains("name", Course.name),
            Flag("recommended", Course.recommended),
            Flag("introductory", Course.introductory),
        ),
        order_by=(Course.id.desc(),),
    )

"""
File: course_admin/domains/users/service.py
Description: 用户领域服务 (业务逻辑层)

本模块在通用 CRUD 流程之上增加密码哈希步骤：
1. 创建：校验通过后哈希密码，再写入数据库
2. 更新：仅当 password 在本次变更字段中时重新哈希；否则原哈希保持不变
3. 已是哈希格式的密码 (旧系统导入) 原样写入，不会被二次哈希

注意：
- 密码哈希使用异步版本函数，避免阻塞事件循环。
- 日志中的字段一律经过脱敏，绝不记录明文密码。
"""

from typing import Any

from course_admin.core.logging import logger
from course_admin.core.pagination import Contains, Equals, QueryBuilder, to_int
from course_admin.core.security import get_password_hash_async
from course_admin.db.models.user import User
from course_admin.domains.crud_service import CRUDService
from course_admin.domains.users.repository import UserRepository
from course_admin.domains.users.rules import USER_RULES
from course_admin.utils.masking import mask_email


class UserService(CRUDService[User]):
    """
    用户领域服务。
    """

    entity_name = "user"
    entity_label = "用户"
    rules = USER_RULES
    query = QueryBuilder(
        filters=(
            Contains("username", User.username),
            Contains("email", User.email),
            Equals("role", User.role, coerce=to_int),
        ),
        order_by=(User.id.desc(),),
    )

    repo: UserRepository

    def __init__(self, repo: UserRepository):
        super().__init__(repo)

    async def before_write(
        self, fields: dict[str, Any], db_obj: User | None
    ) -> dict[str, Any]:
        if "password" not in fields:
            return fields

        fields = dict(fields)
        fields["password"] = await get_password_hash_async(fields["password"])

        if db_obj is not None:
            logger.bind(user_id=str(db_obj.id), email=mask_email(db_obj.email)).info(
                "User password changed"
            )
        return fields

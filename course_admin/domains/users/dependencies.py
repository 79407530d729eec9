"""
File: course_admin/domains/users/dependencies.py
Description: 用户领域依赖注入 (DI)

本模块负责定义和组装用户领域的依赖项：
1. get_user_repository: 注入 DB 会话，实例化 Repository
2. get_user_service: 注入 Repository，实例化 Service

依赖链：
DBSession → UserRepository → UserService → UserServiceDep

Router 层将直接使用 UserServiceDep，无需关心底层细节。
"""

from typing import Annotated

from fastapi import Depends

from course_admin.api.deps import DBSession
from course_admin.db.models.user import User
from course_admin.domains.users.repository import UserRepository
from course_admin.domains.users.service import UserService


async def get_user_repository(session: DBSession) -> UserRepository:
    """
    获取用户仓储实例 (UserRepository)。
    """
    return UserRepository(model=User, session=session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


async def get_user_service(repo: UserRepoDep) -> UserService:
    """
    获取用户服务实例 (UserService)。
    """
    return UserService(repo=repo)


# ==============================================================================
# 导出类型别名，供 Router 层使用
# ==============================================================================

# Router 中只需写: service: UserServiceDep
UserServiceDep = Annotated[UserService, Depends(get_user_service)]

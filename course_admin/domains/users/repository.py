"""
File: course_admin/domains/users/repository.py
Description: 用户领域仓储层 (Repository)

本模块负责用户数据的数据库访问，继承自通用 BaseRepository。
扩展功能：
1. get_by_email: 根据邮箱查询 (登录使用)
"""

from sqlalchemy import select

from course_admin.db.models.user import User
from course_admin.db.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    用户仓储类。
    继承了 BaseRepository 的 create/update/get/delete/list 方法。
    """

    async def get_by_email(self, email: str) -> User | None:
        """
        根据邮箱查询用户。
        """
        stmt = select(User).where(User.email == email)
        # 邮箱有唯一索引，scalar_one_or_none 可以发现脏数据
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

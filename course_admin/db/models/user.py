"""
File: course_admin/db/models/user.py
Description: 用户模型 (后台账号)

继承自 UUIDModel，自动拥有 UUID v7 主键与 created_at / updated_at。

约束：
- email / username 数据库级唯一索引 (应用层唯一性校验之外的最终保障)
- password 只存储哈希值 (Argon2id；兼容旧系统导入的 bcrypt)
"""

from typing import TYPE_CHECKING

from sqlalchemy import SmallInteger, String, Text, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from course_admin.db.models.base import UUIDModel

if TYPE_CHECKING:
    from course_admin.db.models.course import Course


class User(UUIDModel):
    """
    用户模型
    """

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return "users"

    # --------------------------------------------------------------------------
    # 登录凭证
    # --------------------------------------------------------------------------

    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, comment="邮箱 (登录凭证)"
    )

    username: Mapped[str] = mapped_column(
        String(45), unique=True, nullable=False, comment="用户名"
    )

    password: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="密码哈希值"
    )

    # --------------------------------------------------------------------------
    # 基础资料
    # --------------------------------------------------------------------------

    nickname: Mapped[str] = mapped_column(String(45), nullable=False, comment="昵称")

    # 0: 男性 1: 女性 2: 未选择
    sex: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, server_default=text("2"), comment="性别"
    )

    company: Mapped[str | None] = mapped_column(
        String(255), nullable=True, comment="公司"
    )

    introduce: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="个人介绍"
    )

    # 0: 普通用户 100: 管理员
    role: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        server_default=text("0"),
        index=True,
        comment="用户组",
    )

    avatar: Mapped[str | None] = mapped_column(
        String(255), nullable=True, comment="头像URL"
    )

    courses: Mapped[list["Course"]] = relationship(
        back_populates="user", lazy="raise", passive_deletes="all"
    )

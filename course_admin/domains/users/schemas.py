"""
File: course_admin/domains/users/schemas.py
Description: 用户领域 Pydantic 模型 (Schema)

本模块定义了用户相关的输入/输出数据结构：
1. UserCreate: 创建用户参数 (包含密码明文)
2. UserUpdate: 更新参数 (所有字段可选，只处理传入的字段)
3. UserRead: 用户信息响应 (包含 ID, 时间戳, 屏蔽密码)

规范：
- 输入模型类型宽松，格式 / 长度 / 唯一性等规则统一由 rules.py 校验
- 响应模型开启 from_attributes=True 以支持 ORM 转换
- UserRead 不包含 password 字段，任何接口都不会返回密码哈希
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from course_admin.core.response import CamelModel

# ------------------------------------------------------------------------------
# Input Schemas (输入模型)
# ------------------------------------------------------------------------------


class UserCreate(CamelModel):
    email: str | None = Field(default=None, description="邮箱 (登录凭证, 唯一)")
    username: str | None = Field(default=None, description="用户名 (唯一)")
    password: str | None = Field(default=None, description="明文密码 (6 ~ 45)")
    nickname: str | None = Field(default=None, description="昵称")
    sex: int | str | None = Field(
        default=None, description="性别 (0 男性 / 1 女性 / 2 未选择)"
    )
    company: str | None = Field(default=None, description="公司")
    introduce: str | None = Field(default=None, description="个人介绍")
    role: int | str | None = Field(
        default=None, description="用户组 (0 普通用户 / 100 管理员)"
    )
    avatar: str | None = Field(default=None, description="头像URL")


class UserUpdate(UserCreate):
    """
    用户更新模型。
    只有传入 password 时才会重新哈希，未传时原哈希保持不变。
    """


# ------------------------------------------------------------------------------
# Output Schemas (输出模型)
# ------------------------------------------------------------------------------


class UserRead(CamelModel):
    """
    用户信息响应模型。
    """

    id: UUID
    email: str
    username: str
    nickname: str
    sex: int
    company: str | None = None
    introduce: str | None = None
    role: int
    avatar: str | None = None
    created_at: datetime
    updated_at: datetime

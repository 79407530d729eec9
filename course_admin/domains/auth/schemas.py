"""
File: course_admin/domains/auth/schemas.py
Description: 认证领域 Pydantic 模型 (Schema)

1. LoginRequest: 邮箱密码登录请求参数 (必填检查由 LOGIN_RULES 完成)
2. LoginData: 登录成功后返回的数据 ({"user": ...}，不含密码)
"""

from pydantic import BaseModel, Field

from course_admin.core.validation import EntityRules, non_empty, required, rules
from course_admin.domains.users.schemas import UserRead


class LoginRequest(BaseModel):
    """
    邮箱密码登录请求参数。
    """

    email: str | None = Field(default=None, description="邮箱", examples=["admin@clwy.cn"])
    password: str | None = Field(default=None, description="用户密码")


class LoginData(BaseModel):
    user: UserRead


LOGIN_RULES = EntityRules(
    {
        "email": rules(required("邮箱必须填写。"), non_empty("邮箱不能为空。")),
        "password": rules(required("密码必须填写。"), non_empty("密码不能为空。")),
    }
)

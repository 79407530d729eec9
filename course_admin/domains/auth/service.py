"""
File: course_admin/domains/auth/service.py
Description: 认证领域服务 (Service)

本模块封装登录校验：
1. 参数检查: 邮箱与密码必须填写 (ValidationFailed)
2. 凭证校验: 按邮箱查询用户，由哈希算法校验密码
3. 用户不存在与密码错误返回完全相同的错误，防止枚举攻击
4. 恒定开销: 邮箱不存在时仍对占位哈希执行一次校验，响应耗时不暴露邮箱是否注册

不签发任何令牌，登录成功仅返回用户信息。
"""

from course_admin.core.exceptions import AppException
from course_admin.core.logging import logger
from course_admin.core.security import get_password_hash, verify_password_async
from course_admin.core.validation import ValidationContext
from course_admin.db.models.user import User
from course_admin.domains.auth.constants import AuthError, INVALID_CREDENTIALS_DETAIL
from course_admin.domains.auth.schemas import LOGIN_RULES, LoginRequest
from course_admin.domains.users.repository import UserRepository
from course_admin.utils.masking import mask_email

# 占位哈希，与真实用户哈希使用相同的工作因子
DUMMY_PASSWORD_HASH = get_password_hash("course-admin-login-placeholder")


class AuthService:
    """
    认证服务类。
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def login(self, login_data: LoginRequest) -> User:
        """
        用户登录流程。

        Raises:
            ValidationFailedException: 邮箱或密码未填写
            AppException(AuthError.INVALID_CREDENTIALS): 用户不存在或密码错误
        """
        fields = await LOGIN_RULES.validate(
            login_data.model_dump(), context=ValidationContext(repo=self.user_repo)
        )
        email, password = fields["email"], fields["password"]

        user = await self.user_repo.get_by_email(email)
        stored_hash = user.password if user is not None else DUMMY_PASSWORD_HASH
        matched = await verify_password_async(password, stored_hash)

        if user is None or not matched:
            logger.bind(email=mask_email(email)).warning("Login rejected")
            raise AppException(
                AuthError.INVALID_CREDENTIALS, errors=[INVALID_CREDENTIALS_DETAIL]
            )

        logger.bind(user_id=str(user.id), email=mask_email(user.email)).info(
            "User logged in"
        )
        return user

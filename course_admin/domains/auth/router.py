"""
File: course_admin/domains/auth/router.py
Description: 认证领域 HTTP 路由层

挂载前缀: /users
1. POST /login: 邮箱密码登录，成功返回用户信息 (不含密码)

失败响应:
- 邮箱 / 密码未填写: 400 请求参数错误
- 用户不存在 / 密码错误: 401 登录失败 (errors: ["邮箱或密码错误"])
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from course_admin.core.response import ResponseModel
from course_admin.domains.auth.constants import AuthMsg
from course_admin.domains.auth.schemas import LoginData, LoginRequest
from course_admin.domains.auth.service import AuthService
from course_admin.domains.users.dependencies import UserRepoDep
from course_admin.domains.users.schemas import UserRead

router = APIRouter()

# ------------------------------------------------------------------------------
# 依赖注入构造器 (Dependencies)
# ------------------------------------------------------------------------------


async def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """
    构造 AuthService 实例，复用 User 领域的 Repository。
    """
    return AuthService(user_repo=user_repo)


# 类型别名：Auth 服务依赖
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


# ------------------------------------------------------------------------------
# Endpoints (路由定义)
# ------------------------------------------------------------------------------


@router.post(
    "/login",
    response_model=ResponseModel[LoginData],
    summary="用户登录",
    description="使用邮箱密码登录，成功后返回用户信息。",
)
async def login(
    login_data: LoginRequest,
    service: AuthServiceDep,
) -> ResponseModel[LoginData]:
    user = await service.login(login_data)
    return ResponseModel.success(
        data=LoginData(user=UserRead.model_validate(user)),
        message=AuthMsg.LOGIN_SUCCESS,
    )

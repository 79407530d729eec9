"""
File: course_admin/domains/users/router.py
Description: 用户领域 HTTP 路由层

挂载前缀: /users (登录接口见 domains/auth/router.py)
1. GET    /       分页列表 (支持 username / email 模糊搜索，role 精确匹配)
2. GET    /{id}   详情
3. POST   /       创建 (密码哈希后写入)
4. PUT    /{id}   更新 (传入 password 时重新哈希)
5. DELETE /{id}   删除

所有响应均使用 UserRead，不包含密码。
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from course_admin.api.deps import PageQuery
from course_admin.core.response import EmptyData, ItemData, ListData, ResponseModel
from course_admin.domains.users.constants import UserMsg
from course_admin.domains.users.dependencies import UserServiceDep
from course_admin.domains.users.schemas import UserCreate, UserRead, UserUpdate

router = APIRouter()


@router.get(
    "",
    response_model=ResponseModel[ListData[UserRead]],
    summary="查询用户列表",
)
async def list_users(
    page: PageQuery,
    service: UserServiceDep,
    username: Annotated[str | None, Query(description="用户名关键词")] = None,
    email: Annotated[str | None, Query(description="邮箱关键词")] = None,
    role: Annotated[str | None, Query(description="用户组 (0 / 100)")] = None,
) -> ResponseModel[ListData[UserRead]]:
    users, total = await service.list(
        page, {"username": username, "email": email, "role": role}
    )
    return ResponseModel.success(
        data=ListData.of(
            [UserRead.model_validate(u) for u in users],
            total,
            page.current_page,
            page.page_size,
        ),
        message=UserMsg.LIST_SUCCESS,
    )


@router.get(
    "/{id}",
    response_model=ResponseModel[ItemData[UserRead]],
    summary="查询用户详情",
)
async def get_user(id: UUID, service: UserServiceDep) -> ResponseModel[ItemData[UserRead]]:
    user = await service.get(id)
    return ResponseModel.success(
        data=ItemData(item=UserRead.model_validate(user)),
        message=UserMsg.GET_SUCCESS,
    )


@router.post(
    "",
    response_model=ResponseModel[ItemData[UserRead]],
    status_code=status.HTTP_201_CREATED,
    summary="创建用户",
    description="邮箱与用户名必须唯一，密码以 Argon2id 哈希存储。",
)
async def create_user(
    user_in: UserCreate, service: UserServiceDep
) -> ResponseModel[ItemData[UserRead]]:
    user = await service.create(user_in)
    return ResponseModel.success(
        data=ItemData(item=UserRead.model_validate(user)),
        message=UserMsg.CREATE_SUCCESS,
    )


@router.put(
    "/{id}",
    response_model=ResponseModel[ItemData[UserRead]],
    summary="更新用户",
)
async def update_user(
    id: UUID, user_in: UserUpdate, service: UserServiceDep
) -> ResponseModel[ItemData[UserRead]]:
    user = await service.update(id, user_in)
    return ResponseModel.success(
        data=ItemData(item=UserRead.model_validate(user)),
        message=UserMsg.UPDATE_SUCCESS,
    )


@router.delete(
    "/{id}",
    response_model=ResponseModel[EmptyData],
    summary="删除用户",
)
async def delete_user(id: UUID, service: UserServiceDep) -> ResponseModel[EmptyData]:
    await service.delete(id)
    return ResponseModel.success(data=EmptyData(), message=UserMsg.DELETE_SUCCESS)

"""
File: course_admin/domains/categories/router.py
Description: 分类领域 HTTP 路由层 (后台管理)

挂载前缀: /admin/categories
1. GET    /       分页列表 (支持 name 模糊搜索，按 rank 升序)
2. GET    /{id}   详情
3. POST   /       创建 (201)
4. PUT    /{id}   更新 (仅校验传入字段)
5. DELETE /{id}   删除 (分类下有课程时拒绝)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from course_admin.api.deps import PageQuery
from course_admin.core.response import EmptyData, ItemData, ListData, ResponseModel
from course_admin.domains.categories.constants import CategoryMsg
from course_admin.domains.categories.dependencies import CategoryServiceDep
from course_admin.domains.categories.schemas import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
)

router = APIRouter()


@router.get(
    "",
    response_model=ResponseModel[ListData[CategoryRead]],
    summary="查询分类列表",
)
async def list_categories(
    page: PageQuery,
    service: CategoryServiceDep,
    name: Annotated[str | None, Query(description="名称关键词")] = None,
) -> ResponseModel[ListData[CategoryRead]]:
    categories, total = await service.list(page, {"name": name})
    return ResponseModel.success(
        data=ListData.of(
            [CategoryRead.model_validate(c) for c in categories],
            total,
            page.current_page,
            page.page_size,
        ),
        message=CategoryMsg.LIST_SUCCESS,
    )


@router.get(
    "/{id}",
    response_model=ResponseModel[ItemData[CategoryRead]],
    summary="查询分类详情",
)
async def get_category(
    id: UUID, service: CategoryServiceDep
) -> ResponseModel[ItemData[CategoryRead]]:
    category = await service.get(id)
    return ResponseModel.success(
        data=ItemData(item=CategoryRead.model_validate(category)),
        message=CategoryMsg.GET_SUCCESS,
    )


@router.post(
    "",
    response_model=ResponseModel[ItemData[CategoryRead]],
    status_code=status.HTTP_201_CREATED,
    summary="创建分类",
)
async def create_category(
    category_in: CategoryCreate, service: CategoryServiceDep
) -> ResponseModel[ItemData[CategoryRead]]:
    category = await service.create(category_in)
    return ResponseModel.success(
        data=ItemData(item=CategoryRead.model_validate(category)),
        message=CategoryMsg.CREATE_SUCCESS,
    )


@router.put(
    "/{id}",
    response_model=ResponseModel[ItemData[CategoryRead]],
    summary="更新分类",
)
async def update_category(
    id: UUID, category_in: CategoryUpdate, service: CategoryServiceDep
) -> ResponseModel[ItemData[CategoryRead]]:
    category = await service.update(id, category_in)
    return ResponseModel.success(
        data=ItemData(item=CategoryRead.model_validate(category)),
        message=CategoryMsg.UPDATE_SUCCESS,
    )


@router.delete(
    "/{id}",
    response_model=ResponseModel[EmptyData],
    summary="删除分类",
)
async def delete_category(
    id: UUID, service: CategoryServiceDep
) -> ResponseModel[EmptyData]:
    await service.delete(id)
    return ResponseModel.success(data=EmptyData(), message=CategoryMsg.DELETE_SUCCESS)

"""
File: course_admin/domains/courses/router.py
Description: 课程领域 HTTP 路由层 (后台管理)

挂载前缀: /admin/courses
响应中的课程均带有分类 {id, name} 与讲师 {id, username} 摘要。
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from course_admin.api.deps import PageQuery
from course_admin.core.response import EmptyData, ItemData, ListData, ResponseModel
from course_admin.domains.courses.constants import CourseMsg
from course_admin.domains.courses.dependencies import CourseServiceDep
from course_admin.domains.courses.schemas import CourseCreate, CourseRead, CourseUpdate

router = APIRouter()


@router.get(
    "",
    response_model=ResponseModel[ListData[CourseRead]],
    summary="查询课程列表",
)
async def list_courses(
    page: PageQuery,
    service: CourseServiceDep,
    category_id: Annotated[str | None, Query(alias="categoryId")] = None,
    user_id: Annotated[str | None, Query(alias="userId")] = None,
    name: Annotated[str | None, Query(description="名称关键词")] = None,
    recommended: Annotated[str | None, Query()] = None,
    introductory: Annotated[str | None, Query()] = None,
) -> ResponseModel[ListData[CourseRead]]:
    courses, total = await service.list(
        page,
        {
            "categoryId": category_id,
            "userId": user_id,
            "name": name,
            "recommended": recommended,
            "introductory": introductory,
        },
    )
    return ResponseModel.success(
        data=ListData.of(
            [CourseRead.model_validate(c) for c in courses],
            total,
            page.current_page,
            page.page_size,
        ),
        message=CourseMsg.LIST_SUCCESS,
    )


@router.get(
    "/{id}",
    response_model=ResponseModel[ItemData[CourseRead]],
    summary="查询课程详情",
)
async def get_course(
    id: UUID, service: CourseServiceDep
) -> ResponseModel[ItemData[CourseRead]]:
    course = await service.get(id)
    return ResponseModel.success(
        data=ItemData(item=CourseRead.model_validate(course)),
        message=CourseMsg.GET_SUCCESS,
    )


@router.post(
    "",
    response_model=ResponseModel[ItemData[CourseRead]],
    status_code=status.HTTP_201_CREATED,
    summary="创建课程",
)
async def create_course(
    course_in: CourseCreate, service: CourseServiceDep
) -> ResponseModel[ItemData[CourseRead]]:
    course = await service.create(course_in)
    return ResponseModel.success(
        data=ItemData(item=CourseRead.model_validate(course)),
        message=CourseMsg.CREATE_SUCCESS,
    )


@router.put(
    "/{id}",
    response_model=ResponseModel[ItemData[CourseRead]],
    summary="更新课程",
)
async def update_course(
    id: UUID, course_in: CourseUpdate, service: CourseServiceDep
) -> ResponseModel[ItemData[CourseRead]]:
    course = await service.update(id, course_in)
    return ResponseModel.success(
        data=ItemData(item=CourseRead.model_validate(course)),
        message=CourseMsg.UPDATE_SUCCESS,
    )


@router.delete(
    "/{id}",
    response_model=ResponseModel[EmptyData],
    summary="删除课程",
)
async def delete_course(id: UUID, service: CourseServiceDep) -> ResponseModel[EmptyData]:
    await service.delete(id)
    return ResponseModel.success(data=EmptyData(), message=CourseMsg.DELETE_SUCCESS)

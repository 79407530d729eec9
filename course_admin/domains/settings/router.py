"""
File: course_admin/domains/settings/router.py
Description: 系统设置 HTTP 路由层 (后台管理)

挂载前缀: /admin/settings
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from course_admin.api.deps import PageQuery
from course_admin.core.response import EmptyData, ItemData, ListData, ResponseModel
from course_admin.domains.settings.constants import SettingMsg
from course_admin.domains.settings.dependencies import SettingServiceDep
from course_admin.domains.settings.schemas import (
    SettingCreate,
    SettingRead,
    SettingUpdate,
)

router = APIRouter()


@router.get(
    "",
    response_model=ResponseModel[ListData[SettingRead]],
    summary="查询设置列表",
)
async def list_settings(
    page: PageQuery,
    service: SettingServiceDep,
    name: Annotated[str | None, Query(description="名称关键词")] = None,
) -> ResponseModel[ListData[SettingRead]]:
    settings, total = await service.list(page, {"name": name})
    return ResponseModel.success(
        data=ListData.of(
            [SettingRead.model_validate(s) for s in settings],
            total,
            page.current_page,
            page.page_size,
        ),
        message=SettingMsg.LIST_SUCCESS,
    )


@router.get(
    "/{id}",
    response_model=ResponseModel[ItemData[SettingRead]],
    summary="查询设置详情",
)
async def get_setting(
    id: UUID, service: SettingServiceDep
) -> ResponseModel[ItemData[SettingRead]]:
    setting = await service.get(id)
    return ResponseModel.success(
        data=ItemData(item=SettingRead.model_validate(setting)),
        message=SettingMsg.GET_SUCCESS,
    )


@router.post(
    "",
    response_model=ResponseModel[ItemData[SettingRead]],
    status_code=status.HTTP_201_CREATED,
    summary="创建设置",
)
async def create_setting(
    setting_in: SettingCreate, service: SettingServiceDep
) -> ResponseModel[ItemData[SettingRead]]:
    setting = await service.create(setting_in)
    return ResponseModel.success(
        data=ItemData(item=SettingRead.model_validate(setting)),
        message=SettingMsg.CREATE_SUCCESS,
    )


@router.put(
    "/{id}",
    response_model=ResponseModel[ItemData[SettingRead]],
    summary="更新设置",
)
async def update_setting(
    id: UUID, setting_in: SettingUpdate, service: SettingServiceDep
) -> ResponseModel[ItemData[SettingRead]]:
    setting = await service.update(id, setting_in)
    return ResponseModel.success(
        data=ItemData(item=SettingRead.model_validate(setting)),
        message=SettingMsg.UPDATE_SUCCESS,
    )


@router.delete(
    "/{id}",
    response_model=ResponseModel[EmptyData],
    summary="删除设置",
)
async def delete_setting(id: UUID, service: SettingServiceDep) -> ResponseModel[EmptyData]:
    await service.delete(id)
    return ResponseModel.success(data=EmptyData(), message=SettingMsg.DELETE_SUCCESS)

"""
File: course_admin/domains/settings/schemas.py
Description: 系统设置领域 Pydantic 模型 (Schema)
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from course_admin.core.response import CamelModel


class SettingCreate(CamelModel):
    name: str | None = Field(default=None, description="站点名称")
    icp: str | None = Field(default=None, description="ICP备案号")
    copyright: str | None = Field(default=None, description="版权信息")


class SettingUpdate(SettingCreate):
    """仅传入的字段参与校验与更新"""


class SettingRead(CamelModel):
    id: UUID
    name: str
    icp: str | None = None
    copyright: str | None = None
    created_at: datetime
    updated_at: datetime

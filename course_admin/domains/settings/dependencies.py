"""
File: course_admin/domains/settings/dependencies.py
Description: 系统设置领域依赖注入 (DI)
"""

from typing import Annotated

from fastapi import Depends

from course_admin.api.deps import DBSession
from course_admin.db.models.setting import Setting
from course_admin.db.repositories.base import BaseRepository
from course_admin.domains.settings.service import SettingService


async def get_setting_service(session: DBSession) -> SettingService:
    return SettingService(repo=BaseRepository(model=Setting, session=session))


SettingServiceDep = Annotated[SettingService, Depends(get_setting_service)]

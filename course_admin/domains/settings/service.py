"""
File: course_admin/domains/settings/service.py
Description: 系统设置领域服务
"""

from course_admin.core.pagination import Contains, QueryBuilder
from course_admin.db.models.setting import Setting
from course_admin.domains.crud_service import CRUDService
from course_admin.domains.settings.rules import SETTING_RULES


class SettingService(CRUDService[Setting]):
    entity_name = "setting"
    entity_label = "设置"
    rules = SETTING_RULES
    query = QueryBuilder(
        filters=(Contains("name", Setting.name),),
        order_by=(Setting.id.desc(),),
    )

"""
File: course_admin/db/models/setting.py
Description: 站点设置模型 (名称 / ICP 备案号 / 版权信息)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from course_admin.db.models.base import UUIDModel


class Setting(UUIDModel):
    @declared_attr.directive
    def __tablename__(cls) -> str:
        return "settings"

    name: Mapped[str] = mapped_column(String(255), nullable=False, comment="站点名称")

    icp: Mapped[str | None] = mapped_column(
        String(255), nullable=True, comment="ICP备案号"
    )

    copyright: Mapped[str | None] = mapped_column(
        String(255), nullable=True, comment="版权信息"
    )

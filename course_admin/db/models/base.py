"""
File: course_admin/db/models/base.py
Description: ORM 模型基类与组件化定义

本模块采用"组件化组合" (Mixin) 模式：
1. UUIDBase: [基础] 提供 UUID v7 主键 + 自动表名(智能 snake_case) + update 方法
2. TimestampMixin: [组件] 提供 created_at, updated_at (UTC, TIMESTAMPTZ)
3. UUIDModel: [标准] 聚合了 UUIDBase + TimestampMixin (所有业务表)

主键使用 UUID v7：按生成时间单调递增，因此 "id 倒序" 即 "最新在前"。
列类型使用 SQLAlchemy 通用 Uuid，PostgreSQL 下为原生 UUID，SQLite 下为 CHAR(32)。
"""

import re
import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, MetaData, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from uuid6 import uuid7

# 约束命名约定 (Alembic 生成迁移时命名稳定)
INDEXES_NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def resolve_table_name(name: str) -> str:
    """
    将驼峰命名 (CamelCase) 转换为蛇形命名 (snake_case)。

    示例:
    - Course -> course
    - SiteSetting -> site_setting
    - HTTPResponse -> http_response
    """
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


class Base(DeclarativeBase):
    """SQLAlchemy 声明式元类"""

    metadata = MetaData(naming_convention=INDEXES_NAMING_CONVENTION)


class TimestampMixin:
    """
    [组件] 时间戳混入类

    强制使用 UTC 时间存储 (TIMESTAMPTZ)，展示时再转本地时间。
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        nullable=False,
        comment="创建时间 (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
        comment="更新时间 (UTC)",
    )


class UUIDBase(Base):
    """
    [纯净版] 仅包含 ID 和基础工具方法。
    """

    __abstract__ = True

    @declared_attr.directive
    def __tablename__(cls) -> str:
        """自动将类名转为蛇形命名 (snake_case)"""
        return resolve_table_name(cls.__name__)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid7, comment="主键 (UUID v7)"
    )

    def update(self, **kwargs: Any) -> None:
        """
        [工具方法] 动态更新模型属性

        用法:
        category.update(**validated_fields)
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)


class UUIDModel(UUIDBase, TimestampMixin):
    """
    [标准版] 全站通用的业务模型基类。

    组合了：
    1. UUIDBase (ID + Update + SnakeCase表名)
    2. TimestampMixin (UTC 创建/更新时间)
    """

    __abstract__ = True

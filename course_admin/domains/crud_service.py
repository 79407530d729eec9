"""
File: course_admin/domains/crud_service.py
Description: 通用持久化网关服务 (Persistence Gateway)

所有实体共享的写入流程在此实现一次，各领域 Service 只声明规则表、查询构建器，
并按需覆盖 before_write / before_delete 钩子：

    create: 校验 (全部字段 + 默认值) -> before_write -> 写入 -> commit -> 重新读取
    update: 按 ID 读取 (404) -> 校验 (仅变更字段) -> before_write -> 写入 -> commit -> 重新读取
    delete: 按 ID 读取 (404) -> before_delete (引用检查) -> 物理删除 -> commit

错误归类：
- 校验失败在写入前抛出 ValidationFailedException，无任何副作用
- 数据库约束拒绝 (IntegrityError，如并发写入绕过了唯一性校验) 会回滚并重跑存储相关规则，
  能归因则抛 ValidationFailedException，否则抛 ConflictException
- 其他 SQLAlchemyError 一律转为 UnexpectedException
"""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from contextlib import asynccontextmanager
from typing import Any, ClassVar, Generic

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from course_admin.core.exceptions import (
    ConflictException,
    NotFoundException,
    UnexpectedException,
    ValidationFailedException,
)
from course_admin.core.logging import logger
from course_admin.core.pagination import PageParams, QueryBuilder
from course_admin.core.validation import EntityRules, ValidationContext
from course_admin.db.repositories.base import BaseRepository, ModelType
from course_admin.utils.masking import mask_sensitive_data


class CRUDService(Generic[ModelType]):
    """
    通用 CRUD 服务基类。

    子类需声明：
    - entity_name: 日志中使用的实体标识 (如 "category")
    - entity_label: 面向用户的实体中文名 (如 "分类")，用于 404 文案
    - rules: 字段规则表
    - query: 列表查询构建器 (过滤参数 + 默认排序)
    """

    entity_name: ClassVar[str]
    entity_label: ClassVar[str]
    rules: ClassVar[EntityRules]
    query: ClassVar[QueryBuilder]

    def __init__(self, repo: BaseRepository[ModelType]):
        self.repo = repo

    # --------------------------------------------------------------------------
    # Read
    # --------------------------------------------------------------------------

    async def list(
        self, page: PageParams, filters: Mapping[str, str | None] | None = None
    ) -> tuple[list[ModelType], int]:
        plan = self.query.build(page, filters or {})
        async with self._storage_guard():
            return await self.repo.list(plan)

    async def get(self, id: uuid.UUID, *, refresh: bool = False) -> ModelType:
        """
        按 ID 获取记录，不存在时抛出 NotFoundException。
        """
        async with self._storage_guard():
            db_obj = await self.repo.get(id, refresh=refresh)
        if db_obj is None:
            raise NotFoundException(self.entity_label, id)
        return db_obj

    # --------------------------------------------------------------------------
    # Write
    # --------------------------------------------------------------------------

    async def create(self, obj_in: BaseModel | Mapping[str, Any]) -> ModelType:
        payload = _as_dict(obj_in)
        context = ValidationContext(repo=self.repo)

        fields = await self.rules.validate(payload, context=context)
        fields = await self.before_write(fields, None)

        db_obj = await self._write(lambda: self.repo.create(fields), fields, context)

        logger.bind(entity=self.entity_name, id=str(db_obj.id)).info(
            f"{self.entity_name} created"
        )
        return await self.get(db_obj.id, refresh=True)

    async def update(
        self, id: uuid.UUID, obj_in: BaseModel | Mapping[str, Any]
    ) -> ModelType:
        db_obj = await self.get(id)
        payload = _as_dict(obj_in)
        context = ValidationContext(repo=self.repo, exclude_id=id)

        fields = await self.rules.validate(payload, context=context, partial=True)
        fields = await self.before_write(fields, db_obj)

        if fields:
            await self._write(lambda: self.repo.update(db_obj, fields), fields, context)

        logger.bind(
            entity=self.entity_name, id=str(id), changed=sorted(fields)
        ).info(f"{self.entity_name} updated")
        return await self.get(id, refresh=True)

    async def delete(self, id: uuid.UUID) -> None:
        db_obj = await self.get(id)
        await self.before_delete(db_obj)

        session = self.repo.session
        try:
            await self.repo.delete(db_obj)
            await session.commit()
        except IntegrityError as exc:
            # 外键 RESTRICT 拒绝 (并发写入绕过了 before_delete 检查)
            await session.rollback()
            raise ConflictException(
                f"该{self.entity_label}仍被其他数据引用，不能删除。"
            ) from exc
        except SQLAlchemyError as exc:
            await session.rollback()
            raise UnexpectedException() from exc

        logger.bind(entity=self.entity_name, id=str(id)).info(
            f"{self.entity_name} deleted"
        )

    # --------------------------------------------------------------------------
    # Hooks
    # --------------------------------------------------------------------------

    async def before_write(
        self, fields: dict[str, Any], db_obj: ModelType | None
    ) -> dict[str, Any]:
        """
        校验通过之后、写入之前的处理步骤。
        db_obj 为 None 表示创建。返回最终写入的字段。
        """
        return fields

    async def before_delete(self, db_obj: ModelType) -> None:
        """删除前的前置条件检查，不满足时抛出 ConflictException"""

    # --------------------------------------------------------------------------
    # Internals
    # --------------------------------------------------------------------------

    async def _write(
        self,
        action: Callable[[], Awaitable[ModelType]],
        fields: dict[str, Any],
        context: ValidationContext,
    ) -> ModelType:
        session = self.repo.session
        try:
            db_obj = await action()
            await session.commit()
        except IntegrityError as exc:
            await session.rollback()
            logger.bind(
                entity=self.entity_name, fields=mask_sensitive_data(fields)
            ).warning("Write rejected by storage constraint")

            errors = await self.rules.recheck_storage(fields, context=context)
            if errors:
                raise ValidationFailedException(errors) from exc
            raise ConflictException("数据已被修改，请重试。") from exc
        except SQLAlchemyError as exc:
            await session.rollback()
            raise UnexpectedException() from exc
        return db_obj

    @asynccontextmanager
    async def _storage_guard(self) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            await self.repo.session.rollback()
            raise UnexpectedException() from exc


def _as_dict(obj_in: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """只保留调用方显式提供的字段 (未传的字段不参与更新)"""
    if isinstance(obj_in, BaseModel):
        return obj_in.model_dump(exclude_unset=True)
    return dict(obj_in)

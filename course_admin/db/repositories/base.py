"""
File: course_admin/db/repositories/base.py
Description: 通用异步 Repository 基类 (CRUD)

本模块定义了 BaseRepository，封装了所有实体共享的存储操作。
各领域 Repository 继承此类，仅在需要 JOIN 或特殊查询时覆盖 base_select()。

特性：
- 泛型支持: BaseRepository[ModelType]，写入数据统一为已校验的 dict
- 纯异步: 基于 sqlalchemy.ext.asyncio
- 安全增强: update 操作自动过滤核心系统字段 (id, created_at, updated_at)
- 分页: list() 执行 QueryPlan，总数与当页数据共用同一组过滤条件
- 校验支撑: exists_by / reference_exists 为校验引擎的唯一性与外键规则提供查询

注意：本层只 flush，不 commit。事务提交由 Service 层控制。
"""

import uuid
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from course_admin.core.pagination import QueryPlan
from course_admin.db.models.base import UUIDBase

ModelType = TypeVar("ModelType", bound=UUIDBase)


class BaseRepository(Generic[ModelType]):
    """
    通用 CRUD 仓储基类。

    参数:
    - model: SQLAlchemy 模型类 (如 Category)
    - session: 当前请求的 AsyncSession
    """

    # 受保护的字段，禁止通过通用 update 方法修改
    PROTECTED_FIELDS: ClassVar[set[str]] = {"id", "created_at", "updated_at"}

    def __init__(self, model: type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    # --------------------------------------------------------------------------
    # 查询操作 (Read)
    # --------------------------------------------------------------------------

    def base_select(self) -> Select[tuple[ModelType]]:
        """
        列表与详情查询的基础语句。
        需要 JOIN 关联数据的实体在子类中覆盖。
        """
        return select(self.model)

    async def get(self, id: uuid.UUID, *, refresh: bool = False) -> ModelType | None:
        """
        根据主键 ID 查询单条记录。

        Args:
            refresh: 为 True 时用查询结果覆盖会话中已存在的同一对象
                     (写入后重新读取关联数据时使用)
        """
        stmt = self.base_select().where(self.model.id == id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.unique().scalar_one_or_none()

    async def list(self, plan: QueryPlan) -> tuple[list[ModelType], int]:
        """
        按读取计划分页查询。

        Returns:
            (当页记录, 满足条件的总数)
        """
        total = await self.count(plan)

        stmt = (
            self.base_select()
            .where(*plan.where)
            .order_by(*plan.order_by)
            .offset(plan.page.offset)
            .limit(plan.page.limit)
        )
        result = await self.session.execute(stmt)
        return list(result.unique().scalars().all()), total

    async def count(self, plan: QueryPlan | None = None) -> int:
        stmt = select(func.count()).select_from(self.model)
        if plan is not None:
            stmt = stmt.where(*plan.where)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def exists_by(
        self, field: str, value: Any, *, exclude_id: uuid.UUID | None = None
    ) -> bool:
        """
        是否存在 field == value 的记录 (可排除指定 ID)。
        供唯一性校验使用。
        """
        column = getattr(self.model, field)
        stmt = select(self.model.id).where(column == value)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def reference_exists(self, model: type[UUIDBase], id: uuid.UUID) -> bool:
        """被引用实体 (外键目标) 是否存在"""
        stmt = select(model.id).where(model.id == id).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None

    # --------------------------------------------------------------------------
    # 写入操作 (Create / Update / Delete)
    # --------------------------------------------------------------------------

    async def create(self, data: dict[str, Any]) -> ModelType:
        """
        创建新记录并 flush 以获取数据库生成的值。
        """
        db_obj = self.model(**data)

        self.session.add(db_obj)
        await self.session.flush()
        await self.session.refresh(db_obj)

        return db_obj

    async def update(self, db_obj: ModelType, data: dict[str, Any]) -> ModelType:
        """
        更新现有记录。
        会自动过滤 PROTECTED_FIELDS 中的字段。
        """
        safe_data = {k: v for k, v in data.items() if k not in self.PROTECTED_FIELDS}
        db_obj.update(**safe_data)

        self.session.add(db_obj)
        await self.session.flush()
        await self.session.refresh(db_obj)

        return db_obj

    async def delete(self, db_obj: ModelType) -> None:
        """物理删除记录 (无软删除)"""
        await self.session.delete(db_obj)
        await self.session.flush()

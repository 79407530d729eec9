"""
File: course_admin/db/session.py
Description: 数据库句柄 (Async SQLAlchemy)

本模块提供显式构造、显式传递的 Database 对象，而不是模块级全局引擎：
1. __init__: 只保存连接参数，不建立任何连接
2. open(): 创建 AsyncEngine 与 AsyncSession 工厂 (应用启动 / 测试初始化时调用)
3. session(): 获取一个新的 AsyncSession (由请求依赖使用)
4. close(): 释放连接池 (应用关闭时调用)

JSON 字段序列化使用 orjson。
"""

from typing import Any

import orjson
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from course_admin.core.config import Settings
from course_admin.core.logging import logger
from course_admin.db.models import Base


def _orjson_serializer(obj: Any) -> str:
    """orjson 返回 bytes，SQLAlchemy 需要 str"""
    return orjson.dumps(obj).decode("utf-8")


def _orjson_deserializer(obj: str | bytes) -> Any:
    return orjson.loads(obj)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite 默认不检查外键，ON DELETE RESTRICT 依赖此开关
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    存储后端句柄。连接池是请求之间唯一共享的可变资源。

    用法:
        db = Database.from_settings(settings)
        db.open()
        async with db.session() as session:
            ...
        await db.close()
    """

    def __init__(self, url: str, **engine_options: Any):
        self.url = url
        self.engine_options = engine_options
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        options: dict[str, Any] = {"echo": settings.is_debug}
        # SQLite (开发/测试) 不支持 QueuePool 参数
        if not settings.is_sqlite:
            options.update(
                pool_pre_ping=settings.DB_POOL_PRE_PING,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_timeout=settings.DB_POOL_TIMEOUT,
                pool_recycle=settings.DB_POOL_RECYCLE,
            )
        return cls(str(settings.SQLALCHEMY_DATABASE_URI), **options)

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not open; call open() first.")
        return self._engine

    def open(self) -> None:
        """创建引擎与会话工厂。重复调用无副作用。"""
        if self._engine is not None:
            return

        self._engine = create_async_engine(
            self.url,
            json_serializer=_orjson_serializer,
            json_deserializer=_orjson_deserializer,
            **self.engine_options,
        )
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        # expire_on_commit=False 是 AsyncSession 的强制要求
        # 避免在 commit 后访问属性时触发隐式 IO
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.bind(dialect=self._engine.dialect.name).info("Database engine opened")

    def session(self) -> AsyncSession:
        if self._session_factory is None:
            raise RuntimeError("Database is not open; call open() first.")
        return self._session_factory()

    async def create_all(self) -> None:
        """按 ORM 元数据建表 (测试与本地开发用；生产环境走 Alembic 迁移)"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        """释放连接池资源。重复调用无副作用。"""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine closed")

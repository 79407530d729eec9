"""
File: tests/conftest.py
Description: Pytest 全局 Fixtures 配置 (Async + SQLite 内存库)

1. 在导入应用代码之前把 DSN 指向 sqlite+aiosqlite 内存库
2. 每个测试独立构造 Database 句柄并建表，结束后删表释放 (测试之间零共享)
3. client 通过 create_app(database) 注入同一个句柄，无需 dependency_overrides
"""

import asyncio
import os
import sys
from collections.abc import AsyncGenerator

# ------------------------------------------------------------------------------
# Windows 平台特定修复 (必须在任何 async 操作之前)
# ------------------------------------------------------------------------------
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# ------------------------------------------------------------------------------
# 1. 环境配置覆写 (必须先于 course_admin 的任何导入)
# ------------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["SQLALCHEMY_DATABASE_URI"] = TEST_DATABASE_URL

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from course_admin.db.session import Database  # noqa: E402
from course_admin.main import create_app  # noqa: E402

# ------------------------------------------------------------------------------
# 2. 全局 Fixtures
# ------------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="function")
async def database() -> AsyncGenerator[Database, None]:
    """
    测试专用存储句柄。
    StaticPool 保证内存库在整个测试期间只有一个连接 (否则每个连接都是一个新的空库)。
    """
    db = Database(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    db.open()
    await db.create_all()

    yield db

    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture(scope="function")
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """
    获取异步 HTTP 客户端。
    ASGITransport 不触发 lifespan，句柄已由 database fixture 打开。
    """
    app = create_app(database)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

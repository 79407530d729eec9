"""
File: alembic/env.py
Description: Alembic 迁移环境配置 - 同步版本

策略：
- 迁移 (Migration): 使用 psycopg (Sync) -> 稳定，无 EventLoop 问题
- 运行 (Runtime): 使用 asyncpg (Async) -> 高性能

迁移连接串由运行时 DSN 推导：postgresql+asyncpg -> postgresql+psycopg，
sqlite+aiosqlite -> sqlite (本地开发)。
"""

import sys
from logging.config import fileConfig
from pathlib import Path

from sqlalchemy import create_engine, pool

from alembic import context  # type: ignore

# ------------------------------------------------------------------------------
# 0. 将项目根目录加入 sys.path (未 pip install 时也能直接运行 alembic)
# ------------------------------------------------------------------------------
sys.path.insert(0, str(Path(__file__).parent.parent.resolve()))

# ------------------------------------------------------------------------------
# 1. 导入项目配置与模型
# ------------------------------------------------------------------------------
from course_admin.core.config import settings  # noqa: E402
from course_admin.db.models import Base  # noqa: E402

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# ------------------------------------------------------------------------------
# 2. 构建同步数据库 URL
# ------------------------------------------------------------------------------
SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg",
    "sqlite+aiosqlite": "sqlite",
}


def to_sync_url(async_url: str) -> str:
    scheme, sep, rest = async_url.partition("://")
    return f"{SYNC_DRIVERS.get(scheme, scheme)}{sep}{rest}"


sync_uri = to_sync_url(str(settings.SQLALCHEMY_DATABASE_URI))

# configparser 插值需要转义 %
config.set_main_option("sqlalchemy.url", sync_uri.replace("%", "%%"))

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """离线模式迁移：生成 SQL 脚本而不实际连接数据库"""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """在线模式迁移：连接数据库并执行迁移"""
    connectable = create_engine(
        config.get_main_option("sqlalchemy.url") or "",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
            # SQLite 不支持 ALTER 约束，使用批量模式重建表
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

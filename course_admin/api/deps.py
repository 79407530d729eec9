"""
File: course_admin/api/deps.py
Description: 全局依赖注入定义 (DB Session + 分页参数)

本模块负责：
1. 数据库会话管理 (get_db / DBSession)：从 app.state.db 取得 Database 句柄
2. 列表接口的分页参数解析 (get_page_params / PageQuery)
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from course_admin.core.pagination import PageParams
from course_admin.db.session import Database

# ------------------------------------------------------------------------------
# 1. Database Dependencies
# ------------------------------------------------------------------------------


def get_database(request: Request) -> Database:
    """应用工厂在 app.state 上挂载的存储句柄"""
    return request.app.state.db


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """
    获取异步数据库会话依赖。
    使用 async with 确保请求结束时自动关闭 session。
    """
    async with database.session() as session:
        yield session


# 数据库会话依赖类型别名
DBSession = Annotated[AsyncSession, Depends(get_db)]


# ------------------------------------------------------------------------------
# 2. Pagination Dependencies
# ------------------------------------------------------------------------------


async def get_page_params(
    current_page: Annotated[
        str | None, Query(alias="currentPage", description="当前页码，默认 1")
    ] = None,
    page_size: Annotated[
        str | None, Query(alias="pageSize", description="每页条数，默认 10")
    ] = None,
) -> PageParams:
    """
    分页参数按原始字符串接收，由 PageParams 统一规范化
    (负数取绝对值、小数截断、非法值回退默认值)，不会触发 422。
    """
    return PageParams.from_raw(current_page, page_size)


# 用法: async def endpoint(page: PageQuery): ...
PageQuery = Annotated[PageParams, Depends(get_page_params)]

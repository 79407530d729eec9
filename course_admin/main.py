"""
File: course_admin/main.py
Description: FastAPI 应用入口与工厂函数

本模块负责：
1. 创建 FastAPI 应用实例 (设置默认响应类为 ORJSONResponse)
2. 管理应用生命周期 (lifespan): 启动日志、打开 / 关闭数据库句柄
3. 组装全局组件：中间件、异常处理器、路由
4. 提供健康检查接口 (/health)
"""

import asyncio
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

# ------------------------------------------------------------------------------
# [Fix for Windows] 解决 Windows 下 asyncpg 连接重置/关闭的 Bug
# 必须在任何 asyncio 循环启动前执行 (放在顶部)
# ------------------------------------------------------------------------------
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from course_admin.api_router import api_router
from course_admin.core.config import settings
from course_admin.core.exceptions import register_exception_handlers
from course_admin.core.logging import setup_logging
from course_admin.core.middleware import register_middlewares
from course_admin.core.response import ResponseModel
from course_admin.db.session import Database


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    应用生命周期管理器。
    """
    # 1. 启动时：初始化日志系统，打开数据库句柄
    setup_logging()
    database: Database = app.state.db
    database.open()

    yield

    # 2. 关闭时：释放连接池
    await database.close()


def create_app(database: Database | None = None) -> FastAPI:
    """
    应用工厂函数。

    Args:
        database: 存储句柄。未传时按全局配置构造 (测试中传入基于 SQLite 的句柄)
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        # 强制默认响应类为 ORJSONResponse (高性能)
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    app.state.db = database or Database.from_settings(settings)

    # 1. 注册中间件 (CORS, RequestID, Logging)
    register_middlewares(app)

    # 2. 注册异常处理器
    register_exception_handlers(app)

    # 3. 挂载 API 路由
    app.include_router(api_router, prefix=settings.API_V1_STR)

    # 4. 挂载健康检查
    @app.get(
        "/health",
        tags=["health"],
        summary="健康检查",
        response_model=ResponseModel[dict[str, str]],
    )
    async def health_check():
        """
        健康检查接口。
        用于 K8s Liveness/Readiness Probe 或负载均衡器检查。
        返回统一响应信封。
        """
        return ResponseModel.success(data={"status": "ok"})

    return app


# 暴露给 Uvicorn 运行的应用实例
app = create_app()

if __name__ == "__main__":
    # 本地调试入口
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

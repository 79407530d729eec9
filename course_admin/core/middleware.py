"""
File: course_admin/core/middleware.py
Description: 中间件配置与实现

1. RequestLogMiddleware: 请求 ID + 访问日志
   - 上游已带 X-Request-ID 时沿用，否则生成 UUID v7
   - 通过 logger.contextualize 让本次请求内的所有日志自动携带 request_id
   - 响应头回写 X-Request-ID
2. register_middlewares: 统一注册 CORS 与 RequestLogMiddleware
"""

import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from uuid6 import uuid7

from course_admin.core.config import settings
from course_admin.core.logging import logger

REQUEST_ID_HEADER = "X-Request-ID"

# 不记录访问日志的路径 (探针等高频请求)
SKIP_LOG_PATHS: frozenset[str] = frozenset({"/health", "/favicon.ico"})

# 上游传入的请求 ID 超过该长度时丢弃，重新生成
MAX_REQUEST_ID_LENGTH = 64


def resolve_request_id(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH:
        return incoming
    return str(uuid7())


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    全局请求日志中间件
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = resolve_request_id(request)
        # 异常处理器从 request.state 读取
        request.state.request_id = request_id

        with logger.contextualize(request_id=request_id):
            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.bind(
                    method=request.method,
                    path=request.url.path,
                    duration_ms=_elapsed_ms(started),
                ).opt(exception=exc).error("Request failed with unhandled exception")
                raise

            response.headers[REQUEST_ID_HEADER] = request_id

            if request.url.path not in SKIP_LOG_PATHS:
                log = logger.bind(
                    method=request.method,
                    path=request.url.path,
                    query=str(request.url.query),
                    status_code=response.status_code,
                    duration_ms=_elapsed_ms(started),
                    client_ip=request.client.host if request.client else "unknown",
                )
                if response.status_code >= 500:
                    log.warning("Request finished with server error")
                else:
                    log.info("Request finished")

            return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def register_middlewares(app: FastAPI) -> None:
    """
    统一注册所有中间件。
    后注册的中间件先处理请求 (洋葱模型)。
    """
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=[REQUEST_ID_HEADER],
        )

    app.add_middleware(RequestLogMiddleware)

"""
File: course_admin/core/exceptions.py
Description: 业务异常类与全局异常处理器

本模块负责：
1. 定义错误分类 (Taxonomy)：所有核心操作只会以下列四种异常之一失败
   - ValidationFailedException: 字段校验失败，携带完整的有序错误列表
   - NotFoundException: 按 ID 查询的资源不存在
   - ConflictException: 前置条件不满足 (如分类下仍有课程) 或写入冲突
   - UnexpectedException: 存储 / 基础设施层的未预期故障
2. 全局异常处理器将异常渲染为统一响应信封 + 语义化 HTTP 状态码
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from course_admin.core.error_code import BaseErrorCode, SystemErrorCode
from course_admin.core.logging import logger
from course_admin.core.response import ResponseModel

# ------------------------------------------------------------------------------
# 1. 业务异常类
# ------------------------------------------------------------------------------


class AppException(Exception):
    """
    应用基础异常类。

    用法示例:
        raise AppException(AuthError.INVALID_CREDENTIALS)
        raise AppException(SystemErrorCode.CONFLICT, errors=["该分类下有课程，不能删除。"])
    """

    def __init__(
        self,
        error: BaseErrorCode,
        message: str = "",
        errors: list[str] | None = None,
    ):
        # 自动从枚举中解构: (HTTP状态, 业务码, 默认文案)
        self.http_status = error.http_status
        self.code = error.code
        self.message = message or error.msg
        self.errors: list[str] = list(errors or [])
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.errors:
            return f"{self.message}: {'; '.join(self.errors)}"
        return self.message


class ValidationFailedException(AppException):
    """字段校验失败。errors 保持字段声明顺序，一次返回全部错误。"""

    def __init__(self, errors: list[str]):
        super().__init__(SystemErrorCode.VALIDATION_FAILED, errors=errors)


class NotFoundException(AppException):
    """
    按 ID 查询的资源不存在。

    Args:
        entity: 实体中文名 (如 "分类")
        identifier: 请求的资源 ID
    """

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(
            SystemErrorCode.NOT_FOUND, errors=[f"ID: {identifier}的{entity}未找到。"]
        )


class ConflictException(AppException):
    def __init__(self, message: str):
        super().__init__(SystemErrorCode.CONFLICT, errors=[message])


class UnexpectedException(AppException):
    """存储/基础设施故障。对外只暴露通用文案，原始异常通过 __cause__ 保留用于日志。"""

    def __init__(self, message: str = "服务器内部错误，请稍后重试。"):
        super().__init__(SystemErrorCode.INTERNAL_ERROR, errors=[message])


# ------------------------------------------------------------------------------
# 2. 辅助函数
# ------------------------------------------------------------------------------


def _get_request_id(request: Request) -> str:
    """尝试从 request.state 获取 request_id，如果不存在则返回 'unknown'"""
    return str(getattr(request.state, "request_id", "unknown"))


def _render(status_code: int, message: str, errors: list[str]) -> ORJSONResponse:
    response_model = ResponseModel.fail(message=message, errors=errors)
    return ORJSONResponse(status_code=status_code, content=response_model.model_dump())


# ------------------------------------------------------------------------------
# 3. 全局异常处理器 (Handlers)
# ------------------------------------------------------------------------------


async def app_exception_handler(request: Request, exc: AppException) -> ORJSONResponse:
    """
    处理自定义业务异常 (AppException 及其子类)
    """
    log = logger.bind(
        request_id=_get_request_id(request),
        code=exc.code,
        http_status=exc.http_status,
        errors=exc.errors,
    )

    if exc.http_status >= 500:
        # 存储故障需要完整堆栈 (原始异常挂在 __cause__ 上)
        log.opt(exception=exc.__cause__ or exc).error("Unexpected failure occurred")
    else:
        log.warning("Business exception occurred")

    return _render(exc.http_status, exc.message, exc.errors)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> ORJSONResponse:
    """
    处理 FastAPI 请求解析异常 (默认 422)。
    映射为 ValidationFailed (HTTP 400)，每个错误一条文案。
    """
    messages: list[str] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field_name = ".".join(loc) or "body"
        messages.append(f"{field_name}: {error.get('msg', 'Invalid parameter')}")

    logger.bind(
        request_id=_get_request_id(request),
        errors=messages,
    ).warning("Request validation failed")

    error = SystemErrorCode.VALIDATION_FAILED
    return _render(error.http_status, error.msg, messages)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> ORJSONResponse:
    """
    处理框架层面的 HTTP 异常 (如 404 路由不存在, 405 Method Not Allowed)
    """
    logger.bind(
        request_id=_get_request_id(request),
        status_code=exc.status_code,
        detail=str(exc.detail),
    ).warning("Framework HTTP exception occurred")

    message = SystemErrorCode.NOT_FOUND.msg if exc.status_code == 404 else str(exc.detail)
    return _render(exc.status_code, message, [str(exc.detail)])


async def general_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    处理所有未捕获的异常 (500)，屏蔽内部细节。
    """
    logger.opt(exception=exc).bind(request_id=_get_request_id(request)).error(
        "Unhandled system exception occurred"
    )

    fallback = UnexpectedException()
    return _render(fallback.http_status, fallback.message, fallback.errors)


# ------------------------------------------------------------------------------
# 4. 异常处理器注册函数
# ------------------------------------------------------------------------------


def register_exception_handlers(app: FastAPI) -> None:
    """
    统一注册所有异常处理器。
    """
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore
    app.add_exception_handler(Exception, general_exception_handler)

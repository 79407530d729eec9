"""
File: course_admin/core/error_code.py
Description: 全局错误码基类与系统级错误定义

错误码定义结构 Tuple(http_status, code, message):
1. http_status: HTTP 响应状态码 (4xx/5xx)
2. code: 字符串业务码 (格式: domain.reason)，用于日志检索
3. message: 写入响应信封 message 字段的默认文案

系统只对外暴露四类错误 (Taxonomy)：
- VALIDATION_FAILED: 参数校验失败 (400)，errors 中携带全部字段错误
- NOT_FOUND: 资源不存在 (404)
- CONFLICT: 前置条件不满足 / 数据冲突 (400)
- INTERNAL_ERROR: 未预期的存储或基础设施故障 (500)
"""

from enum import Enum

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class BaseErrorCode(Enum):
    """
    错误码枚举基类
    所有业务领域的错误码 Enum 必须继承此类。

    Value Tuple Definition:
    (http_status, code, msg)
    """

    @property
    def http_status(self) -> int:
        """获取映射的 HTTP 状态码"""
        return self.value[0]

    @property
    def code(self) -> str:
        """获取业务错误标识 (domain.reason)"""
        return self.value[1]

    @property
    def msg(self) -> str:
        """获取默认错误描述信息"""
        return self.value[2]


class SystemErrorCode(BaseErrorCode):
    """
    系统通用错误定义 (System Domain)
    """

    # HTTP 400
    VALIDATION_FAILED = (
        HTTP_400_BAD_REQUEST,
        "system.validation_failed",
        "请求参数错误",
    )
    CONFLICT = (HTTP_400_BAD_REQUEST, "system.conflict", "请求参数错误")

    # HTTP 404
    NOT_FOUND = (HTTP_404_NOT_FOUND, "system.not_found", "资源不存在")

    # HTTP 500: 服务端故障 (需要监控报警)
    INTERNAL_ERROR = (
        HTTP_500_INTERNAL_SERVER_ERROR,
        "system.internal_error",
        "服务器错误",
    )

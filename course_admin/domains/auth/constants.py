"""
File: course_admin/domains/auth/constants.py
Description: 认证领域常量定义 (错误码 + 成功提示)
Namespace: auth.*

1. Error 定义: 继承 BaseErrorCode，包含 (HTTP状态, 业务码, 默认文案)
2. Msg 定义: 纯字符串常量，用于 Router 返回成功响应
"""

from starlette.status import HTTP_401_UNAUTHORIZED

from course_admin.core.error_code import BaseErrorCode

# ==============================================================================
# 1. 错误码定义 (Error Codes)
# 用于 Service 层抛出异常: raise AppException(AuthError.INVALID_CREDENTIALS, ...)
# ==============================================================================


class AuthError(BaseErrorCode):
    """
    认证领域错误定义
    Tuple Structure: (HTTP_Status, Code_String, Default_Message)
    """

    # 用户不存在与密码错误使用同一个错误，防止枚举邮箱
    INVALID_CREDENTIALS = (
        HTTP_401_UNAUTHORIZED,
        "auth.invalid_credentials",
        "登录失败",
    )


# 登录失败时 errors 中的唯一文案
INVALID_CREDENTIALS_DETAIL = "邮箱或密码错误"


# ==============================================================================
# 2. 成功提示语 (Success Messages)
# ==============================================================================


class AuthMsg:
    """
    认证领域成功提示文案
    """

    LOGIN_SUCCESS = "登录成功"

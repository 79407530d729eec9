"""
File: course_admin/utils/masking.py
Description: 日志脱敏工具 (Data Masking)

写日志前对请求体 / 字段字典脱敏，保证日志中绝不出现明文密码或其哈希。
1. mask_email: 邮箱部分掩盖
2. mask_sensitive_data: 递归遍历 dict / list，掩盖敏感 Key 对应的值
"""

from typing import Any

# 敏感字段黑名单 (大小写不敏感)
SENSITIVE_KEYS = {
    "password",
    "passwd",
    "new_password",
    "old_password",
    "secret",
    "token",
}


def mask_email(email: str | None) -> str:
    """
    邮箱脱敏。
    示例: admin@clwy.cn -> a***@clwy.cn
    """
    if not email or "@" not in email:
        return "******"

    user_part, domain_part = email.split("@", 1)
    masked_user = "*" * 4 if len(user_part) <= 1 else f"{user_part[0]}***"
    return f"{masked_user}@{domain_part}"


def mask_secret(value: Any) -> str:
    """密码等机密信息完全掩盖"""
    if value is None:
        return ""
    return "******"


def mask_sensitive_data(data: Any) -> Any:
    """
    递归脱敏，返回副本，不修改原数据。
    """
    if isinstance(data, dict):
        return {
            k: mask_secret(v)
            if isinstance(k, str) and k.lower() in SENSITIVE_KEYS
            else mask_sensitive_data(v)
            for k, v in data.items()
        }

    if isinstance(data, list | tuple):
        return [mask_sensitive_data(item) for item in data]

    return data

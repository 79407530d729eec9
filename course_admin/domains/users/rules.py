"""
File: course_admin/domains/users/rules.py
Description: 用户字段规则表

注意：
password 的长度规则针对明文 (6 ~ 45)。已是哈希格式的值 (如从旧系统导入)
跳过明文长度规则 (仍受列宽 255 限制)，写入前也不会被再次哈希。
其余 String(255) 列同样声明长度上限，超长输入在校验阶段即被拒绝。
"""

from course_admin.core.security import is_password_hashed
from course_admin.core.validation import (
    EntityRules,
    is_email,
    is_url,
    length,
    non_empty,
    one_of,
    required,
    rules,
    unique,
)
from course_admin.domains.users.constants import (
    ROLE_CHOICES,
    ROLE_STANDARD,
    SEX_CHOICES,
    SEX_UNSPECIFIED,
)

USER_RULES = EntityRules(
    {
        "email": rules(
            required("邮箱必须填写。"),
            non_empty("邮箱不能为空。"),
            is_email("邮箱格式不正确。"),
            unique("邮箱已存在，请直接登录。"),
        ),
        "username": rules(
            required("用户名必须填写。"),
            non_empty("用户名不能为空。"),
            length(2, 45, "用户名长度必须是2 ~ 45之间。"),
            unique("用户名已经存在。"),
        ),
        "password": rules(
            required("密码必须填写。"),
            non_empty("密码不能为空。"),
            length(6, 45, "密码长度必须是6 ~ 45之间。").unless(is_password_hashed),
            length(1, 255, "密码长度不能超过255个字符。"),
        ),
        "nickname": rules(
            required("昵称必须填写。"),
            non_empty("昵称不能为空。"),
            length(2, 45, "昵称长度必须是2 ~ 45之间。"),
        ),
        "sex": rules(
            required("性别必须填写。"),
            one_of(SEX_CHOICES, "性别的值必须是，男性：0 女性：1 未选择：2。"),
            default=SEX_UNSPECIFIED,
        ),
        "company": rules(length(0, 255, "公司名称长度不能超过255个字符。")),
        "introduce": rules(),
        "role": rules(
            required("用户组必须选择。"),
            one_of(ROLE_CHOICES, "用户组的值必须是，普通用户：0 管理员：100。"),
            default=ROLE_STANDARD,
        ),
        "avatar": rules(
            length(0, 255, "头像地址长度不能超过255个字符。"),
            is_url("图片地址不正确。"),
        ),
    }
)

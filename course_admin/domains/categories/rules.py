"""
File: course_admin/domains/categories/rules.py
Description: 分类字段规则表

name 全局唯一；rank 为正整数排序键，未传时默认为 1。
"""

from course_admin.core.validation import (
    EntityRules,
    is_integer,
    is_positive,
    length,
    non_empty,
    required,
    rules,
    unique,
)

CATEGORY_RULES = EntityRules(
    {
        "name": rules(
            required("名称必须填写。"),
            non_empty("名称不能为空。"),
            length(2, 45, "长度必须是2 ~ 45之间。"),
            unique("名称已存在，请选择其他名称。"),
        ),
        "rank": rules(
            required("排序必须填写。"),
            is_integer("排序必须为整数。"),
            is_positive("排序必须是正整数。"),
            default=1,
        ),
    }
)

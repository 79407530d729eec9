"""
File: course_admin/domains/settings/rules.py
Description: 系统设置字段规则表

icp / copyright 为可选自由文本，只限制长度 (列宽 255)。
"""

from course_admin.core.validation import EntityRules, length, non_empty, required, rules

SETTING_RULES = EntityRules(
    {
        "name": rules(
            required("名称必须填写。"),
            non_empty("名称不能为空。"),
            length(1, 255, "名称长度不能超过255个字符。"),
        ),
        "icp": rules(length(0, 255, "ICP备案号长度不能超过255个字符。")),
        "copyright": rules(length(0, 255, "版权信息长度不能超过255个字符。")),
    }
)

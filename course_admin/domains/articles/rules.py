"""
File: course_admin/domains/articles/rules.py
Description: 文章字段规则表
"""

from course_admin.core.validation import EntityRules, length, non_empty, required, rules

ARTICLE_RULES = EntityRules(
    {
        "title": rules(
            required("标题必须存在。"),
            non_empty("标题不能为空。"),
            length(2, 45, "标题长度需要在2 ~ 45个字符之间。"),
        ),
        "content": rules(
            required("内容必须存在。"),
            non_empty("内容不能为空。"),
        ),
    }
)

"""
File: course_admin/domains/courses/rules.py
Description: 课程字段规则表

外键字段 (category_id / user_id) 在写入前确认被引用的分类 / 用户存在，
失败文案中带出请求的 ID。布尔与计数字段有默认值，显式传 null 视为缺失必填项。
"""

from course_admin.core.validation import (
    EntityRules,
    exists,
    is_boolean,
    is_integer,
    is_non_negative,
    is_url,
    length,
    non_empty,
    required,
    rules,
)
from course_admin.db.models.category import Category
from course_admin.db.models.user import User

COURSE_RULES = EntityRules(
    {
        "category_id": rules(
            required("分类ID必须填写。"),
            non_empty("分类ID不能为空。"),
            exists(Category, "ID为：{value} 的分类不存在。"),
        ),
        "user_id": rules(
            required("用户ID必须填写。"),
            non_empty("用户ID不能为空。"),
            exists(User, "ID为：{value} 的用户不存在。"),
        ),
        "name": rules(
            required("名称必须填写。"),
            non_empty("名称不能为空。"),
            length(2, 45, "名称长度必须是2 ~ 45之间。"),
        ),
        "image": rules(
            length(0, 255, "图片地址长度不能超过255个字符。"),
            is_url("图片地址不正确。"),
        ),
        "recommended": rules(
            required("是否推荐必须填写。"),
            is_boolean("是否推荐的值必须是，推荐:true 不推荐:false。"),
            default=False,
        ),
        "introductory": rules(
            required("是否入门课程必须填写。"),
            is_boolean("是否入门课程的值必须是，推荐:true 不推荐:false。"),
            default=False,
        ),
        "content": rules(),
        "likes_count": rules(
            required("点赞数必须填写。"),
            is_integer("点赞数必须为整数。"),
            is_non_negative("点赞数不能为负数。"),
            default=0,
        ),
        "chapters_count": rules(
            required("章节数必须填写。"),
            is_integer("章节数必须为整数。"),
            is_non_negative("章节数不能为负数。"),
            default=0,
        ),
    }
)

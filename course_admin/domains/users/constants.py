"""
File: course_admin/domains/users/constants.py
Description: 用户领域常量定义 (枚举取值 + 成功提示)
"""

# ==============================================================================
# 1. 枚举取值
# ==============================================================================

# 性别: 0 男性 / 1 女性 / 2 未选择
SEX_CHOICES = (0, 1, 2)
SEX_UNSPECIFIED = 2

# 用户组: 0 普通用户 / 100 管理员
ROLE_CHOICES = (0, 100)
ROLE_STANDARD = 0


# ==============================================================================
# 2. 成功提示语 (Success Messages)
# ==============================================================================


class UserMsg:
    """
    用户领域成功提示文案
    """

    LIST_SUCCESS = "查询用户列表成功。"
    GET_SUCCESS = "查询用户成功。"
    CREATE_SUCCESS = "创建用户成功。"
    UPDATE_SUCCESS = "更新用户成功。"
    DELETE_SUCCESS = "删除用户成功。"

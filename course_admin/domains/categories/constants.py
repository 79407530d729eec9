"""
File: course_admin/domains/categories/constants.py
Description: 分类领域常量定义 (冲突提示 + 成功提示)
"""

# ==============================================================================
# 1. 冲突提示 (Conflict Messages)
# 用于 Service 层抛出异常: raise ConflictException(CategoryConflict.HAS_COURSES)
# ==============================================================================


class CategoryConflict:
    HAS_COURSES = "该分类下有课程，不能删除。"


# ==============================================================================
# 2. 成功提示语 (Success Messages)
# 用于 Router 层返回响应: return ResponseModel.success(message=CategoryMsg.CREATE_SUCCESS)
# ==============================================================================


class CategoryMsg:
    """
    分类领域成功提示文案
    """

    LIST_SUCCESS = "查询分类列表成功。"
    GET_SUCCESS = "查询分类成功。"
    CREATE_SUCCESS = "创建分类成功。"
    UPDATE_SUCCESS = "更新分类成功。"
    DELETE_SUCCESS = "删除分类成功。"

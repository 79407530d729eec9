"""
File: course_admin/domains/articles/constants.py
Description: 文章领域成功提示文案
"""


class ArticleMsg:
    LIST_SUCCESS = "查询文章列表成功。"
    GET_SUCCESS = "查询文章成功。"
    CREATE_SUCCESS = "创建文章成功。"
    UPDATE_SUCCESS = "更新文章成功。"
    DELETE_SUCCESS = "删除文章成功。"

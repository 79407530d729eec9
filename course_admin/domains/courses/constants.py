"""
File: course_admin/domains/courses/constants.py
Description: 课程领域成功提示文案
"""


class CourseMsg:
    LIST_SUCCESS = "查询课程列表成功。"
    GET_SUCCESS = "查询课程成功。"
    CREATE_SUCCESS = "创建课程成功。"
    UPDATE_SUCCESS = "更新课程成功。"
    DELETE_SUCCESS = "删除课程成功。"

"""
File: course_admin/domains/settings/constants.py
Description: 系统设置领域成功提示文案
"""


class SettingMsg:
    LIST_SUCCESS = "查询设置列表成功。"
    GET_SUCCESS = "查询设置成功。"
    CREATE_SUCCESS = "创建设置成功。"
    UPDATE_SUCCESS = "更新设置成功。"
    DELETE_SUCCESS = "删除设置成功。"

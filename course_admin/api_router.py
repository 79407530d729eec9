"""
File: course_admin/api_router.py
Description: 根 API 路由聚合层

本模块负责：
1. 聚合所有业务领域的 Router (auth, users, articles, categories, courses, settings)
2. 统一设置路由前缀 (后台管理资源位于 /admin 下)
3. 统一设置标签 (Tags) 用于 OpenAPI 文档分组
"""

from fastapi import APIRouter

from course_admin.domains.articles.router import router as articles_router
from course_admin.domains.auth.router import router as auth_router
from course_admin.domains.categories.router import router as categories_router
from course_admin.domains.courses.router import router as courses_router
from course_admin.domains.settings.router import router as settings_router
from course_admin.domains.users.router import router as users_router

# 创建根 API 路由
api_router = APIRouter()

# ------------------------------------------------------------------------------
# 注册领域路由
# ------------------------------------------------------------------------------

# 1. 认证模块 (POST /users/login)，需先于 /users/{id} 注册
api_router.include_router(auth_router, prefix="/users", tags=["auth"])

# 2. 用户模块
api_router.include_router(users_router, prefix="/users", tags=["users"])

# 3. 后台内容管理
api_router.include_router(articles_router, prefix="/admin/articles", tags=["文章"])
api_router.include_router(
    categories_router, prefix="/admin/categories", tags=["分类"]
)
api_router.include_router(courses_router, prefix="/admin/courses", tags=["课程"])
api_router.include_router(settings_router, prefix="/admin/settings", tags=["系统设置"])

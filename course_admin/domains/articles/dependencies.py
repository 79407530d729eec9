"""
File: course_admin/domains/articles/dependencies.py
Description: 文章领域依赖注入 (DI)

文章没有专用查询，直接使用通用 BaseRepository。
"""

from typing import Annotated

from fastapi import Depends

from course_admin.api.deps import DBSession
from course_admin.db.models.article import Article
from course_admin.db.repositories.base import BaseRepository
from course_admin.domains.articles.service import ArticleService


async def get_article_service(session: DBSession) -> ArticleService:
    return ArticleService(repo=BaseRepository(model=Article, session=session))


ArticleServiceDep = Annotated[ArticleService, Depends(get_article_service)]

"""
File: course_admin/domains/articles/service.py
Description: 文章领域服务

无额外业务规则，直接复用通用 CRUD 流程；列表支持 title 模糊搜索，最新在前。
"""

from course_admin.core.pagination import Contains, QueryBuilder
from course_admin.db.models.article import Article
from course_admin.domains.articles.rules import ARTICLE_RULES
from course_admin.domains.crud_service import CRUDService


class ArticleService(CRUDService[Article]):
    entity_name = "article"
    entity_label = "文章"
    rules = ARTICLE_RULES
    query = QueryBuilder(
        filters=(Contains("title", Article.title),),
        order_by=(Article.id.desc(),),
    )

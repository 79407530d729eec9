"""
File: course_admin/domains/articles/router.py
Description: 文章领域 HTTP 路由层 (后台管理)

挂载前缀: /admin/articles
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from course_admin.api.deps import PageQuery
from course_admin.core.response import EmptyData, ItemData, ListData, ResponseModel
from course_admin.domains.articles.constants import ArticleMsg
from course_admin.domains.articles.dependencies import ArticleServiceDep
from course_admin.domains.articles.schemas import (
    ArticleCreate,
    ArticleRead,
    ArticleUpdate,
)

router = APIRouter()


@router.get(
    "",
    response_model=ResponseModel[ListData[ArticleRead]],
    summary="查询文章列表",
)
async def list_articles(
    page: PageQuery,
    service: ArticleServiceDep,
    title: Annotated[str | None, Query(description="标题关键词")] = None,
) -> ResponseModel[ListData[ArticleRead]]:
    articles, total = await service.list(page, {"title": title})
    return ResponseModel.success(
        data=ListData.of(
            [ArticleRead.model_validate(a) for a in articles],
            total,
            page.current_page,
            page.page_size,
        ),
        message=ArticleMsg.LIST_SUCCESS,
    )


@router.get(
    "/{id}",
    response_model=ResponseModel[ItemData[ArticleRead]],
    summary="查询文章详情",
)
async def get_article(
    id: UUID, service: ArticleServiceDep
) -> ResponseModel[ItemData[ArticleRead]]:
    article = await service.get(id)
    return ResponseModel.success(
        data=ItemData(item=ArticleRead.model_validate(article)),
        message=ArticleMsg.GET_SUCCESS,
    )


@router.post(
    "",
    response_model=ResponseModel[ItemData[ArticleRead]],
    status_code=status.HTTP_201_CREATED,
    summary="创建文章",
)
async def create_article(
    article_in: ArticleCreate, service: ArticleServiceDep
) -> ResponseModel[ItemData[ArticleRead]]:
    article = await service.create(article_in)
    return ResponseModel.success(
        data=ItemData(item=ArticleRead.model_validate(article)),
        message=ArticleMsg.CREATE_SUCCESS,
    )


@router.put(
    "/{id}",
    response_model=ResponseModel[ItemData[ArticleRead]],
    summary="更新文章",
)
async def update_article(
    id: UUID, article_in: ArticleUpdate, service: ArticleServiceDep
) -> ResponseModel[ItemData[ArticleRead]]:
    article = await service.update(id, article_in)
    return ResponseModel.success(
        data=ItemData(item=ArticleRead.model_validate(article)),
        message=ArticleMsg.UPDATE_SUCCESS,
    )


@router.delete(
    "/{id}",
    response_model=ResponseModel[EmptyData],
    summary="删除文章",
)
async def delete_article(id: UUID, service: ArticleServiceDep) -> ResponseModel[EmptyData]:
    await service.delete(id)
    return ResponseModel.success(data=EmptyData(), message=ArticleMsg.DELETE_SUCCESS)

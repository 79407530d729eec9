"""
File: tests/integration/test_content_router.py
Description: 文章与系统设置接口集成测试
"""

import pytest
from httpx import AsyncClient

from course_admin.core.config import settings

ARTICLES_URL = f"{settings.API_V1_STR}/admin/articles"
SETTINGS_URL = f"{settings.API_V1_STR}/admin/settings"


@pytest.mark.asyncio
async def test_article_pagination_over_25_rows(client: AsyncClient) -> None:
    for i in range(1, 26):
        response = await client.post(
            ARTICLES_URL, json={"title": f"文章 {i:02d}", "content": "内容"}
        )
        assert response.status_code == 201

    response = await client.get(ARTICLES_URL, params={"currentPage": 2, "pageSize": 10})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "查询文章列表成功。"
    assert body["data"]["pagination"] == {"total": 25, "currentPage": 2, "pageSize": 10}
    assert [a["title"] for a in body["data"]["items"]] == [
        f"文章 {i:02d}" for i in range(15, 5, -1)
    ]


@pytest.mark.asyncio
async def test_article_validation_messages(client: AsyncClient) -> None:
    response = await client.post(ARTICLES_URL, json={"title": "  ", "content": ""})

    assert response.status_code == 400
    assert response.json()["errors"] == ["标题不能为空。", "内容不能为空。"]


@pytest.mark.asyncio
async def test_setting_crud(client: AsyncClient) -> None:
    created = await client.post(
        SETTINGS_URL,
        json={"name": "长乐未央", "icp": "鄂ICP备13016268号-11", "copyright": "© 2013"},
    )
    assert created.status_code == 201
    setting_id = created.json()["data"]["item"]["id"]

    updated = await client.put(f"{SETTINGS_URL}/{setting_id}", json={"icp": None})
    assert updated.status_code == 200
    assert updated.json()["data"]["item"]["icp"] is None
    assert updated.json()["data"]["item"]["name"] == "长乐未央"

    missing_name = await client.put(f"{SETTINGS_URL}/{setting_id}", json={"name": ""})
    assert missing_name.status_code == 400
    assert missing_name.json()["errors"] == ["名称不能为空。"]

    deleted = await client.delete(f"{SETTINGS_URL}/{setting_id}")
    assert deleted.json()["message"] == "删除设置成功。"

"""
File: tests/integration/test_category_router.py
Description: 分类接口集成测试

验证：
1. 路由挂载与 URL 路径 (/api/v1/admin/categories)
2. 统一响应信封结构 (status / message / data / errors)
3. 完整的 CRUD 流程与唯一性、删除保护
"""

import uuid

import pytest
from httpx import AsyncClient

from course_admin.core.config import settings

CATEGORIES_URL = f"{settings.API_V1_STR}/admin/categories"


@pytest.mark.asyncio
async def test_create_duplicate_and_search(client: AsyncClient) -> None:
    """
    创建 -> 重复创建 -> 模糊搜索
    """
    response = await client.post(CATEGORIES_URL, json={"name": "Web", "rank": 1})

    assert response.status_code == 201
    body = response.json()
    assert body["status"] is True
    assert body["message"] == "创建分类成功。"
    assert body["data"]["item"]["name"] == "Web"
    assert body["data"]["item"]["rank"] == 1
    assert "createdAt" in body["data"]["item"]
    assert "errors" not in body

    duplicate = await client.post(CATEGORIES_URL, json={"name": "Web", "rank": 1})

    assert duplicate.status_code == 400
    assert duplicate.json() == {
        "status": False,
        "message": "请求参数错误",
        "errors": ["名称已存在，请选择其他名称。"],
    }

    search = await client.get(CATEGORIES_URL, params={"name": "We"})

    assert search.status_code == 200
    data = search.json()["data"]
    assert data["pagination"] == {"total": 1, "currentPage": 1, "pageSize": 10}
    assert [c["name"] for c in data["items"]] == ["Web"]


@pytest.mark.asyncio
async def test_create_reports_all_field_errors(client: AsyncClient) -> None:
    response = await client.post(CATEGORIES_URL, json={"rank": 0, "unknown": 1})

    assert response.status_code == 400
    assert response.json()["errors"] == ["名称必须填写。", "排序必须是正整数。"]


@pytest.mark.asyncio
async def test_get_update_delete(client: AsyncClient) -> None:
    created = await client.post(CATEGORIES_URL, json={"name": "前端开发"})
    category_id = created.json()["data"]["item"]["id"]

    detail = await client.get(f"{CATEGORIES_URL}/{category_id}")
    assert detail.status_code == 200
    assert detail.json()["message"] == "查询分类成功。"
    assert detail.json()["data"]["item"]["rank"] == 1

    updated = await client.put(f"{CATEGORIES_URL}/{category_id}", json={"rank": "5"})
    assert updated.status_code == 200
    assert updated.json()["data"]["item"] == {
        **detail.json()["data"]["item"],
        "rank": 5,
        "updatedAt": updated.json()["data"]["item"]["updatedAt"],
    }

    deleted = await client.delete(f"{CATEGORIES_URL}/{category_id}")
    assert deleted.status_code == 200
    assert deleted.json() == {"status": True, "message": "删除分类成功。", "data": {}}

    missing = await client.get(f"{CATEGORIES_URL}/{category_id}")
    assert missing.status_code == 404
    assert missing.json() == {
        "status": False,
        "message": "资源不存在",
        "errors": [f"ID: {category_id}的分类未找到。"],
    }


@pytest.mark.asyncio
async def test_update_missing_category(client: AsyncClient) -> None:
    missing = uuid.uuid4()

    response = await client.put(f"{CATEGORIES_URL}/{missing}", json={"name": "Web"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_pagination_parameters_are_normalized(client: AsyncClient) -> None:
    for i in range(12):
        await client.post(CATEGORIES_URL, json={"name": f"分类{i:02d}", "rank": i + 1})

    response = await client.get(
        CATEGORIES_URL, params={"currentPage": "-2", "pageSize": "5.7"}
    )

    data = response.json()["data"]
    assert data["pagination"] == {"total": 12, "currentPage": 2, "pageSize": 5}
    assert [c["name"] for c in data["items"]] == [f"分类{i:02d}" for i in range(5, 10)]

    fallback = await client.get(CATEGORIES_URL, params={"currentPage": "abc", "pageSize": "0"})
    assert fallback.json()["data"]["pagination"]["currentPage"] == 1
    assert fallback.json()["data"]["pagination"]["pageSize"] == 10

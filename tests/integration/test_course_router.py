"""
File: tests/integration/test_course_router.py
Description: 课程接口集成测试 (外键校验、关联数据、删除保护)
"""

import uuid
from typing import Any

import pytest
from httpx import AsyncClient

from course_admin.core.config import settings

API = settings.API_V1_STR


async def create_owner_and_category(client: AsyncClient) -> tuple[dict[str, Any], dict[str, Any]]:
    user = await client.post(
        f"{API}/users",
        json={
            "email": "lecturer@clwy.cn",
            "username": "lecturer",
            "password": "123123",
            "nickname": "讲师",
        },
    )
    category = await client.post(f"{API}/admin/categories", json={"name": "后端开发"})
    assert user.status_code == 201
    assert category.status_code == 201
    return user.json()["data"]["item"], category.json()["data"]["item"]


@pytest.mark.asyncio
async def test_create_course_with_relations(client: AsyncClient) -> None:
    user, category = await create_owner_and_category(client)

    response = await client.post(
        f"{API}/admin/courses",
        json={
            "categoryId": category["id"],
            "userId": user["id"],
            "name": "Node.js 项目实践",
            "image": "https://images.clwy.cn/node.png",
            "recommended": True,
            "chaptersCount": "12",
        },
    )

    assert response.status_code == 201
    course = response.json()["data"]["item"]
    assert course["name"] == "Node.js 项目实践"
    assert course["recommended"] is True
    assert course["introductory"] is False
    assert course["likesCount"] == 0
    assert course["chaptersCount"] == 12
    assert course["category"] == {"id": category["id"], "name": "后端开发"}
    assert course["user"] == {"id": user["id"], "username": "lecturer"}
    assert "categoryId" not in course


@pytest.mark.asyncio
async def test_create_course_with_unknown_references(client: AsyncClient) -> None:
    missing_category = uuid.uuid4()
    missing_user = uuid.uuid4()

    response = await client.post(
        f"{API}/admin/courses",
        json={
            "categoryId": str(missing_category),
            "userId": str(missing_user),
            "name": "C",
            "likesCount": -1,
        },
    )

    assert response.status_code == 400
    assert response.json()["errors"] == [
        f"ID为：{missing_category} 的分类不存在。",
        f"ID为：{missing_user} 的用户不存在。",
        "名称长度必须是2 ~ 45之间。",
        "点赞数不能为负数。",
    ]


@pytest.mark.asyncio
async def test_list_courses_with_filters(client: AsyncClient) -> None:
    user, category = await create_owner_and_category(client)
    for name, introductory in (("Python 入门", True), ("Python 进阶", False)):
        await client.post(
            f"{API}/admin/courses",
            json={
                "categoryId": category["id"],
                "userId": user["id"],
                "name": name,
                "introductory": introductory,
            },
        )

    response = await client.get(
        f"{API}/admin/courses", params={"name": "Python", "introductory": "1"}
    )

    data = response.json()["data"]
    assert response.json()["message"] == "查询课程列表成功。"
    assert data["pagination"]["total"] == 1
    assert data["items"][0]["name"] == "Python 入门"
    assert data["items"][0]["user"]["username"] == "lecturer"

    newest_first = await client.get(f"{API}/admin/courses", params={"userId": user["id"]})
    assert [c["name"] for c in newest_first.json()["data"]["items"]] == [
        "Python 进阶",
        "Python 入门",
    ]


@pytest.mark.asyncio
async def test_category_delete_blocked_by_course(client: AsyncClient) -> None:
    user, category = await create_owner_and_category(client)
    created = await client.post(
        f"{API}/admin/courses",
        json={"categoryId": category["id"], "userId": user["id"], "name": "Go 入门"},
    )
    course_id = created.json()["data"]["item"]["id"]

    blocked = await client.delete(f"{API}/admin/categories/{category['id']}")

    assert blocked.status_code == 400
    assert blocked.json() == {
        "status": False,
        "message": "请求参数错误",
        "errors": ["该分类下有课程，不能删除。"],
    }
    still_there = await client.get(f"{API}/admin/categories/{category['id']}")
    assert still_there.status_code == 200

    assert (await client.delete(f"{API}/admin/courses/{course_id}")).status_code == 200
    assert (await client.delete(f"{API}/admin/categories/{category['id']}")).status_code == 200


@pytest.mark.asyncio
async def test_update_course_partial(client: AsyncClient) -> None:
    user, category = await create_owner_and_category(client)
    created = await client.post(
        f"{API}/admin/courses",
        json={"categoryId": category["id"], "userId": user["id"], "name": "Go 入门"},
    )
    course_id = created.json()["data"]["item"]["id"]

    response = await client.put(
        f"{API}/admin/courses/{course_id}", json={"likesCount": 3, "image": "not a url"}
    )
    assert response.status_code == 400
    assert response.json()["errors"] == ["图片地址不正确。"]

    response = await client.put(f"{API}/admin/courses/{course_id}", json={"likesCount": 3})
    assert response.status_code == 200
    item = response.json()["data"]["item"]
    assert item["likesCount"] == 3
    assert item["name"] == "Go 入门"
    assert item["category"]["name"] == "后端开发"

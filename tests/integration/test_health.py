"""
File: tests/integration/test_health.py
Description: 健康检查与框架级错误的集成测试
"""

import pytest
from httpx import AsyncClient

from course_admin.core.config import settings


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """
    测试：GET /health
    验证：
    1. 状态码 200
    2. 返回统一响应信封，data 为 {"status": "ok"}，没有 errors
    3. 中间件仍然工作：响应头中存在 X-Request-ID
    """
    # /health 挂载在根路径，没有 /api/v1 前缀
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": True,
        "message": "Success",
        "data": {"status": "ok"},
    }

    request_id_header = response.headers.get("X-Request-ID")
    assert request_id_header


@pytest.mark.asyncio
async def test_request_id_is_propagated(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "trace-abc"})

    assert response.headers["X-Request-ID"] == "trace-abc"


@pytest.mark.asyncio
async def test_unknown_route_uses_envelope(client: AsyncClient) -> None:
    response = await client.get(f"{settings.API_V1_STR}/admin/nothing-here")

    assert response.status_code == 404
    body = response.json()
    assert body["status"] is False
    assert body["message"] == "资源不存在"
    assert "data" not in body


@pytest.mark.asyncio
async def test_malformed_path_id_is_validation_failure(client: AsyncClient) -> None:
    response = await client.get(f"{settings.API_V1_STR}/admin/categories/not-a-uuid")

    assert response.status_code == 400
    body = response.json()
    assert body["status"] is False
    assert body["message"] == "请求参数错误"
    assert len(body["errors"]) == 1
    assert body["errors"][0].startswith("id: ")

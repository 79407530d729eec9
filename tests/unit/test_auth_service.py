"""
File: tests/unit/test_auth_service.py
Description: 登录服务单元测试 (恒定开销校验)
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from course_admin.core.exceptions import AppException
from course_admin.core.security import get_password_hash
from course_admin.db.models.user import User
from course_admin.domains.auth import service as auth_service_module
from course_admin.domains.auth.constants import AuthError
from course_admin.domains.auth.schemas import LoginRequest
from course_admin.domains.auth.service import DUMMY_PASSWORD_HASH, AuthService
from course_admin.domains.users.repository import UserRepository


@pytest.fixture
def verify_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str]]:
    calls: list[tuple[str, str]] = []

    async def recording_verify(plain_password: str, hashed_password: str) -> bool:
        calls.append((plain_password, hashed_password))
        return False

    monkeypatch.setattr(auth_service_module, "verify_password_async", recording_verify)
    return calls


@pytest.mark.asyncio
async def test_unknown_email_still_verifies_once(
    db_session: AsyncSession, verify_calls: list[tuple[str, str]]
) -> None:
    service = AuthService(user_repo=UserRepository(model=User, session=db_session))

    with pytest.raises(AppException) as exc_info:
        await service.login(LoginRequest(email="nobody@clwy.cn", password="123123"))

    assert exc_info.value.code == AuthError.INVALID_CREDENTIALS.code
    assert exc_info.value.http_status == 401
    assert verify_calls == [("123123", DUMMY_PASSWORD_HASH)]


@pytest.mark.asyncio
async def test_known_email_verifies_against_stored_hash(
    db_session: AsyncSession, verify_calls: list[tuple[str, str]]
) -> None:
    stored = get_password_hash("123123")
    db_session.add(
        User(email="admin@clwy.cn", username="admin", password=stored, nickname="管理员")
    )
    await db_session.commit()
    service = AuthService(user_repo=UserRepository(model=User, session=db_session))

    with pytest.raises(AppException):
        await service.login(LoginRequest(email="admin@clwy.cn", password="wrong-password"))

    assert verify_calls == [("wrong-password", stored)]


def test_placeholder_hash_uses_current_work_factor() -> None:
    assert DUMMY_PASSWORD_HASH.startswith("$argon2id$")
    assert "m=65536,t=3,p=4" in DUMMY_PASSWORD_HASH

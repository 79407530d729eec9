"""
File: tests/unit/test_validation.py
Description: 字段校验引擎单元测试

使用内存假仓储代替数据库，只验证引擎语义：
白名单 / 默认值 / 错误聚合顺序 / 短路 / 部分更新 / 规范化 / 存储规则。
"""

import uuid
from typing import Any

import pytest

from course_admin.core.exceptions import ValidationFailedException
from course_admin.core.validation import (
    EntityRules,
    ValidationContext,
    is_boolean,
    is_integer,
    length,
    one_of,
    required,
    rules,
)
from course_admin.domains.categories.rules import CATEGORY_RULES
from course_admin.domains.courses.rules import COURSE_RULES
from course_admin.domains.settings.rules import SETTING_RULES
from course_admin.domains.users.rules import USER_RULES

# ------------------------------------------------------------------------------
# Fixtures
# ------------------------------------------------------------------------------


class FakeRepo:
    """按 (字段, 值) 记录已占用的唯一值，按 ID 记录可引用的记录"""

    def __init__(
        self,
        taken: set[tuple[str, Any]] | None = None,
        references: set[uuid.UUID] | None = None,
    ):
        self.taken = taken or set()
        self.references = references or set()
        self.unique_calls: list[tuple[str, Any, uuid.UUID | None]] = []

    async def exists_by(
        self, field: str, value: Any, *, exclude_id: uuid.UUID | None = None
    ) -> bool:
        self.unique_calls.append((field, value, exclude_id))
        return (field, value) in self.taken

    async def reference_exists(self, model: type[Any], id: uuid.UUID) -> bool:
        return id in self.references


def context_for(repo: FakeRepo, exclude_id: uuid.UUID | None = None) -> ValidationContext:
    return ValidationContext(repo=repo, exclude_id=exclude_id)  # type: ignore[arg-type]


# ------------------------------------------------------------------------------
# Whitelist & Defaults
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_unknown_fields_are_dropped() -> None:
    result = await CATEGORY_RULES.validate(
        {"name": "Web", "rank": 2, "id": "hack", "createdAt": "2020-01-01"},
        context=context_for(FakeRepo()),
    )

    assert result == {"name": "Web", "rank": 2}


@pytest.mark.asyncio
async def test_defaults_applied_on_create() -> None:
    result = await CATEGORY_RULES.validate({"name": "Web"}, context=context_for(FakeRepo()))

    assert result == {"name": "Web", "rank": 1}


@pytest.mark.asyncio
async def test_defaults_not_applied_on_partial_update() -> None:
    result = await CATEGORY_RULES.validate(
        {"name": "Web"}, context=context_for(FakeRepo()), partial=True
    )

    assert result == {"name": "Web"}


# ------------------------------------------------------------------------------
# Error Aggregation
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_errors_aggregated_in_declaration_order() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await USER_RULES.validate({}, context=context_for(FakeRepo()))

    assert exc_info.value.errors == [
        "邮箱必须填写。",
        "用户名必须填写。",
        "密码必须填写。",
        "昵称必须填写。",
    ]
    assert exc_info.value.http_status == 400


@pytest.mark.asyncio
async def test_first_failure_stops_field_and_skips_storage_checks() -> None:
    repo = FakeRepo()

    with pytest.raises(ValidationFailedException) as exc_info:
        await CATEGORY_RULES.validate({"name": "", "rank": 1}, context=context_for(repo))

    # 空字符串只报"不能为空"，长度与唯一性规则不再执行
    assert exc_info.value.errors == ["名称不能为空。"]
    assert repo.unique_calls == []


@pytest.mark.asyncio
async def test_multiple_fields_reported_together() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await CATEGORY_RULES.validate(
            {"name": "W", "rank": "abc"}, context=context_for(FakeRepo())
        )

    assert exc_info.value.errors == ["长度必须是2 ~ 45之间。", "排序必须为整数。"]


# ------------------------------------------------------------------------------
# Partial Update / Optional Fields / Normalization
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_partial_update_only_checks_present_fields() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await CATEGORY_RULES.validate(
            {"rank": "0"}, context=context_for(FakeRepo()), partial=True
        )

    assert exc_info.value.errors == ["排序必须是正整数。"]


@pytest.mark.asyncio
async def test_partial_update_rejects_explicit_null_for_required_field() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await CATEGORY_RULES.validate(
            {"name": None}, context=context_for(FakeRepo()), partial=True
        )

    assert exc_info.value.errors == ["名称必须填写。"]


@pytest.mark.asyncio
async def test_optional_none_skips_all_checks() -> None:
    result = await USER_RULES.validate(
        {"avatar": None, "company": None}, context=context_for(FakeRepo()), partial=True
    )

    assert result == {"avatar": None, "company": None}


@pytest.mark.asyncio
async def test_values_are_normalized() -> None:
    entity = EntityRules(
        {
            "count": rules(is_integer("整数")),
            "flag": rules(is_boolean("布尔")),
            "kind": rules(one_of((0, 100), "枚举")),
        }
    )

    result = await entity.validate(
        {"count": "5", "flag": "true", "kind": "100"}, context=context_for(FakeRepo())
    )

    assert result == {"count": 5, "flag": True, "kind": 100}


@pytest.mark.asyncio
async def test_boolean_rule_rejects_non_boolean() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await COURSE_RULES.validate(
            {"recommended": "yes"}, context=context_for(FakeRepo()), partial=True
        )

    assert exc_info.value.errors == ["是否推荐的值必须是，推荐:true 不推荐:false。"]


@pytest.mark.asyncio
async def test_enum_rule_rejects_unknown_value() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await USER_RULES.validate(
            {"sex": 3, "role": 1}, context=context_for(FakeRepo()), partial=True
        )

    assert exc_info.value.errors == [
        "性别的值必须是，男性：0 女性：1 未选择：2。",
        "用户组的值必须是，普通用户：0 管理员：100。",
    ]


@pytest.mark.asyncio
async def test_email_and_url_formats() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await USER_RULES.validate(
            {"email": "not-an-email", "avatar": "ftp//broken"},
            context=context_for(FakeRepo()),
            partial=True,
        )

    assert exc_info.value.errors == ["邮箱格式不正确。", "图片地址不正确。"]


# ------------------------------------------------------------------------------
# Column Width
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_user_text_fields_limited_to_column_width() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await USER_RULES.validate(
            {"company": "x" * 256, "avatar": "https://clwy.cn/" + "a" * 250},
            context=context_for(FakeRepo()),
            partial=True,
        )

    assert exc_info.value.errors == [
        "公司名称长度不能超过255个字符。",
        "头像地址长度不能超过255个字符。",
    ]


@pytest.mark.asyncio
async def test_course_image_limited_to_column_width() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await COURSE_RULES.validate(
            {"image": "https://images.clwy.cn/" + "a" * 300},
            context=context_for(FakeRepo()),
            partial=True,
        )

    assert exc_info.value.errors == ["图片地址长度不能超过255个字符。"]


@pytest.mark.asyncio
async def test_setting_fields_limited_to_column_width() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await SETTING_RULES.validate(
            {"name": "n" * 256, "icp": "i" * 256, "copyright": "c" * 256},
            context=context_for(FakeRepo()),
        )

    assert exc_info.value.errors == [
        "名称长度不能超过255个字符。",
        "ICP备案号长度不能超过255个字符。",
        "版权信息长度不能超过255个字符。",
    ]


@pytest.mark.asyncio
async def test_column_width_boundary_is_accepted() -> None:
    result = await SETTING_RULES.validate(
        {"name": "n" * 255, "icp": "", "copyright": None},
        context=context_for(FakeRepo()),
    )

    assert result == {"name": "n" * 255, "icp": "", "copyright": None}


@pytest.mark.asyncio
async def test_hashed_password_still_limited_to_column_width() -> None:
    oversized = "$argon2id$v=19$m=65536,t=3,p=4$" + "a" * 300

    with pytest.raises(ValidationFailedException) as exc_info:
        await USER_RULES.validate(
            {"password": oversized}, context=context_for(FakeRepo()), partial=True
        )

    assert exc_info.value.errors == ["密码长度不能超过255个字符。"]


# ------------------------------------------------------------------------------
# Skip Predicate
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_hashed_password_bypasses_length_rule() -> None:
    hashed = "$argon2id$v=19$m=65536,t=3,p=4$" + "a" * 60

    result = await USER_RULES.validate(
        {"password": hashed}, context=context_for(FakeRepo()), partial=True
    )

    assert result == {"password": hashed}


@pytest.mark.asyncio
async def test_plaintext_password_length_enforced() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await USER_RULES.validate(
            {"password": "12345"}, context=context_for(FakeRepo()), partial=True
        )

    assert exc_info.value.errors == ["密码长度必须是6 ~ 45之间。"]


@pytest.mark.asyncio
async def test_unless_only_affects_its_own_check() -> None:
    entity = EntityRules(
        {"code": rules(required("必填"), length(1, 3, "太长").unless(lambda v: v == "SKIP"))}
    )

    assert await entity.validate({"code": "SKIP"}, context=context_for(FakeRepo())) == {
        "code": "SKIP"
    }
    with pytest.raises(ValidationFailedException):
        await entity.validate({"code": "LONG"}, context=context_for(FakeRepo()))


# ------------------------------------------------------------------------------
# Storage-backed Rules
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_unique_rule_rejects_taken_value() -> None:
    repo = FakeRepo(taken={("name", "Web")})

    with pytest.raises(ValidationFailedException) as exc_info:
        await CATEGORY_RULES.validate({"name": "Web"}, context=context_for(repo))

    assert exc_info.value.errors == ["名称已存在，请选择其他名称。"]


@pytest.mark.asyncio
async def test_unique_rule_excludes_current_record_on_update() -> None:
    repo = FakeRepo()
    current_id = uuid.uuid4()

    await CATEGORY_RULES.validate(
        {"name": "Web"}, context=context_for(repo, exclude_id=current_id), partial=True
    )

    assert repo.unique_calls == [("name", "Web", current_id)]


@pytest.mark.asyncio
async def test_exists_rule_names_missing_identifier() -> None:
    missing = uuid.uuid4()
    user_id = uuid.uuid4()
    repo = FakeRepo(references={user_id})

    with pytest.raises(ValidationFailedException) as exc_info:
        await COURSE_RULES.validate(
            {"category_id": str(missing), "user_id": str(user_id), "name": "Python"},
            context=context_for(repo),
        )

    assert exc_info.value.errors == [f"ID为：{missing} 的分类不存在。"]


@pytest.mark.asyncio
async def test_exists_rule_converts_identifier() -> None:
    category_id = uuid.uuid4()
    user_id = uuid.uuid4()
    repo = FakeRepo(references={category_id, user_id})

    result = await COURSE_RULES.validate(
        {"category_id": str(category_id), "user_id": str(user_id), "name": "Python"},
        context=context_for(repo),
    )

    assert result["category_id"] == category_id
    assert result["user_id"] == user_id
    assert result["recommended"] is False
    assert result["likes_count"] == 0


@pytest.mark.asyncio
async def test_exists_rule_rejects_malformed_identifier() -> None:
    with pytest.raises(ValidationFailedException) as exc_info:
        await COURSE_RULES.validate(
            {"category_id": "abc"}, context=context_for(FakeRepo()), partial=True
        )

    assert exc_info.value.errors == ["ID为：abc 的分类不存在。"]


@pytest.mark.asyncio
async def test_recheck_storage_only_runs_storage_rules() -> None:
    repo = FakeRepo(taken={("email", "a@clwy.cn")})

    errors = await USER_RULES.recheck_storage(
        {"email": "a@clwy.cn", "username": "free", "password": "x"},
        context=context_for(repo),
    )

    assert errors == ["邮箱已存在，请直接登录。"]

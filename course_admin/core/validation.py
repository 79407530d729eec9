"""
File: course_admin/core/validation.py
Description: 声明式字段校验引擎 (Field Validation Engine)

本模块把"什么是合法的"与"如何执行校验"解耦：
1. 各领域以 EntityRules 声明字段规则表 (见 domains/*/rules.py)
2. 引擎统一执行：白名单过滤 -> 默认值填充 -> 同步规则 -> 异步 (存储) 规则
3. 所有字段错误聚合为一个 ValidationFailedException，按字段声明顺序排列

执行语义：
- 每个字段内：先执行全部同步规则，再执行异步规则；首个失败即跳过该字段后续规则
- 字段之间相互独立，一次请求可同时报告多个字段错误
- 非必填字段值为 None 时跳过其全部规则
- 异步规则顺序执行 (同一个 AsyncSession 不支持并发操作)
- 规则可返回规范化后的值 (如 "5" -> 5)，引擎以规范化结果作为输出
"""

import re
import uuid
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from course_admin.core.exceptions import ValidationFailedException

if TYPE_CHECKING:
    from course_admin.db.repositories.base import BaseRepository


class RuleViolation(Exception):
    """规则函数内部使用：表示当前值不满足规则，由引擎替换为规则文案。"""


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """
    异步规则的执行上下文。

    Attributes:
        repo: 当前实体的仓储，用于唯一性查询与外键存在性查询
        exclude_id: 更新场景下当前记录的 ID，唯一性查询会排除它
    """

    repo: "BaseRepository[Any]"
    exclude_id: uuid.UUID | None = None


SyncCheckFn = Callable[[Any], Any]
AsyncCheckFn = Callable[[ValidationContext, str, Any], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class Check:
    """
    单条具名规则。

    message 中可使用 {value} 占位符引用被校验的值。
    """

    name: str
    message: str
    func: SyncCheckFn | AsyncCheckFn
    is_async: bool = False
    skip_if: Callable[[Any], bool] | None = None

    def unless(self, predicate: Callable[[Any], bool]) -> "Check":
        """返回一个在 predicate(value) 为真时跳过的规则副本"""
        return replace(self, skip_if=predicate)

    def describe(self, value: Any) -> str:
        return self.message.format(value=value)


_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class FieldRules:
    checks: tuple[Check, ...]
    default: Any = _MISSING

    @property
    def required(self) -> bool:
        return any(check.name == "required" for check in self.checks)

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING


def rules(*checks: Check, default: Any = _MISSING) -> FieldRules:
    """声明一个字段的规则列表 (按执行顺序)"""
    return FieldRules(checks=tuple(checks), default=default)


# ==============================================================================
# 1. 同步规则
# ==============================================================================

_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_url_adapter: TypeAdapter[AnyHttpUrl] = TypeAdapter(AnyHttpUrl)


def required(message: str) -> Check:
    def _check(value: Any) -> Any:
        if value is None:
            raise RuleViolation
        return value

    return Check("required", message, _check)


def non_empty(message: str) -> Check:
    def _check(value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            raise RuleViolation
        return value

    return Check("non_empty", message, _check)


def length(min_length: int, max_length: int, message: str) -> Check:
    def _check(value: Any) -> Any:
        if not isinstance(value, str) or not min_length <= len(value) <= max_length:
            raise RuleViolation
        return value

    return Check("length", message, _check)


def is_email(message: str) -> Check:
    def _check(value: Any) -> Any:
        if not isinstance(value, str):
            raise RuleViolation
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise RuleViolation from None
        return value

    return Check("is_email", message, _check)


def is_url(message: str) -> Check:
    def _check(value: Any) -> Any:
        if not isinstance(value, str):
            raise RuleViolation
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise RuleViolation from None
        return value

    return Check("is_url", message, _check)


def is_integer(message: str) -> Check:
    def _check(value: Any) -> Any:
        # bool 是 int 的子类，需单独排除
        if isinstance(value, bool):
            raise RuleViolation
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str) and _INT_PATTERN.match(value.strip()):
            return int(value.strip())
        raise RuleViolation

    return Check("is_integer", message, _check)


def _compare(value: Any, predicate: Callable[[Any], bool]) -> Any:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise RuleViolation
    if not predicate(value):
        raise RuleViolation
    return value


def is_positive(message: str) -> Check:
    return Check("is_positive", message, lambda value: _compare(value, lambda v: v > 0))


def is_non_negative(message: str) -> Check:
    return Check(
        "is_non_negative", message, lambda value: _compare(value, lambda v: v >= 0)
    )


def is_boolean(message: str) -> Check:
    def _check(value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        raise RuleViolation

    return Check("is_boolean", message, _check)


def one_of(choices: Iterable[Any], message: str) -> Check:
    allowed = tuple(choices)

    def _check(value: Any) -> Any:
        if isinstance(value, bool):
            raise RuleViolation
        for choice in allowed:
            # 兼容 "1" 与 1 这类字符串形式的枚举值
            if value == choice or str(value) == str(choice):
                return choice
        raise RuleViolation

    return Check("one_of", message, _check)


# ==============================================================================
# 2. 异步规则 (查询存储)
# ==============================================================================


def unique(message: str) -> Check:
    """
    唯一性校验：查询是否已存在相同值的其他记录 (更新时排除自身)。

    注意：查询与写入之间没有加锁，并发写入时以数据库唯一索引为最终保障。
    """

    async def _check(ctx: ValidationContext, field_name: str, value: Any) -> Any:
        if await ctx.repo.exists_by(field_name, value, exclude_id=ctx.exclude_id):
            raise RuleViolation
        return value

    return Check("unique", message, _check, is_async=True)


def exists(model: type[Any], message: str) -> Check:
    """
    外键存在性校验：被引用的记录必须存在。
    文案通过 {value} 引用出错的 ID。
    """

    async def _check(ctx: ValidationContext, field_name: str, value: Any) -> Any:
        try:
            key = value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))
        except ValueError:
            raise RuleViolation from None
        if not await ctx.repo.reference_exists(model, key):
            raise RuleViolation
        return key

    return Check("exists", message, _check, is_async=True)


# ==============================================================================
# 3. 规则表与引擎
# ==============================================================================


@dataclass(frozen=True)
class EntityRules:
    """
    实体规则表：字段名 -> FieldRules (声明顺序即错误输出顺序)。
    """

    fields: dict[str, FieldRules] = field(default_factory=dict)

    def whitelist(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """只保留规则表中声明过的字段，其余静默丢弃"""
        return {name: payload[name] for name in self.fields if name in payload}

    def with_defaults(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        data = dict(payload)
        for name, field_rules in self.fields.items():
            if name not in data and field_rules.has_default:
                data[name] = field_rules.default
        return data

    async def validate(
        self,
        payload: Mapping[str, Any],
        *,
        context: ValidationContext,
        partial: bool = False,
    ) -> dict[str, Any]:
        """
        执行校验并返回规范化后的字段字典。

        Args:
            payload: 候选字段 (未过滤)
            context: 异步规则上下文
            partial: True 表示更新场景，只校验 payload 中出现的字段，且不填充默认值

        Raises:
            ValidationFailedException: 任一字段不合法时，携带全部错误文案
        """
        data = self.whitelist(payload)
        if not partial:
            data = self.with_defaults(data)

        names = list(data) if partial else list(self.fields)
        normalized: dict[str, Any] = {}
        errors: list[str] = []

        for name in self.fields:
            if name not in names:
                continue
            ok, value, message = await self._validate_field(
                name, self.fields[name], data.get(name), context
            )
            if ok:
                if name in data:
                    normalized[name] = value
            else:
                errors.append(message)

        if errors:
            raise ValidationFailedException(errors)
        return normalized

    async def recheck_storage(
        self, data: Mapping[str, Any], *, context: ValidationContext
    ) -> list[str]:
        """
        只重跑异步 (存储相关) 规则，用于写入被数据库约束拒绝后的归因。
        """
        errors: list[str] = []
        for name, field_rules in self.fields.items():
            value = data.get(name)
            if name not in data or value is None:
                continue
            for check in field_rules.checks:
                if not check.is_async or _skipped(check, value):
                    continue
                try:
                    await check.func(context, name, value)  # type: ignore[call-arg]
                except RuleViolation:
                    errors.append(check.describe(value))
                    break
        return errors

    @staticmethod
    async def _validate_field(
        name: str,
        field_rules: FieldRules,
        value: Any,
        context: ValidationContext,
    ) -> tuple[bool, Any, str]:
        if value is None and not field_rules.required:
            return True, None, ""

        sync_checks = [c for c in field_rules.checks if not c.is_async]
        async_checks = [c for c in field_rules.checks if c.is_async]

        for check in sync_checks:
            if _skipped(check, value):
                continue
            try:
                value = check.func(value)  # type: ignore[call-arg]
            except RuleViolation:
                return False, value, check.describe(value)

        for check in async_checks:
            if _skipped(check, value):
                continue
            try:
                value = await check.func(context, name, value)  # type: ignore[call-arg]
            except RuleViolation:
                return False, value, check.describe(value)

        return True, value, ""


def _skipped(check: Check, value: Any) -> bool:
    return check.skip_if is not None and check.skip_if(value)

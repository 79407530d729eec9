"""
File: course_admin/core/pagination.py
Description: 查询与分页构建器 (Query/Pagination Builder)

将原始的列表请求参数 (字符串，可能缺失/为零/为负/非数字) 转换为确定的读取计划：
1. 页码与每页条数：取绝对值并截断为整数；缺失、无法解析或为 0 时使用默认值 (1 / 10)
   每页条数不设上限，调用方传多大就用多大
2. offset = (page - 1) * page_size
3. 过滤条件：子串匹配 (LIKE，转义通配符)、精确匹配 (带类型转换)、布尔转换
4. 排序：默认按 id 倒序 (UUID v7 有序，即最新在前)，实体可覆盖

总数与当页数据使用同一组过滤条件，保证 total 与逐页遍历的结果一致。
"""

import math
import uuid
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import ColumnElement, false

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# 布尔过滤参数中视为 True 的取值 (大小写不敏感)，其余一律为 False
TRUTHY_VALUES = frozenset({"true", "1"})


def normalize_positive_int(raw: Any, default: int) -> int:
    """
    将原始参数规范化为正整数。

    示例:
        "2" -> 2, "-3" -> 3, "2.9" -> 2, "0" -> default, "abc" -> default, None -> default
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        number = float(str(raw).strip())
    except ValueError:
        return default
    if not math.isfinite(number):
        return default
    value = abs(int(number))
    return value or default


@dataclass(frozen=True, slots=True)
class PageParams:
    current_page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_raw(cls, current_page: Any = None, page_size: Any = None) -> "PageParams":
        return cls(
            current_page=normalize_positive_int(current_page, DEFAULT_PAGE),
            page_size=normalize_positive_int(page_size, DEFAULT_PAGE_SIZE),
        )

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


# ==============================================================================
# 过滤条件声明
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Contains:
    """子串匹配 (LIKE %value%)"""

    param: str
    column: Any

    def build(self, raw: str) -> ColumnElement[bool]:
        return self.column.contains(raw, autoescape=True)


@dataclass(frozen=True, slots=True)
class Equals:
    """
    精确匹配。
    coerce 失败 (如 role=abc) 时条件恒为假，即不返回任何记录。
    """

    param: str
    column: Any
    coerce: Callable[[str], Any] = str

    def build(self, raw: str) -> ColumnElement[bool]:
        try:
            value = self.coerce(raw)
        except (TypeError, ValueError):
            return false()
        return self.column == value


@dataclass(frozen=True, slots=True)
class Flag:
    """布尔过滤：'true' / '1' 为真，其余为假"""

    param: str
    column: Any

    def build(self, raw: str) -> ColumnElement[bool]:
        return self.column.is_(raw.strip().lower() in TRUTHY_VALUES)


Filter = Contains | Equals | Flag


def to_uuid(raw: str) -> uuid.UUID:
    return uuid.UUID(raw.strip())


def to_int(raw: str) -> int:
    return int(raw.strip())


# ==============================================================================
# 读取计划
# ==============================================================================


@dataclass(frozen=True)
class QueryPlan:
    """
    一次分页读取的完整描述，由 Repository.list() 执行。
    """

    page: PageParams
    where: tuple[ColumnElement[bool], ...] = ()
    order_by: tuple[Any, ...] = ()


@dataclass(frozen=True)
class QueryBuilder:
    """
    实体级查询构建器：声明可用的过滤参数与默认排序。

    用法:
        builder = QueryBuilder(
            filters=(Contains("name", Category.name),),
            order_by=(Category.rank.asc(), Category.id.asc()),
        )
        plan = builder.build(page, {"name": "We"})
    """

    filters: Sequence[Filter] = ()
    order_by: Sequence[Any] = field(default_factory=tuple)

    def build(self, page: PageParams, params: Mapping[str, str | None]) -> QueryPlan:
        where: list[ColumnElement[bool]] = []
        for flt in self.filters:
            raw = params.get(flt.param)
            # 空字符串视为未传
            if raw is None or raw == "":
                continue
            where.append(flt.build(raw))

        return QueryPlan(page=page, where=tuple(where), order_by=tuple(self.order_by))

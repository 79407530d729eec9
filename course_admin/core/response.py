"""
File: course_admin/core/response.py
Description: 统一响应信封（Unified Response Envelope）模型与辅助函数

所有 HTTP 接口（成功或失败）都遵循同一契约：
    {"status": bool, "message": str, "data"?: object, "errors"?: [str]}

- 成功响应: status=True，携带 data（删除接口为 {}）
- 失败响应: status=False，携带 errors（字段级错误文案列表）
- 值为 None 的 data / errors 不会出现在输出中
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ResponseModel(BaseModel, Generic[T]):
    """
    统一响应信封
    """

    model_config = ConfigDict(from_attributes=True)

    status: bool = Field(default=True, description="请求是否成功")
    message: str = Field(default="Success", description="响应消息")
    data: T | None = Field(default=None, description="业务数据")
    errors: list[str] | None = Field(default=None, description="错误详情列表")

    @model_serializer(mode="wrap")
    def _omit_empty_members(self, handler):
        payload = handler(self)
        for key in ("data", "errors"):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload

    @classmethod
    def success(
        cls,
        data: T | None = None,
        message: str = "Success",
    ) -> "ResponseModel[T]":
        """
        构造成功响应
        """
        return cls(status=True, message=message, data=data)

    @classmethod
    def fail(
        cls,
        message: str,
        errors: list[str] | None = None,
    ) -> "ResponseModel[Any]":
        """
        构造失败响应
        """
        return cls(status=False, message=message, errors=errors or [])


# ------------------------------------------------------------------------------
# 通用 data 容器
# ------------------------------------------------------------------------------


class CamelModel(BaseModel):
    """
    对外 JSON 字段使用 camelCase (categoryId / createdAt)，Python 内部保持 snake_case。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    total: int = Field(..., description="满足条件的总记录数 (忽略分页)")
    current_page: int = Field(..., description="当前页码")
    page_size: int = Field(..., description="每页条数")


class ItemData(CamelModel, Generic[T]):
    """单条记录: {"item": ...}"""

    item: T


class ListData(CamelModel, Generic[T]):
    """分页列表: {"items": [...], "pagination": {...}}"""

    items: list[T]
    pagination: Pagination

    @classmethod
    def of(
        cls, items: list[T], total: int, current_page: int, page_size: int
    ) -> "ListData[T]":
        return cls(
            items=items,
            pagination=Pagination(
                total=total, current_page=current_page, page_size=page_size
            ),
        )


class EmptyData(CamelModel):
    """删除等无返回数据的操作: {}"""

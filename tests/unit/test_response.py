"""
File: tests/unit/test_response.py
Description: 统一响应信封与错误分类单元测试
"""

import uuid

from course_admin.core.error_code import SystemErrorCode
from course_admin.core.exceptions import (
    ConflictException,
    NotFoundException,
    UnexpectedException,
    ValidationFailedException,
)
from course_admin.core.response import EmptyData, ItemData, ListData, ResponseModel
from course_admin.utils.masking import mask_email, mask_sensitive_data


def test_success_envelope_omits_errors() -> None:
    body = ResponseModel.success(data={"status": "ok"}, message="OK").model_dump()

    assert body == {"status": True, "message": "OK", "data": {"status": "ok"}}


def test_failure_envelope_omits_data() -> None:
    body = ResponseModel.fail(message="请求参数错误", errors=["名称必须填写。"]).model_dump()

    assert body == {"status": False, "message": "请求参数错误", "errors": ["名称必须填写。"]}


def test_empty_data_is_kept() -> None:
    body = ResponseModel.success(data=EmptyData(), message="删除分类成功。").model_dump()

    assert body["data"] == {}


def test_list_data_uses_camel_case() -> None:
    data = ListData.of([{"id": 1}], total=25, current_page=2, page_size=10)
    body = ResponseModel.success(data=data).model_dump(by_alias=True)

    assert body["data"]["pagination"] == {"total": 25, "currentPage": 2, "pageSize": 10}


def test_item_data_wraps_single_record() -> None:
    body = ItemData(item={"name": "Web"}).model_dump()

    assert body == {"item": {"name": "Web"}}


def test_taxonomy_http_status_and_messages() -> None:
    missing = uuid.uuid4()

    validation = ValidationFailedException(["a", "b"])
    not_found = NotFoundException("分类", missing)
    conflict = ConflictException("该分类下有课程，不能删除。")
    unexpected = UnexpectedException()

    assert (validation.http_status, validation.message, validation.errors) == (
        400,
        "请求参数错误",
        ["a", "b"],
    )
    assert (not_found.http_status, not_found.message) == (404, "资源不存在")
    assert not_found.errors == [f"ID: {missing}的分类未找到。"]
    assert (conflict.http_status, conflict.message) == (400, "请求参数错误")
    assert (unexpected.http_status, unexpected.message) == (500, "服务器错误")


def test_system_error_codes_are_the_four_kinds() -> None:
    assert {code.name for code in SystemErrorCode} == {
        "VALIDATION_FAILED",
        "CONFLICT",
        "NOT_FOUND",
        "INTERNAL_ERROR",
    }


def test_mask_sensitive_data() -> None:
    masked = mask_sensitive_data(
        {"email": "admin@clwy.cn", "password": "123123", "nested": [{"Password": "x"}]}
    )

    assert masked == {
        "email": "admin@clwy.cn",
        "password": "******",
        "nested": [{"Password": "******"}],
    }


def test_mask_email() -> None:
    assert mask_email("admin@clwy.cn") == "a***@clwy.cn"
    assert mask_email("a@clwy.cn") == "****@clwy.cn"
    assert mask_email(None) == "******"

"""
Action 系统异常类定义
"""

from typing import Any, Dict, List, Optional

from core.constants.errors import ErrorCode
from core.constants.exceptions import (
    CoreException,
    ResourceNotFoundException,
    ValidationException,
)


class ActionException(CoreException):
    """Action 系统基础异常"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        code: str = ErrorCode.ACTION_ERROR.value,
    ):
        super().__init__(code=code, message=message, details=details)


class SchemaValidationError(ValidationException):
    """Action 输入或输出不符合 schema

    Attributes:
        action_name: 出错的 action 名称
        stage: "input" 或 "output"
        path: 第一个错误的点分路径，例如 "docs.0.content.mimeType"
        errors: pydantic 给出的完整错误列表
    """

    def __init__(
        self,
        action_name: str,
        stage: str,
        path: str,
        message: str,
        errors: List[Dict[str, Any]],
        expected: str,
        original_exception: Optional[Exception] = None,
    ):
        self.action_name = action_name
        self.stage = stage
        self.path = path
        self.errors = errors
        self.expected = expected
        super().__init__(
            message=f"{stage} of action '{action_name}' is invalid: {message}",
            field=path or None,
            details={"stage": stage, "expected": expected, "errors": errors},
            code=ErrorCode.SCHEMA_VALIDATION_ERROR.value,
            original_exception=original_exception,
        )


class DuplicateActionError(ActionException):
    """重复注册异常"""

    def __init__(self, category: str, key: str):
        self.category = category
        self.key = key
        super().__init__(
            f"Action '{key}' is already registered under '{category}'",
            details={"category": category, "key": key},
            code=ErrorCode.DUPLICATE_ACTION.value,
        )


class ActionNotFoundError(ResourceNotFoundException):
    """Action 未找到异常"""

    def __init__(self, category: str, key: str):
        self.category = category
        self.key = key
        super().__init__(
            resource_type=f"{category} action",
            resource_id=key,
            details={"category": category, "key": key},
        )

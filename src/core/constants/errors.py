"""
错误代码定义

所有异常共享的错误代码，取值即序列化后 `code` 字段的内容。
"""

from enum import Enum


class ErrorCode(str, Enum):
    """错误代码枚举"""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Action 相关
    ACTION_ERROR = "ACTION_ERROR"
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"
    DUPLICATE_ACTION = "DUPLICATE_ACTION"
    UNSUPPORTED_INDEXER = "UNSUPPORTED_INDEXER"

"""
异常处理模块

本模块定义了项目中使用的基础异常类。
遵循统一的异常处理规范，便于错误追踪和调试。
"""

from typing import Optional, Dict, Any
from core.constants.errors import ErrorCode


class CoreException(Exception):
    """基础异常类

    所有自定义异常的基类，提供统一的异常处理接口。
    包含错误代码、错误消息和可选的详细信息。
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        初始化基础异常

        Args:
            code: 错误代码
            message: 错误消息
            details: 可选的详细信息字典
            original_exception: 原始异常对象
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        """返回异常的字符串表示"""
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        """返回异常的详细表示"""
        details_str = f", details={self.details}" if self.details else ""
        original_str = (
            f", original={self.original_exception}" if self.original_exception else ""
        )
        return f"{self.__class__.__name__}(code='{self.code}', message='{self.message}'{details_str}{original_str})"

    def to_dict(self) -> Dict[str, Any]:
        """将异常转换为字典格式，便于序列化"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "exception_type": self.__class__.__name__,
        }


class ValidationException(CoreException):
    """数据验证异常

    当输入数据验证失败时抛出此异常。
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        code: str = ErrorCode.VALIDATION_ERROR.value,
        original_exception: Optional[Exception] = None,
    ):
        self.field = field
        if field:
            message = f"Field '{field}': {message}"

        super().__init__(
            code=code,
            message=message,
            details=details,
            original_exception=original_exception,
        )


class ResourceNotFoundException(CoreException):
    """资源未找到异常

    当请求的资源不存在时抛出此异常。
    """

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            code=ErrorCode.RESOURCE_NOT_FOUND.value, message=message, details=details
        )


class ConfigurationException(CoreException):
    """配置异常

    当系统配置错误或缺失时抛出此异常。
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.config_key = config_key
        if config_key:
            message = f"Configuration error for '{config_key}': {message}"

        super().__init__(
            code=ErrorCode.CONFIGURATION_ERROR.value, message=message, details=details
        )


class UnsupportedIndexerError(CoreException):
    """不支持的 indexer 形态

    传给 index() 的对象既没有可调用的 `index` 方法，本身也不可调用。
    """

    def __init__(self, indexer: Any, reason: Optional[str] = None):
        self.indexer = indexer
        message = f"Unsupported indexer shape: {type(indexer).__name__}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            code=ErrorCode.UNSUPPORTED_INDEXER.value,
            message=message,
            details={"indexer_type": type(indexer).__name__},
        )


__all__ = [
    'ErrorCode',
    'CoreException',
    'ValidationException',
    'ResourceNotFoundException',
    'ConfigurationException',
    'UnsupportedIndexerError',
]

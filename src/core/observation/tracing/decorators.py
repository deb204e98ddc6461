"""
装饰器模块

为 action handler 等异步调用自动添加 [trace] 日志。
"""

import logging
import time
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, TypeVar

T = TypeVar('T')


def trace_logger(
    operation_name: Optional[str] = None,
    include_args: bool = False,
    include_result: bool = False,
    log_level: str = "debug",
    logger_name: Optional[str] = None,
):
    """
    自动添加 [trace] 日志的装饰器，仅支持协程函数

    Args:
        operation_name: 操作名称，如果不提供则使用函数名
        include_args: 是否记录函数参数
        include_result: 是否记录函数返回值
        log_level: 日志级别 (debug, info, warning, error)
        logger_name: 日志器名称，默认使用被装饰函数所在模块
    """

    def decorator(
        func: Callable[..., Awaitable[T]]
    ) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def async_wrapper(*args, **kwargs) -> T:
            logger = logging.getLogger(logger_name or func.__module__)
            operation = operation_name or func.__name__

            # 日志级别未启用时直接执行，避免格式化开销
            if not _is_log_level_enabled(logger, log_level):
                return await func(*args, **kwargs)

            start_time = time.perf_counter()

            log_message = f"[trace] {operation} - start"
            if include_args and (args or kwargs):
                log_message += f" | args: {_format_args(args, kwargs)}"
            _log_message(logger, log_level, log_message)

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                duration = round((time.perf_counter() - start_time) * 1000, 2)
                _log_message(
                    logger,
                    "error",
                    f"[trace] {operation} - failed ({duration}ms) | error: {e!r}",
                )
                raise

            duration = round((time.perf_counter() - start_time) * 1000, 2)
            log_message = f"[trace] {operation} - done ({duration}ms)"
            if include_result and result is not None:
                log_message += f" | result: {_format_result(result)}"
            _log_message(logger, log_level, log_message)
            return result

        return async_wrapper

    return decorator


def _is_log_level_enabled(logger: logging.Logger, level: str) -> bool:
    level_num = getattr(logging, level.upper(), logging.INFO)
    return logger.isEnabledFor(level_num)


def _log_message(logger: logging.Logger, level: str, message: str):
    log_method = getattr(logger, level.lower(), logger.info)
    log_method(message)


def _format_value(value: Any) -> str:
    # 大对象只记录类型与长度
    if isinstance(value, (list, tuple, dict)) and len(str(value)) > 100:
        return f"{type(value).__name__}(len={len(value)})"
    if hasattr(value, '__dict__') and not isinstance(value, type):
        return type(value).__name__
    return repr(value)


def _format_args(args, kwargs) -> str:
    args_str = [f"arg{i}: {_format_value(arg)}" for i, arg in enumerate(args)]
    args_str.extend(f"{key}: {_format_value(value)}" for key, value in kwargs.items())
    return ", ".join(args_str)


def _format_result(result: Any) -> str:
    return _format_value(result)

"""
统一日志模块

根日志器在首次导入时配置：
- LOG_LEVEL: 日志级别，默认 INFO
- LOG_RICH: 为 true 时控制台使用 Rich 彩色输出

基本用法:
    from core.observation.logger import get_logger
    logger = get_logger(__name__)
    logger.info("message")

调用链追踪:
    with activity_scope():
        ...  # 作用域内的所有日志携带同一个 activity_id
"""
import logging
import contextvars
import uuid
import sys
import os
from contextlib import contextmanager
from typing import Iterator, Optional
from functools import lru_cache

from rich.logging import RichHandler

# ============================================================================
# 常量定义
# ============================================================================

LOG_FORMAT = '%(asctime)s - [%(activity_id)s] - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'

NO_ACTIVITY = '-'

# 需要抑制的第三方库日志
NOISY_LOGGERS = [
    'asyncio',
    'urllib3',
    'httpx',
    'httpcore',
]

# ============================================================================
# Activity ID 追踪（关联同一次 retrieve/index 调用的所有日志）
# ============================================================================

activity_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    'activity_id', default=NO_ACTIVITY
)


def set_activity_id(activity_id: Optional[str] = None) -> str:
    """设置当前上下文的 activity_id

    Args:
        activity_id: 自定义 ID，不提供则自动生成 8 位 UUID

    Returns:
        设置的 activity_id
    """
    if activity_id is None:
        activity_id = str(uuid.uuid4())[:8]
    activity_id_var.set(activity_id)
    return activity_id


def get_activity_id() -> str:
    """获取当前上下文的 activity_id"""
    return activity_id_var.get()


@contextmanager
def activity_scope(activity_id: Optional[str] = None) -> Iterator[str]:
    """在作用域内绑定 activity_id，退出时恢复

    外层已有 activity_id 且未显式指定时沿用外层的值，
    嵌套的 retrieve/index 调用因此共享同一个 ID。
    """
    current = activity_id_var.get()
    if activity_id is None:
        if current != NO_ACTIVITY:
            yield current
            return
        activity_id = str(uuid.uuid4())[:8]
    token = activity_id_var.set(activity_id)
    try:
        yield activity_id
    finally:
        activity_id_var.reset(token)


class ActivityIdFilter(logging.Filter):
    """自动添加 activity_id 到日志记录"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.activity_id = activity_id_var.get()
        return True


def _get_caller_module_name(depth: int = 2) -> str:
    frame = sys._getframe(depth)
    return frame.f_globals.get('__name__', 'unknown')


def create_console_handler(use_rich: bool = False) -> logging.Handler:
    """创建控制台 handler（Rich 或普通 stdout）"""
    if use_rich:
        handler = RichHandler(
            rich_tracebacks=True,
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter('[%(activity_id)s] %(name)s - %(message)s'))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(ActivityIdFilter())
    return handler


# ============================================================================
# LoggerProvider 核心类
# ============================================================================

class LoggerProvider:
    """统一的日志管理类（单例模式）

    职责：
    1. 初始化根日志配置（级别来自 LOG_LEVEL 环境变量）
    2. 抑制第三方库噪音日志
    3. 提供 logger 实例缓存
    """

    _instance: Optional['LoggerProvider'] = None
    _initialized: bool = False

    def __new__(cls) -> 'LoggerProvider':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._init_root_logger()
            self._suppress_noisy_loggers()
            LoggerProvider._initialized = True

    def _init_root_logger(self):
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        use_rich = os.getenv('LOG_RICH', 'false').lower() in ('true', '1', 'yes')

        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            handlers=[create_console_handler(use_rich)],
        )

    def _suppress_noisy_loggers(self):
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.WARNING)

    @lru_cache(maxsize=1000)
    def _get_cached_logger(self, module_name: str) -> logging.Logger:
        return logging.getLogger(module_name)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """获取日志器

        Args:
            name: 日志器名称，推荐传入 __name__
        """
        if name is None:
            name = _get_caller_module_name(depth=3)
        return self._get_cached_logger(name)


logger_provider = LoggerProvider()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """获取日志器（推荐用法）

    推荐:
        logger = get_logger(__name__)  # 模块顶部获取一次
        logger.info("message")         # 后续直接使用
    """
    if name is None:
        name = _get_caller_module_name()
    return logger_provider.get_logger(name)

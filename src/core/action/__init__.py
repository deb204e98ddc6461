# -*- coding: utf-8 -*-
"""
Action 框架

功能特性:
- 基于 pydantic 的输入/输出 schema 校验
- 按 category + provider/id 注册与查找
- 重复注册检测（可配置为覆盖并告警）
- 可选的 [trace] 调用日志
"""

from core.action.action import Action, action
from core.action.registry import (
    ActionDefinition,
    ActionRegistry,
    ActionType,
    get_registry,
    lookup_indexer,
    lookup_retriever,
)
from core.action.exceptions import (
    ActionException,
    ActionNotFoundError,
    DuplicateActionError,
    SchemaValidationError,
)

__all__ = [
    # 核心
    'Action',
    'action',
    # 注册表
    'ActionDefinition',
    'ActionRegistry',
    'ActionType',
    'get_registry',
    'lookup_indexer',
    'lookup_retriever',
    # 异常类
    'ActionException',
    'ActionNotFoundError',
    'DuplicateActionError',
    'SchemaValidationError',
]

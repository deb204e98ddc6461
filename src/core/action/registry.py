"""
Action 注册表实现

按 category（retriever / indexer）和 key（provider/id）存储已构建的 action，
供其他子系统发现。

锁使用策略：
- 纯读操作（contains_action）：无锁
- 修改注册表状态的操作：使用 self._lock 保护
- 全局注册表创建：使用 _registry_lock 保证单例
"""

from enum import Enum
from threading import RLock
from typing import Any, Dict, List, Optional, Union

from config import load_config
from core.action.action import Action
from core.action.exceptions import ActionNotFoundError, DuplicateActionError
from core.observation.logger import get_logger

logger = get_logger(__name__)


class ActionType(str, Enum):
    """Action 类别"""

    RETRIEVER = "retriever"
    INDEXER = "indexer"


Category = Union[ActionType, str]


def _normalize_category(category: Category) -> str:
    if isinstance(category, ActionType):
        return category.value
    if isinstance(category, str) and category:
        return category
    raise TypeError(
        f"Action category must be ActionType or non-empty str, got {category!r}"
    )


class ActionDefinition:
    """已注册 action 的定义"""

    def __init__(self, category: str, key: str, action: Action):
        self.category = category
        self.key = key
        self.action = action

    def __repr__(self):
        return f"ActionDefinition(category={self.category}, key={self.key}, name={self.action.name})"


class ActionRegistry:
    """Action 注册表"""

    def __init__(self, allow_override: bool = False):
        self._lock = RLock()
        self.allow_override = allow_override
        # {category: {key: ActionDefinition}}，dict 保留注册顺序
        self._actions: Dict[str, Dict[str, ActionDefinition]] = {}

    def register_action(self, category: Category, key: str, action: Action) -> None:
        """注册 action

        Raises:
            DuplicateActionError: 同一 category 下 key 已存在且不允许覆盖
        """
        category = _normalize_category(category)
        with self._lock:
            actions = self._actions.setdefault(category, {})
            existing = actions.get(key)
            if existing is not None:
                if not self.allow_override:
                    raise DuplicateActionError(category, key)
                logger.warning(
                    "Overriding %s action '%s' (was %r)", category, key, existing.action
                )
                # 覆盖后排在最后，与重新注册的顺序一致
                del actions[key]

            actions[key] = ActionDefinition(category, key, action)
            logger.debug("Registered %s action '%s'", category, key)

    def lookup_action(self, category: Category, key: str) -> Action:
        """根据 category 和 key 查找 action"""
        category = _normalize_category(category)
        with self._lock:
            definition = self._actions.get(category, {}).get(key)
            if definition is None:
                raise ActionNotFoundError(category, key)
            return definition.action

    def contains_action(self, category: Category, key: str) -> bool:
        """检查是否包含指定 action"""
        return key in self._actions.get(_normalize_category(category), {})

    def list_actions(self, category: Optional[Category] = None) -> List[Action]:
        """按注册顺序列出 action，可按 category 过滤"""
        with self._lock:
            if category is not None:
                definitions = self._actions.get(_normalize_category(category), {})
                return [d.action for d in definitions.values()]
            return [
                d.action
                for definitions in self._actions.values()
                for d in definitions.values()
            ]

    def list_all_actions_info(self) -> List[Dict[str, Any]]:
        """
        列出所有已注册的 action 信息

        Returns:
            信息列表，每项包含 category、key、name
        """
        with self._lock:
            return [
                {
                    'category': d.category,
                    'key': d.key,
                    'name': d.action.name,
                }
                for definitions in self._actions.values()
                for d in definitions.values()
            ]

    def clear(self):
        """清空注册表"""
        with self._lock:
            self._actions.clear()


# 全局注册表实例
_global_registry: Optional[ActionRegistry] = None
_registry_lock = RLock()


def get_registry() -> ActionRegistry:
    """获取全局注册表实例，allow_override 取自 registry.allow_override 配置"""
    global _global_registry
    if _global_registry is None:
        with _registry_lock:
            if _global_registry is None:
                allow_override = load_config("app").get(
                    "registry.allow_override", False
                )
                _global_registry = ActionRegistry(allow_override=bool(allow_override))
    return _global_registry


def lookup_retriever(key: str) -> Action:
    """在全局注册表中查找 retriever"""
    return get_registry().lookup_action(ActionType.RETRIEVER, key)


def lookup_indexer(key: str) -> Action:
    """在全局注册表中查找 indexer"""
    return get_registry().lookup_action(ActionType.INDEXER, key)

"""
统一配置加载工具

支持:
1. YAML 配置文件加载
2. 环境变量替换 (${VAR} 或 ${VAR:default})
3. 点访问 (config.registry.allow_override)
4. 配置缓存（避免重复加载）

使用示例:
    from config import load_config

    config = load_config("app")
    print(config.registry.allow_override)
    print(config.get("actions.trace_level", "debug"))
"""
import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, Union
from functools import lru_cache

from core.constants.exceptions import ConfigurationException

_ENV_PATTERN = re.compile(r'\$\{([^:}]+)(?::([^}]*))?\}')


class ConfigDict:
    """
    支持点访问的配置字典

    Examples:
        config = ConfigDict({"a": {"b": 1}})
        config.a.b  # -> 1
        config["a"]["b"]  # -> 1
        config.get("a.b")  # -> 1
    """

    def __init__(self, data: Dict[str, Any]):
        for key, value in data.items():
            if isinstance(value, dict):
                setattr(self, key, ConfigDict(value))
            else:
                setattr(self, key, value)
        self._data = data

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"ConfigDict({self._data})"

    def get(self, key: str, default: Any = None) -> Any:
        """
        支持点分隔的 key 访问

        Examples:
            config.get("registry.allow_override")
            config.get("unknown.key", "default_value")
        """
        value = self
        try:
            for k in key.split("."):
                value = getattr(value, k)
            return value
        except AttributeError:
            return default

    def to_dict(self) -> Dict[str, Any]:
        """转换回普通字典"""
        return self._data

    def __iter__(self):
        return iter(self._data)

    def items(self):
        return self._data.items()

    def keys(self):
        return self._data.keys()


def _get_config_dir() -> Path:
    return Path(os.environ.get("ACTION_CONFIG_DIR", Path(__file__).parent))


def _replace_env_vars(obj: Any) -> Any:
    """
    递归替换配置中的环境变量

    支持格式:
    - ${VAR_NAME} - 必须存在的环境变量，缺失时保持原样
    - ${VAR_NAME:default_value} - 带默认值

    类型转换（仅当整个字符串是单一占位符时）:
    - ${VAR:123} -> int 123
    - ${VAR:1.5} -> float 1.5
    - ${VAR:true} -> bool True
    """
    if isinstance(obj, dict):
        return {key: _replace_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_replace_env_vars(item) for item in obj]
    if not isinstance(obj, str):
        return obj

    def replacer(match):
        value = os.environ.get(match.group(1))
        if value is None:
            if match.group(2) is None:
                return match.group(0)
            return match.group(2)
        return value

    result = _ENV_PATTERN.sub(replacer, obj)
    if result != obj:
        result = _try_convert_type(result)
    return result


def _try_convert_type(value: str) -> Union[str, int, float, bool]:
    """尝试将字符串转换为合适的类型

    先尝试数值，再尝试纯文本布尔值，避免 "0" 被误转为 False。
    """
    try:
        float_val = float(value)
        if float_val.is_integer() and '.' not in value:
            return int(float_val)
        return float_val
    except ValueError:
        pass

    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    return value


def _find_config_file(name: str) -> Path:
    config_dir = _get_config_dir()
    candidates = [
        config_dir / f"{name}.yaml",
        config_dir / f"{name}.yml",
        config_dir / name / "config.yaml",
    ]

    for path in candidates:
        if path.exists():
            return path

    raise ConfigurationException(
        "config file not found",
        config_key=name,
        details={"searched": [str(p) for p in candidates]},
    )


def load_yaml(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    加载 YAML 配置文件（原始字典格式），并完成环境变量替换
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}

    return _replace_env_vars(config)


@lru_cache(maxsize=32)
def load_config(name: str = "app") -> ConfigDict:
    """
    加载配置文件，返回支持点访问的配置对象

    Args:
        name: 配置名称，如 "app" -> config/app.yaml

    Examples:
        config = load_config()
        print(config.registry.allow_override)  # False
    """
    return ConfigDict(load_yaml(_find_config_file(name)))


def reload_config(name: str = "app") -> ConfigDict:
    """
    重新加载配置（清除缓存）

    环境变量变化后需要调用，例如测试中 monkeypatch 了 ACTION_* 变量
    """
    load_config.cache_clear()
    return load_config(name)

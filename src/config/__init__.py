"""
统一配置模块

目录结构:
    config/
    ├── __init__.py     # 本文件，导出公共 API
    ├── loader.py       # 配置加载工具
    └── app.yaml        # action / registry 运行时配置

使用示例:
    from config import load_config

    config = load_config("app")
    print(config.registry.allow_override)
"""

from config.loader import (
    ConfigDict,
    load_config,
    load_yaml,
    reload_config,
)

__all__ = [
    "ConfigDict",
    "load_config",
    "load_yaml",
    "reload_config",
]

"""
Configuration Management
========================

Default task options loaded from JSON or YAML files.
"""

from xml_tasks.config.settings import (
    TasksConfig,
    QueryConfig,
    TransformConfig,
    ValidationConfig,
    get_default_config,
    load_config,
    save_config,
)

__all__ = [
    "TasksConfig",
    "QueryConfig",
    "TransformConfig",
    "ValidationConfig",
    "get_default_config",
    "load_config",
    "save_config",
]

"""
Configuration management for podcheck.

Provides configuration classes for object sources, cluster access and
output rendering.
"""

from podcheck.config.check_config import (
    DEFAULT_PAGE_SIZE,
    CheckConfig,
    ClusterConfig,
    OutputFormat,
    OutputMode,
    SourceConfig,
    load_config_from_env,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "CheckConfig",
    "ClusterConfig",
    "OutputFormat",
    "OutputMode",
    "SourceConfig",
    "load_config_from_env",
]

"""
Config - Black Box Interface

Purpose: Produce a NeulionConfig for the client
Interface: NeulionConfig, ConfigProvider, EnvConfigProvider, FileConfigProvider, load_config()
Hidden: Environment variable names, rc file lookup order

The client core only ever receives a NeulionConfig; it never reads the
environment or files itself.
"""

from .provider import (
    DEFAULT_AUTH_CACHE_TTL,
    ConfigProvider,
    EnvConfigProvider,
    FileConfigProvider,
    NeulionConfig,
    load_config,
)

__all__ = [
    "DEFAULT_AUTH_CACHE_TTL",
    "ConfigProvider",
    "EnvConfigProvider",
    "FileConfigProvider",
    "NeulionConfig",
    "load_config",
]

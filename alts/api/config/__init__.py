"""Config API module."""

from .AltsConfig import AltsConfig
from .LogConfig import LogConfig

__all__ = ["AltsConfig", "LogConfig"]

"""Configuration module for the Youdao dictionary tool"""

from .settings import (
    AppSettings,
    LoggingSettings,
    RenderSettings,
    YoudaoSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "YoudaoSettings",
    "RenderSettings",
    "LoggingSettings",
    "settings",
]

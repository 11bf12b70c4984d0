"""
Configuration package for the NZ Spelling Converter.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    ConverterSettings,
    CorsSettings,
    settings,
    get_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "ConverterSettings",
    "CorsSettings",
    "settings",
    "get_settings",
]

"""
Configuration package for the Travel Lens relay.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    GeocodingSettings,
    AIProviderSettings,
    SecuritySettings,
    settings,
    load_settings,
    get_settings,
    reload_settings,
)
from .loader import ConfigLoader, load_config_for_environment

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "GeocodingSettings",
    "AIProviderSettings",
    "SecuritySettings",
    "settings",
    "load_settings",
    "get_settings",
    "reload_settings",
    "ConfigLoader",
    "load_config_for_environment",
]

"""Configuration for syncpath."""

from .settings import PathSettings, Settings, get_settings

__all__ = ["PathSettings", "Settings", "get_settings"]

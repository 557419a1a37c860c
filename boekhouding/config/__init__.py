"""Configuration package."""

from boekhouding.config.settings import APP_NAME, Settings, get_settings

__all__ = ["APP_NAME", "Settings", "get_settings"]

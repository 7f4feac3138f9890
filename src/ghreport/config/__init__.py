"""Configuration for the GitHub profile report."""

from .settings import ReportSettings, get_settings, reload_settings

__all__ = ["ReportSettings", "get_settings", "reload_settings"]

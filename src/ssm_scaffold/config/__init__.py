"""
Configuration helpers for the SSM document scaffolder.
"""

from .settings import LOG_LEVELS, ScaffoldSettings, get_settings, resolve_log_level

__all__ = ["LOG_LEVELS", "ScaffoldSettings", "get_settings", "resolve_log_level"]

"""Core app configuration, errors and security."""

from careconnect.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]

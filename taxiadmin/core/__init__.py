"""
Core package for CAdministrator.
"""
from taxiadmin.core.config import settings, get_settings

__all__ = ["settings", "get_settings"]

"""
Enum type definitions for CAdministrator.
"""
from enum import Enum


class UserRole(str, Enum):
    """Login role. Admins see every driver; drivers may be hidden from each other."""
    ADMIN = "admin"
    DRIVER = "driver"

    @property
    def is_admin(self) -> bool:
        return self == UserRole.ADMIN

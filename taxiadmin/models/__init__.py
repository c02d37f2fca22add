"""
SQLAlchemy ORM Models for CAdministrator.

This module exports all domain models and enums.
"""

# Enums
from taxiadmin.models.enums import UserRole

# Base
from taxiadmin.models.base import BaseModel, TimestampMixin, IntegerPrimaryKeyMixin

# Domain Models
from taxiadmin.models.user import User
from taxiadmin.models.driver import Driver
from taxiadmin.models.car import Car
from taxiadmin.models.skift import Skift
from taxiadmin.models.expense import Expense
from taxiadmin.models.varsel import Varsel

__all__ = [
    # Enums
    "UserRole",
    # Base
    "BaseModel",
    "TimestampMixin",
    "IntegerPrimaryKeyMixin",
    # Domain Models
    "User",
    "Driver",
    "Car",
    "Skift",
    "Expense",
    "Varsel",
]

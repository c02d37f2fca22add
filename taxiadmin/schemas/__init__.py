"""
Pydantic schemas for API request/response validation.
"""

from taxiadmin.schemas.base import BaseSchema
from taxiadmin.schemas.auth import LoginRequest, LoginResponse, LoginDriver
from taxiadmin.schemas.driver import DriverCreate, DriverUpdate
from taxiadmin.schemas.car import CarCreate, CarUpdate
from taxiadmin.schemas.skift import SkiftCreate, SkiftUpdate
from taxiadmin.schemas.expense import ExpenseCreate
from taxiadmin.schemas.varsel import SweepSummarySchema, CheckAllResponse

__all__ = [
    # Base
    "BaseSchema",
    # Auth
    "LoginRequest",
    "LoginResponse",
    "LoginDriver",
    # Driver
    "DriverCreate",
    "DriverUpdate",
    # Car
    "CarCreate",
    "CarUpdate",
    # Skift
    "SkiftCreate",
    "SkiftUpdate",
    # Expense
    "ExpenseCreate",
    # Varsel
    "SweepSummarySchema",
    "CheckAllResponse",
]

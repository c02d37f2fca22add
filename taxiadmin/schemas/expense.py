"""
Expense (utgift) Pydantic schemas.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import Field, field_validator

from taxiadmin.schemas.base import BaseSchema


class ExpenseCreate(BaseSchema):
    """Schema for registering an expense. The date defaults to now."""
    date: Optional[datetime] = None
    category: str = Field(..., min_length=1, max_length=100)
    amount: Decimal
    description: Optional[str] = None
    driver_id: Optional[int] = Field(None, alias="driverId")
    car_id: Optional[int] = Field(None, alias="carId")

    @field_validator("amount", mode="before")
    @classmethod
    def accept_decimal_comma(cls, v: Any) -> Any:
        """Accept amounts typed as "123,50"."""
        if isinstance(v, str):
            return v.strip().replace(",", ".")
        return v

    @field_validator("driver_id", "car_id", mode="before")
    @classmethod
    def blank_id_is_none(cls, v: Any) -> Any:
        if v in ("", 0, "0"):
            return None
        return v

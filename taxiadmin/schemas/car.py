"""
Car Pydantic schemas.
"""
from datetime import date

from pydantic import Field, field_validator

from taxiadmin.schemas.base import BaseSchema


class CarCreate(BaseSchema):
    """Schema for creating or replacing a car."""
    license_number: str = Field(..., alias="skiltNummer", min_length=1, max_length=20)
    car_brand: str = Field(..., alias="bilmerke", min_length=1, max_length=100)
    model_year: int = Field(..., alias="arsmodell", ge=1900)

    @field_validator("model_year")
    @classmethod
    def model_year_not_after_next_year(cls, v: int) -> int:
        if v > date.today().year + 1:
            raise ValueError("Model year cannot be later than next year")
        return v


class CarUpdate(CarCreate):
    """Schema for updating a car (full replacement)."""

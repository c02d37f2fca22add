"""
Driver Pydantic schemas.

Request bodies use the Norwegian API field names as aliases.
"""
from decimal import Decimal

from pydantic import EmailStr, Field

from taxiadmin.schemas.base import BaseSchema


class DriverCreate(BaseSchema):
    """Schema for creating or replacing a driver."""
    driver_number: str = Field(..., alias="sjåforNummer", min_length=1, max_length=50)
    person_number: str = Field(..., alias="personNummer", min_length=1, max_length=20)
    name: str = Field(..., alias="fornavn", min_length=1, max_length=100)
    last_name: str = Field(..., alias="etternavn", min_length=1, max_length=100)
    address: str = Field(..., alias="adresse", min_length=1, max_length=200)
    town: str = Field(..., alias="by", min_length=1, max_length=100)
    postal_code: str = Field(..., alias="postnummer", min_length=1, max_length=10)
    telephone: str = Field(..., alias="telefon", min_length=1, max_length=30)
    email: EmailStr = Field(..., alias="epost")
    salary_percentage: Decimal = Field(..., alias="lonnprosent", ge=0, le=100)
    hide_from_others: bool = Field(False, alias="ikkeVisMegForAndre")


class DriverUpdate(DriverCreate):
    """Schema for updating a driver (full replacement)."""

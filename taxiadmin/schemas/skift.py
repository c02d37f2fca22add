"""
Skift (shift) Pydantic schemas.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from taxiadmin.schemas.base import BaseSchema, TIME_OF_DAY_PATTERN


class SkiftCreate(BaseSchema):
    """Schema for registering or replacing a shift."""
    skift_number: str = Field(..., alias="skiftNummer", min_length=1, max_length=50)
    km_between_skift: Decimal = Field(..., alias="kmMellomSkift", ge=0)

    start_date: datetime = Field(..., alias="startDato")
    stop_date: Optional[datetime] = Field(None, alias="sluttDato")
    start_time: str = Field(..., alias="startTid", pattern=TIME_OF_DAY_PATTERN)
    stop_time: Optional[str] = Field(None, alias="sluttTid", pattern=TIME_OF_DAY_PATTERN)

    salary_basis: Decimal = Field(..., alias="lonnBasis", ge=0)
    start_km: Decimal = Field(..., alias="startKm", ge=0)
    stop_km: Decimal = Field(..., alias="sluttKm", ge=0)
    total_km: Decimal = Field(..., alias="totalKm", ge=0)
    ant_turer: int = Field(..., alias="antTurer", ge=0)
    km_opptatt: Decimal = Field(..., alias="kmOpptatt", ge=0)
    tips_kontant: Decimal = Field(..., alias="tipsKontant", ge=0)
    tips_kreditt: Decimal = Field(..., alias="tipsKreditt", ge=0)
    netto: Decimal = Field(..., alias="netto")
    loyve: Optional[str] = Field(None, alias="loyve", max_length=50)

    driver_id: int = Field(..., alias="sjåforId")
    car_id: int = Field(..., alias="bilId")


class SkiftUpdate(SkiftCreate):
    """Schema for updating a shift (full replacement)."""

"""
Varsel (alert) Pydantic schemas.
"""
from pydantic import Field

from taxiadmin.schemas.base import BaseSchema


class SweepSummarySchema(BaseSchema):
    """Counts from one check of all shifts."""
    total: int
    created: int
    updated: int
    skipped: int
    failed: int = 0


class CheckAllResponse(BaseSchema):
    """Response of the check-all-shifts operation."""
    success: bool = True
    message: str = Field(default="Sjekking av alle skift fullført")
    summary: SweepSummarySchema

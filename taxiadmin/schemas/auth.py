"""Authentication request/response schemas."""
from typing import Optional

from pydantic import Field

from .base import BaseSchema


class LoginRequest(BaseSchema):
    """User login credentials."""

    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class LoginDriver(BaseSchema):
    """Driver record linked to a logged-in user."""

    id: int
    name: str
    last_name: str = Field(..., alias="lastName")
    driver_number: str = Field(..., alias="driverNumber")
    hide_from_others: bool = Field(False, alias="hideFromOthers")


class LoginResponse(BaseSchema):
    """Successful login: bearer token plus who logged in."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type (always 'bearer')")
    id: int
    username: str
    role: str
    driver_id: Optional[int] = Field(None, alias="driverId")
    driver: Optional[LoginDriver] = None

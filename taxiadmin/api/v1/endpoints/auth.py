"""Authentication endpoints."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from taxiadmin.core.security import create_access_token
from taxiadmin.db.database import get_async_session
from taxiadmin.models.enums import UserRole
from taxiadmin.schemas.auth import LoginDriver, LoginRequest, LoginResponse
from taxiadmin.services.accounts import authenticate

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> LoginResponse:
    """Login endpoint - validates credentials and returns JWT token.

    Request (JSON):
        - username: User's username (a driver logs in with the driver number)
        - password: User's password

    Response:
        - access_token: JWT token for the Authorization header
        - role, driverId and the linked driver (if any)

    Raises:
        401 Unauthorized: If credentials are invalid
    """
    user = await authenticate(session, credentials.username, credentials.password)

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    role = UserRole(user.role)
    access_token = create_access_token(user.username, claims={"role": role.value})

    logger.info(f"User '{user.username}' logged in successfully")
    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        id=user.id,
        username=user.username,
        role=role.value,
        driver_id=user.driver_id,
        driver=LoginDriver.model_validate(user.driver) if user.driver else None,
    )

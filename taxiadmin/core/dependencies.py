"""FastAPI dependencies for authentication and authorization."""
from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taxiadmin.core.security import decode_access_token
from taxiadmin.db.database import get_async_session
from taxiadmin.models.enums import UserRole
from taxiadmin.models.user import User

# HTTP Bearer token extractor (reads Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthSession:
    """The authenticated caller of one request."""
    user_id: int
    username: str
    role: UserRole
    driver_id: Optional[int] = None
    hide_from_others: bool = False

    @property
    def is_admin(self) -> bool:
        return UserRole(self.role).is_admin

    @classmethod
    def from_user(cls, user: User) -> "AuthSession":
        return cls(
            user_id=user.id,
            username=user.username,
            role=UserRole(user.role),
            driver_id=user.driver_id,
            hide_from_others=bool(user.driver and user.driver.hide_from_others),
        )


async def get_current_session(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> AuthSession:
    """Dependency resolving the bearer token to an AuthSession.

    Usage:
        @router.get("/protected")
        async def protected_route(
            auth: Annotated[AuthSession, Depends(get_current_session)]
        ):
            return {"message": f"Hello {auth.username}"}

    Raises:
        HTTPException 401: If token is missing, invalid, or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    username = decode_access_token(credentials.credentials)
    if username is None:
        raise credentials_exception

    result = await session.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()

    if user is None:
        raise credentials_exception

    return AuthSession.from_user(user)


CurrentSession = Annotated[AuthSession, Depends(get_current_session)]

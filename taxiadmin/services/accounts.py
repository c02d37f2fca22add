"""
Login accounts for admins and drivers.
"""
import logging
from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from taxiadmin.core.security import get_password_hash, verify_password
from taxiadmin.models import Driver, User, UserRole

logger = logging.getLogger(__name__)


def initial_driver_password(driver: Driver) -> str:
    """First password of a driver account: driver number followed by first name."""
    return f"{driver.driver_number}{driver.name}"


def build_driver_user(driver: Driver) -> User:
    """Driver-role account for ``driver``, logging in with the driver number."""
    return User(
        username=driver.driver_number,
        hashed_password=get_password_hash(initial_driver_password(driver)),
        role=UserRole.DRIVER,
        driver=driver,
    )


async def authenticate(session: AsyncSession, username: str, password: str) -> Optional[User]:
    """
    Look up a user by exact username and check the password.

    Returns None both for an unknown username and for a wrong password.
    """
    result = await session.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()

    if user is None:
        logger.warning(f"Login attempt failed: User '{username}' not found")
        return None

    if not verify_password(password, user.hashed_password):
        logger.warning(f"Login attempt failed: Invalid password for user '{username}'")
        return None

    return user


async def drivers_without_user(session: AsyncSession) -> list[Driver]:
    """Drivers that have no login account yet."""
    has_user = exists().where(User.driver_id == Driver.id)
    result = await session.execute(
        select(Driver).where(~has_user).order_by(Driver.driver_number)
    )
    return list(result.scalars().all())

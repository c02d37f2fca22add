"""User model for authentication."""
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .enums import UserRole

if TYPE_CHECKING:
    from .driver import Driver


class User(BaseModel):
    """User account for system authentication.

    Admins manage the fleet; every driver gets a driver-role account linked
    to their driver record. Password is stored as bcrypt hash.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        "username", String(50), unique=True, nullable=False, index=True
    )
    hashed_password: Mapped[str] = mapped_column("password", String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        "role",
        Enum(
            UserRole,
            name="user_role",
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=UserRole.DRIVER,
    )
    driver_id: Mapped[Optional[int]] = mapped_column(
        "driverId",
        ForeignKey("drivers.id", ondelete="CASCADE"),
        unique=True,
        nullable=True,
    )

    driver: Mapped[Optional["Driver"]] = relationship("Driver", lazy="selectin")

    def __repr__(self) -> str:
        return f"<User(username={self.username}, role={self.role})>"

"""
Driver model for CAdministrator.
"""
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taxiadmin.models.base import BaseModel

if TYPE_CHECKING:
    from taxiadmin.models.skift import Skift


class Driver(BaseModel):
    """
    Taxi driver with identity and payroll information.

    Attributes:
        driver_number: Unique driver number, also the login username
        person_number: Unique national identity number
        name: First name
        last_name: Last name
        address: Street address
        town: Town
        postal_code: Postal code
        telephone: Contact phone number
        email: Unique contact email
        salary_percentage: Share of the salary basis paid out (0-100)
        hide_from_others: Hide this driver from other drivers' listings
    """
    __tablename__ = "drivers"

    # Identity
    driver_number: Mapped[str] = mapped_column(
        "driverNumber",
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    person_number: Mapped[str] = mapped_column(
        "personNumber",
        String(20),
        unique=True,
        nullable=False,
    )

    name: Mapped[str] = mapped_column(
        "name",
        String(100),
        nullable=False,
    )

    last_name: Mapped[str] = mapped_column(
        "lastName",
        String(100),
        nullable=False,
    )

    # Contact
    address: Mapped[str] = mapped_column(
        "address",
        String(200),
        nullable=False,
    )

    town: Mapped[str] = mapped_column(
        "town",
        String(100),
        nullable=False,
    )

    postal_code: Mapped[str] = mapped_column(
        "postalCode",
        String(10),
        nullable=False,
    )

    telephone: Mapped[str] = mapped_column(
        "telephone",
        String(30),
        nullable=False,
    )

    email: Mapped[str] = mapped_column(
        "email",
        String(200),
        unique=True,
        nullable=False,
    )

    # Payroll
    salary_percentage: Mapped[Decimal] = mapped_column(
        "salaryPercentage",
        Numeric(5, 2),
        nullable=False,
        default=Decimal("0"),
    )

    hide_from_others: Mapped[bool] = mapped_column(
        "hideFromOthers",
        Boolean,
        nullable=False,
        default=False,
    )

    # Relationships
    skifts: Mapped[list["Skift"]] = relationship(
        "Skift",
        back_populates="driver",
        lazy="selectin",
        order_by="Skift.start_date.desc()",
    )

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.last_name}"

    def is_visible_to(self, auth) -> bool:
        """Check whether the logged-in caller may see this driver."""
        if auth.is_admin or not self.hide_from_others:
            return True
        return auth.driver_id == self.id

    def __repr__(self) -> str:
        return f"<Driver(id={self.id}, name={self.name!r}, driver_number={self.driver_number!r})>"

"""
Expense (utgift) model for CAdministrator.
"""
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taxiadmin.models.base import BaseModel

if TYPE_CHECKING:
    from taxiadmin.models.driver import Driver
    from taxiadmin.models.car import Car


class Expense(BaseModel):
    """Cost record, optionally tied to a driver and/or a car."""
    __tablename__ = "expenses"

    date: Mapped[datetime] = mapped_column(
        "date",
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    category: Mapped[str] = mapped_column(
        "category",
        String(100),
        nullable=False,
    )

    amount: Mapped[Decimal] = mapped_column(
        "amount",
        Numeric(10, 2),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(
        "description",
        Text,
        nullable=True,
    )

    driver_id: Mapped[Optional[int]] = mapped_column(
        "driverId",
        ForeignKey("drivers.id", ondelete="SET NULL"),
        nullable=True,
    )

    car_id: Mapped[Optional[int]] = mapped_column(
        "carId",
        ForeignKey("cars.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    driver: Mapped[Optional["Driver"]] = relationship("Driver", lazy="selectin")
    car: Mapped[Optional["Car"]] = relationship("Car", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Expense(id={self.id}, category={self.category!r}, amount={self.amount})>"

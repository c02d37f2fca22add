"""
Skift (shift) model for CAdministrator.
"""
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taxiadmin.models.base import BaseModel

if TYPE_CHECKING:
    from taxiadmin.models.driver import Driver
    from taxiadmin.models.car import Car


class Skift(BaseModel):
    """
    One working period for one driver in one car.

    Odometer readings follow ``total_km = stop_km - start_km``; this is a
    convention of the data entry, not enforced here. A shift is open while
    its stop date and time are unset.

    The ant_turer, km_opptatt, tips_*, netto and loyve columns keep their
    Norwegian persisted names.
    """
    __tablename__ = "skifts"

    skift_number: Mapped[str] = mapped_column(
        "skiftNumber",
        String(50),
        nullable=False,
        index=True,
    )

    km_between_skift: Mapped[Decimal] = mapped_column(
        "kmBetweenSkift",
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0"),
    )

    # Period
    start_date: Mapped[datetime] = mapped_column(
        "startDate",
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    stop_date: Mapped[Optional[datetime]] = mapped_column(
        "stopDate",
        DateTime(timezone=True),
        nullable=True,
    )

    start_time: Mapped[str] = mapped_column(
        "startTime",
        String(10),
        nullable=False,
    )

    stop_time: Mapped[Optional[str]] = mapped_column(
        "stopTime",
        String(10),
        nullable=True,
    )

    # Odometer
    start_km: Mapped[Decimal] = mapped_column("startKm", Numeric(10, 2), nullable=False)
    stop_km: Mapped[Decimal] = mapped_column("stopKm", Numeric(10, 2), nullable=False)
    total_km: Mapped[Decimal] = mapped_column("totalKm", Numeric(10, 2), nullable=False)

    # Performance
    ant_turer: Mapped[int] = mapped_column("antTurer", Integer, nullable=False, default=0)
    km_opptatt: Mapped[Decimal] = mapped_column("kmOpptatt", Numeric(10, 2), nullable=False)

    # Money (NOK)
    salary_basis: Mapped[Decimal] = mapped_column("salaryBasis", Numeric(10, 2), nullable=False)
    tips_kontant: Mapped[Decimal] = mapped_column(
        "tipsKontant", Numeric(10, 2), nullable=False, default=Decimal("0")
    )
    tips_kreditt: Mapped[Decimal] = mapped_column(
        "tipsKreditt", Numeric(10, 2), nullable=False, default=Decimal("0")
    )
    netto: Mapped[Decimal] = mapped_column("netto", Numeric(10, 2), nullable=False)

    loyve: Mapped[Optional[str]] = mapped_column(
        "loyve",
        String(50),
        nullable=True,
        comment="Taxi permit the shift was driven under",
    )

    # Foreign keys (no cascade: drivers and cars with shifts cannot be deleted)
    driver_id: Mapped[int] = mapped_column(
        "driverId",
        ForeignKey("drivers.id"),
        nullable=False,
        index=True,
    )

    car_id: Mapped[int] = mapped_column(
        "carId",
        ForeignKey("cars.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    driver: Mapped["Driver"] = relationship(
        "Driver",
        back_populates="skifts",
        lazy="selectin",
    )

    car: Mapped["Car"] = relationship(
        "Car",
        back_populates="skifts",
        lazy="selectin",
    )

    @property
    def is_open(self) -> bool:
        """Check if the shift has not been closed yet."""
        return self.stop_date is None and self.stop_time is None

    def __repr__(self) -> str:
        return f"<Skift(id={self.id}, skift_number={self.skift_number!r})>"

"""
Car model for CAdministrator.
"""
from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taxiadmin.models.base import BaseModel

if TYPE_CHECKING:
    from taxiadmin.models.skift import Skift


class Car(BaseModel):
    """
    Fleet vehicle.

    Attributes:
        license_number: Unique registration plate
        car_brand: Make of the car
        model_year: Model year
    """
    __tablename__ = "cars"

    license_number: Mapped[str] = mapped_column(
        "licenseNumber",
        String(20),
        unique=True,
        nullable=False,
        index=True,
    )

    car_brand: Mapped[str] = mapped_column(
        "carBrand",
        String(100),
        nullable=False,
    )

    model_year: Mapped[int] = mapped_column(
        "modelYear",
        Integer,
        nullable=False,
    )

    # Relationships
    skifts: Mapped[list["Skift"]] = relationship(
        "Skift",
        back_populates="car",
        lazy="selectin",
        order_by="Skift.start_date.desc()",
    )

    def __repr__(self) -> str:
        return f"<Car(id={self.id}, license_number={self.license_number!r})>"

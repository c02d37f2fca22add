"""
Varsel (low-performance alert) model for CAdministrator.
"""
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taxiadmin.models.base import BaseModel

if TYPE_CHECKING:
    from taxiadmin.models.skift import Skift


class Varsel(BaseModel):
    """
    Alert raised for a shift that fell below the performance thresholds.

    There is at most one varsel per shift. It keeps the metrics from the
    last evaluation that breached a threshold and is not removed when the
    shift later stops breaching.

    Attributes:
        skift_id: Shift this alert belongs to (unique)
        skift_number: Display number of the shift
        km_opptatt: Km driven with a fare
        opptatt_prosent: Share of total km driven with a fare (%)
        ant_turer: Trip count
        lonn_basis: Salary basis (NOK)
        reason: Breached thresholds, comma separated
    """
    __tablename__ = "varsler"

    skift_id: Mapped[int] = mapped_column(
        "skiftId",
        ForeignKey("skifts.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    skift_number: Mapped[str] = mapped_column("skiftNumber", String(50), nullable=False)
    km_opptatt: Mapped[Decimal] = mapped_column("kmOpptatt", Numeric(10, 2), nullable=False)
    opptatt_prosent: Mapped[Decimal] = mapped_column("opptattProsent", Numeric(10, 4), nullable=False)
    ant_turer: Mapped[int] = mapped_column("antTurer", Integer, nullable=False)
    lonn_basis: Mapped[Decimal] = mapped_column("lonnBasis", Numeric(10, 2), nullable=False)
    reason: Mapped[str] = mapped_column("reason", Text, nullable=False)

    skift: Mapped["Skift"] = relationship("Skift", lazy="selectin")

    @property
    def reasons(self) -> list[str]:
        return self.reason.split(", ") if self.reason else []

    def __repr__(self) -> str:
        return f"<Varsel(id={self.id}, skift_id={self.skift_id}, reason={self.reason!r})>"

"""
Low-performance alerts (varsler) for shifts.

A shift is flagged when any of four metrics falls strictly below its
threshold (defaults shown, configurable in Settings):

    Km opptatt      < 40      km driven with a fare
    Opptatt%        < 20 %    kmOpptatt / totalKm * 100 (0 when totalKm is 0)
    Antall turer    < 10      trips
    Lønnsgrunnlag   < 2000    salary basis (NOK)

All four checks always run, so the stored reason lists every breached
threshold in the order above. A shift has at most one varsel; it is created
on the first breach and refreshed on later breaches. A shift that stops
breaching keeps its varsel.
"""
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from sqlalchemy import func, literal_column, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import raiseload

from taxiadmin.core.config import Settings, get_settings
from taxiadmin.models import Skift, Varsel

logger = logging.getLogger(__name__)

REASON_KM_OPPTATT = "Km opptatt < 40"
REASON_OPPTATT_PROSENT = "Opptatt% < 20%"
REASON_ANT_TURER = "Antall turer < 10"
REASON_LONN_BASIS = "Lønnsgrunnlag < 2000"

REASON_SEPARATOR = ", "

# Varsel columns rewritten when an existing varsel is refreshed
REFRESHED_COLUMNS = ("kmOpptatt", "opptattProsent", "antTurer", "lonnBasis", "reason")

# Errors that make one shift unprocessable without stopping a sweep
ROW_ERRORS = (ValueError, TypeError, ArithmeticError, SQLAlchemyError)


def _to_number(value: Any, name: str) -> float:
    """Coerce a numeric or numeric-string value to float."""
    if value is None or isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return number


@dataclass(frozen=True)
class AlertEvaluation:
    """Outcome of checking one shift against the thresholds."""
    km_opptatt: float
    total_km: float
    opptatt_prosent: float
    ant_turer: int
    lonn_basis: float
    reasons: list[str] = field(default_factory=list)

    @property
    def should_alert(self) -> bool:
        return len(self.reasons) > 0

    @property
    def reason(self) -> str:
        """Reasons as stored on the varsel."""
        return REASON_SEPARATOR.join(self.reasons)


def evaluate_skift(
    km_opptatt: Any,
    total_km: Any,
    ant_turer: Any,
    lonn_basis: Any,
    settings: Optional[Settings] = None,
) -> AlertEvaluation:
    """
    Check shift metrics against the alert thresholds.

    Args:
        km_opptatt: Km driven with a fare
        total_km: Total km driven during the shift
        ant_turer: Number of trips
        lonn_basis: Salary basis amount
        settings: Threshold source, the application settings by default

    Values may be numbers, Decimals or numeric strings.

    Returns:
        AlertEvaluation with the reasons in fixed check order

    Raises:
        ValueError: If a value is not a finite number
    """
    settings = settings or get_settings()
    km = _to_number(km_opptatt, "kmOpptatt")
    total = _to_number(total_km, "totalKm")
    trips = _to_number(ant_turer, "antTurer")
    basis = _to_number(lonn_basis, "lonnBasis")

    opptatt_prosent = (km / total) * 100 if total > 0 else 0.0

    reasons = []
    if km < settings.varsel_min_km_opptatt:
        reasons.append(REASON_KM_OPPTATT)
    if opptatt_prosent < settings.varsel_min_opptatt_prosent:
        reasons.append(REASON_OPPTATT_PROSENT)
    if trips < settings.varsel_min_ant_turer:
        reasons.append(REASON_ANT_TURER)
    if basis < settings.varsel_min_lonn_basis:
        reasons.append(REASON_LONN_BASIS)

    return AlertEvaluation(
        km_opptatt=km,
        total_km=total,
        opptatt_prosent=opptatt_prosent,
        ant_turer=int(trips),
        lonn_basis=basis,
        reasons=reasons,
    )


def evaluate(skift: Skift) -> AlertEvaluation:
    """Check a stored shift against the alert thresholds."""
    return evaluate_skift(
        km_opptatt=skift.km_opptatt,
        total_km=skift.total_km,
        ant_turer=skift.ant_turer,
        lonn_basis=skift.salary_basis,
    )


class ReconcileOutcome(str, Enum):
    """What reconciling one shift did to its varsel."""
    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"


async def upsert_varsel(
    session: AsyncSession,
    skift: Skift,
    evaluation: AlertEvaluation,
) -> ReconcileOutcome:
    """
    Insert or refresh the varsel of a shift in one statement.

    Uses INSERT .. ON CONFLICT on the unique shift id, so overlapping
    sweeps cannot create duplicate rows. ``xmax`` is 0 only for a row the
    statement inserted, which tells a create from an update.
    """
    table = Varsel.__table__
    stmt = insert(table).values(
        skiftId=skift.id,
        skiftNumber=skift.skift_number,
        kmOpptatt=evaluation.km_opptatt,
        opptattProsent=evaluation.opptatt_prosent,
        antTurer=evaluation.ant_turer,
        lonnBasis=evaluation.lonn_basis,
        reason=evaluation.reason,
    )
    refreshed = {name: stmt.excluded[name] for name in REFRESHED_COLUMNS}
    refreshed["updatedAt"] = func.current_timestamp()
    stmt = stmt.on_conflict_do_update(
        index_elements=["skiftId"],
        set_=refreshed,
    ).returning(
        table.c.id,
        literal_column("(xmax = 0)").label("inserted"),
    )

    result = await session.execute(stmt)
    row = result.one()
    return ReconcileOutcome.CREATED if row.inserted else ReconcileOutcome.UPDATED


async def reconcile_skift(session: AsyncSession, skift: Skift) -> ReconcileOutcome:
    """
    Bring the varsel of one shift in line with its current metrics.

    A shift below no threshold is skipped and an existing varsel is left
    as it is.

    Raises:
        ValueError: If a metric of the shift is not numeric
    """
    evaluation = evaluate(skift)
    if not evaluation.should_alert:
        return ReconcileOutcome.SKIPPED

    outcome = await upsert_varsel(session, skift, evaluation)
    logger.debug(
        f"Varsel {outcome.value} for skift {skift.skift_number}: {evaluation.reason}"
    )
    return outcome


async def refresh_varsel(session: AsyncSession, skift: Skift) -> Optional[ReconcileOutcome]:
    """
    Reconcile the varsel after a shift was created or changed.

    Runs in a savepoint; a failure is logged and leaves the shift write
    intact.
    """
    try:
        async with session.begin_nested():
            return await reconcile_skift(session, skift)
    except ROW_ERRORS as e:
        logger.error(f"Failed to update varsel for skift {skift.skift_number}: {e}")
        return None


@dataclass
class SweepSummary:
    """Counts from checking every shift.

    Shifts that failed are counted in ``failed`` and also in ``skipped``, so
    ``created + updated + skipped == total``.
    """
    total: int = 0
    created: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0

    def record(self, outcome: ReconcileOutcome) -> None:
        self.total += 1
        if outcome == ReconcileOutcome.CREATED:
            self.created += 1
        elif outcome == ReconcileOutcome.UPDATED:
            self.updated += 1
        else:
            self.skipped += 1

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "created": self.created,
            "updated": self.updated,
            "skipped": self.skipped,
            "failed": self.failed,
        }


async def check_all_skifts(session: AsyncSession) -> SweepSummary:
    """
    Reconcile the varsel of every shift.

    Shifts are processed one at a time in id order, each inside its own
    savepoint. A shift that cannot be processed is logged and skipped; only
    a failure to read the shifts themselves aborts the sweep.

    Returns:
        SweepSummary with created/updated/skipped counts
    """
    logger.info("Fetching all skifts...")
    result = await session.execute(
        select(Skift).options(raiseload("*")).order_by(Skift.id)
    )
    skifts = result.scalars().all()
    logger.info(f"Found {len(skifts)} skifts to check")

    summary = SweepSummary()
    for skift in skifts:
        try:
            async with session.begin_nested():
                outcome = await reconcile_skift(session, skift)
        except ROW_ERRORS as e:
            logger.error(f"Failed to check skift {skift.skift_number} (id={skift.id}): {e}")
            summary.failed += 1
            outcome = ReconcileOutcome.SKIPPED
        summary.record(outcome)

    logger.info(f"Varsel sweep finished: {summary.to_dict()}")
    return summary

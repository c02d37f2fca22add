"""
Skift (shift) API endpoints.

Creating or changing a shift re-evaluates its varsel.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taxiadmin.core.dependencies import CurrentSession
from taxiadmin.db.database import get_async_session
from taxiadmin.models import Car, Driver, Skift
from taxiadmin.schemas.skift import SkiftCreate, SkiftUpdate
from taxiadmin.services.field_mapping import EntityKind, to_external, to_internal
from taxiadmin.services.varsler import refresh_varsel

router = APIRouter()
logger = logging.getLogger(__name__)


def skift_to_external(skift: Skift) -> dict:
    """Shift with its driver and car in the Norwegian API shape."""
    return to_external(skift.to_dict("driver", "car"), EntityKind.SKIFT)


async def _get_skift(session: AsyncSession, skift_id: int) -> Skift:
    result = await session.execute(select(Skift).where(Skift.id == skift_id))
    skift = result.scalar_one_or_none()

    if not skift:
        raise HTTPException(status_code=404, detail="Skift not found")
    return skift


async def _check_references(session: AsyncSession, data: SkiftCreate) -> None:
    """The shift's driver and car must exist."""
    if await session.get(Driver, data.driver_id) is None:
        raise HTTPException(status_code=400, detail=f"Sjåfør {data.driver_id} finnes ikke")
    if await session.get(Car, data.car_id) is None:
        raise HTTPException(status_code=400, detail=f"Bil {data.car_id} finnes ikke")


@router.get("")
async def list_skifts(
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """List all shifts with driver and car, newest first."""
    result = await session.execute(select(Skift).order_by(Skift.start_date.desc()))
    skifts = result.scalars().all()

    return [skift_to_external(skift) for skift in skifts]


@router.get("/{skift_id}")
async def get_skift(
    skift_id: int,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Get a specific shift by ID."""
    skift = await _get_skift(session, skift_id)
    return skift_to_external(skift)


@router.post("", status_code=201)
async def create_skift(
    data: SkiftCreate,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Register a shift.

    A varsel is created when the shift falls below any performance
    threshold.
    """
    await _check_references(session, data)

    skift = Skift.from_record(to_internal(data.to_api_record(), EntityKind.SKIFT))
    session.add(skift)
    await session.flush()
    await session.refresh(skift)

    await refresh_varsel(session, skift)

    logger.info(f"Skift {skift.skift_number} registered by {auth.username}")
    return skift_to_external(skift)


@router.put("/{skift_id}")
async def update_skift(
    skift_id: int,
    data: SkiftUpdate,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Replace a shift's data and re-evaluate its varsel."""
    skift = await _get_skift(session, skift_id)
    await _check_references(session, data)

    skift.apply_record(to_internal(data.to_api_record(), EntityKind.SKIFT))
    await session.flush()
    await session.refresh(skift)

    await refresh_varsel(session, skift)

    return skift_to_external(skift)


@router.delete("/{skift_id}")
async def delete_skift(
    skift_id: int,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete a shift. Its varsel goes with it."""
    skift = await _get_skift(session, skift_id)

    await session.delete(skift)
    logger.info(f"Skift {skift.skift_number} deleted by {auth.username}")
    return {"message": "Skift deleted successfully"}

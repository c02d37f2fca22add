"""
Driver API endpoints.

Responses use the Norwegian field names.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taxiadmin.core.dependencies import CurrentSession
from taxiadmin.db.database import get_async_session
from taxiadmin.models import Driver, Skift, User
from taxiadmin.schemas.driver import DriverCreate, DriverUpdate
from taxiadmin.services.accounts import build_driver_user
from taxiadmin.services.field_mapping import EntityKind, to_external, to_internal

router = APIRouter()
logger = logging.getLogger(__name__)

DUPLICATE_MESSAGES = {
    "driver_number": "Sjåførnummer eksisterer allerede",
    "person_number": "Personnummer eksisterer allerede",
    "email": "E-post eksisterer allerede",
}
DUPLICATE_USERNAME = "Brukernavn eksisterer allerede"
DUPLICATE_ANY = "En eller flere felt eksisterer allerede"


async def _check_unique(
    session: AsyncSession,
    data: DriverCreate,
    driver_id: int | None = None,
) -> None:
    """Reject values already used by another driver (400, Norwegian text)."""
    query = select(Driver).where(
        or_(
            Driver.driver_number == data.driver_number,
            Driver.person_number == data.person_number,
            Driver.email == data.email,
        )
    )
    if driver_id is not None:
        query = query.where(Driver.id != driver_id)

    result = await session.execute(query)
    existing = result.scalars().first()
    if existing is None:
        return

    for field, message in DUPLICATE_MESSAGES.items():
        if getattr(existing, field) == getattr(data, field):
            raise HTTPException(status_code=400, detail=message)
    raise HTTPException(status_code=400, detail=DUPLICATE_ANY)


async def _get_driver(session: AsyncSession, driver_id: int) -> Driver:
    result = await session.execute(select(Driver).where(Driver.id == driver_id))
    driver = result.scalar_one_or_none()

    if not driver:
        raise HTTPException(status_code=404, detail="Driver not found")
    return driver


def driver_to_external(driver: Driver) -> dict:
    """Driver with its shifts in the Norwegian API shape."""
    return to_external(driver.to_dict("skifts"), EntityKind.DRIVER)


@router.get("")
async def list_drivers(
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """
    List drivers with their shifts, newest shift first.

    Drivers who asked to be hidden are only listed for admins and for
    themselves.
    """
    result = await session.execute(select(Driver).order_by(Driver.name))
    drivers = result.scalars().all()

    return [
        driver_to_external(driver)
        for driver in drivers
        if driver.is_visible_to(auth)
    ]


@router.get("/{driver_id}")
async def get_driver(
    driver_id: int,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Get a specific driver by ID, with shifts and the car of each shift."""
    driver = await _get_driver(session, driver_id)
    if not driver.is_visible_to(auth):
        raise HTTPException(status_code=404, detail="Driver not found")

    data = to_external(driver.to_dict(), EntityKind.DRIVER)
    data["skifts"] = [
        to_external(skift.to_dict("car"), EntityKind.SKIFT)
        for skift in driver.skifts
    ]
    return data


@router.post("", status_code=201)
async def create_driver(
    data: DriverCreate,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Create a new driver together with the driver's login account.

    The account's username is the driver number and the first password is
    the driver number followed by the first name.
    """
    await _check_unique(session, data)

    existing_user = await session.execute(
        select(User).where(User.username == data.driver_number)
    )
    if existing_user.scalar_one_or_none():
        raise HTTPException(status_code=400, detail=DUPLICATE_USERNAME)

    driver = Driver.from_record(to_internal(data.to_api_record(), EntityKind.DRIVER))
    session.add(driver)
    session.add(build_driver_user(driver))

    try:
        await session.flush()
    except IntegrityError as e:
        logger.warning(f"Driver {data.driver_number} conflicts with an existing record: {e.orig}")
        raise HTTPException(status_code=400, detail=DUPLICATE_ANY)

    await session.refresh(driver)
    logger.info(f"Driver {driver.driver_number} created by {auth.username}")

    return driver_to_external(driver)


@router.put("/{driver_id}")
async def update_driver(
    driver_id: int,
    data: DriverUpdate,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Replace a driver's data."""
    driver = await _get_driver(session, driver_id)
    await _check_unique(session, data, driver_id=driver_id)

    driver.apply_record(to_internal(data.to_api_record(), EntityKind.DRIVER))

    try:
        await session.flush()
    except IntegrityError as e:
        logger.warning(f"Driver {driver_id} update conflicts with an existing record: {e.orig}")
        raise HTTPException(status_code=400, detail=DUPLICATE_ANY)

    await session.refresh(driver)
    return driver_to_external(driver)


@router.delete("/{driver_id}")
async def delete_driver(
    driver_id: int,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete a driver. Drivers with registered shifts cannot be deleted."""
    driver = await _get_driver(session, driver_id)

    has_skifts = await session.scalar(
        select(Skift.id).where(Skift.driver_id == driver_id).limit(1)
    )
    if has_skifts is not None:
        raise HTTPException(status_code=409, detail="Sjåføren har registrerte skift")

    await session.delete(driver)
    logger.info(f"Driver {driver.driver_number} deleted by {auth.username}")
    return {"message": "Driver deleted successfully"}

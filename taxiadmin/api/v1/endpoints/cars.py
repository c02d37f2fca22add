"""
Car API endpoints.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taxiadmin.core.dependencies import CurrentSession
from taxiadmin.db.database import get_async_session
from taxiadmin.models import Car, Skift
from taxiadmin.schemas.car import CarCreate, CarUpdate
from taxiadmin.services.field_mapping import EntityKind, to_external, to_internal

router = APIRouter()
logger = logging.getLogger(__name__)

# Shifts embedded per car in the listing
LATEST_SKIFTS_PER_CAR = 5

DUPLICATE_LICENSE_NUMBER = "Skiltnummer eksisterer allerede"


async def _get_car(session: AsyncSession, car_id: int) -> Car:
    result = await session.execute(select(Car).where(Car.id == car_id))
    car = result.scalar_one_or_none()

    if not car:
        raise HTTPException(status_code=404, detail="Car not found")
    return car


async def _check_license_number(
    session: AsyncSession,
    license_number: str,
    car_id: int | None = None,
) -> None:
    query = select(Car).where(Car.license_number == license_number)
    if car_id is not None:
        query = query.where(Car.id != car_id)

    existing = await session.execute(query)
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=400, detail=DUPLICATE_LICENSE_NUMBER)


@router.get("")
async def list_cars(
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """List cars by license number, each with its latest shifts."""
    result = await session.execute(select(Car).order_by(Car.license_number))
    cars = result.scalars().all()

    items = []
    for car in cars:
        data = to_external(car.to_dict(), EntityKind.CAR)
        data["skifts"] = [
            to_external(skift.to_dict(), EntityKind.SKIFT)
            for skift in car.skifts[:LATEST_SKIFTS_PER_CAR]
        ]
        items.append(data)
    return items


@router.get("/{car_id}")
async def get_car(
    car_id: int,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Get a specific car by ID, with shifts and the driver of each shift."""
    car = await _get_car(session, car_id)

    data = to_external(car.to_dict(), EntityKind.CAR)
    data["skifts"] = [
        to_external(skift.to_dict("driver"), EntityKind.SKIFT)
        for skift in car.skifts
    ]
    return data


@router.post("", status_code=201)
async def create_car(
    data: CarCreate,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Create a new car."""
    await _check_license_number(session, data.license_number)

    car = Car.from_record(to_internal(data.to_api_record(), EntityKind.CAR))
    session.add(car)
    await session.flush()
    await session.refresh(car)

    logger.info(f"Car {car.license_number} created by {auth.username}")
    return to_external(car.to_dict(), EntityKind.CAR)


@router.put("/{car_id}")
async def update_car(
    car_id: int,
    data: CarUpdate,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Replace a car's data."""
    car = await _get_car(session, car_id)
    await _check_license_number(session, data.license_number, car_id=car_id)

    car.apply_record(to_internal(data.to_api_record(), EntityKind.CAR))
    await session.flush()
    await session.refresh(car)

    return to_external(car.to_dict(), EntityKind.CAR)


@router.delete("/{car_id}")
async def delete_car(
    car_id: int,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete a car. Cars with registered shifts cannot be deleted."""
    car = await _get_car(session, car_id)

    has_skifts = await session.scalar(
        select(Skift.id).where(Skift.car_id == car_id).limit(1)
    )
    if has_skifts is not None:
        raise HTTPException(status_code=409, detail="Bilen har registrerte skift")

    await session.delete(car)
    logger.info(f"Car {car.license_number} deleted by {auth.username}")
    return {"message": "Car deleted successfully"}

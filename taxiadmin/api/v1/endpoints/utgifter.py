"""
Expense (utgift) API endpoints.

Expenses keep their persisted field names in responses.
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from taxiadmin.core.dependencies import CurrentSession
from taxiadmin.db.database import get_async_session
from taxiadmin.models import Car, Driver, Expense
from taxiadmin.schemas.expense import ExpenseCreate

router = APIRouter()
logger = logging.getLogger(__name__)


async def _check_references(session: AsyncSession, data: ExpenseCreate) -> None:
    """A given driver or car must exist."""
    if data.driver_id is not None and await session.get(Driver, data.driver_id) is None:
        raise HTTPException(status_code=400, detail=f"Sjåfør {data.driver_id} finnes ikke")
    if data.car_id is not None and await session.get(Car, data.car_id) is None:
        raise HTTPException(status_code=400, detail=f"Bil {data.car_id} finnes ikke")


@router.get("")
async def list_expenses(
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """List all expenses with driver and car, newest first."""
    result = await session.execute(select(Expense).order_by(Expense.date.desc()))
    return [expense.to_dict("driver", "car") for expense in result.scalars().all()]


@router.post("", status_code=201)
async def create_expense(
    data: ExpenseCreate,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Register an expense.

    - **amount** may be a number or a string with decimal comma ("149,90")
    - **date** defaults to the current time
    """
    await _check_references(session, data)

    expense = Expense(
        date=data.date or datetime.now(timezone.utc),
        category=data.category,
        amount=data.amount,
        description=data.description,
        driver_id=data.driver_id,
        car_id=data.car_id,
    )
    session.add(expense)
    await session.flush()
    await session.refresh(expense)

    logger.info(f"Expense {expense.category} {expense.amount} registered by {auth.username}")
    return expense.to_dict()


@router.delete("")
async def delete_all_expenses(
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete every expense."""
    result = await session.execute(delete(Expense))
    logger.warning(f"All expenses ({result.rowcount}) deleted by {auth.username}")
    return {"deleted": result.rowcount}


@router.get("/by-car/{car_id}")
async def list_expenses_by_car(
    car_id: int,
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """List the expenses of one car, newest first."""
    result = await session.execute(
        select(Expense).where(Expense.car_id == car_id).order_by(Expense.date.desc())
    )
    return [expense.to_dict() for expense in result.scalars().all()]

"""
Varsel (low-performance alert) API endpoints.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taxiadmin.core.dependencies import CurrentSession
from taxiadmin.db.database import get_async_session
from taxiadmin.models import Varsel
from taxiadmin.schemas.varsel import CheckAllResponse, SweepSummarySchema
from taxiadmin.services.field_mapping import EntityKind, to_external
from taxiadmin.services.varsler import check_all_skifts

router = APIRouter()
logger = logging.getLogger(__name__)

SKIFT_SUMMARY_FIELDS = ("id", "skiftNummer", "startDato", "sluttDato", "startTid", "sluttTid", "totalKm")
DRIVER_SUMMARY_FIELDS = ("id", "fornavn", "etternavn", "sjåforNummer")
CAR_SUMMARY_FIELDS = ("id", "skiltNummer", "bilmerke", "arsmodell")


def _pick(record: dict, fields: tuple[str, ...]) -> dict:
    return {name: record.get(name) for name in fields}


def varsel_to_external(varsel: Varsel) -> dict:
    """Varsel with a summary of its shift, driver and car."""
    data = {
        "id": varsel.id,
        "skiftId": varsel.skift_id,
        "skiftNummer": varsel.skift_number,
        "kmOpptatt": float(varsel.km_opptatt),
        "opptattProsent": round(float(varsel.opptatt_prosent), 2),
        "antTurer": varsel.ant_turer,
        "lonnBasis": float(varsel.lonn_basis),
        "reason": varsel.reason,
        "createdAt": varsel.created_at,
        "updatedAt": varsel.updated_at,
    }

    skift = varsel.skift
    if skift is not None:
        summary = _pick(to_external(skift.to_dict(), EntityKind.SKIFT), SKIFT_SUMMARY_FIELDS)
        summary["totalKm"] = float(skift.total_km)
        if skift.driver is not None:
            summary["driver"] = _pick(
                to_external(skift.driver.to_dict(), EntityKind.DRIVER), DRIVER_SUMMARY_FIELDS
            )
        if skift.car is not None:
            summary["car"] = _pick(
                to_external(skift.car.to_dict(), EntityKind.CAR), CAR_SUMMARY_FIELDS
            )
        data["skift"] = summary

    return data


@router.get("")
async def list_varsler(
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """List all varsler, newest first."""
    result = await session.execute(select(Varsel).order_by(Varsel.created_at.desc()))
    return [varsel_to_external(varsel) for varsel in result.scalars().all()]


@router.post(
    "/check-all",
    response_model=CheckAllResponse,
    responses={500: {"description": "Shifts could not be read"}},
)
async def check_all(
    auth: CurrentSession,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Check every shift against the varsel thresholds.

    Creates missing varsler and refreshes existing ones. Shifts that no
    longer breach a threshold keep their varsel.

    Response summary: total, created, updated, skipped (failed shifts are
    counted as skipped and reported in failed).
    """
    logger.info(f"Varsel check of all skifts started by {auth.username}")
    try:
        summary = await check_all_skifts(session)
    except SQLAlchemyError as e:
        logger.exception("Error checking skifts")
        await session.rollback()
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to check skifts", "details": type(e).__name__},
        )

    return CheckAllResponse(
        success=True,
        summary=SweepSummarySchema(**summary.to_dict()),
    )

"""
API v1 router aggregation.
"""
from fastapi import APIRouter

from taxiadmin.api.v1.endpoints import auth, drivers, cars, skifts, utgifter, varsler

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router)

api_router.include_router(
    drivers.router,
    prefix="/drivers",
    tags=["Drivers"],
)

api_router.include_router(
    cars.router,
    prefix="/cars",
    tags=["Cars"],
)

api_router.include_router(
    skifts.router,
    prefix="/skifts",
    tags=["Skifts"],
)

api_router.include_router(
    utgifter.router,
    prefix="/utgifter",
    tags=["Utgifter"],
)

api_router.include_router(
    varsler.router,
    prefix="/varsler",
    tags=["Varsler"],
)

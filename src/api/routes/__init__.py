from fastapi import APIRouter

from .places import router as places_router
from .health import router as health_router

api_router = APIRouter()

api_router.include_router(
    places_router,
    prefix="/places",
    tags=["Places"],
)

api_router.include_router(
    health_router,
    prefix="/health",
    tags=["Health"],
)

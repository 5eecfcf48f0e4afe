"""Development-only routes"""
import logging
from fastapi import APIRouter, Depends
from ..config import Settings
from ..dependencies import get_settings, get_store
from ..errors import ForbiddenError
from ..schemas.response import SeedResponse, ErrorResponse
from ..storage import TripStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dev", tags=["dev"])


@router.post(
    "/seed",
    response_model=SeedResponse,
    responses={
        403: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    }
)
async def seed(settings: Settings = Depends(get_settings), store: TripStore = Depends(get_store)):
    """
    Write the demo profile and trip into the active store

    Raises:
        ForbiddenError: In production
    """
    if settings.is_production:
        raise ForbiddenError("Not allowed in production")

    demo_profile, demo_trip = await store.seed_demo()
    logger.info(f"Seeded demo data into {store.name} store")
    return SeedResponse(demo_profile=demo_profile, demo_trip=demo_trip)

"""JSON endpoint exposing the fighter browser's filter vocabularies."""

from fastapi import APIRouter, Depends

from mma_scheduler.schemas.error import ErrorResponse
from mma_scheduler.schemas.fighter import FilterOptionsResponse
from mma_scheduler.services.dependencies import get_fighter_service
from mma_scheduler.services.fighter_service import FighterService

router = APIRouter()


@router.get(
    "/filter-options",
    response_model=FilterOptionsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_filter_options(
    service: FighterService = Depends(get_fighter_service),
) -> FilterOptionsResponse:
    """Distinct nationalities (alphabetical) and weight classes (division order)."""
    return await service.get_filter_options()

"""JSON endpoint paging through the yearly event schedule."""

from fastapi import APIRouter, Depends, Query, Response

from mma_scheduler.api.params import parse_pagination
from mma_scheduler.schemas.error import ErrorResponse
from mma_scheduler.schemas.event import EventListResponse
from mma_scheduler.services.dependencies import get_app_settings, get_event_service
from mma_scheduler.services.event_service import EventService
from mma_scheduler.settings import AppSettings
from mma_scheduler.utils.event_utils import SCHEDULED_CACHE_CONTROL, parse_year_filter

router = APIRouter()


@router.get(
    "/events",
    response_model=EventListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_events(
    response: Response,
    year: str | None = Query(
        None, description="Calendar year (UTC); 0, missing or out of range = all"
    ),
    offset: str | None = Query(None),
    limit: str | None = Query(None),
    service: EventService = Depends(get_event_service),
    settings: AppSettings = Depends(get_app_settings),
) -> EventListResponse:
    """Events of one year in ascending date order with ``hasMore``/``nextOffset``."""
    page_offset, page_limit = parse_pagination(
        offset, limit, default_limit=settings.events_page_size
    )
    selected_year = parse_year_filter(year)

    result = await service.list_events_for_year(
        selected_year, offset=page_offset, limit=page_limit
    )
    response.headers["Cache-Control"] = SCHEDULED_CACHE_CONTROL
    return result

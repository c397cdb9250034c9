"""JSON endpoints backing the fighter browser and fight history pagination."""

from fastapi import APIRouter, Depends, Query

from mma_scheduler.api.params import parse_flag, parse_pagination
from mma_scheduler.db.repositories.fighter_repository import normalize_fighter_filters
from mma_scheduler.schemas.error import ErrorResponse
from mma_scheduler.schemas.fight import FightHistoryResponse
from mma_scheduler.schemas.fighter import FighterListResponse, LegacyFighterListResponse
from mma_scheduler.services.dependencies import get_app_settings, get_fighter_service
from mma_scheduler.services.fighter_service import FighterService
from mma_scheduler.settings import AppSettings

router = APIRouter()

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


@router.get("/fighters", response_model=FighterListResponse, responses=_ERROR_RESPONSES)
async def list_fighters(
    offset: str | None = Query(None, description="Rows to skip (default 0)"),
    limit: str | None = Query(None, description="Page size (default 10)"),
    search: str | None = Query(None, description="Case-insensitive name substring"),
    status: str | None = Query(
        None, description="Fighter status; 'Retired' also matches 'Not Fighting'"
    ),
    champion: str | None = Query(None, description="'true' keeps champions only"),
    weight_class: list[str] = Query(
        [], alias="weightClass", description="Repeat to include several divisions"
    ),
    nationality: list[str] = Query([], description="Repeat to include several countries"),
    service: FighterService = Depends(get_fighter_service),
    settings: AppSettings = Depends(get_app_settings),
) -> FighterListResponse:
    """Filtered, name-ordered page of fighters plus the total match count."""
    page_offset, page_limit = parse_pagination(
        offset, limit, default_limit=settings.fighters_page_size
    )
    filters = normalize_fighter_filters(
        search=search,
        status=status,
        champion=parse_flag(champion),
        weight_classes=weight_class,
        nationalities=nationality,
    )
    return await service.list_fighters(filters, offset=page_offset, limit=page_limit)


@router.get(
    "/fighters.json",
    response_model=LegacyFighterListResponse,
    responses=_ERROR_RESPONSES,
)
async def list_all_fighters(
    offset: str | None = Query(None),
    limit: str | None = Query(None),
    service: FighterService = Depends(get_fighter_service),
    settings: AppSettings = Depends(get_app_settings),
) -> LegacyFighterListResponse:
    """Unfiltered fighter page with every column."""
    page_offset, page_limit = parse_pagination(
        offset, limit, default_limit=settings.fighters_page_size
    )
    return await service.list_all_fighters(offset=page_offset, limit=page_limit)


@router.get(
    "/fighters/{fighter_id}/fights",
    response_model=FightHistoryResponse,
    responses=_ERROR_RESPONSES,
)
async def get_fight_history(
    fighter_id: str,
    offset: str | None = Query(None),
    limit: str | None = Query(None),
    service: FighterService = Depends(get_fighter_service),
    settings: AppSettings = Depends(get_app_settings),
) -> FightHistoryResponse:
    """Fight history of a fighter, most recent first.

    Args:
        fighter_id: Fighter identifier
        offset: Rows to skip
        limit: Page size (defaults to the fighter browser page size)

    Returns:
        The requested page, the total number of fights and ``hasMore``
    """
    page_offset, page_limit = parse_pagination(
        offset, limit, default_limit=settings.fighters_page_size
    )
    return await service.get_fight_history(fighter_id, offset=page_offset, limit=page_limit)

"""Server-rendered HTML pages."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from mma_scheduler.schemas.error import ErrorPage, ErrorType
from mma_scheduler.services.dependencies import (
    get_app_settings,
    get_event_service,
    get_fighter_service,
    get_ranking_service,
)
from mma_scheduler.services.event_service import EventService
from mma_scheduler.services.fighter_service import FighterService
from mma_scheduler.services.ranking_service import RankingService
from mma_scheduler.settings import AppSettings
from mma_scheduler.utils.date_math import utc_now
from mma_scheduler.utils.event_utils import cache_control_for, parse_year
from mma_scheduler.utils.request_context import get_request_id
from mma_scheduler.web.templating import render_error_page, templates

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    service: EventService = Depends(get_event_service),
    settings: AppSettings = Depends(get_app_settings),
) -> HTMLResponse:
    upcoming = await service.list_upcoming(limit=settings.upcoming_events_limit)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": "MMA Scheduler", "events": upcoming},
    )


@router.get("/events")
async def events_index() -> RedirectResponse:
    """Send visitors to the current year's schedule."""
    return RedirectResponse(
        url=f"/events/{utc_now().year}", status_code=status.HTTP_302_FOUND
    )


@router.get("/events/event/{event_id}", response_class=HTMLResponse)
async def event_detail(
    request: Request,
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> HTMLResponse:
    """Event header and fight card.

    Completed cards are cached for a day, everything else for an hour.
    """
    event = await service.get_event_detail(event_id)
    if event is None:
        logger.info("Event %s not found", event_id)
        return render_error_page(
            request,
            ErrorPage(
                error_type=ErrorType.NOT_FOUND,
                title="Event not found",
                message="The event you are looking for does not exist.",
                status_code=status.HTTP_404_NOT_FOUND,
                request_id=get_request_id(),
                back_url="/events",
                back_label="Back to events",
            ),
        )

    response = templates.TemplateResponse(
        request,
        "event_detail.html",
        {"title": event.name, "event": event},
    )
    response.headers["Cache-Control"] = cache_control_for(event.status)
    return response


@router.get("/events/{year}", response_class=HTMLResponse)
async def events_for_year(
    request: Request,
    year: str,
    service: EventService = Depends(get_event_service),
    settings: AppSettings = Depends(get_app_settings),
) -> HTMLResponse:
    current_year = utc_now().year
    selected_year = parse_year(year, current_year)
    years = await service.list_years(current_year)
    return templates.TemplateResponse(
        request,
        "events_year.html",
        {
            "title": f"UFC Events {selected_year}",
            "selected_year": selected_year,
            "years": years,
            "page_size": settings.events_page_size,
        },
    )


@router.get("/fighters", response_class=HTMLResponse)
async def fighters_index(
    request: Request,
    settings: AppSettings = Depends(get_app_settings),
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "fighters.html",
        {"title": "UFC Fighters", "page_size": settings.fighters_page_size},
    )


@router.get("/fighters/{fighter_id}", response_class=HTMLResponse)
async def fighter_detail(
    request: Request,
    fighter_id: str,
    service: FighterService = Depends(get_fighter_service),
    settings: AppSettings = Depends(get_app_settings),
) -> HTMLResponse:
    """Fighter profile with the first page of fights; the rest is embedded as JSON."""
    profile = await service.get_profile(fighter_id)
    if profile is None:
        logger.info("Fighter %s not found", fighter_id)
        return render_error_page(
            request,
            ErrorPage(
                error_type=ErrorType.NOT_FOUND,
                title="Fighter Not Found",
                message="The fighter you are looking for does not exist.",
                status_code=status.HTTP_404_NOT_FOUND,
                request_id=get_request_id(),
                back_url="/fighters",
                back_label="Back to fighters",
            ),
        )

    records = await service.get_fight_records(fighter_id)
    page_size = settings.fight_history_page_size
    return templates.TemplateResponse(
        request,
        "fighter_detail.html",
        {
            "title": profile.name,
            "fighter": profile,
            "fights": records[:page_size],
            "all_fights": [record.model_dump(mode="json") for record in records],
            "page_size": page_size,
        },
    )


@router.get("/rankings", response_class=HTMLResponse)
async def rankings(
    request: Request,
    service: RankingService = Depends(get_ranking_service),
) -> HTMLResponse:
    roster = await service.get_roster()
    return templates.TemplateResponse(
        request,
        "rankings.html",
        {"title": "UFC Rankings", "roster": roster},
    )

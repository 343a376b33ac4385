"""
Events API endpoints, mounted at /api/events.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_event_service
from shared.models import AuthenticatedUser

from .interfaces import IEventService
from .models import CreateEventRequest, Event, EventListResponse, UpdateEventRequest

router = APIRouter()


@router.get("", response_model=EventListResponse)
async def list_events(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> EventListResponse:
    return EventListResponse(events=await service.list_events(user.id))


@router.post("", response_model=Event, status_code=201)
async def create_event(
    request: CreateEventRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    return await service.create_event(user.id, request)


@router.get("/upcoming", response_model=EventListResponse)
async def list_upcoming(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> EventListResponse:
    """Visible events that have not started yet."""
    return EventListResponse(events=await service.list_upcoming(user.id))


@router.get("/organizer/{organizer_id}", response_model=EventListResponse)
async def list_by_organizer(
    organizer_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> EventListResponse:
    return EventListResponse(events=await service.list_by_organizer(organizer_id, user.id))


@router.get("/sport/{sport}", response_model=EventListResponse)
async def list_by_sport(
    sport: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> EventListResponse:
    return EventListResponse(events=await service.list_by_sport(sport, user.id))


@router.get("/{event_id}", response_model=Event)
async def get_event(
    event_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    return await service.get_event(event_id, user.id)


@router.patch("/{event_id}", response_model=Event)
async def update_event(
    event_id: str,
    request: UpdateEventRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    return await service.update_event(event_id, user.id, request)


@router.delete("/{event_id}", status_code=204)
async def delete_event(
    event_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> None:
    await service.delete_event(event_id, user.id)


@router.post("/{event_id}/attendance", response_model=Event)
async def attend(
    event_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    return await service.attend(event_id, user.id)


@router.delete("/{event_id}/attendance", response_model=Event)
async def unattend(
    event_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    return await service.unattend(event_id, user.id)

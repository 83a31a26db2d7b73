"""Read-only event routes.

Mounted on their own when the service runs with READ_ONLY=true, and reused by
the full event router otherwise.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from calendar_api.database.repositories import EventRepository
from calendar_api.errors import NotFoundError
from calendar_api.handlers.dependencies import get_event_repository
from calendar_api.models import ApiResponse, Event

router = APIRouter(tags=["events"])


@router.get("/events", response_model=ApiResponse[List[Event]])
async def get_events(repo: EventRepository = Depends(get_event_repository)):
    """List all events by start time."""
    events = await repo.find_all()
    return ApiResponse[List[Event]].ok(events)


@router.get("/events/{event_id}", response_model=ApiResponse[Event])
async def get_event(event_id: UUID, repo: EventRepository = Depends(get_event_repository)):
    """Get a single event."""
    event = await repo.find_by_id(event_id)
    if event is None:
        raise NotFoundError(f"Event {event_id} not found")
    return ApiResponse[Event].ok(event)

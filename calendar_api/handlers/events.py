"""Event routes: create, update, delete and the details view."""

from uuid import UUID

from fastapi import APIRouter, Depends

from calendar_api.database.repositories import (
    EventFileRepository,
    EventNoteRepository,
    EventRepository,
)
from calendar_api.errors import NotFoundError
from calendar_api.handlers import simple_events
from calendar_api.handlers.dependencies import (
    get_event_file_repository,
    get_event_note_repository,
    get_event_repository,
)
from calendar_api.models import (
    ApiResponse,
    CreateEventRequest,
    Event,
    EventWithDetails,
    UpdateEventRequest,
)

router = APIRouter(tags=["events"])
router.include_router(simple_events.router)


@router.post("/events", response_model=ApiResponse[Event])
async def create_event(payload: CreateEventRequest,
                       repo: EventRepository = Depends(get_event_repository)):
    """Create an event. Priority defaults to "medium"."""
    event = await repo.create(payload)
    return ApiResponse[Event].ok(event)


@router.put("/events/{event_id}", response_model=ApiResponse[Event])
async def update_event(event_id: UUID,
                       payload: UpdateEventRequest,
                       repo: EventRepository = Depends(get_event_repository)):
    """Apply a partial update. Omitted or null fields keep their stored value."""
    event = await repo.update(event_id, payload)
    if event is None:
        raise NotFoundError(f"Event {event_id} not found")
    return ApiResponse[Event].ok(event)


@router.delete("/events/{event_id}", response_model=ApiResponse[None])
async def delete_event(event_id: UUID, repo: EventRepository = Depends(get_event_repository)):
    """Delete an event. Deleting an unknown id is not an error."""
    await repo.delete(event_id)
    return ApiResponse[None].ok()


@router.get("/events/{event_id}/details", response_model=ApiResponse[EventWithDetails])
async def get_event_details(event_id: UUID,
                            repo: EventRepository = Depends(get_event_repository),
                            file_repo: EventFileRepository = Depends(get_event_file_repository),
                            note_repo: EventNoteRepository = Depends(get_event_note_repository)):
    """The event with its files (newest first) and notes (oldest first)."""
    event = await repo.find_by_id(event_id)
    if event is None:
        raise NotFoundError(f"Event {event_id} not found")

    files = await file_repo.find_by_event(event_id)
    notes = await note_repo.find_by_event(event_id)
    return ApiResponse[EventWithDetails].ok(EventWithDetails.from_parts(event, files, notes))

"""Threaded notes on an event."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from calendar_api.database.repositories import EventNoteRepository
from calendar_api.handlers.dependencies import get_event_note_repository
from calendar_api.models import ApiResponse, CreateNoteRequest, EventNote

router = APIRouter(tags=["notes"])


@router.get("/events/{event_id}/notes", response_model=ApiResponse[List[EventNote]])
async def get_notes(event_id: UUID, repo: EventNoteRepository = Depends(get_event_note_repository)):
    notes = await repo.find_by_event(event_id)
    return ApiResponse[List[EventNote]].ok(notes)


@router.post("/events/{event_id}/notes", response_model=ApiResponse[EventNote])
async def add_note(event_id: UUID,
                   payload: CreateNoteRequest,
                   repo: EventNoteRepository = Depends(get_event_note_repository)):
    """Add a note. The event reference is checked by the database, not here."""
    note = await repo.create(event_id, payload)
    return ApiResponse[EventNote].ok(note)

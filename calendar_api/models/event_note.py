"""Event note models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EventNote(BaseModel):
    """A note posted on an event's thread."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    event_id: UUID
    author_name: str
    content: str
    created_at: datetime
    updated_at: datetime


class CreateNoteRequest(BaseModel):
    """Payload for adding a note."""

    author_name: str = Field(..., description="Display name of the author")
    content: str = Field(..., description="Note body")

"""File attachment models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_UPLOADER = "Anonymous"


class EventFile(BaseModel):
    """Metadata row for an uploaded file. The bytes live in file storage."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    event_id: UUID
    filename: str
    original_filename: str
    file_size: int
    mime_type: str = DEFAULT_MIME_TYPE
    uploaded_by: str = DEFAULT_UPLOADER
    created_at: datetime


class FileUploadResponse(BaseModel):
    """Summary returned after an upload."""

    id: UUID
    filename: str
    original_filename: str
    file_size: int
    uploaded_by: str

    @classmethod
    def from_file(cls, event_file: EventFile) -> "FileUploadResponse":
        return cls(
            id=event_file.id,
            filename=event_file.filename,
            original_filename=event_file.original_filename,
            file_size=event_file.file_size,
            uploaded_by=event_file.uploaded_by,
        )

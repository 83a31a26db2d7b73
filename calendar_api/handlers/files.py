"""File upload and download routes."""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, Request, Response
from starlette.datastructures import FormData, UploadFile

from calendar_api.database.repositories import EventFileRepository
from calendar_api.errors import NotFoundError, ValidationError
from calendar_api.handlers.dependencies import get_event_file_repository, get_file_storage
from calendar_api.models import ApiResponse, FileUploadResponse
from calendar_api.models.event_file import DEFAULT_MIME_TYPE, DEFAULT_UPLOADER
from calendar_api.storage import FileStorage, storage_filename

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])

UNKNOWN_FILENAME = "unknown"


@dataclass
class UploadForm:
    """Parts of an upload request, collected before anything is stored."""

    data: Optional[bytes] = None
    original_filename: str = UNKNOWN_FILENAME
    mime_type: str = DEFAULT_MIME_TYPE
    uploaded_by: str = DEFAULT_UPLOADER

    @property
    def has_file(self) -> bool:
        return self.data is not None


async def parse_upload_form(form: FormData) -> UploadForm:
    """Collect the `file` and `uploaded_by` parts; other parts are ignored.

    Raises:
        ValidationError: If the form has no `file` part
    """
    upload = UploadForm()

    for name, value in form.multi_items():
        if name == "uploaded_by":
            upload.uploaded_by = value if isinstance(value, str) else (await value.read()).decode("utf-8", "replace")
        elif name == "file":
            if isinstance(value, UploadFile):
                upload.data = await value.read()
                upload.original_filename = value.filename or UNKNOWN_FILENAME
                upload.mime_type = value.content_type or DEFAULT_MIME_TYPE
            else:
                upload.data = value.encode("utf-8")

    if not upload.has_file:
        raise ValidationError("No file provided")
    return upload


def content_disposition(original_filename: str) -> str:
    """Attachment header for a client-supplied filename.

    The quoted `filename` is an ASCII fallback with quotes, backslashes and
    control characters replaced; `filename*` carries the exact name.
    """
    fallback = "".join(
        char if 0x20 <= ord(char) < 0x7f and char not in '"\\' else "_"
        for char in original_filename
    ) or UNKNOWN_FILENAME
    encoded = quote(original_filename, safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"


@router.post("/events/{event_id}/files", response_model=ApiResponse[FileUploadResponse])
async def upload_file(event_id: UUID,
                      request: Request,
                      repo: EventFileRepository = Depends(get_event_file_repository),
                      storage: FileStorage = Depends(get_file_storage)):
    """
    Attach a file to an event.

    The blob is written before its metadata row is inserted, so a row never
    points at missing content. A failed insert leaves the blob behind.
    """
    form = await request.form()
    try:
        upload = await parse_upload_form(form)
    finally:
        await form.close()

    file_id = uuid4()
    filename = storage_filename(file_id, upload.original_filename)

    file_size = await storage.save(filename, upload.data)

    event_file = await repo.create(
        file_id=file_id,
        event_id=event_id,
        filename=filename,
        original_filename=upload.original_filename,
        file_size=file_size,
        mime_type=upload.mime_type,
        uploaded_by=upload.uploaded_by,
    )
    logger.info(f"Uploaded {upload.original_filename!r} ({file_size} bytes) to event {event_id}")
    return ApiResponse[FileUploadResponse].ok(FileUploadResponse.from_file(event_file))


@router.get("/files/{file_id}/download")
async def download_file(file_id: UUID,
                        repo: EventFileRepository = Depends(get_event_file_repository),
                        storage: FileStorage = Depends(get_file_storage)):
    """Return the stored bytes with the original filename as an attachment."""
    event_file = await repo.find_by_id(file_id)
    if event_file is None:
        raise NotFoundError(f"File {file_id} not found")

    data = await storage.read(event_file.filename)

    return Response(
        content=data,
        media_type=event_file.mime_type,
        headers={"Content-Disposition": content_disposition(event_file.original_filename)},
    )

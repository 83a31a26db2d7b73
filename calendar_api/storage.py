"""Local filesystem storage for uploaded file content."""

import asyncio
from pathlib import Path
from typing import Union
from uuid import UUID

import structlog

from calendar_api.errors import NotFoundError, StorageError

logger = structlog.get_logger(__name__)

MAX_EXTENSION_LENGTH = 32


def file_extension(original_filename: str) -> str:
    """Extension of a client-supplied name, without the dot ("" if none).

    Only the last path component counts, and a leading dot (".bashrc") does
    not start an extension. Extensions that are not short ASCII alphanumerics
    are dropped.
    """
    name = original_filename.replace("\\", "/").rsplit("/", 1)[-1]
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem.strip("."):
        return ""
    if len(extension) > MAX_EXTENSION_LENGTH or not (extension.isascii() and extension.isalnum()):
        return ""
    return extension


def storage_filename(file_id: UUID, original_filename: str) -> str:
    """Name the blob is stored under: the file id plus the original extension."""
    extension = file_extension(original_filename)
    return f"{file_id}.{extension}" if extension else str(file_id)


class FileStorage:
    """Blobs addressed by generated storage filenames under one directory."""

    def __init__(self, upload_dir: Union[str, Path]):
        self.upload_dir = Path(upload_dir)
        self.logger = logger.bind(component="file_storage")

    def path_for(self, filename: str) -> Path:
        path = self.upload_dir / filename
        if path.parent != self.upload_dir:
            raise NotFoundError("File not found")
        return path

    async def ensure_directory(self) -> None:
        try:
            await asyncio.to_thread(self.upload_dir.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            self.logger.error("Failed to create upload directory", path=str(self.upload_dir), error=str(e))
            raise StorageError("Failed to prepare file storage") from e

    async def save(self, filename: str, data: bytes) -> int:
        """Write `data` under `filename` and return the number of bytes written."""
        await self.ensure_directory()
        path = self.path_for(filename)
        try:
            written = await asyncio.to_thread(path.write_bytes, data)
        except OSError as e:
            self.logger.error("Failed to write file", filename=filename, error=str(e))
            raise StorageError("Failed to store file") from e

        self.logger.info("File stored", filename=filename, size=written)
        return written

    async def read(self, filename: str) -> bytes:
        """Read a stored blob; a missing blob is reported as not found."""
        path = self.path_for(filename)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except (FileNotFoundError, IsADirectoryError) as e:
            self.logger.warning("Stored file missing", filename=filename)
            raise NotFoundError("File not found") from e
        except OSError as e:
            self.logger.error("Failed to read file", filename=filename, error=str(e))
            raise StorageError("Failed to read file") from e

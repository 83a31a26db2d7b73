"""Tests for local file storage."""

from uuid import UUID

import pytest

from calendar_api.errors import NotFoundError, StorageError
from calendar_api.storage import FileStorage, file_extension, storage_filename

FILE_ID = UUID("7f1f3c52-3c1e-4c8e-9a0a-1b2c3d4e5f60")


@pytest.mark.parametrize("original, expected", [
    ("report.pdf", "pdf"),
    ("archive.tar.gz", "gz"),
    ("README", ""),
    (".bashrc", ""),
    ("trailing.", ""),
    ("../../etc/passwd.txt", "txt"),
    ("C:\\Users\\ada\\notes.md", "md"),
    ("a." + "x" * 33, ""),
    ("a." + "x" * 32, "x" * 32),
    ("photo.jp g", ""),
    ("résumé.pdf", "pdf"),
    ("data.tär", ""),
])
def test_file_extension(original, expected):
    assert file_extension(original) == expected


def test_storage_filename():
    assert storage_filename(FILE_ID, "report.pdf") == f"{FILE_ID}.pdf"
    assert storage_filename(FILE_ID, "Makefile") == str(FILE_ID)


@pytest.mark.asyncio
async def test_save_creates_directory_and_reads_back(tmp_path):
    storage = FileStorage(tmp_path / "nested" / "uploads")

    written = await storage.save("blob.bin", b"\x00\x01binary")

    assert written == 8
    assert (tmp_path / "nested" / "uploads" / "blob.bin").read_bytes() == b"\x00\x01binary"
    assert await storage.read("blob.bin") == b"\x00\x01binary"


@pytest.mark.asyncio
async def test_read_missing_blob_is_not_found(tmp_path):
    storage = FileStorage(tmp_path)

    with pytest.raises(NotFoundError):
        await storage.read("missing.pdf")


@pytest.mark.asyncio
async def test_names_cannot_escape_directory(tmp_path):
    storage = FileStorage(tmp_path / "uploads")

    with pytest.raises(NotFoundError):
        await storage.read("../secret.txt")


@pytest.mark.asyncio
async def test_unwritable_directory_is_storage_error(tmp_path):
    blocker = tmp_path / "uploads"
    blocker.write_text("not a directory")
    storage = FileStorage(blocker)

    with pytest.raises(StorageError):
        await storage.save("blob.bin", b"data")

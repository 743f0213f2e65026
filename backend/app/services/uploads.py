"""File upload handler for event banners and gallery media."""

import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path, PurePath

import aiofiles
import aiofiles.os
from starlette.datastructures import UploadFile

from app.core import settings
from app.core.exceptions import InvalidInputError, PayloadTooLargeError

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/svg+xml",
        "video/mp4",
        "video/mpeg",
        "video/quicktime",
        "video/x-msvideo",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)

CHUNK_SIZE = 64 * 1024

_UNSAFE_NAME_RE = re.compile(r"[^a-z0-9]+")
_SUBDIR_RE = re.compile(r"^[a-z0-9_-]+$")


@dataclass(frozen=True)
class StoredFile:
    """Metadata for a file written to upload storage."""

    filename: str
    path: str
    mime: str
    size: int


def storage_filename(original_name: str, now_ms: int | None = None) -> str:
    """Build ``<epoch-ms>-<sanitised-base><ext>`` from a client file name."""
    name = PurePath(original_name or "upload").name
    suffix = PurePath(name).suffix
    base = name[: -len(suffix)] if suffix else name
    base = _UNSAFE_NAME_RE.sub("-", base.lower()).strip("-") or "file"
    ext = suffix.lower() if re.fullmatch(r"\.[A-Za-z0-9]{1,10}", suffix) else ""
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{stamp}-{base}{ext}"


async def save_upload(
    file: UploadFile,
    subdir: str,
    *,
    upload_root: Path | None = None,
    max_size: int | None = None,
) -> StoredFile:
    """Validate and store an uploaded file.

    Raises:
        InvalidInputError: Unsupported MIME type or bad subdirectory.
        PayloadTooLargeError: File exceeds the size ceiling. Nothing is
            left on disk in that case.
    """
    if not _SUBDIR_RE.match(subdir):
        raise InvalidInputError(f"Invalid upload directory: {subdir}")

    mime = (file.content_type or "").lower()
    if mime not in ALLOWED_MIME_TYPES:
        raise InvalidInputError("Unsupported file type")

    root = upload_root if upload_root is not None else settings.upload_root
    limit = max_size if max_size is not None else settings.upload_max_size_bytes

    dest_dir = Path(root) / subdir
    await aiofiles.os.makedirs(dest_dir, exist_ok=True)

    filename = storage_filename(file.filename or "")
    dest = dest_dir / filename

    size = 0
    too_large = False
    async with aiofiles.open(dest, "wb") as out:
        while chunk := await file.read(CHUNK_SIZE):
            size += len(chunk)
            if size > limit:
                too_large = True
                break
            await out.write(chunk)

    if too_large:
        await aiofiles.os.remove(dest)
        raise PayloadTooLargeError(f"File too large. Max size: {limit // (1024 * 1024)} MB")

    logger.info(f"Stored upload {dest} ({size} bytes, {mime})")
    return StoredFile(filename=filename, path=str(dest), mime=mime, size=size)


async def delete_upload(path: str | None, *, upload_root: Path | None = None) -> bool:
    """Remove a previously stored file.

    Paths outside the upload root (external media URLs included) are left
    alone. Returns False if nothing was removed.
    """
    if not path:
        return False
    root = Path(upload_root if upload_root is not None else settings.upload_root).resolve()
    target = Path(path).resolve()
    if not target.is_relative_to(root):
        return False
    try:
        await aiofiles.os.remove(target)
        return True
    except FileNotFoundError:
        return False


async def discard_upload(stored: StoredFile | None) -> None:
    """Remove a file saved for a write that did not commit."""
    if stored is not None and await delete_upload(stored.path):
        logger.info(f"Discarded upload {stored.path}")

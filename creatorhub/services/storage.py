from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from fastapi import UploadFile

from creatorhub.config import settings
from creatorhub.errors import PayloadTooLargeError, ValidationError


logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"
ALLOWED_MEDIA_EXTENSIONS = {
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".webp",
    ".svg",
    ".mp4",
    ".mov",
    ".webm",
    ".pdf",
}
_CHUNK_SIZE = 1024 * 1024


def upload_root() -> Path:
    return Path(settings.upload_dir)


def _sanitize_filename(filename: str) -> str:
    base = os.path.basename(filename or "upload")
    safe = "".join(ch if ch.isalnum() or ch in ("-", "_", ".") else "_" for ch in base)
    return safe or "upload"


def save_upload(upload: UploadFile | None, *, folder: str, prefix: str) -> str:
    """Write an uploaded file under ``upload_dir/folder`` and return its public URL."""

    if upload is None or not upload.filename:
        raise ValidationError("No file uploaded")

    original = _sanitize_filename(upload.filename)
    suffix = Path(original).suffix.lower()
    if suffix not in ALLOWED_MEDIA_EXTENSIONS:
        raise ValidationError(f"Unsupported file type '{suffix or original}'")

    target_dir = upload_root() / folder
    target_dir.mkdir(parents=True, exist_ok=True)
    stored_name = f"{prefix}-{uuid.uuid4().hex}{suffix}"
    destination = target_dir / stored_name

    max_bytes = int(settings.max_upload_bytes)
    total = 0
    try:
        with destination.open("wb") as out:
            while True:
                chunk = upload.file.read(_CHUNK_SIZE)
                if not chunk:
                    break
                total += len(chunk)
                if total > max_bytes:
                    out.close()
                    destination.unlink(missing_ok=True)
                    raise PayloadTooLargeError(f"File too large. Max upload size is {max_bytes // (1024 * 1024)}MB.")
                out.write(chunk)
    finally:
        upload.file.close()

    logger.info("stored upload %s (%d bytes)", destination, total)
    return f"{UPLOAD_URL_PREFIX}/{folder}/{stored_name}"

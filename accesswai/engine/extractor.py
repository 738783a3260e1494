"""
Archive Extractor — Turns an uploaded ZIP project into source files.

Only entries with a supported web-source extension are kept, in archive
order. Content stays as bytes; decoding happens in the scanner so an
undecodable entry is skipped there rather than aborting the upload.
"""

from __future__ import annotations

import io
import logging
import zipfile
import zlib
from collections.abc import Iterable

from accesswai.config import settings
from accesswai.errors import InputError, InvalidArchiveError
from accesswai.models.scan_models import SourceFile

logger = logging.getLogger("accesswai.extractor")

ZIP_CONTENT_TYPES = {"application/zip", "application/x-zip-compressed"}


def is_supported_file(name: str, extensions: Iterable[str] | None = None) -> bool:
    """True when the file name ends with an allowed extension (case-insensitive)."""
    allowed = tuple(ext.lower() for ext in (extensions or settings.allowed_extensions))
    return name.lower().endswith(allowed)


def extract_source_files(
    archive: bytes,
    max_bytes: int | None = None,
    extensions: Iterable[str] | None = None,
) -> list[SourceFile]:
    """
    Read supported source files out of a ZIP archive.

    Args:
        archive: Raw ZIP bytes.
        max_bytes: Size cap; defaults to settings.max_upload_bytes.
        extensions: Allowed suffixes; defaults to settings.allowed_extensions.

    Returns:
        SourceFile list in archive order (may be empty).

    Raises:
        InputError: archive exceeds the size cap.
        InvalidArchiveError: archive is not a readable ZIP.
    """
    limit = max_bytes if max_bytes is not None else settings.max_upload_bytes
    if len(archive) > limit:
        raise InputError(f"Archive exceeds maximum size of {limit} bytes")

    try:
        zf = zipfile.ZipFile(io.BytesIO(archive))
    except (zipfile.BadZipFile, zlib.error, ValueError) as e:
        raise InvalidArchiveError(
            "Invalid ZIP file. Please upload a valid ZIP archive."
        ) from e

    files: list[SourceFile] = []
    with zf:
        for entry in zf.infolist():
            if entry.is_dir() or not is_supported_file(entry.filename, extensions):
                continue
            try:
                files.append(SourceFile(name=entry.filename, content=zf.read(entry)))
            except (zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError, OSError) as e:
                logger.error(f"Error reading file {entry.filename}: {e}")

    logger.info(f"Extracted {len(files)} source files from archive")
    return files

"""Validation and storage of uploaded images."""

from __future__ import annotations

import logging
import re
from collections.abc import Collection
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import BinaryIO

from userhub_backend.storage import SizeLimitExceededError, UploadStorage

logger = logging.getLogger(__name__)

DEFAULT_BASENAME = "upload"
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_SEPARATORS = re.compile(r"[\\/]")


class UploadRejectedError(Exception):
    """Base class for uploads refused by :class:`UploadService`."""


class MissingFileError(UploadRejectedError):
    """Raised when the request carried no file."""


class InvalidFileTypeError(UploadRejectedError):
    """Raised when the file's MIME type is not allowed."""


class FileTooLargeError(UploadRejectedError):
    """Raised when the file exceeds the configured size ceiling."""


@dataclass(slots=True, frozen=True)
class IncomingFile:
    """A file as received from the client."""

    filename: str | None
    content_type: str | None
    stream: BinaryIO


@dataclass(slots=True, frozen=True)
class UploadedImage:
    """Attributes of a stored upload reported back to the caller."""

    filename: str
    mimetype: str
    size: int
    path: str


def build_stored_filename(original: str | None, now: datetime) -> str:
    """Return ``<epoch-ms>-<basename>`` for a client-supplied filename.

    Directory components are dropped so the result always stays inside the
    upload directory.
    """
    basename = _SEPARATORS.split(original or "")[-1].strip()
    if basename in {"", ".", ".."}:
        basename = DEFAULT_BASENAME
    millis = (now - _EPOCH) // timedelta(milliseconds=1)
    return f"{millis}-{basename}"


class UploadService:
    """Checks type and size of an image before persisting it."""

    def __init__(
        self,
        storage: UploadStorage,
        *,
        allowed_types: Collection[str],
        max_bytes: int,
    ) -> None:
        self._storage = storage
        self._allowed_types = frozenset(allowed_types)
        self._max_bytes = max_bytes

    def store_image(self, file: IncomingFile | None) -> UploadedImage:
        if file is None:
            raise MissingFileError
        if file.content_type not in self._allowed_types:
            logger.info(
                "Rejected upload %r with type %s", file.filename, file.content_type
            )
            raise InvalidFileTypeError(file.content_type)

        filename = build_stored_filename(file.filename, datetime.now(tz=UTC))
        try:
            stored = self._storage.save(
                file.stream, filename, max_bytes=self._max_bytes
            )
        except SizeLimitExceededError as exc:
            logger.info("Rejected upload %r: larger than %d bytes", filename, exc.limit)
            raise FileTooLargeError(filename) from exc

        logger.info("Stored upload %s (%d bytes)", stored.path, stored.size)
        return UploadedImage(
            filename=stored.filename,
            mimetype=file.content_type,
            size=stored.size,
            path=str(stored.path),
        )

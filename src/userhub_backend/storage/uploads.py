"""Filesystem storage for uploaded files."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO
from uuid import uuid4

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
PARTIAL_SUFFIX = ".part"


class SizeLimitExceededError(Exception):
    """Raised when a stream is longer than the permitted number of bytes."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"stream exceeds {limit} bytes")
        self.limit = limit


@dataclass(slots=True, frozen=True)
class StoredFile:
    """Location and size of a file written by :class:`UploadStorage`."""

    filename: str
    path: Path
    size: int


class UploadStorage:
    """Writes uploads into a single directory."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)
        self._lock = threading.Lock()

    @property
    def directory(self) -> Path:
        return self._directory

    def ensure_directory(self) -> None:
        """Create the upload directory if it does not exist yet."""
        if not self._directory.is_dir():
            logger.info("Creating upload directory %s", self._directory)
        self._directory.mkdir(parents=True, exist_ok=True)

    def save(self, stream: BinaryIO, filename: str, *, max_bytes: int) -> StoredFile:
        """Copy *stream* to ``directory/filename``.

        Data goes to a temporary ``.part`` file first; it is renamed into place
        only after the whole stream fit within *max_bytes*, so a rejected upload
        leaves nothing behind.
        """
        self.ensure_directory()
        target = self._directory / filename
        partial = target.with_name(f".{target.name}.{uuid4().hex}{PARTIAL_SUFFIX}")
        size = 0
        try:
            with partial.open("wb") as out:
                while chunk := stream.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > max_bytes:
                        raise SizeLimitExceededError(max_bytes)
                    out.write(chunk)
            with self._lock:
                os.replace(partial, target)
        except Exception:
            partial.unlink(missing_ok=True)
            raise
        return StoredFile(filename=filename, path=target, size=size)


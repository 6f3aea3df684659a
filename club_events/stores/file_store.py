"""File-system implementation of the PosterStore."""

import time
from pathlib import PurePath

from django.core.exceptions import SuspiciousFileOperation
from django.core.files import File
from django.core.files.storage import FileSystemStorage, Storage

from club_events.domain import PosterUpload
from club_events.stores.interfaces import PosterStore, StoreError


class FileSystemPosterStore(PosterStore):
    """Stores posters under MEDIA_ROOT and references them by MEDIA_URL path."""

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage or FileSystemStorage()

    @staticmethod
    def generate_name(filename: str) -> str:
        """Return a timestamp-based name keeping the original extension."""
        return f"{time.time_ns()}{PurePath(filename).suffix}"

    def save(self, poster: PosterUpload) -> str:
        try:
            name = self._storage.save(self.generate_name(poster.filename), File(poster.content))
        except (OSError, SuspiciousFileOperation, ValueError) as exc:
            raise StoreError(f"saving poster {poster.filename!r} failed") from exc
        return self._storage.url(name)

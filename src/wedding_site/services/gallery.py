"""Guest photo gallery: listing, selection and bulk download."""

import asyncio
import io
import logging
import zipfile
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Protocol

from wedding_site.domain.photos import GalleryPhoto
from wedding_site.services.uploads import PhotoRepository

logger = logging.getLogger(__name__)


class PhotoDownloader(Protocol):
    """Fetches the binary content of a hosted photo."""

    async def fetch_bytes(self, url: str) -> bytes:
        """Download the photo at a URL."""


class DownloadSink(Protocol):
    """Destination for downloaded photos."""

    def save(self, filename: str, content: bytes) -> None:
        """Persist one downloaded file."""


@dataclass
class GalleryService:
    """Reads guest photos for display."""

    repository: PhotoRepository

    def list_photos(self) -> list[GalleryPhoto]:
        """Return guest photos, newest first."""
        return [_to_gallery_photo(row) for row in self.repository.list_photos()]


def _to_gallery_photo(row: dict[str, object]) -> GalleryPhoto:
    created = row.get("created_at")
    return GalleryPhoto(
        id=str(row["id"]),
        url=str(row["file_url"]),
        caption=row.get("caption"),
        uploaded_by=row.get("uploaded_by"),
        created_at=datetime.fromisoformat(created)
        if isinstance(created, str) and created
        else None,
    )


@dataclass
class PhotoSelection:
    """Set of photo ids picked for download while in selection mode."""

    selection_mode: bool = False
    selected: set[str] = field(default_factory=set)

    def toggle_mode(self) -> None:
        """Enter or leave selection mode; leaving clears the selection."""
        if self.selection_mode:
            self.deselect_all()
        self.selection_mode = not self.selection_mode

    def toggle(self, photo_id: str) -> None:
        if photo_id in self.selected:
            self.selected.discard(photo_id)
        else:
            self.selected.add(photo_id)

    def select_all(self, photos: Iterable[GalleryPhoto]) -> None:
        self.selected = {photo.id for photo in photos}

    def deselect_all(self) -> None:
        self.selected = set()

    def all_selected(self, photos: list[GalleryPhoto]) -> bool:
        return len(self.selected) == len(photos)

    def selected_photos(self, photos: Iterable[GalleryPhoto]) -> list[GalleryPhoto]:
        """Return selected photos in gallery order."""
        return [photo for photo in photos if photo.id in self.selected]


@dataclass
class Lightbox:
    """Single-photo overlay with wrap-around navigation."""

    size: int
    index: int | None = None

    def open(self, index: int) -> None:
        if index < 0 or index >= self.size:
            raise IndexError(f"No photo at position {index}")
        self.index = index

    def close(self) -> None:
        self.index = None

    def next(self) -> None:
        if self.index is not None:
            self.index = (self.index + 1) % self.size

    def previous(self) -> None:
        if self.index is not None:
            self.index = (self.index - 1 + self.size) % self.size


def download_filename(position: int) -> str:
    """Return the saved filename for the n-th downloaded photo (1-based)."""
    return f"wedding-photo-{position}.jpg"


@dataclass
class BulkDownloader:
    """Downloads photos one at a time with a pause between each."""

    downloader: PhotoDownloader
    pacing_seconds: float = 0.5

    async def download(self, photos: list[GalleryPhoto], sink: DownloadSink) -> int:
        """Save each photo into the sink and return how many were saved."""
        saved = 0
        for position, photo in enumerate(photos, start=1):
            try:
                content = await self.downloader.fetch_bytes(photo.url)
            except Exception:
                logger.exception("Photo download failed", extra={"photo_id": photo.id})
            else:
                sink.save(download_filename(position), content)
                saved += 1
            await asyncio.sleep(self.pacing_seconds)
        return saved


class ZipDownloadSink(DownloadSink):
    """Collects downloaded photos into an in-memory zip archive."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()
        self._archive = zipfile.ZipFile(self._buffer, "w", zipfile.ZIP_STORED)

    def save(self, filename: str, content: bytes) -> None:
        self._archive.writestr(filename, content)

    def getvalue(self) -> bytes:
        """Finish the archive and return its bytes."""
        self._archive.close()
        return self._buffer.getvalue()


@dataclass
class DirectoryDownloadSink(DownloadSink):
    """Writes downloaded photos into a local directory."""

    directory: Path

    def save(self, filename: str, content: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / filename).write_bytes(content)

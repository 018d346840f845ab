"""Guest photo upload queue."""

import asyncio
import logging
import secrets
import string
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID, uuid4

from wedding_site.domain.uploads import (
    BatchResult,
    SourceFile,
    UploadItem,
    UploadStatus,
)
from wedding_site.services.previews import PreviewStore

logger = logging.getLogger(__name__)

ANONYMOUS_UPLOADER = "Anonymous Guest"
UPLOAD_PREFIX = "uploads"
_KEY_ALPHABET = string.ascii_lowercase + string.digits


class PhotoStorage(Protocol):
    """Object storage for uploaded photos."""

    def store_object(self, key: str, content: bytes, media_type: str) -> None:
        """Store bytes under a key."""

    def resolve_public_url(self, key: str) -> str:
        """Return the durable public address of a stored key."""


class PhotoRepository(Protocol):
    """Persistence interface for photo metadata."""

    def create_photo(
        self, file_name: str, file_path: str, file_url: str, uploaded_by: str
    ) -> None:
        """Append a photo record."""

    def list_photos(self) -> list[dict[str, object]]:
        """Return photo records, newest first."""


class UploadInProgressError(RuntimeError):
    """Raised when a queue is submitted while a pass is still running."""


def build_storage_key(source: SourceFile, now_ms: int | None = None) -> str:
    """Return a collision-resistant storage key keeping the file extension."""
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    suffix = "".join(secrets.choice(_KEY_ALPHABET) for _ in range(6))
    return f"{UPLOAD_PREFIX}/{timestamp}-{suffix}.{source.extension}"


@dataclass
class UploadQueue:
    """Owns the files a guest selected and drives them through storage."""

    storage: PhotoStorage
    photo_repository: PhotoRepository
    previews: PreviewStore
    cleanup_delay_seconds: float = 2.0
    on_settled: Callable[[BatchResult], None] | None = None
    _items: list[UploadItem] = field(default_factory=list)
    _uploading: bool = False
    pending_cleanup: asyncio.Task[None] | None = None

    @property
    def items(self) -> list[UploadItem]:
        return list(self._items)

    @property
    def is_uploading(self) -> bool:
        return self._uploading

    @property
    def pending_count(self) -> int:
        return sum(1 for item in self._items if item.status is UploadStatus.PENDING)

    @property
    def all_done(self) -> bool:
        return all(item.status is UploadStatus.DONE for item in self._items)

    def add_files(self, files: Iterable[SourceFile]) -> list[UploadItem]:
        """Queue the image files from a selection, in order."""
        added = []
        for source in files:
            if not source.is_image:
                continue
            item = UploadItem(source=source, preview=self.previews.acquire(source))
            self._items.append(item)
            added.append(item)
        return added

    def remove(self, index: int) -> UploadItem:
        """Remove the item at a position and release its preview."""
        if index < 0 or index >= len(self._items):
            raise IndexError(f"No queued file at position {index}")
        item = self._items.pop(index)
        self._release(item)
        return item

    def clear(self) -> None:
        """Remove every queued item."""
        for item in self._items:
            self._release(item)
        self._items.clear()

    async def submit(self, uploaded_by: str | None = None) -> BatchResult | None:
        """Upload every item that is not done yet, one at a time."""
        if self._uploading:
            raise UploadInProgressError("Upload already in progress")
        if not self._items:
            return None
        self._uploading = True
        uploader = (uploaded_by or "").strip() or ANONYMOUS_UPLOADER
        for item in self._items:
            if item.status is UploadStatus.FAILED:
                item.status = UploadStatus.PENDING
        attempted = succeeded = failed = 0
        try:
            for item in list(self._items):
                if item.status is UploadStatus.DONE or item not in self._items:
                    continue
                attempted += 1
                if await self._upload(item, uploader):
                    succeeded += 1
                else:
                    failed += 1
        finally:
            self._uploading = False
        result = BatchResult(attempted=attempted, succeeded=succeeded, failed=failed)
        if self.on_settled is not None:
            self.on_settled(result)
        if self.pending_cleanup is not None and not self.pending_cleanup.done():
            self.pending_cleanup.cancel()
        self.pending_cleanup = asyncio.create_task(self._clear_completed_later())
        return result

    def clear_completed(self) -> int:
        """Drop finished items and release their previews."""
        done = [item for item in self._items if item.status is UploadStatus.DONE]
        for item in done:
            self._items.remove(item)
            self._release(item)
        return len(done)

    async def _clear_completed_later(self) -> None:
        await asyncio.sleep(self.cleanup_delay_seconds)
        self.clear_completed()

    async def _upload(self, item: UploadItem, uploader: str) -> bool:
        item.status = UploadStatus.IN_FLIGHT
        item.progress = 0
        source = item.source
        key = build_storage_key(source)
        try:
            self.storage.store_object(key, source.content, source.media_type)
            public_url = self.storage.resolve_public_url(key)
            self.photo_repository.create_photo(
                file_name=source.name,
                file_path=key,
                file_url=public_url,
                uploaded_by=uploader,
            )
        except Exception:
            logger.exception(
                "Photo upload failed", extra={"file_name": source.name, "key": key}
            )
            item.status = UploadStatus.FAILED
            return False
        item.status = UploadStatus.DONE
        item.progress = 100
        return True

    def _release(self, item: UploadItem) -> None:
        if item.preview is not None:
            self.previews.release(item.preview)
            item.preview = None


@dataclass
class UploadQueueRegistry:
    """Holds one upload queue per guest session."""

    factory: Callable[[], UploadQueue]
    _queues: dict[UUID, UploadQueue] = field(default_factory=dict)

    def create(self) -> tuple[UUID, UploadQueue]:
        """Create a new empty queue."""
        queue_id = uuid4()
        queue = self.factory()
        self._queues[queue_id] = queue
        return queue_id, queue

    def get(self, queue_id: UUID) -> UploadQueue | None:
        """Return a queue by id, if present."""
        return self._queues.get(queue_id)

    def __len__(self) -> int:
        return len(self._queues)

    def discard(self, queue_id: UUID) -> None:
        """Clear and forget a queue."""
        queue = self._queues.pop(queue_id, None)
        if queue is not None:
            queue.clear()

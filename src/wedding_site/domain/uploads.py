"""Domain models for guest photo uploads."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID, uuid4

IMAGE_MEDIA_PREFIX = "image/"


class UploadStatus(StrEnum):
    """Lifecycle of a queued file within one submission attempt."""

    PENDING = "pending"
    IN_FLIGHT = "in_flight"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceFile:
    """A file selected by a guest."""

    name: str
    media_type: str
    content: bytes

    @property
    def is_image(self) -> bool:
        return self.media_type.startswith(IMAGE_MEDIA_PREFIX)

    @property
    def extension(self) -> str:
        return self.name.rsplit(".", maxsplit=1)[-1]


@dataclass(frozen=True)
class PreviewHandle:
    """Revocable local reference used to preview a queued file."""

    token: str
    url: str


@dataclass(eq=False)
class UploadItem:
    """One selected file awaiting transfer."""

    source: SourceFile
    preview: PreviewHandle | None
    status: UploadStatus = UploadStatus.PENDING
    progress: int = 0
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one pass over an upload queue."""

    attempted: int
    succeeded: int
    failed: int

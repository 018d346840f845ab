"""Response and request models for the HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from wedding_site.domain.photos import GalleryPhoto
from wedding_site.domain.rsvp import MealPreference, RsvpRecord
from wedding_site.domain.uploads import BatchResult, UploadItem, UploadStatus
from wedding_site.services.uploads import UploadQueue


class PhotoOut(BaseModel):
    id: str
    url: str
    caption: str | None = None
    uploaded_by: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_photo(cls, photo: GalleryPhoto) -> "PhotoOut":
        return cls(
            id=photo.id,
            url=photo.url,
            caption=photo.caption,
            uploaded_by=photo.uploaded_by,
            created_at=photo.created_at,
        )


class CarouselOut(BaseModel):
    photos: list[PhotoOut]
    interval_seconds: float
    autoplay: bool


class UploadItemOut(BaseModel):
    id: UUID
    file_name: str
    media_type: str
    status: UploadStatus
    progress: int
    preview_url: str | None

    @classmethod
    def from_item(cls, item: UploadItem) -> "UploadItemOut":
        return cls(
            id=item.id,
            file_name=item.source.name,
            media_type=item.source.media_type,
            status=item.status,
            progress=item.progress,
            preview_url=item.preview.url if item.preview else None,
        )


class BatchResultOut(BaseModel):
    attempted: int
    succeeded: int
    failed: int

    @classmethod
    def from_result(cls, result: BatchResult) -> "BatchResultOut":
        return cls(
            attempted=result.attempted,
            succeeded=result.succeeded,
            failed=result.failed,
        )


class UploadQueueOut(BaseModel):
    id: UUID
    items: list[UploadItemOut]
    pending_count: int
    is_uploading: bool
    all_done: bool
    result: BatchResultOut | None = None

    @classmethod
    def from_queue(
        cls, queue_id: UUID, queue: UploadQueue, result: BatchResult | None = None
    ) -> "UploadQueueOut":
        return cls(
            id=queue_id,
            items=[UploadItemOut.from_item(item) for item in queue.items],
            pending_count=queue.pending_count,
            is_uploading=queue.is_uploading,
            all_done=queue.all_done,
            result=BatchResultOut.from_result(result) if result else None,
        )


class SubmitUploadsIn(BaseModel):
    uploaded_by: str | None = None


class RsvpOut(BaseModel):
    id: str
    guest_name: str
    email: str
    attending: bool
    number_of_attendees: int
    meal_preference: MealPreference
    dietary_restrictions: str | None
    message: str | None
    created_at: datetime

    @classmethod
    def from_record(cls, record: RsvpRecord) -> "RsvpOut":
        return cls(
            id=record.id,
            guest_name=record.guest_name,
            email=record.email,
            attending=record.attending,
            number_of_attendees=record.number_of_attendees,
            meal_preference=record.meal_preference,
            dietary_restrictions=record.dietary_restrictions,
            message=record.message,
            created_at=record.created_at,
        )

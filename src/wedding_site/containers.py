"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from supabase import create_client

from wedding_site.adapters.photo_downloader import HttpxPhotoDownloader
from wedding_site.adapters.supabase_photo_repository import SupabasePhotoRepository
from wedding_site.adapters.supabase_photo_storage import SupabasePhotoStorage
from wedding_site.adapters.supabase_rsvp_repository import SupabaseRsvpRepository
from wedding_site.config import Settings
from wedding_site.services.carousel import Carousel
from wedding_site.services.gallery import BulkDownloader, GalleryService
from wedding_site.services.previews import InMemoryPreviewStore
from wedding_site.services.rsvp import RsvpService
from wedding_site.services.rsvp_admin import RsvpAdminService
from wedding_site.services.uploads import UploadQueue, UploadQueueRegistry


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    preview_store: InMemoryPreviewStore
    upload_queues: UploadQueueRegistry
    gallery_service: GalleryService
    bulk_downloader: BulkDownloader
    carousel: Carousel
    rsvp_service: RsvpService
    rsvp_admin_service: RsvpAdminService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    photo_storage = SupabasePhotoStorage(
        supabase_client, bucket=resolved_settings.photo_bucket
    )
    photo_repository = SupabasePhotoRepository(
        supabase_client, table=resolved_settings.photos_table
    )
    rsvp_repository = SupabaseRsvpRepository(
        supabase_client, table=resolved_settings.rsvps_table
    )
    preview_store = InMemoryPreviewStore()

    def new_queue() -> UploadQueue:
        return UploadQueue(
            storage=photo_storage,
            photo_repository=photo_repository,
            previews=preview_store,
            cleanup_delay_seconds=resolved_settings.upload_cleanup_delay_seconds,
        )

    photo_downloader = HttpxPhotoDownloader.create(
        timeout=resolved_settings.download_timeout_seconds
    )

    async def close_resources() -> None:
        await photo_downloader.close()

    return AppContainer(
        settings=resolved_settings,
        preview_store=preview_store,
        upload_queues=UploadQueueRegistry(new_queue),
        gallery_service=GalleryService(photo_repository),
        bulk_downloader=BulkDownloader(
            downloader=photo_downloader,
            pacing_seconds=resolved_settings.download_pacing_seconds,
        ),
        carousel=Carousel(
            interval_seconds=resolved_settings.carousel_interval_seconds,
            autoplay=resolved_settings.carousel_autoplay,
        ),
        rsvp_service=RsvpService(rsvp_repository),
        rsvp_admin_service=RsvpAdminService(
            rsvp_repository,
            timezone=ZoneInfo(resolved_settings.rsvp_timezone)
            if resolved_settings.rsvp_timezone
            else None,
        ),
        close_resources=close_resources,
    )

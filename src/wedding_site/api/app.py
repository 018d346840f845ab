"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request, Response

from wedding_site.api.admin import router as admin_router
from wedding_site.api.schemas import CarouselOut, PhotoOut
from wedding_site.api.uploads import router as uploads_router
from wedding_site.app_logging import configure_logging
from wedding_site.containers import AppContainer
from wedding_site.domain.rsvp import RsvpSubmission
from wedding_site.services.gallery import ZipDownloadSink, download_filename
from wedding_site.services.rsvp import RsvpSubmissionError, confirmation_message

_DOWNLOAD_FAILED = "Failed to download photos. Please try again."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)
    app.include_router(uploads_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/carousel")
    async def carousel(request: Request) -> CarouselOut:
        """Return the featured photos and rotation settings."""
        state_container: AppContainer = request.app.state.container
        state = state_container.carousel
        return CarouselOut(
            photos=[PhotoOut.from_photo(photo) for photo in state.photos],
            interval_seconds=state.interval_seconds,
            autoplay=state.autoplay,
        )

    @app.get("/photos")
    async def list_photos(request: Request) -> dict[str, list[PhotoOut]]:
        """Return guest photos, newest first."""
        state_container: AppContainer = request.app.state.container
        try:
            photos = state_container.gallery_service.list_photos()
        except Exception as exc:
            logger.exception("Failed to load guest photos")
            raise HTTPException(
                status_code=502, detail="Failed to load photos. Please try again."
            ) from exc
        return {"photos": [PhotoOut.from_photo(photo) for photo in photos]}

    @app.get("/photos/download")
    async def download_photos(
        request: Request, ids: list[str] = Query(default=[])
    ) -> Response:
        """Download one guest photo, or several as a zip archive."""
        if not ids:
            raise HTTPException(status_code=400, detail="Select at least one photo.")
        state_container: AppContainer = request.app.state.container
        try:
            photos = state_container.gallery_service.list_photos()
        except Exception as exc:
            logger.exception("Failed to load guest photos")
            raise HTTPException(
                status_code=502, detail="Failed to load photos. Please try again."
            ) from exc
        wanted = set(ids)
        selected = [photo for photo in photos if photo.id in wanted]
        if not selected:
            raise HTTPException(status_code=404, detail="No matching photos.")
        downloader = state_container.bulk_downloader
        if len(selected) == 1:
            photo = selected[0]
            try:
                content = await downloader.downloader.fetch_bytes(photo.url)
            except Exception as exc:
                logger.exception("Photo download failed", extra={"photo_id": photo.id})
                raise HTTPException(status_code=502, detail=_DOWNLOAD_FAILED) from exc
            filename = download_filename(1)
            return Response(
                content=content,
                media_type="image/jpeg",
                headers={"Content-Disposition": f'attachment; filename="{filename}"'},
            )
        sink = ZipDownloadSink()
        if not await downloader.download(selected, sink):
            raise HTTPException(status_code=502, detail=_DOWNLOAD_FAILED)
        return Response(
            content=sink.getvalue(),
            media_type="application/zip",
            headers={
                "Content-Disposition": 'attachment; filename="wedding-photos.zip"'
            },
        )

    @app.post("/rsvp", status_code=201)
    async def submit_rsvp(
        submission: RsvpSubmission, request: Request
    ) -> dict[str, str]:
        """Store a guest response."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.rsvp_service.submit(submission)
        except RsvpSubmissionError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return {"status": "ok", "message": confirmation_message(submission)}

    return app

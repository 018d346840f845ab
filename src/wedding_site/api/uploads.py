"""Guest photo upload endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import (
    APIRouter,
    File,
    HTTPException,
    Request,
    Response,
    UploadFile,
    status,
)

from wedding_site.api.schemas import SubmitUploadsIn, UploadQueueOut
from wedding_site.domain.uploads import SourceFile
from wedding_site.services.uploads import UploadInProgressError

if TYPE_CHECKING:
    from wedding_site.containers import AppContainer
    from wedding_site.services.uploads import UploadQueue

router = APIRouter(prefix="/uploads", tags=["uploads"])

_DEFAULT_MEDIA_TYPE = "application/octet-stream"


def _get_queue(request: Request, queue_id: UUID) -> UploadQueue:
    container: AppContainer = request.app.state.container
    queue = container.upload_queues.get(queue_id)
    if queue is None:
        raise HTTPException(status_code=404, detail="Upload queue not found")
    return queue


@router.post("/queues", status_code=status.HTTP_201_CREATED)
async def create_queue(request: Request) -> UploadQueueOut:
    """Start an empty upload queue for a guest."""
    container: AppContainer = request.app.state.container
    queue_id, queue = container.upload_queues.create()
    return UploadQueueOut.from_queue(queue_id, queue)


@router.get("/queues/{queue_id}")
async def get_queue(queue_id: UUID, request: Request) -> UploadQueueOut:
    """Return the files in a queue and their status."""
    return UploadQueueOut.from_queue(queue_id, _get_queue(request, queue_id))


@router.post("/queues/{queue_id}/files")
async def add_files(
    queue_id: UUID, request: Request, files: list[UploadFile] = File(...)
) -> UploadQueueOut:
    """Add selected files; anything that is not an image is dropped."""
    queue = _get_queue(request, queue_id)
    sources = [
        SourceFile(
            name=upload.filename or "photo",
            media_type=upload.content_type or _DEFAULT_MEDIA_TYPE,
            content=await upload.read(),
        )
        for upload in files
    ]
    queue.add_files(sources)
    return UploadQueueOut.from_queue(queue_id, queue)


@router.delete("/queues/{queue_id}/files/{index}")
async def remove_file(queue_id: UUID, index: int, request: Request) -> UploadQueueOut:
    """Remove one file from a queue."""
    queue = _get_queue(request, queue_id)
    try:
        queue.remove(index)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return UploadQueueOut.from_queue(queue_id, queue)


@router.delete("/queues/{queue_id}")
async def clear_queue(queue_id: UUID, request: Request) -> UploadQueueOut:
    """Remove every file from a queue and drop the queue."""
    container: AppContainer = request.app.state.container
    queue = _get_queue(request, queue_id)
    container.upload_queues.discard(queue_id)
    return UploadQueueOut.from_queue(queue_id, queue)


@router.post("/queues/{queue_id}/submit")
async def submit_queue(
    queue_id: UUID, body: SubmitUploadsIn, request: Request
) -> UploadQueueOut:
    """Upload every file in the queue that has not been uploaded yet."""
    queue = _get_queue(request, queue_id)
    try:
        result = await queue.submit(body.uploaded_by)
    except UploadInProgressError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return UploadQueueOut.from_queue(queue_id, queue, result)


@router.get("/previews/{token}")
async def preview(token: str, request: Request) -> Response:
    """Serve the local preview of a queued file."""
    container: AppContainer = request.app.state.container
    source = container.preview_store.get(token)
    if source is None:
        raise HTTPException(status_code=404, detail="Preview not found")
    return Response(content=source.content, media_type=source.media_type)

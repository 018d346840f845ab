"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import secrets
from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from wedding_site.api.schemas import RsvpOut
from wedding_site.services.rsvp_admin import AttendanceFilter, export_filename

if TYPE_CHECKING:
    from wedding_site.containers import AppContainer
    from wedding_site.domain.rsvp import RsvpStats

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or not secrets.compare_digest(x_admin_token, admin_token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/rsvps", dependencies=[Depends(require_admin)])
async def list_rsvps(
    request: Request,
    search: str = "",
    attendance: AttendanceFilter = AttendanceFilter.ALL,
) -> dict[str, object]:
    """Return responses matching the filters, plus stats over all of them."""
    container: AppContainer = request.app.state.container
    admin = container.rsvp_admin_service
    admin.ensure_loaded()
    return {
        "rsvps": [
            RsvpOut.from_record(record).model_dump(mode="json")
            for record in admin.filter(search, attendance)
        ],
        "stats": _serialize_stats(admin.stats()),
    }


@router.get("/rsvps/stats", dependencies=[Depends(require_admin)])
async def rsvp_stats(request: Request) -> dict[str, int]:
    """Return headcounts over every response."""
    container: AppContainer = request.app.state.container
    container.rsvp_admin_service.ensure_loaded()
    return _serialize_stats(container.rsvp_admin_service.stats())


@router.post("/rsvps/refresh", dependencies=[Depends(require_admin)])
async def refresh_rsvps(request: Request) -> dict[str, object]:
    """Reload responses from the backend."""
    container: AppContainer = request.app.state.container
    admin = container.rsvp_admin_service
    refreshed = admin.refresh()
    return {"refreshed": refreshed, "count": len(admin.records)}


@router.get("/rsvps/export", dependencies=[Depends(require_admin)])
async def export_rsvps(request: Request) -> Response:
    """Download every fetched response as CSV."""
    container: AppContainer = request.app.state.container
    admin = container.rsvp_admin_service
    admin.ensure_loaded()
    filename = export_filename(date.today())
    return Response(
        content=admin.export_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _serialize_stats(stats: RsvpStats) -> dict[str, int]:
    return {
        "total": stats.total,
        "attending": stats.attending,
        "not_attending": stats.not_attending,
        "total_guests": stats.total_guests,
        "vegetarian": stats.vegetarian,
        "non_vegetarian": stats.non_vegetarian,
    }

"""Photo domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GalleryPhoto:
    """Remote photo as shown in the gallery or carousel."""

    id: str
    url: str
    caption: str | None = None
    uploaded_by: str | None = None
    created_at: datetime | None = None

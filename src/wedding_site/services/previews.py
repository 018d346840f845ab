"""Local preview handles for queued uploads."""

import secrets
from dataclasses import dataclass, field
from typing import Protocol

from wedding_site.domain.uploads import PreviewHandle, SourceFile


class PreviewStore(Protocol):
    """Acquires and releases preview handles for selected files."""

    def acquire(self, source: SourceFile) -> PreviewHandle:
        """Create a preview handle for a file."""

    def release(self, handle: PreviewHandle) -> None:
        """Release a previously acquired preview handle."""


@dataclass
class InMemoryPreviewStore(PreviewStore):
    """Keeps preview bytes in memory until released."""

    url_prefix: str = "/uploads/previews"
    _previews: dict[str, SourceFile] = field(default_factory=dict)

    def acquire(self, source: SourceFile) -> PreviewHandle:
        """Store the file and return a handle addressing it."""
        token = secrets.token_urlsafe(16)
        self._previews[token] = source
        return PreviewHandle(token=token, url=f"{self.url_prefix}/{token}")

    def release(self, handle: PreviewHandle) -> None:
        """Drop the preview for a handle."""
        self._previews.pop(handle.token, None)

    def get(self, token: str) -> SourceFile | None:
        """Return the previewed file for a token, if still held."""
        return self._previews.get(token)

    def __len__(self) -> int:
        return len(self._previews)

"""HTTP download of hosted photos."""

from dataclasses import dataclass

import httpx

from wedding_site.services.gallery import PhotoDownloader


@dataclass
class HttpxPhotoDownloader(PhotoDownloader):
    """Photo downloader using httpx."""

    http_client: httpx.AsyncClient
    timeout: float = 20.0

    @classmethod
    def create(cls, timeout: float = 20.0) -> "HttpxPhotoDownloader":
        """Create a downloader with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(), timeout=timeout)

    async def fetch_bytes(self, url: str) -> bytes:
        """Download the photo at a URL."""
        response = await self.http_client.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

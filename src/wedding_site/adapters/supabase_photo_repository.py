"""Supabase-backed photo repository."""

from dataclasses import dataclass

from supabase import Client

from wedding_site.errors import GatewayError
from wedding_site.services.uploads import PhotoRepository


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo metadata persistence."""

    client: Client
    table: str = "wedding_photos"

    def create_photo(
        self, file_name: str, file_path: str, file_url: str, uploaded_by: str
    ) -> None:
        """Create a photo metadata row."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "file_name": file_name,
                    "file_path": file_path,
                    "file_url": file_url,
                    "uploaded_by": uploaded_by,
                }
            )
            .execute()
        )
        if not response.data:
            raise GatewayError("Failed to create photo metadata")

    def list_photos(self) -> list[dict[str, object]]:
        """Return photo rows, newest first."""
        response = (
            self.client.table(self.table)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return response.data or []

"""Supabase Storage bucket for uploaded photos."""

from dataclasses import dataclass

from supabase import Client

from wedding_site.services.uploads import PhotoStorage


@dataclass
class SupabasePhotoStorage(PhotoStorage):
    """Stores photo bytes in a Supabase Storage bucket."""

    client: Client
    bucket: str = "wedding-photos"

    def store_object(self, key: str, content: bytes, media_type: str) -> None:
        """Upload bytes under a key in the bucket."""
        self.client.storage.from_(self.bucket).upload(
            key, content, {"content-type": media_type}
        )

    def resolve_public_url(self, key: str) -> str:
        """Return the public URL for a stored key."""
        return self.client.storage.from_(self.bucket).get_public_url(key)

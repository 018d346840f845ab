"""Supabase-backed RSVP repository."""

from dataclasses import dataclass

from supabase import Client

from wedding_site.errors import GatewayError
from wedding_site.services.rsvp import RsvpRepository


@dataclass
class SupabaseRsvpRepository(RsvpRepository):
    """Supabase implementation for guest responses."""

    client: Client
    table: str = "wedding_rsvps"

    def create_rsvp(self, fields: dict[str, object]) -> None:
        """Create an RSVP row."""
        response = self.client.table(self.table).insert(fields).execute()
        if not response.data:
            raise GatewayError("Failed to create RSVP")

    def list_rsvps(self) -> list[dict[str, object]]:
        """Return RSVP rows, newest first."""
        response = (
            self.client.table(self.table)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return response.data or []

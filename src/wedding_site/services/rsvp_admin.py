"""RSVP admin view: stats, filtering and CSV export."""

import csv
import io
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from enum import StrEnum

from wedding_site.domain.rsvp import MealPreference, RsvpRecord, RsvpStats
from wedding_site.services.rsvp import RsvpRepository

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Name",
    "Email",
    "Attending",
    "Guests",
    "Meal Preference",
    "Dietary Restrictions",
    "Message",
    "Date",
]


class AttendanceFilter(StrEnum):
    """Attendance filter for the admin list."""

    ALL = "all"
    YES = "yes"
    NO = "no"


@dataclass
class RsvpAdminService:
    """Holds the fetched responses and derives admin views from them."""

    repository: RsvpRepository
    records: list[RsvpRecord] = field(default_factory=list)
    loaded: bool = False
    timezone: tzinfo | None = None

    def refresh(self) -> bool:
        """Reload all responses; keep the previous list if the fetch fails."""
        try:
            records = [_to_record(row) for row in self.repository.list_rsvps()]
        except Exception:
            logger.exception("Failed to fetch RSVPs")
            return False
        self.records = records
        self.loaded = True
        return True

    def ensure_loaded(self) -> None:
        if not self.loaded:
            self.refresh()

    def stats(self) -> RsvpStats:
        """Aggregate counts over every fetched response."""
        return compute_stats(self.records)

    def filter(
        self, search: str = "", attendance: AttendanceFilter = AttendanceFilter.ALL
    ) -> list[RsvpRecord]:
        """Return responses matching a name/email search and attendance."""
        return filter_records(self.records, search, attendance)

    def export_csv(self) -> str:
        """Render every fetched response, ignoring filters."""
        return render_csv(self.records, self.timezone)


def compute_stats(records: list[RsvpRecord]) -> RsvpStats:
    """Count responses and headcounts in one pass."""
    attending = not_attending = total_guests = vegetarian = non_vegetarian = 0
    for record in records:
        if not record.attending:
            not_attending += 1
            continue
        attending += 1
        total_guests += record.number_of_attendees
        if record.meal_preference is MealPreference.VEGETARIAN:
            vegetarian += record.number_of_attendees
        elif record.meal_preference is MealPreference.NON_VEGETARIAN:
            non_vegetarian += record.number_of_attendees
    return RsvpStats(
        total=len(records),
        attending=attending,
        not_attending=not_attending,
        total_guests=total_guests,
        vegetarian=vegetarian,
        non_vegetarian=non_vegetarian,
    )


def filter_records(
    records: list[RsvpRecord], search: str, attendance: AttendanceFilter
) -> list[RsvpRecord]:
    needle = search.lower()
    matches = []
    for record in records:
        if (
            needle not in record.guest_name.lower()
            and needle not in record.email.lower()
        ):
            continue
        if attendance is AttendanceFilter.YES and not record.attending:
            continue
        if attendance is AttendanceFilter.NO and record.attending:
            continue
        matches.append(record)
    return matches


def format_date(value: datetime, tz: tzinfo | None = None) -> str:
    """Render a timestamp as a month/day/year date in a timezone.

    Without a timezone the server's local zone is used.
    """
    value = value.astimezone(tz)
    return f"{value.month}/{value.day}/{value.year}"


def render_csv(records: list[RsvpRecord], tz: tzinfo | None = None) -> str:
    """Render responses as CSV with every field quoted."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for record in records:
        writer.writerow(
            [
                record.guest_name,
                record.email,
                "Yes" if record.attending else "No",
                str(record.number_of_attendees),
                record.meal_preference.value,
                record.dietary_restrictions or "",
                record.message or "",
                format_date(record.created_at, tz),
            ]
        )
    return buffer.getvalue()[:-1]


def export_filename(today: date) -> str:
    return f"wedding-rsvps-{today.isoformat()}.csv"


def _to_record(row: dict[str, object]) -> RsvpRecord:
    return RsvpRecord(
        id=str(row["id"]),
        guest_name=str(row["guest_name"]),
        email=str(row["email"]),
        attending=bool(row["attending"]),
        number_of_attendees=int(row.get("number_of_attendees") or 0),
        meal_preference=MealPreference(row["meal_preference"]),
        dietary_restrictions=row.get("dietary_restrictions"),
        message=row.get("message"),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )

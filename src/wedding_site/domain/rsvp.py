"""RSVP domain models."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class MealPreference(StrEnum):
    """Meal choice offered to attending guests."""

    VEGETARIAN = "vegetarian"
    NON_VEGETARIAN = "non-vegetarian"


class RsvpSubmission(BaseModel):
    """Guest response as entered in the RSVP form."""

    guest_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    attending: bool = True
    number_of_attendees: int = Field(default=1, ge=0)
    meal_preference: MealPreference = MealPreference.NON_VEGETARIAN
    dietary_restrictions: str | None = None
    message: str | None = None

    @field_validator("guest_name", "email")
    @classmethod
    def _strip_required(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @field_validator("dietary_restrictions", "message")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    def to_record(self) -> dict[str, object]:
        """Return the row persisted for this response."""
        return {
            "guest_name": self.guest_name,
            "email": self.email,
            "attending": self.attending,
            "number_of_attendees": self.number_of_attendees if self.attending else 0,
            "meal_preference": self.meal_preference.value,
            "dietary_restrictions": self.dietary_restrictions,
            "message": self.message,
        }


@dataclass(frozen=True)
class RsvpRecord:
    """Stored guest response."""

    id: str
    guest_name: str
    email: str
    attending: bool
    number_of_attendees: int
    meal_preference: MealPreference
    dietary_restrictions: str | None
    message: str | None
    created_at: datetime


@dataclass(frozen=True)
class RsvpStats:
    """Aggregate headcounts over all responses."""

    total: int
    attending: int
    not_attending: int
    total_guests: int
    vegetarian: int
    non_vegetarian: int

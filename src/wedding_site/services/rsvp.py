"""RSVP submission."""

import logging
from dataclasses import dataclass
from typing import Protocol

from wedding_site.domain.rsvp import RsvpSubmission

logger = logging.getLogger(__name__)

SUBMISSION_FAILED_MESSAGE = "Failed to submit RSVP. Please try again."


class RsvpRepository(Protocol):
    """Persistence interface for RSVP records."""

    def create_rsvp(self, fields: dict[str, object]) -> None:
        """Append an RSVP record."""

    def list_rsvps(self) -> list[dict[str, object]]:
        """Return RSVP records, newest first."""


class RsvpSubmissionError(RuntimeError):
    """Raised when a response could not be stored."""

    def __init__(self) -> None:
        super().__init__(SUBMISSION_FAILED_MESSAGE)


@dataclass
class RsvpService:
    """Stores guest responses."""

    repository: RsvpRepository

    def submit(self, submission: RsvpSubmission) -> None:
        """Insert one response; failures surface as a generic error."""
        try:
            self.repository.create_rsvp(submission.to_record())
        except Exception as exc:
            logger.exception(
                "RSVP submission failed", extra={"guest_name": submission.guest_name}
            )
            raise RsvpSubmissionError from exc


def confirmation_message(submission: RsvpSubmission) -> str:
    """Return the thank-you text shown after a successful response."""
    if not submission.attending:
        return (
            "We're sorry you can't make it, but we appreciate you letting us know."
        )
    extra = submission.number_of_attendees - 1
    if extra <= 0:
        party = "party"
    else:
        party = f"{extra} guest{'s' if extra > 1 else ''}"
    return f"We can't wait to celebrate with you and your {party}!"

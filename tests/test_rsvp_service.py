"""Tests for RSVP submission."""

import pytest
from pydantic import ValidationError

from wedding_site.domain.rsvp import MealPreference, RsvpSubmission
from wedding_site.services.rsvp import (
    SUBMISSION_FAILED_MESSAGE,
    RsvpService,
    RsvpSubmissionError,
    confirmation_message,
)
from tests.conftest import InMemoryRsvpRepository


def test_submit_inserts_record() -> None:
    repository = InMemoryRsvpRepository()
    service = RsvpService(repository)

    service.submit(
        RsvpSubmission(
            guest_name="Ada Lovelace",
            email="ada@example.com",
            number_of_attendees=2,
            meal_preference=MealPreference.VEGETARIAN,
            dietary_restrictions="No nuts",
        )
    )

    row = repository.rows[0]
    assert row["guest_name"] == "Ada Lovelace"
    assert row["attending"] is True
    assert row["number_of_attendees"] == 2
    assert row["meal_preference"] == "vegetarian"
    assert row["dietary_restrictions"] == "No nuts"
    assert row["message"] is None


def test_declined_response_stores_zero_attendees() -> None:
    submission = RsvpSubmission(
        guest_name="Bob",
        email="bob@example.com",
        attending=False,
        number_of_attendees=3,
    )

    assert submission.to_record()["number_of_attendees"] == 0


def test_blank_optional_fields_become_null() -> None:
    submission = RsvpSubmission(
        guest_name="Bob", email="bob@example.com", dietary_restrictions="", message="  "
    )

    record = submission.to_record()

    assert record["dietary_restrictions"] is None
    assert record["message"] is None


@pytest.mark.parametrize("field", ["guest_name", "email"])
def test_required_fields_must_not_be_blank(field: str) -> None:
    payload = {"guest_name": "Bob", "email": "bob@example.com", field: "   "}

    with pytest.raises(ValidationError):
        RsvpSubmission(**payload)


def test_submit_failure_raises_generic_error() -> None:
    service = RsvpService(InMemoryRsvpRepository(fail=True))

    with pytest.raises(RsvpSubmissionError) as exc_info:
        service.submit(RsvpSubmission(guest_name="Bob", email="bob@example.com"))

    assert str(exc_info.value) == SUBMISSION_FAILED_MESSAGE


def test_confirmation_message_variants() -> None:
    solo = RsvpSubmission(guest_name="A", email="a@b.com", number_of_attendees=1)
    pair = RsvpSubmission(guest_name="A", email="a@b.com", number_of_attendees=2)
    family = RsvpSubmission(guest_name="A", email="a@b.com", number_of_attendees=4)
    declined = RsvpSubmission(guest_name="A", email="a@b.com", attending=False)

    assert confirmation_message(solo).endswith("your party!")
    assert confirmation_message(pair).endswith("your 1 guest!")
    assert confirmation_message(family).endswith("your 3 guests!")
    assert "sorry you can't make it" in confirmation_message(declined)

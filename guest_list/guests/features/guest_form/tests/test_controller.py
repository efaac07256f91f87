"""Tests for GuestFormController."""

import pytest

from guest_list.guests.dtos import GuestCategory, RSVPStatus
from guest_list.guests.features.guest_form.controller import (
    FormBusyError,
    FormMode,
    GuestFormController,
)


@pytest.fixture
def bob(make_guest):
    return make_guest(
        id=2,
        name="Bob",
        email=None,
        phone="+31 6 5555",
        rsvp_status="pending",
        category="friends",
    )


def test_open_for_create_resets_draft(store_factory):
    form = GuestFormController(store_factory())
    form.draft.name = "Leftover"

    form.open_for_create()

    assert form.mode == FormMode.CREATING
    assert form.is_open
    assert form.draft.name == ""


def test_open_for_edit_populates_draft(store_factory, bob):
    form = GuestFormController(store_factory([bob]))

    form.open_for_edit(bob)

    assert form.mode == FormMode.EDITING
    assert form.draft.name == "Bob"
    assert form.draft.email == ""
    assert form.draft.phone == "+31 6 5555"
    assert form.draft.category == GuestCategory.FRIENDS


async def test_empty_name_blocks_submission(store_factory, write_model):
    form = GuestFormController(store_factory(write_model=write_model))
    form.open_for_create()

    outcome = await form.submit()

    assert not outcome.ok
    assert "name" in outcome.field_errors
    assert outcome.result is None
    assert write_model.created == []
    assert form.mode == FormMode.CREATING


async def test_invalid_email_is_reported_per_field(store_factory, write_model):
    form = GuestFormController(store_factory(write_model=write_model))
    form.open_for_create()
    form.draft.name = "Alice"
    form.draft.email = "alice-at-example"

    outcome = await form.submit()

    assert list(outcome.field_errors) == ["email"]
    assert write_model.created == []


async def test_create_submits_normalised_draft(store_factory, write_model):
    form = GuestFormController(store_factory(write_model=write_model))
    form.open_for_create()
    form.draft.name = "  Alice "
    form.draft.email = "alice@example.com"

    outcome = await form.submit()

    assert outcome.ok
    created = write_model.created[0]
    assert created.wedding_id == 1
    assert created.name == "Alice"
    assert created.phone is None
    assert created.notes is None
    assert form.mode == FormMode.CLOSED
    assert form.draft.name == ""


async def test_edit_sends_only_changed_fields(store_factory, write_model, bob):
    form = GuestFormController(store_factory([bob], write_model=write_model))
    form.open_for_edit(bob)
    form.draft.phone = ""
    form.draft.notes = "Vegetarian table"

    outcome = await form.submit()

    assert outcome.ok
    guest_id, changes = write_model.updates[0]
    assert guest_id == bob.id
    assert changes.to_payload() == {"phone": None, "notes": "Vegetarian table"}


async def test_edit_status_change_stamps_response_time(store_factory, write_model, bob, now):
    form = GuestFormController(store_factory([bob], write_model=write_model))
    form.open_for_edit(bob)
    form.draft.rsvp_status = RSVPStatus.DECLINED

    await form.submit()

    _, changes = write_model.updates[0]
    assert changes.model_dump(exclude_unset=True) == {
        "rsvp_status": RSVPStatus.DECLINED,
        "responded_at": now,
    }


async def test_edit_without_changes_sends_nothing(store_factory, write_model, bob):
    form = GuestFormController(store_factory([bob], write_model=write_model))
    form.open_for_edit(bob)

    outcome = await form.submit()

    assert outcome.ok
    assert outcome.result.guest == bob
    assert write_model.updates == []
    assert form.mode == FormMode.CLOSED


async def test_failed_mutation_keeps_dialog_open(store_factory, failing_write_model):
    form = GuestFormController(store_factory(write_model=failing_write_model))
    form.open_for_create()
    form.draft.name = "Alice"

    outcome = await form.submit()

    assert not outcome.ok
    assert form.mode == FormMode.CREATING
    assert form.draft.name == "Alice"
    assert form.error_message == "HTTP 500: boom"
    assert not form.is_submitting


def test_cancel_discards_draft(store_factory, bob):
    form = GuestFormController(store_factory([bob]))
    form.open_for_edit(bob)
    form.draft.name = "Robert"
    form.field_errors = {"name": "bad"}

    form.cancel()

    assert form.mode == FormMode.CLOSED
    assert form.editing_guest is None
    assert form.draft.name == ""
    assert form.field_errors == {}


async def test_submit_while_busy_is_refused(store_factory):
    form = GuestFormController(store_factory())
    form.open_for_create()
    form.is_submitting = True

    with pytest.raises(FormBusyError):
        await form.submit()


async def test_submit_closed_form_is_an_error(store_factory):
    form = GuestFormController(store_factory())

    with pytest.raises(RuntimeError):
        await form.submit()


async def test_create_keeps_email_as_typed(store_factory, write_model):
    form = GuestFormController(store_factory(write_model=write_model))
    form.open_for_create()
    form.draft.name = "Alice"
    form.draft.email = "Alice@Example.COM"

    outcome = await form.submit()

    assert outcome.ok
    assert write_model.created[0].email == "Alice@Example.COM"


async def test_unchanged_mixed_case_email_sends_nothing(store_factory, write_model, make_guest):
    guest = make_guest(id=2, name="Bob", email="Bob@Example.COM")
    form = GuestFormController(store_factory([guest], write_model=write_model))
    form.open_for_edit(guest)

    outcome = await form.submit()

    assert outcome.ok
    assert write_model.updates == []

"""Guest form controller.

Owns the single editable draft and the closed / creating / editing dialog
state. The draft is validated against ``GuestFormSchema`` before anything is
sent to the store client.
"""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import ValidationError

from guest_list.guests.dtos import (
    GuestDraft,
    GuestDTO,
    GuestFormSchema,
    GuestUpdate,
    MutationResult,
)
from guest_list.guests.store import GuestStoreClient


class FormMode(str, Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


@dataclass(frozen=True)
class SubmitOutcome:
    """What happened on submit: validation errors, a mutation result, or nothing sent."""

    field_errors: dict[str, str] = field(default_factory=dict)
    result: MutationResult | None = None

    @property
    def ok(self) -> bool:
        return not self.field_errors and self.result is not None and self.result.ok


class FormBusyError(Exception):
    """Raised when submitting while a previous submission is still outstanding."""


def field_errors_from(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.setdefault(name, error["msg"])
    return errors


def changed_fields(guest: GuestDTO, validated: GuestFormSchema) -> dict:
    """Return the validated fields that differ from the stored guest."""
    return {
        name: value
        for name, value in validated.model_dump().items()
        if getattr(guest, name) != value
    }


class GuestFormController:
    def __init__(self, store: GuestStoreClient):
        self._store = store
        self.mode = FormMode.CLOSED
        self.draft = GuestDraft()
        self.editing_guest: GuestDTO | None = None
        self.field_errors: dict[str, str] = {}
        self.error_message: str | None = None
        self.is_submitting = False

    @property
    def is_open(self) -> bool:
        return self.mode != FormMode.CLOSED

    def open_for_create(self) -> None:
        self._reset()
        self.mode = FormMode.CREATING

    def open_for_edit(self, guest: GuestDTO) -> None:
        self._reset()
        self.editing_guest = guest
        self.draft = GuestDraft.from_guest(guest)
        self.mode = FormMode.EDITING

    def cancel(self) -> None:
        self._reset()

    def validate(self) -> GuestFormSchema | None:
        """Validate the draft, recording per-field errors on failure."""
        try:
            validated = GuestFormSchema.model_validate(self.draft.as_dict())
        except ValidationError as e:
            self.field_errors = field_errors_from(e)
            return None
        self.field_errors = {}
        return validated

    async def submit(self) -> SubmitOutcome:
        if self.is_submitting:
            raise FormBusyError("A guest is already being saved")
        if self.mode == FormMode.CLOSED:
            raise RuntimeError("Cannot submit a closed form")

        validated = self.validate()
        if validated is None:
            return SubmitOutcome(field_errors=dict(self.field_errors))

        self.is_submitting = True
        self.error_message = None
        try:
            if self.mode == FormMode.EDITING:
                result = await self._submit_edit(validated)
            else:
                result = await self._store.create_guest(validated.to_create(self._store.wedding_id))
        finally:
            self.is_submitting = False

        if result.ok:
            self._reset()
        else:
            # Keep the dialog open with the draft so the user can retry.
            self.error_message = result.error.message
        return SubmitOutcome(result=result)

    async def _submit_edit(self, validated: GuestFormSchema) -> MutationResult:
        guest = self.editing_guest
        changes = changed_fields(guest, validated)
        if not changes:
            return MutationResult.success(guest)
        if "rsvp_status" in changes:
            changes["responded_at"] = self._store.now()
        return await self._store.update_guest(guest.id, GuestUpdate(**changes))

    def _reset(self) -> None:
        self.mode = FormMode.CLOSED
        self.draft = GuestDraft()
        self.editing_guest = None
        self.field_errors = {}
        self.error_message = None

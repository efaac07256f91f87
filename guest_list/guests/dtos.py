from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RSVPStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DECLINED = "declined"
    MAYBE = "maybe"


class GuestCategory(str, Enum):
    FAMILY = "family"
    FRIENDS = "friends"
    COLLEAGUES = "colleagues"
    OTHER = "other"


class GuestSide(str, Enum):
    PARTNER_A = "partner_a"
    PARTNER_B = "partner_b"
    BOTH = "both"


class Language(str, Enum):
    EN = "en"
    ES = "es"
    NL = "nl"


# Optional text fields: "" in the draft, null on the wire.
OPTIONAL_TEXT_FIELDS = (
    "email",
    "phone",
    "plus_one_name",
    "dietary_restrictions",
    "address",
    "notes",
)


class ErrorKind(str, Enum):
    NETWORK = "network"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    SERVER = "server"


class GuestApiError(Exception):
    """Raised when a request to the guest API fails."""

    def __init__(self, kind: ErrorKind, message: str, status_code: int | None = None) -> None:
        self.kind = kind
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class GuestNotFoundError(Exception):
    """Raised when a guest id is not part of the loaded guest list."""

    def __init__(self, guest_id: int) -> None:
        self.guest_id = guest_id
        super().__init__(f"Guest not found: {guest_id}")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GuestDTO(_CamelModel):
    """A guest record as returned by the guest API."""

    id: int
    wedding_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    plus_one: bool = False
    plus_one_name: str | None = None
    additional_guests: int = 0
    category: GuestCategory = GuestCategory.FAMILY
    side: GuestSide = GuestSide.BOTH
    dietary_restrictions: str | None = None
    address: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    responded_at: datetime | None = None


class GuestCreate(_CamelModel):
    """Body of POST /api/guests."""

    wedding_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    plus_one: bool = False
    plus_one_name: str | None = None
    additional_guests: int = 0
    category: GuestCategory = GuestCategory.FAMILY
    side: GuestSide = GuestSide.BOTH
    dietary_restrictions: str | None = None
    address: str | None = None
    notes: str | None = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class GuestUpdate(_CamelModel):
    """Body of PATCH /api/guests/{id}. Only explicitly set fields are sent."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    rsvp_status: RSVPStatus | None = None
    plus_one: bool | None = None
    plus_one_name: str | None = None
    additional_guests: int | None = None
    category: GuestCategory | None = None
    side: GuestSide | None = None
    dietary_restrictions: str | None = None
    address: str | None = None
    notes: str | None = None
    responded_at: datetime | None = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class GuestFormSchema(BaseModel):
    """Validation schema for the guest form."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    email: str | None = None
    phone: str | None = None
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    plus_one: bool = False
    plus_one_name: str | None = None
    additional_guests: int = Field(default=0, ge=0, strict=True)
    category: GuestCategory = GuestCategory.FAMILY
    side: GuestSide = GuestSide.BOTH
    dietary_restrictions: str | None = None
    address: str | None = None
    notes: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def empty_to_none(cls, value):
        if value == "":
            return None
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value):
        # Validate only; the address is stored exactly as typed.
        if value is not None:
            try:
                validate_email(value, check_deliverability=False)
            except EmailNotValidError as e:
                raise ValueError(f"value is not a valid email address: {e}") from e
        return value

    def to_create(self, wedding_id: int) -> GuestCreate:
        return GuestCreate(wedding_id=wedding_id, **self.model_dump())


@dataclass
class GuestDraft:
    """The editable, unsaved guest record held by the form."""

    name: str = ""
    email: str = ""
    phone: str = ""
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    plus_one: bool = False
    plus_one_name: str = ""
    additional_guests: int = 0
    category: GuestCategory = GuestCategory.FAMILY
    side: GuestSide = GuestSide.BOTH
    dietary_restrictions: str = ""
    address: str = ""
    notes: str = ""

    @classmethod
    def from_guest(cls, guest: GuestDTO) -> "GuestDraft":
        """Create a draft from a stored guest, back-filling missing text with ""."""
        values = {}
        for draft_field in fields(cls):
            value = getattr(guest, draft_field.name)
            if draft_field.name in OPTIONAL_TEXT_FIELDS and value is None:
                value = ""
            values[draft_field.name] = value
        return cls(**values)

    def as_dict(self) -> dict:
        return {draft_field.name: getattr(self, draft_field.name) for draft_field in fields(self)}


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a create, update or delete request."""

    guest: GuestDTO | None = None
    error: GuestApiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, guest: GuestDTO | None = None) -> "MutationResult":
        return cls(guest=guest)

    @classmethod
    def failure(cls, error: GuestApiError) -> "MutationResult":
        return cls(error=error)

from dataclasses import dataclass, field

from guest_list.guests.dtos import GuestCategory, GuestDTO, RSVPStatus

ALL = "all"


@dataclass
class GuestFilters:
    search: str = ""
    status: str = ALL
    category: str = ALL

    @property
    def is_active(self) -> bool:
        return bool(self.search) or self.status != ALL or self.category != ALL


@dataclass(frozen=True)
class GuestStats:
    total: int = 0
    confirmed: int = 0
    declined: int = 0
    pending: int = 0
    maybe: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "confirmed": self.confirmed,
            "declined": self.declined,
            "pending": self.pending,
            "maybe": self.maybe,
        }


@dataclass(frozen=True)
class GuestListView:
    guests: list[GuestDTO] = field(default_factory=list)
    stats: GuestStats = field(default_factory=GuestStats)
    empty_message_key: str | None = None


def matches_search(guest: GuestDTO, search: str) -> bool:
    term = search.lower()
    if term in guest.name.lower():
        return True
    if guest.email and term in guest.email.lower():
        return True
    # Phone numbers have no case.
    return bool(guest.phone) and search in guest.phone


def matches_status(guest: GuestDTO, status: str) -> bool:
    return status == ALL or guest.rsvp_status == RSVPStatus(status)


def matches_category(guest: GuestDTO, category: str) -> bool:
    return category == ALL or guest.category == GuestCategory(category)


def filter_guests(guests: list[GuestDTO], filters: GuestFilters) -> list[GuestDTO]:
    return [
        guest
        for guest in guests
        if matches_search(guest, filters.search)
        and matches_status(guest, filters.status)
        and matches_category(guest, filters.category)
    ]


def compute_stats(guests: list[GuestDTO]) -> GuestStats:
    """Count guests per RSVP status over the whole, unfiltered list."""
    counts = {status: 0 for status in RSVPStatus}
    for guest in guests:
        counts[guest.rsvp_status] += 1
    return GuestStats(
        total=len(guests),
        confirmed=counts[RSVPStatus.CONFIRMED],
        declined=counts[RSVPStatus.DECLINED],
        pending=counts[RSVPStatus.PENDING],
        maybe=counts[RSVPStatus.MAYBE],
    )


def empty_message_key(filtered: list[GuestDTO], filters: GuestFilters) -> str | None:
    if filtered:
        return None
    if filters.is_active:
        return "guestList.noGuestsFound"
    return "guestList.noGuestsYet"


def build_view(guests: list[GuestDTO], filters: GuestFilters) -> GuestListView:
    filtered = filter_guests(guests, filters)
    return GuestListView(
        guests=filtered,
        stats=compute_stats(guests),
        empty_message_key=empty_message_key(filtered, filters),
    )

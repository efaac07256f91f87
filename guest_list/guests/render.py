"""Terminal rendering of statistics tiles and guest cards."""

import typer

from guest_list.guests.dtos import GuestDTO, RSVPStatus
from guest_list.guests.features.list_guests.view import GuestListView, GuestStats
from guest_list.i18n.translator import Translator

STATUS_COLORS = {
    RSVPStatus.CONFIRMED: typer.colors.GREEN,
    RSVPStatus.DECLINED: typer.colors.RED,
    RSVPStatus.PENDING: typer.colors.YELLOW,
    RSVPStatus.MAYBE: typer.colors.BLUE,
}

STATUS_LABEL_KEYS = {
    RSVPStatus.CONFIRMED: "guestList.confirmed",
    RSVPStatus.DECLINED: "guestList.declined",
    RSVPStatus.PENDING: "guestList.pending",
    RSVPStatus.MAYBE: "guestList.maybe",
}


def status_icon(status: RSVPStatus) -> str:
    if status == RSVPStatus.CONFIRMED:
        return typer.style("✓", fg=typer.colors.GREEN)
    if status == RSVPStatus.DECLINED:
        return typer.style("✗", fg=typer.colors.RED)
    return typer.style("◷", fg=typer.colors.YELLOW)


def status_badge(status: RSVPStatus, t: Translator) -> str:
    return typer.style(f"[{t(STATUS_LABEL_KEYS[status])}]", fg=STATUS_COLORS[status])


def render_stats(stats: GuestStats, t: Translator) -> list[str]:
    tiles = [typer.style(f"{t('guestList.totalGuests')}: {stats.total}", bold=True)]
    for status in (RSVPStatus.CONFIRMED, RSVPStatus.DECLINED, RSVPStatus.PENDING, RSVPStatus.MAYBE):
        count = getattr(stats, status.value)
        tiles.append(typer.style(f"{t(STATUS_LABEL_KEYS[status])}: {count}", fg=STATUS_COLORS[status]))
    return tiles


def render_card(guest: GuestDTO, t: Translator) -> list[str]:
    lines = [f"{status_icon(guest.rsvp_status)} #{guest.id} {typer.style(guest.name, bold=True)}"]

    contact = []
    if guest.email:
        contact.append(f"✉ {guest.email}")
    if guest.phone:
        contact.append(f"☎ {guest.phone}")
    if contact:
        lines.append("    " + "  ".join(contact))

    badges = []
    if guest.plus_one:
        badges.append("[+1]")
    badges.append(status_badge(guest.rsvp_status, t))
    lines.append("    " + " ".join(badges))
    return lines


def render_view(view: GuestListView, t: Translator) -> list[str]:
    lines = ["  |  ".join(render_stats(view.stats, t)), ""]
    for guest in view.guests:
        lines.extend(render_card(guest, t))
    if view.empty_message_key:
        lines.append(typer.style(t(view.empty_message_key), dim=True))
    return lines

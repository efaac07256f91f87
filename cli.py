"""CLI commands for managing a wedding's guest list."""

import asyncio

import sentry_sdk
import typer

from guest_list.config.logging import setup_logging
from guest_list.config.settings import settings
from guest_list.guests.dtos import (
    GuestApiError,
    GuestCategory,
    GuestDraft,
    GuestNotFoundError,
    GuestSide,
    RSVPStatus,
)
from guest_list.guests.features.guest_form.controller import SubmitOutcome
from guest_list.guests.features.list_guests.view import ALL
from guest_list.guests.panel import GuestListPanel, open_panel
from guest_list.guests.render import render_view
from guest_list.notifications.notifier import EchoNotifier

app = typer.Typer(help="CLI commands for managing a wedding guest list")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and cache activity"),
):
    """Configure logging and error reporting."""
    setup_logging(verbose=verbose)
    if settings.SENTRY_DSN:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.ENVIRONMENT,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            send_default_pii=False,
        )


def _run(wedding_id: int, action):
    """Open a panel for the wedding and run ``action`` against it."""

    async def _with_panel():
        async with open_panel(wedding_id, notifier=EchoNotifier()) as panel:
            return await action(panel)

    try:
        return asyncio.run(_with_panel())
    except (GuestApiError, GuestNotFoundError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)


def _apply_fields(draft: GuestDraft, **values) -> None:
    """Copy every option the user actually passed onto the draft."""
    for name, value in values.items():
        if value is not None:
            setattr(draft, name, value)


def _report(outcome: SubmitOutcome) -> None:
    if outcome.field_errors:
        typer.secho("Please fix the following fields:", fg=typer.colors.RED)
        for name, message in outcome.field_errors.items():
            typer.secho(f"  {name}: {message}", fg=typer.colors.RED)
        raise typer.Exit(1)
    if not outcome.ok:
        raise typer.Exit(1)
    if outcome.result.guest:
        guest = outcome.result.guest
        typer.secho(f"  Guest ID: {guest.id}", fg=typer.colors.CYAN)
        typer.secho(f"  Name: {guest.name}", fg=typer.colors.BLUE)


@app.command("list")
def list_guests(
    wedding_id: int = typer.Argument(..., help="Wedding ID"),
    search: str = typer.Option("", "--search", "-s", help="Search by name, email or phone"),
    status: str = typer.Option(ALL, "--status", help="RSVP status or 'all'"),
    category: str = typer.Option(ALL, "--category", "-c", help="Guest category or 'all'"),
):
    """Show statistics and the guests matching the filters."""

    async def _list(panel: GuestListPanel):
        panel.set_search(search)
        panel.set_status_filter(status)
        panel.set_category_filter(category)
        typer.secho(panel.t("guestList.loading"), dim=True)
        return panel, await panel.view()

    try:
        panel, view = _run(wedding_id, _list)
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    for line in render_view(view, panel.t):
        typer.echo(line)


@app.command()
def add(
    wedding_id: int = typer.Argument(..., help="Wedding ID"),
    name: str = typer.Option(..., "--name", "-n", help="Guest name"),
    email: str = typer.Option(None, "--email", "-e"),
    phone: str = typer.Option(None, "--phone", "-p"),
    rsvp_status: RSVPStatus = typer.Option(None, "--status"),
    plus_one: bool = typer.Option(None, "--plus-one/--no-plus-one"),
    plus_one_name: str = typer.Option(None, "--plus-one-name"),
    additional_guests: int = typer.Option(None, "--additional-guests"),
    category: GuestCategory = typer.Option(None, "--category", "-c"),
    side: GuestSide = typer.Option(None, "--side"),
    dietary_restrictions: str = typer.Option(None, "--dietary"),
    address: str = typer.Option(None, "--address"),
    notes: str = typer.Option(None, "--notes"),
):
    """Add a guest to the wedding."""

    async def _add(panel: GuestListPanel):
        panel.open_create()
        _apply_fields(
            panel.form.draft,
            name=name,
            email=email,
            phone=phone,
            rsvp_status=rsvp_status,
            plus_one=plus_one,
            plus_one_name=plus_one_name,
            additional_guests=additional_guests,
            category=category,
            side=side,
            dietary_restrictions=dietary_restrictions,
            address=address,
            notes=notes,
        )
        return await panel.submit()

    _report(_run(wedding_id, _add))


@app.command()
def edit(
    wedding_id: int = typer.Argument(..., help="Wedding ID"),
    guest_id: int = typer.Argument(..., help="Guest ID"),
    name: str = typer.Option(None, "--name", "-n"),
    email: str = typer.Option(None, "--email", "-e", help="Pass '' to clear"),
    phone: str = typer.Option(None, "--phone", "-p", help="Pass '' to clear"),
    rsvp_status: RSVPStatus = typer.Option(None, "--status"),
    plus_one: bool = typer.Option(None, "--plus-one/--no-plus-one"),
    plus_one_name: str = typer.Option(None, "--plus-one-name"),
    additional_guests: int = typer.Option(None, "--additional-guests"),
    category: GuestCategory = typer.Option(None, "--category", "-c"),
    side: GuestSide = typer.Option(None, "--side"),
    dietary_restrictions: str = typer.Option(None, "--dietary"),
    address: str = typer.Option(None, "--address"),
    notes: str = typer.Option(None, "--notes"),
):
    """Edit an existing guest. Only the options given are changed."""

    async def _edit(panel: GuestListPanel):
        await panel.open_edit(guest_id)
        _apply_fields(
            panel.form.draft,
            name=name,
            email=email,
            phone=phone,
            rsvp_status=rsvp_status,
            plus_one=plus_one,
            plus_one_name=plus_one_name,
            additional_guests=additional_guests,
            category=category,
            side=side,
            dietary_restrictions=dietary_restrictions,
            address=address,
            notes=notes,
        )
        return await panel.submit()

    _report(_run(wedding_id, _edit))


@app.command()
def rsvp(
    wedding_id: int = typer.Argument(..., help="Wedding ID"),
    guest_id: int = typer.Argument(..., help="Guest ID"),
    status: RSVPStatus = typer.Argument(..., help="New RSVP status"),
):
    """Record a guest's RSVP response."""

    async def _rsvp(panel: GuestListPanel):
        return await panel.update_status(guest_id, status)

    result = _run(wedding_id, _rsvp)
    if not result.ok:
        raise typer.Exit(1)


@app.command()
def delete(
    wedding_id: int = typer.Argument(..., help="Wedding ID"),
    guest_id: int = typer.Argument(..., help="Guest ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Remove a guest from the wedding."""
    if not yes:
        typer.confirm(f"Delete guest {guest_id}?", abort=True)

    async def _delete(panel: GuestListPanel):
        return await panel.delete(guest_id)

    result = _run(wedding_id, _delete)
    if not result.ok:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

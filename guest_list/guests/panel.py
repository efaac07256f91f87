"""Guest list panel for a single wedding.

Holds the filter controls, the guest form and the store client, and exposes
the actions a user can take on the guest list.
"""

import contextlib
import logging
from collections.abc import AsyncIterator, Callable
from datetime import datetime
from typing import Protocol

import httpx

from guest_list.config.settings import settings
from guest_list.guests.cache import QueryCache
from guest_list.guests.dtos import (
    GuestCategory,
    GuestDTO,
    GuestNotFoundError,
    MutationResult,
    RSVPStatus,
)
from guest_list.guests.features.guest_form.controller import (
    FormMode,
    GuestFormController,
    SubmitOutcome,
)
from guest_list.guests.features.list_guests.view import (
    ALL,
    GuestFilters,
    GuestListView,
    build_view,
)
from guest_list.guests.repository.read_models import HttpGuestReadModel
from guest_list.guests.repository.write_models import HttpGuestWriteModel
from guest_list.guests.store import GuestStoreClient, utc_now
from guest_list.i18n.translator import Translator
from guest_list.notifications.notifier import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)


class PanelConfig(Protocol):
    api_base_url: str
    request_timeout: float
    language: str


class GuestListPanel:
    def __init__(self, store: GuestStoreClient, translator: Translator):
        self.store = store
        self.t = translator
        self.filters = GuestFilters()
        self.form = GuestFormController(store)

    @property
    def wedding_id(self) -> int:
        return self.store.wedding_id

    async def guests(self) -> list[GuestDTO]:
        return await self.store.list_guests()

    async def view(self) -> GuestListView:
        return build_view(await self.guests(), self.filters)

    async def find_guest(self, guest_id: int) -> GuestDTO:
        for guest in await self.guests():
            if guest.id == guest_id:
                return guest
        raise GuestNotFoundError(guest_id)

    # Filters

    def set_search(self, search: str) -> None:
        self.filters.search = search

    def set_status_filter(self, status: str) -> None:
        if status != ALL:
            status = RSVPStatus(status).value
        self.filters.status = status

    def set_category_filter(self, category: str) -> None:
        if category != ALL:
            category = GuestCategory(category).value
        self.filters.category = category

    # Form

    def open_create(self) -> None:
        self.form.open_for_create()

    async def open_edit(self, guest_id: int) -> None:
        self.form.open_for_edit(await self.find_guest(guest_id))

    def cancel(self) -> None:
        self.form.cancel()

    async def submit(self) -> SubmitOutcome:
        return await self.form.submit()

    def dialog_title(self) -> str:
        if self.form.mode == FormMode.EDITING:
            return self.t("guestList.editGuest")
        return self.t("guestList.addNewGuest")

    def submit_label(self) -> str:
        if self.form.is_submitting:
            return self.t("common.saving")
        if self.form.mode == FormMode.EDITING:
            return self.t("common.save")
        return self.t("guestList.addGuest")

    # Card actions

    async def update_status(self, guest_id: int, status: RSVPStatus) -> MutationResult:
        guest = await self.find_guest(guest_id)
        return await self.store.update_status(guest.id, status)

    async def delete(self, guest_id: int) -> MutationResult:
        guest = await self.find_guest(guest_id)
        logger.debug(f"Deleting guest {guest.id} ({guest.name})")
        return await self.store.delete_guest(guest.id)


@contextlib.asynccontextmanager
async def open_panel(
    wedding_id: int,
    config: PanelConfig = settings,
    notifier: Notifier | None = None,
    clock: Callable[[], datetime] = utc_now,
    http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    **client_kwargs,
) -> AsyncIterator[GuestListPanel]:
    """Create a panel wired to the guest API, closing the HTTP client on exit."""
    async with http_client_class(
        base_url=config.api_base_url,
        timeout=config.request_timeout,
        **client_kwargs,
    ) as http_client:
        translator = Translator.for_code(config.language)
        store = GuestStoreClient(
            wedding_id=wedding_id,
            read_model=HttpGuestReadModel(http_client),
            write_model=HttpGuestWriteModel(http_client),
            cache=QueryCache(),
            notifier=notifier or LoggingNotifier(),
            translator=translator,
            clock=clock,
        )
        yield GuestListPanel(store, translator)

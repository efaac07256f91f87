"""Guest store client.

Reads a wedding's guest list through a cached query and sends mutations
through the write model. Every successful mutation invalidates the cached
list and emits a notification. Failed mutations are returned as a
``MutationResult`` carrying the error instead of being raised.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from guest_list.guests.cache import QueryCache, QueryKey
from guest_list.guests.dtos import (
    GuestApiError,
    GuestCreate,
    GuestDTO,
    GuestUpdate,
    MutationResult,
    RSVPStatus,
)
from guest_list.guests.repository.read_models import GuestReadModel
from guest_list.guests.repository.write_models import GuestWriteModel
from guest_list.guests.urls import WEDDING_GUESTS_QUERY
from guest_list.i18n.translator import Translator
from guest_list.notifications.notifier import Notifier, ToastVariant

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


def wedding_guests_key(wedding_id: int) -> QueryKey:
    return (WEDDING_GUESTS_QUERY, wedding_id)


class GuestStoreClient:
    def __init__(
        self,
        wedding_id: int,
        read_model: GuestReadModel,
        write_model: GuestWriteModel,
        cache: QueryCache,
        notifier: Notifier,
        translator: Translator,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.wedding_id = wedding_id
        self._read_model = read_model
        self._write_model = write_model
        self._cache = cache
        self._notifier = notifier
        self._t = translator
        self._clock = clock

    @property
    def enabled(self) -> bool:
        return bool(self.wedding_id)

    @property
    def query_key(self) -> QueryKey:
        return wedding_guests_key(self.wedding_id)

    async def list_guests(self) -> list[GuestDTO]:
        """Return the wedding's guests, refetching when the cached list is stale.

        Raises GuestApiError when the list cannot be fetched.
        """
        if not self.enabled:
            return []
        return await self._cache.fetch(
            self.query_key, lambda: self._read_model.list_guests(self.wedding_id)
        )

    def invalidate(self) -> None:
        self._cache.invalidate(self.query_key)

    def now(self) -> datetime:
        return self._clock()

    async def create_guest(self, guest: GuestCreate) -> MutationResult:
        try:
            created = await self._write_model.create_guest(guest)
        except GuestApiError as e:
            return self._failed("create", e, "guestList.saveFailed")

        logger.info(f"Created guest {created.id} for wedding {self.wedding_id}")
        self._succeeded("guestList.guestAdded", "guestList.guestAddedSuccess")
        return MutationResult.success(created)

    async def update_guest(self, guest_id: int, changes: GuestUpdate) -> MutationResult:
        try:
            updated = await self._write_model.update_guest(guest_id, changes)
        except GuestApiError as e:
            return self._failed("update", e, "guestList.saveFailed")

        logger.info(f"Updated guest {guest_id} for wedding {self.wedding_id}")
        self._succeeded("guestList.guestUpdated", "guestList.guestUpdatedSuccess")
        return MutationResult.success(updated)

    async def update_status(self, guest_id: int, status: RSVPStatus) -> MutationResult:
        """Set a guest's RSVP status and stamp the response time."""
        changes = GuestUpdate(rsvp_status=status, responded_at=self.now())
        return await self.update_guest(guest_id, changes)

    async def delete_guest(self, guest_id: int) -> MutationResult:
        try:
            await self._write_model.delete_guest(guest_id)
        except GuestApiError as e:
            return self._failed("delete", e, "guestList.deleteFailed")

        logger.info(f"Deleted guest {guest_id} for wedding {self.wedding_id}")
        self._succeeded("guestList.guestDeleted", "guestList.guestDeletedSuccess")
        return MutationResult.success()

    def _succeeded(self, title_key: str, description_key: str) -> None:
        self.invalidate()
        self._notifier.notify(self._t(title_key), self._t(description_key))

    def _failed(self, action: str, error: GuestApiError, title_key: str) -> MutationResult:
        logger.warning(f"Failed to {action} guest for wedding {self.wedding_id}: {error}")
        self._notifier.notify(self._t(title_key), error.message, ToastVariant.DESTRUCTIVE)
        return MutationResult.failure(error)

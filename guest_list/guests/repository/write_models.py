"""Guest write models - create, update and delete through the guest API."""

from abc import ABC, abstractmethod

import httpx

from guest_list.guests.dtos import GuestCreate, GuestDTO, GuestUpdate
from guest_list.guests.repository.errors import api_error_from_httpx
from guest_list.guests.urls import GUEST_URL, GUESTS_URL


class GuestWriteModel(ABC):
    @abstractmethod
    async def create_guest(self, guest: GuestCreate) -> GuestDTO:
        """Create a guest. Returns the stored guest."""
        raise NotImplementedError

    @abstractmethod
    async def update_guest(self, guest_id: int, changes: GuestUpdate) -> GuestDTO:
        """Apply a partial update to a guest. Returns the updated guest."""
        raise NotImplementedError

    @abstractmethod
    async def delete_guest(self, guest_id: int) -> None:
        raise NotImplementedError


class HttpGuestWriteModel(GuestWriteModel):
    """Write operations against the guest API. Raises GuestApiError on failure."""

    def __init__(self, http_client: httpx.AsyncClient):
        self._http_client = http_client

    async def _send(self, method: str, url: str, payload: dict | None = None) -> httpx.Response:
        try:
            response = await self._http_client.request(method, url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise api_error_from_httpx(e) from e
        return response

    async def create_guest(self, guest: GuestCreate) -> GuestDTO:
        response = await self._send("POST", GUESTS_URL, guest.to_payload())
        return GuestDTO.model_validate(response.json())

    async def update_guest(self, guest_id: int, changes: GuestUpdate) -> GuestDTO:
        response = await self._send(
            "PATCH", GUEST_URL.format(guest_id=guest_id), changes.to_payload()
        )
        return GuestDTO.model_validate(response.json())

    async def delete_guest(self, guest_id: int) -> None:
        await self._send("DELETE", GUEST_URL.format(guest_id=guest_id))

import abc

import httpx

from guest_list.guests.dtos import GuestDTO
from guest_list.guests.repository.errors import api_error_from_httpx
from guest_list.guests.urls import WEDDING_GUESTS_URL


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_guests(self, wedding_id: int) -> list[GuestDTO]:
        """
        Get all guests of a wedding.
        Raises GuestApiError when the guest API cannot be read.
        """
        raise NotImplementedError


class HttpGuestReadModel(GuestReadModel):
    """Guest API implementation of the guest read model."""

    def __init__(self, http_client: httpx.AsyncClient):
        self._http_client = http_client

    async def list_guests(self, wedding_id: int) -> list[GuestDTO]:
        try:
            response = await self._http_client.get(
                WEDDING_GUESTS_URL.format(wedding_id=wedding_id)
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise api_error_from_httpx(e) from e

        return [GuestDTO.model_validate(item) for item in response.json()]

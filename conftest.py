import contextlib
from datetime import UTC, datetime

import httpx
import pytest
from fastapi import Body, FastAPI, HTTPException, Response

from guest_list.config.settings import Settings
from guest_list.guests.cache import QueryCache
from guest_list.guests.dtos import ErrorKind, GuestApiError, GuestCreate, GuestDTO, GuestUpdate
from guest_list.guests.panel import open_panel
from guest_list.guests.repository.read_models import GuestReadModel
from guest_list.guests.repository.write_models import GuestWriteModel
from guest_list.guests.store import GuestStoreClient
from guest_list.i18n.translator import Translator
from guest_list.notifications.notifier import RecordingNotifier

FIXED_NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)


class InMemoryGuestApi:
    """In-memory guest API. Records every request body it receives."""

    def __init__(self):
        self.guests: dict[int, GuestDTO] = {}
        self.requests: list[tuple[str, str, dict | None]] = []
        self.fail_with: int | None = None
        self._next_id = 1

    def add(self, **values) -> GuestDTO:
        guest = GuestDTO(id=self._next_id, created_at=FIXED_NOW, **values)
        self.guests[guest.id] = guest
        self._next_id += 1
        return guest

    def build_app(self) -> FastAPI:
        app = FastAPI()

        def check_failure():
            if self.fail_with:
                raise HTTPException(status_code=self.fail_with, detail="Simulated failure")

        def get_guest(guest_id: int) -> GuestDTO:
            if guest_id not in self.guests:
                raise HTTPException(status_code=404, detail="Guest not found")
            return self.guests[guest_id]

        @app.get("/api/guests/wedding/{wedding_id}")
        async def list_guests(wedding_id: int):
            self.requests.append(("GET", f"/api/guests/wedding/{wedding_id}", None))
            check_failure()
            return [
                guest.model_dump(mode="json", by_alias=True)
                for guest in self.guests.values()
                if guest.wedding_id == wedding_id
            ]

        @app.post("/api/guests", status_code=201)
        async def create_guest(payload: dict = Body(...)):
            self.requests.append(("POST", "/api/guests", payload))
            check_failure()
            data = GuestCreate.model_validate(payload)
            return self.add(**data.model_dump()).model_dump(mode="json", by_alias=True)

        @app.patch("/api/guests/{guest_id}")
        async def update_guest(guest_id: int, payload: dict = Body(...)):
            self.requests.append(("PATCH", f"/api/guests/{guest_id}", payload))
            check_failure()
            guest = get_guest(guest_id)
            changes = GuestUpdate.model_validate(payload)
            updated = guest.model_copy(update=changes.model_dump(exclude_unset=True))
            self.guests[guest_id] = updated
            return updated.model_dump(mode="json", by_alias=True)

        @app.delete("/api/guests/{guest_id}", status_code=204)
        async def delete_guest(guest_id: int):
            self.requests.append(("DELETE", f"/api/guests/{guest_id}", None))
            check_failure()
            get_guest(guest_id)
            del self.guests[guest_id]
            return Response(status_code=204)

        return app


class InMemoryGuestReadModel(GuestReadModel):
    def __init__(self, guests: list[GuestDTO]):
        self.guests = guests
        self.calls = 0

    async def list_guests(self, wedding_id: int) -> list[GuestDTO]:
        self.calls += 1
        return [guest for guest in self.guests if guest.wedding_id == wedding_id]


class InMemoryGuestWriteModel(GuestWriteModel):
    def __init__(self, error: Exception | None = None):
        self.created: list[GuestCreate] = []
        self.updates: list[tuple[int, GuestUpdate]] = []
        self.deleted: list[int] = []
        self.error = error

    async def create_guest(self, guest: GuestCreate) -> GuestDTO:
        if self.error:
            raise self.error
        self.created.append(guest)
        return GuestDTO(id=len(self.created), **guest.model_dump())

    async def update_guest(self, guest_id: int, changes: GuestUpdate) -> GuestDTO:
        if self.error:
            raise self.error
        self.updates.append((guest_id, changes))
        return GuestDTO(id=guest_id, wedding_id=1, name="Updated")

    async def delete_guest(self, guest_id: int) -> None:
        if self.error:
            raise self.error
        self.deleted.append(guest_id)


@pytest.fixture
def guest_api() -> InMemoryGuestApi:
    return InMemoryGuestApi()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(api_base_url="http://test", language="en", request_timeout=5.0)


@pytest.fixture
def panel_factory(guest_api, notifier, test_settings):
    """Open a panel whose HTTP client talks to the in-memory guest API."""

    @contextlib.asynccontextmanager
    async def _factory(wedding_id: int = 1):
        transport = httpx.ASGITransport(app=guest_api.build_app())
        async with open_panel(
            wedding_id,
            config=test_settings,
            notifier=notifier,
            clock=lambda: FIXED_NOW,
            transport=transport,
        ) as panel:
            yield panel

    return _factory


@pytest.fixture
def store_factory(notifier):
    """Build a store client over in-memory read and write models."""

    def _factory(
        guests: list[GuestDTO] | None = None,
        wedding_id: int = 1,
        write_model: GuestWriteModel | None = None,
        cache: QueryCache | None = None,
    ) -> GuestStoreClient:
        return GuestStoreClient(
            wedding_id=wedding_id,
            read_model=InMemoryGuestReadModel(guests or []),
            write_model=write_model or InMemoryGuestWriteModel(),
            cache=cache or QueryCache(),
            notifier=notifier,
            translator=Translator(),
            clock=lambda: FIXED_NOW,
        )

    return _factory


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def write_model() -> InMemoryGuestWriteModel:
    return InMemoryGuestWriteModel()


@pytest.fixture
def failing_write_model() -> InMemoryGuestWriteModel:
    return InMemoryGuestWriteModel(
        error=GuestApiError(ErrorKind.SERVER, "HTTP 500: boom", status_code=500)
    )


@pytest.fixture
def make_guest():
    """Build GuestDTOs with sensible defaults and increasing ids."""
    counter = iter(range(1, 10_000))

    def _make(**values) -> GuestDTO:
        values.setdefault("id", next(counter))
        values.setdefault("wedding_id", 1)
        values.setdefault("name", f"Guest {values['id']}")
        return GuestDTO(**values)

    return _make

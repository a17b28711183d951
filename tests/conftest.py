"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from travel_journal.config import Settings
from travel_journal.containers import AppContainer
from travel_journal.domain.models import (
    ItineraryItem,
    JournalEntry,
    PlannedTrip,
    Trip,
)
from travel_journal.services.accounts import AccountService
from travel_journal.services.advisory import AdvisoryService, TextGenerationClient
from travel_journal.services.insights import InsightsService
from travel_journal.services.latency import SimulatedLatency
from travel_journal.services.state import AppStateController
from travel_journal.services.store import InMemoryStore, StoreKeys
from travel_journal.services.trips import TripRepository

NO_DELAY = SimulatedLatency(scale=0)


class RecordingStore(InMemoryStore):
    """In-memory store that records every write."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[tuple[str, bytes]] = []

    def set(self, key: str, value: bytes) -> None:
        self.writes.append((key, value))
        super().set(key, value)

    def writes_to(self, key: str) -> list[bytes]:
        return [value for written_key, value in self.writes if written_key == key]


@dataclass
class FakeTextClient(TextGenerationClient):
    """Fake text client returning a fixed reply and recording prompts."""

    reply: str = "A lovely trip through the mountains."
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        store: bool,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "store": store,
                "prompt": prompt,
                "image_data_url": image_data_url,
            }
        )
        return self.reply


@dataclass
class FailingTextClient(TextGenerationClient):
    """Fake text client that always raises."""

    calls: int = 0

    async def generate(
        self,
        *,
        model: str,
        store: bool,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        self.calls += 1
        raise RuntimeError("model unavailable")


def make_trip(trip_id: str = "tripA", title: str = "Weekend in Lisbon") -> Trip:
    return Trip(
        id=trip_id,
        title=title,
        start_date=date(2024, 5, 1),
        end_date=date(2024, 5, 4),
        entries=[
            JournalEntry(
                id="a1",
                date=date(2024, 5, 2),
                title="Tram 28",
                content="Rode the yellow tram up to Alfama.",
                location="Lisbon, Portugal",
            )
        ],
    )


def make_tokyo_plan() -> PlannedTrip:
    return PlannedTrip(
        id="plan1",
        title="Spring in Japan",
        destination="Tokyo, Japan",
        start_date=date(2025, 6, 10),
        end_date=date(2025, 6, 20),
        itinerary=[
            ItineraryItem(id="i1", date=date(2025, 6, 11), activity="Visit temple")
        ],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key=None,
        store_backend="memory",
        store_key_prefix="",
        simulated_latency_scale=0,
    )


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def keys() -> StoreKeys:
    return StoreKeys()


@pytest.fixture
def trip_repository(store: RecordingStore, keys: StoreKeys) -> TripRepository:
    return TripRepository(store=store, keys=keys, latency=NO_DELAY)


@pytest.fixture
def account_service(
    store: RecordingStore, keys: StoreKeys, trip_repository: TripRepository
) -> AccountService:
    return AccountService(
        store=store, trip_repository=trip_repository, keys=keys, latency=NO_DELAY
    )


@pytest.fixture
def text_client() -> FakeTextClient:
    return FakeTextClient()


@pytest.fixture
def advisory_service(text_client: FakeTextClient) -> AdvisoryService:
    return AdvisoryService(client=text_client, model="gpt-5-mini")


@pytest.fixture
def controller(
    account_service: AccountService,
    trip_repository: TripRepository,
    advisory_service: AdvisoryService,
) -> AppStateController:
    return AppStateController(
        accounts=account_service,
        repository=trip_repository,
        advisory=advisory_service,
    )


@pytest.fixture
def container(
    settings: Settings,
    store: RecordingStore,
    account_service: AccountService,
    trip_repository: TripRepository,
    advisory_service: AdvisoryService,
    controller: AppStateController,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        store=store,
        account_service=account_service,
        trip_repository=trip_repository,
        advisory_service=advisory_service,
        insights_service=InsightsService(),
        state=controller,
        close_resources=close_resources,
    )

"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from travel_journal.adapters.file_store import JsonFileStore
from travel_journal.adapters.openai_text_client import OpenAITextClient
from travel_journal.adapters.supabase_store import SupabaseKeyValueStore
from travel_journal.config import Settings, parse_store_backend
from travel_journal.services.accounts import AccountService
from travel_journal.services.advisory import AdvisoryService
from travel_journal.services.insights import InsightsService
from travel_journal.services.latency import SimulatedLatency
from travel_journal.services.state import AppStateController
from travel_journal.services.store import InMemoryStore, KeyValueStore, StoreKeys
from travel_journal.services.trips import TripRepository

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    account_service: AccountService
    trip_repository: TripRepository
    advisory_service: AdvisoryService
    insights_service: InsightsService
    state: AppStateController
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Create the configured key-value store."""
    backend = parse_store_backend(settings.store_backend)
    if backend == "memory":
        return InMemoryStore()
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase store requires SUPABASE_URL and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client)
    return JsonFileStore.create(settings.store_path)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = build_store(resolved_settings)
    keys = StoreKeys(prefix=resolved_settings.store_key_prefix)
    latency = SimulatedLatency(scale=resolved_settings.simulated_latency_scale)
    trip_repository = TripRepository(store=store, keys=keys, latency=latency)
    account_service = AccountService(
        store=store,
        trip_repository=trip_repository,
        keys=keys,
        latency=latency,
    )
    text_client = (
        OpenAITextClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_api_key
        else None
    )
    if text_client is None:
        logger.warning("OpenAI API key not found. AI features will be disabled.")
    advisory_service = AdvisoryService(
        client=text_client,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
    )
    state = AppStateController(
        accounts=account_service,
        repository=trip_repository,
        advisory=advisory_service,
    )

    async def close_resources() -> None:
        if text_client is not None:
            await text_client.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        account_service=account_service,
        trip_repository=trip_repository,
        advisory_service=advisory_service,
        insights_service=InsightsService(),
        state=state,
        close_resources=close_resources,
    )

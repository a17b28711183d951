"""Tests for container wiring and configuration."""

import asyncio

import pytest

from travel_journal.adapters.file_store import JsonFileStore
from travel_journal.adapters.openai_text_client import OpenAITextClient
from travel_journal.config import Settings, parse_store_backend
from travel_journal.containers import build_container, build_store
from travel_journal.services.store import InMemoryStore


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.store, InMemoryStore)
    assert container.state.accounts is container.account_service
    assert container.state.repository is container.trip_repository
    assert not container.advisory_service.enabled
    assert container.trip_repository.latency.scale == 0
    asyncio.run(container.close_resources())


def test_build_container_with_openai_key(settings) -> None:
    container = build_container(
        settings.model_copy(update={"openai_api_key": "sk-test"})
    )

    assert isinstance(container.advisory_service.client, OpenAITextClient)
    asyncio.run(container.close_resources())


def test_build_store_file_backend(tmp_path) -> None:
    store = build_store(
        Settings(store_backend="file", store_path=str(tmp_path / "journal"))
    )

    assert isinstance(store, JsonFileStore)
    assert (tmp_path / "journal").is_dir()


def test_build_store_supabase_requires_credentials() -> None:
    with pytest.raises(ValueError, match="Supabase"):
        build_store(Settings(store_backend="supabase", supabase_url=None))


def test_container_applies_key_prefix(settings) -> None:
    container = build_container(
        settings.model_copy(update={"store_key_prefix": "my-travel-tales-"})
    )

    assert container.account_service.keys.users == "my-travel-tales-users"
    assert container.trip_repository.keys.trips("1") == "my-travel-tales-trips-1"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("file", "file"), (" JSON ", "file"), ("", "file"), ("Memory", "memory")],
)
def test_parse_store_backend(raw: str, expected: str) -> None:
    assert parse_store_backend(raw) == expected


def test_parse_store_backend_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="redis"):
        parse_store_backend("redis")

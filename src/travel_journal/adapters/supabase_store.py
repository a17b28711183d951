"""Supabase-backed key-value store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from travel_journal.services.store import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Supabase implementation storing blobs in a two-column table.

    Expects ``kv_store(key text primary key, value text, updated_at
    timestamptz)``. Values are UTF-8 JSON documents.
    """

    client: Client
    table_name: str = "kv_store"

    def get(self, key: str) -> bytes | None:
        """Return the stored value for a key, if present."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        if value is None:
            return None
        return str(value).encode("utf-8")

    def set(self, key: str, value: bytes) -> None:
        """Insert or replace the row for a key."""
        self.client.table(self.table_name).upsert(
            {
                "key": key,
                "value": value.decode("utf-8"),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()

    def remove(self, key: str) -> None:
        """Delete the row for a key."""
        self.client.table(self.table_name).delete().eq("key", key).execute()

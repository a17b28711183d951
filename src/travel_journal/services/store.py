"""Key-value store abstractions."""

from dataclasses import dataclass, field
from typing import Protocol


class KeyValueStore(Protocol):
    """Persistent mapping from string keys to serialized blobs."""

    def get(self, key: str) -> bytes | None:
        """Return the stored value, or None when the key is absent."""

    def set(self, key: str, value: bytes) -> None:
        """Replace the value stored under a key."""

    def remove(self, key: str) -> None:
        """Delete a key if present."""


@dataclass
class InMemoryStore(KeyValueStore):
    """Process-local store used for tests and throwaway runs."""

    _values: dict[str, bytes] = field(default_factory=dict)

    def get(self, key: str) -> bytes | None:
        """Return the stored value if present."""
        return self._values.get(key)

    def set(self, key: str, value: bytes) -> None:
        """Store a value."""
        self._values[key] = bytes(value)

    def remove(self, key: str) -> None:
        """Delete a value if present."""
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        """Return stored keys in insertion order."""
        return list(self._values)


@dataclass(frozen=True)
class StoreKeys:
    """Key layout for the journal store."""

    prefix: str = ""

    @property
    def users(self) -> str:
        return f"{self.prefix}users"

    @property
    def current_user(self) -> str:
        return f"{self.prefix}currentUser"

    def trips(self, user_id: str) -> str:
        return f"{self.prefix}trips-{user_id}"

    def plans(self, user_id: str) -> str:
        return f"{self.prefix}plans-{user_id}"

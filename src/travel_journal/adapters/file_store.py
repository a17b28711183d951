"""File-backed key-value store."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from travel_journal.services.store import KeyValueStore


@dataclass
class JsonFileStore(KeyValueStore):
    """Store each key as one file inside a directory.

    Writes go through a temporary file and an atomic rename, so a crash
    mid-write leaves either the old or the new value.
    """

    root: Path

    @classmethod
    def create(cls, path: str) -> "JsonFileStore":
        """Create a store rooted at a directory, creating it if needed."""
        root = Path(path)
        root.mkdir(parents=True, exist_ok=True)
        return cls(root=root)

    def get(self, key: str) -> bytes | None:
        """Return the file contents for a key, if present."""
        try:
            return self._path(key).read_bytes()
        except FileNotFoundError:
            return None

    def set(self, key: str, value: bytes) -> None:
        """Atomically replace the file for a key."""
        target = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(value)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove(self, key: str) -> None:
        """Delete the file for a key if present."""
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        return self.root / f"{quote(key, safe='-_.')}.json"

"""Credential Store — persisted key-value lookup for the user-supplied API key.

Invariants:
    - Values are strings keyed by strings; one JSON object per file
    - get() never raises: unreadable or corrupt files read as "no value"
    - set()/remove() replace the whole file atomically; the file is created 0600
    - remove() on a missing key or missing file is a no-op

Design Decisions:
    - JSON file over a keyring/DB: the only persisted state is one API key
      (ADR: a database for a single string is overhead without benefit)
    - Unreadable store degrades to CredentialMissing upstream, never to a crash
"""

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

API_KEY_ENTRY = "gemini_api_key"


class CredentialStore:
    """JSON-file backed get/set/remove over string keys."""

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read credential store {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        """Atomic replace; the temp file is created 0600 so the key is never exposed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

"""Key-value storage backends for persisted form data."""

import json
import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from language_manager.config import get_settings

logger = logging.getLogger(__name__)


class PersistedDataError(Exception):
    """Raised when persisted data cannot be read back."""

    pass


class KeyValueStorage(ABC):
    """Synchronous string key-value store. No transactions, no expiry."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never set."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage, lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class FileStorage(KeyValueStorage):
    """Storage kept in a single JSON object file - rewritten on every set."""

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else get_settings().storage_path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.error(f"Storage file {self.path} is not valid JSON: {e}")
            raise PersistedDataError(f"Corrupt storage file: {self.path}") from e
        if not isinstance(data, dict):
            logger.error(f"Storage file {self.path} does not hold a JSON object")
            raise PersistedDataError(f"Corrupt storage file: {self.path}")
        bad_keys = [key for key, value in data.items() if not isinstance(value, str)]
        if bad_keys:
            logger.error(f"Storage file {self.path} holds non-string values for {bad_keys}")
            raise PersistedDataError(f"Corrupt storage file: {self.path}")
        return data

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        # Readers only ever see a complete file
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.path.parent, suffix=".tmp", delete=False
        ) as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            tmp_path = Path(f.name)
        try:
            tmp_path.replace(self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote key '{key}' to {self.path}")

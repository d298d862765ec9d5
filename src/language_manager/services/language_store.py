"""Authoritative language list with id allocation and persistence."""

import logging

from pydantic import TypeAdapter, ValidationError

from language_manager.config import Settings, get_settings
from language_manager.models import DEFAULT_LANGUAGES, LanguageRecord, next_id_for
from language_manager.services.storage import KeyValueStorage, PersistedDataError

logger = logging.getLogger(__name__)

STORAGE_KEY = "programmingLanguages"

_records_adapter = TypeAdapter(list[LanguageRecord])


class LanguageStore:
    """Owns the language list and writes it back to storage after each change.

    The whole list is serialized under a single key as a JSON array of
    {"id", "name", "extension"} objects, in insertion order.
    """

    def __init__(self, storage: KeyValueStorage, settings: Settings | None = None):
        self.storage = storage
        self.settings = settings or get_settings()
        self._records: list[LanguageRecord] = []
        self._next_id = 1
        self._loaded = False

    @property
    def records(self) -> list[LanguageRecord]:
        return list(self._records)

    @property
    def next_id(self) -> int:
        return self._next_id

    def load(self) -> list[LanguageRecord]:
        """Read the persisted list, seeding defaults when nothing is stored.

        Raises PersistedDataError if the stored value cannot be parsed.
        """
        raw = self.storage.get(STORAGE_KEY)
        # An empty string counts as nothing stored
        if not raw:
            logger.info(f"No stored languages, seeding {len(DEFAULT_LANGUAGES)} defaults")
            self._records = list(DEFAULT_LANGUAGES)
            self._next_id = next_id_for(self._records)
            self._loaded = True
            self._persist()
            return self.records

        try:
            records = _records_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Stored languages are malformed: {e}")
            raise PersistedDataError(f"Malformed data under '{STORAGE_KEY}'") from e

        ids = [record.id for record in records]
        if len(ids) != len(set(ids)):
            logger.error(f"Stored languages contain duplicate ids: {ids}")
            raise PersistedDataError(f"Duplicate ids under '{STORAGE_KEY}'")

        self._records = records
        self._next_id = next_id_for(records)
        self._loaded = True
        logger.debug(f"Loaded {len(records)} languages, next id {self._next_id}")
        return self.records

    def add(self, name: str, extension: str) -> LanguageRecord:
        """Append a new record under the next id. Inputs are stored as given."""
        self._ensure_loaded()
        record = LanguageRecord(id=self._next_id, name=name, extension=extension)
        self._records.append(record)
        self._next_id += 1
        logger.info(f"Added language {record.id}: {record.name} (.{record.extension})")
        self._persist()
        return record

    def update(self, id: int, name: str, extension: str) -> bool:
        """Replace name and extension of record `id`, keeping its position."""
        self._ensure_loaded()
        for i, record in enumerate(self._records):
            if record.id == id:
                self._records[i] = record.model_copy(
                    update={"name": name, "extension": extension}
                )
                logger.info(f"Updated language {id}: {name} (.{extension})")
                self._persist()
                return True
        logger.debug(f"Update skipped, no language with id {id}")
        return False

    def remove(self, id: int) -> bool:
        """Drop record `id`. The allocator is not rolled back."""
        self._ensure_loaded()
        remaining = [record for record in self._records if record.id != id]
        if len(remaining) == len(self._records):
            logger.debug(f"Remove skipped, no language with id {id}")
            return False

        self._records = remaining
        logger.info(f"Removed language {id}")
        if self._records or self.settings.persist_empty_list:
            self._persist()
        else:
            logger.debug("List is empty, leaving previous stored list in place")
        return True

    def find_by_id(self, id: int) -> LanguageRecord | None:
        for record in self._records:
            if record.id == id:
                return record
        return None

    def _ensure_loaded(self) -> None:
        # Mutating before load() would overwrite the stored list
        if not self._loaded:
            logger.debug("Store mutated before load, loading first")
            self.load()

    def _persist(self) -> None:
        self.storage.set(STORAGE_KEY, _records_adapter.dump_json(self._records).decode())

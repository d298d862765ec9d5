from .storage import KeyValueStorage, InMemoryStorage, FileStorage, PersistedDataError
from .language_store import LanguageStore, STORAGE_KEY

__all__ = [
    "KeyValueStorage",
    "InMemoryStorage",
    "FileStorage",
    "PersistedDataError",
    "LanguageStore",
    "STORAGE_KEY",
]

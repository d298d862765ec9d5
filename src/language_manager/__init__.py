"""Programming language list editor: persisted store plus form controller."""

from .controller import FormController, create_controller
from .models import DEFAULT_LANGUAGES, EditSession, LanguageRecord, ManagerSnapshot
from .services import FileStorage, InMemoryStorage, LanguageStore, PersistedDataError

__all__ = [
    "FormController",
    "create_controller",
    "DEFAULT_LANGUAGES",
    "EditSession",
    "LanguageRecord",
    "ManagerSnapshot",
    "FileStorage",
    "InMemoryStorage",
    "LanguageStore",
    "PersistedDataError",
]

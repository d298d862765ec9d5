from .language import LanguageRecord, DEFAULT_LANGUAGES, next_id_for
from .session import EditSession, ManagerSnapshot

__all__ = [
    "LanguageRecord",
    "DEFAULT_LANGUAGES",
    "next_id_for",
    "EditSession",
    "ManagerSnapshot",
]

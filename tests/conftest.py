import pytest

from language_manager.config import Settings
from language_manager.controller import FormController
from language_manager.services.language_store import LanguageStore
from language_manager.services.storage import InMemoryStorage


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def store(storage, settings):
    """Store loaded from empty storage, i.e. seeded with the defaults."""
    s = LanguageStore(storage, settings=settings)
    s.load()
    return s


@pytest.fixture
def controller(store):
    return FormController(store)

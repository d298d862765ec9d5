"""Form logic - validates input and turns user intents into store calls."""

from dataclasses import replace

from language_manager.config import logger
from language_manager.models import EditSession, ManagerSnapshot
from language_manager.services.language_store import LanguageStore
from language_manager.services.storage import FileStorage, KeyValueStorage

NAME_REQUIRED = "Language name is required"
EXTENSION_REQUIRED = "Extension is required"


class FormValidationError(Exception):
    """Raised when form input is rejected. Never leaves the controller."""

    pass


class FormController:
    """Add/edit form over a LanguageStore.

    Add mode while `session.editing_id` is None, edit mode otherwise. Edit
    mode is entered with begin_edit() and left by a successful submit() or
    by clear().
    """

    def __init__(self, store: LanguageStore, session: EditSession | None = None):
        self.store = store
        self.session = session or EditSession()

    def set_name(self, value: str) -> None:
        self.session.name_input = value

    def set_extension(self, value: str) -> None:
        self.session.extension_input = value

    def submit(self) -> bool:
        """Save the form: update the edited record, or add a new one.

        Returns False and sets `session.error_message` if a field is empty.
        """
        try:
            name, extension = self._validated_inputs()
        except FormValidationError as e:
            self.session.error_message = str(e)
            logger.debug(f"Submit rejected: {e}")
            return False

        if self.session.editing_id is not None:
            self.store.update(self.session.editing_id, name, extension)
            self.session.editing_id = None
        else:
            self.store.add(name, extension)

        self.session.name_input = ""
        self.session.extension_input = ""
        self.session.error_message = None
        return True

    def begin_edit(self, id: int) -> bool:
        """Load record `id` into the form. Unknown ids are ignored."""
        record = self.store.find_by_id(id)
        if record is None:
            logger.debug(f"begin_edit ignored, no language with id {id}")
            return False

        self.session.name_input = record.name
        self.session.extension_input = record.extension
        self.session.editing_id = id
        self.session.error_message = None
        return True

    def delete(self, id: int) -> bool:
        removed = self.store.remove(id)
        if (
            removed
            and self.session.editing_id == id
            and self.store.settings.clear_edit_on_delete
        ):
            logger.debug(f"Language {id} deleted while being edited, clearing form")
            self.clear()
        return removed

    def clear(self) -> None:
        self.session.name_input = ""
        self.session.extension_input = ""
        self.session.error_message = None
        self.session.editing_id = None

    def snapshot(self) -> ManagerSnapshot:
        return ManagerSnapshot(
            records=tuple(self.store.records),
            session=replace(self.session),
            next_id=self.store.next_id,
        )

    def _validated_inputs(self) -> tuple[str, str]:
        name = self.session.name_input.strip()
        if not name:
            raise FormValidationError(NAME_REQUIRED)
        extension = self.session.extension_input.strip()
        if not extension:
            raise FormValidationError(EXTENSION_REQUIRED)
        return name, extension


def create_controller(storage: KeyValueStorage | None = None) -> FormController:
    """Build a controller over a loaded store (file storage by default)."""
    store = LanguageStore(storage if storage is not None else FileStorage())
    store.load()
    return FormController(store)

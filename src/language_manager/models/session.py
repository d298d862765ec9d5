"""Transient form state and the read-only view handed to renderers."""

from dataclasses import dataclass, field

from language_manager.models.language import LanguageRecord


@dataclass
class EditSession:
    """Current form contents. Not persisted."""

    name_input: str = ""
    extension_input: str = ""
    editing_id: int | None = None  # None = add mode
    error_message: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


@dataclass(frozen=True)
class ManagerSnapshot:
    """Everything a rendering layer needs to draw the table and the form."""

    records: tuple[LanguageRecord, ...] = ()
    session: EditSession = field(default_factory=EditSession)
    next_id: int = 1  # shown read-only as the "Number" field

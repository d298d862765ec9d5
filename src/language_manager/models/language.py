"""Language records managed by the form."""

from pydantic import BaseModel, ConfigDict, PositiveInt


class LanguageRecord(BaseModel):
    """A programming language entry: display name plus file extension."""

    model_config = ConfigDict(frozen=True)

    id: PositiveInt
    name: str  # "Python3"
    extension: str  # "py3", no leading dot


DEFAULT_LANGUAGES = [
    LanguageRecord(id=1, name="C", extension="c"),
    LanguageRecord(id=2, name="C++11", extension="cc"),
    LanguageRecord(id=3, name="Java", extension="java"),
    LanguageRecord(id=4, name="Python2", extension="py2"),
    LanguageRecord(id=5, name="Python3", extension="py3"),
]


def next_id_for(records: list[LanguageRecord]) -> int:
    """Id the next added record should get: max(id) + 1, or 1 when empty."""
    return max((record.id for record in records), default=0) + 1

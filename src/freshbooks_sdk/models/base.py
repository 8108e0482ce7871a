from enum import IntEnum
from typing import Any
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict

T = TypeVar("T", bound="FreshBooksModel")


class VisState(IntEnum):
    """FreshBooks visibility state shared by accounting entities."""

    ACTIVE = 0
    DELETED = 1
    ARCHIVED = 2


class FreshBooksModel(BaseModel):
    """
    Base for every decoded FreshBooks record.

    Records are frozen once decoded. Fields the SDK does not model are kept
    (``extra="allow"``) so nothing the service returned is lost.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @classmethod
    def from_dict(cls: type[T], src_dict: dict[str, Any]) -> T:
        return cls.model_validate(src_dict)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

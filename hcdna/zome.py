from typing import Literal

from pydantic import Field

from hcdna.schema import OpenModel


class ZomeConfig(OpenModel):
    error_handling: Literal["throw-errors", "ignore-errors"] = "throw-errors"


class EntryType(OpenModel):
    """A kind of entry a zome can commit"""

    name: str = ""
    description: str = ""
    sharing: Literal["public", "private", "encrypted"] = "public"


class Zome(OpenModel):
    """A named module of a DNA

    Only the declarative part of a zome is modelled, capabilities and code
    are carried along untouched as extra fields.
    """

    name: str = ""
    description: str = ""
    config: ZomeConfig = Field(default_factory=ZomeConfig)
    entry_types: list[EntryType] = []

    def get_entry_type(self, name: str) -> EntryType | None:
        for entry_type in self.entry_types:
            if entry_type.name == name:
                return entry_type
        return None

import logging
from typing import Any
from uuid import uuid4

from pydantic import Field, ValidationError, field_validator

from hcdna.schema import OpenModel, check_finite
from hcdna.version import CURRENT_SPEC_VERSION, resolve_spec_version
from hcdna.zome import Zome

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when a document can not be read as a DNA."""


def _new_uuid() -> str:
    return str(uuid4())


class Dna(OpenModel):
    """A DNA descriptor

    Fields not part of the schema are kept in `extra_fields` and written back
    after the known fields, so documents from newer tools survive a load/dump.
    `dna_spec_version` is fixed by the schema this package understands and
    can not be assigned. Keyword arguments to the constructor are read like a
    document: a given `dna_spec_version` goes through the same compatibility
    rules as in `from_json`.
    """

    dna_spec_version: str = Field(default=CURRENT_SPEC_VERSION, frozen=True)
    name: str = ""
    description: str = ""
    version: str = ""
    uuid: str = Field(default_factory=_new_uuid)
    properties: dict[str, Any] = {}
    zomes: list[Zome] = []

    @field_validator("dna_spec_version", mode="before")
    @classmethod
    def validate_dna_spec_version(cls, v: Any) -> str:
        if v is not None and not isinstance(v, str):
            raise ValueError("dna_spec_version should be a string")
        return resolve_spec_version(v)

    @field_validator("properties")
    @classmethod
    def validate_properties(cls, v: dict[str, Any]) -> dict[str, Any]:
        check_finite(v, "properties")
        return v

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Fields not part of the schema, in document order"""
        return self.model_extra

    def get_zome(self, name: str) -> Zome | None:
        for zome in self.zomes:
            if zome.name == name:
                return zome
        return None

    @classmethod
    def from_json(cls, data: str | bytes) -> "Dna":
        """Parse a JSON document into a Dna

        Missing fields take their defaults, unknown fields are preserved.

        :param data: The JSON text, its top-level value must be an object.
        :raises ParseError: when `data` is not a valid DNA document.
        """
        try:
            dna = cls.model_validate_json(data)
        except ValidationError as e:
            raise ParseError(f"Invalid DNA document: {e}") from e
        logger.debug("Loaded DNA %r (%s)", dna.name, dna.dna_spec_version)
        return dna

    def to_json(self, indent: int | None = None) -> str:
        """Return the Dna as a JSON document

        Known fields come first in schema order, followed by the extra fields
        in the order they were read.
        """
        return self.model_dump_json(indent=indent)

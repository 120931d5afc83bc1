"""DNA descriptor library for Python

This module provides a Python API to build DNA descriptors in memory and to
convert them to and from their JSON documents.
"""
from hcdna.dna import Dna, ParseError
from hcdna.version import CURRENT_SPEC_VERSION, SpecVersion
from hcdna.zome import EntryType, Zome, ZomeConfig

__all__ = [
    "CURRENT_SPEC_VERSION",
    "Dna",
    "EntryType",
    "ParseError",
    "SpecVersion",
    "Zome",
    "ZomeConfig",
    "create_default",
    "create_from_json",
    "get_name",
    "get_spec_version",
    "set_name",
    "to_json",
]


def create_default() -> Dna:
    """Return a new Dna at the current schema version"""
    return Dna()


def create_from_json(data: str | bytes) -> Dna:
    """Parse a DNA from its JSON document

    :param data: The JSON text.
    :raises ParseError: when `data` is not a JSON object or does not fit the schema.
    """
    return Dna.from_json(data)


def to_json(dna: Dna, indent: int | None = None) -> str:
    return dna.to_json(indent=indent)


def get_name(dna: Dna) -> str:
    return dna.name


def set_name(dna: Dna, value: str):
    dna.name = value


def get_spec_version(dna: Dna) -> str:
    return dna.dna_spec_version

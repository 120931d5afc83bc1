import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

CURRENT_SPEC_VERSION = "2.0"

VERSION_PATTERN = r"(?P<major>0|[1-9][0-9]*)\.(?P<minor>0|[1-9][0-9]*)"
VERSION_RE = re.compile(VERSION_PATTERN)


@dataclass(frozen=True, slots=True, order=True)
class SpecVersion:
    """A DNA schema version tag, '<major>.<minor>'

    Documents sharing the major version of the current schema are readable
    as-is, older majors are upgraded on load, newer majors are unknown.
    """

    major: int
    minor: int = 0

    def __str__(self):
        return f"{self.major}.{self.minor}"

    @classmethod
    def parse(cls, value: str) -> "SpecVersion":
        """Parse a version tag like '2.0' into a SpecVersion object"""
        match = VERSION_RE.fullmatch(value)
        if not match:
            raise ValueError(f"Invalid dna_spec_version: {value!r}")
        return cls(major=int(match["major"]), minor=int(match["minor"]))


CURRENT = SpecVersion.parse(CURRENT_SPEC_VERSION)


def resolve_spec_version(value: str | None) -> str:
    """Return the schema version a loaded document is held at

    - missing: the current version
    - same major as current: kept as given
    - older major: upgraded to the current version
    - newer major: not supported, raises ValueError
    """
    if value is None:
        return CURRENT_SPEC_VERSION
    version = SpecVersion.parse(value)
    if version.major == CURRENT.major:
        return value
    if version.major < CURRENT.major:
        logger.info(
            "Upgrading dna_spec_version %s to %s", value, CURRENT_SPEC_VERSION
        )
        return CURRENT_SPEC_VERSION
    raise ValueError(
        f"Unsupported dna_spec_version {value!r}, "
        f"newest supported is {CURRENT_SPEC_VERSION!r}"
    )

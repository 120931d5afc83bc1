"""Handle based DNA API for foreign callers

Mirrors the C binding surface: every `hc_dna_*` call takes and returns plain
values or a `DnaHandle`, never raises, and reports failure with a sentinel
(`None`, or `False` for setters). A handle owns its Dna exclusively until it
is passed to `hc_dna_free`, after which every call using it fails.
"""
import logging
from functools import wraps

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from hcdna.dna import Dna, ParseError

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when a call gets a missing, released or mistyped argument."""


class DnaHandle:
    """Owns one Dna until released."""

    def __init__(self, dna: Dna):
        self._dna = dna

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.released:
            self.release()

    def __repr__(self):
        state = "released" if self.released else repr(self._dna.name)
        return f"<{self.__class__.__name__} {state}>"

    @property
    def released(self) -> bool:
        return self._dna is None

    @property
    def dna(self) -> Dna:
        if self._dna is None:
            raise InvalidArgument("DnaHandle has already been released")
        return self._dna

    def release(self):
        """Drop the owned Dna, the handle is unusable afterwards"""
        if self._dna is None:
            raise InvalidArgument("DnaHandle has already been released")
        self._dna = None


def _sentinel_on_error(sentinel):
    """Turn library errors into `sentinel`, no exception crosses the boundary"""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (
                InvalidArgument,
                ParseError,
                ValidationError,
                PydanticSerializationError,
            ) as e:
                logger.debug("%s failed: %s", func.__name__, e)
                return sentinel

        return wrapper

    return decorator


def _owned(handle: DnaHandle) -> Dna:
    if not isinstance(handle, DnaHandle):
        raise InvalidArgument(f"Expected a DnaHandle, got {type(handle).__name__}")
    return handle.dna


def _text(value, argument: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgument(f"{argument} should be a str, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidArgument(f"{argument} is not valid UTF-8 text") from e
    return value


def hc_dna_create() -> DnaHandle:
    return DnaHandle(Dna())


@_sentinel_on_error(None)
def hc_dna_create_from_json(buf: str | bytes) -> DnaHandle | None:
    if not isinstance(buf, bytes):
        _text(buf, "buf")
    return DnaHandle(Dna.from_json(buf))


@_sentinel_on_error(None)
def hc_dna_to_json(handle: DnaHandle) -> str | None:
    return _owned(handle).to_json()


@_sentinel_on_error(None)
def hc_dna_get_name(handle: DnaHandle) -> str | None:
    return _owned(handle).name


@_sentinel_on_error(False)
def hc_dna_set_name(handle: DnaHandle, name: str) -> bool:
    dna = _owned(handle)
    dna.name = _text(name, "name")
    return True


@_sentinel_on_error(None)
def hc_dna_get_dna_spec_version(handle: DnaHandle) -> str | None:
    return _owned(handle).dna_spec_version


@_sentinel_on_error(None)
def hc_dna_free(handle: DnaHandle):
    if not isinstance(handle, DnaHandle):
        raise InvalidArgument(f"Expected a DnaHandle, got {type(handle).__name__}")
    handle.release()


@_sentinel_on_error(None)
def hc_dna_string_free(buf: str):
    # Strings are owned by the interpreter, only the argument is checked.
    _text(buf, "buf")

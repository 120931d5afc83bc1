import json

import pytest

from hcdna import Dna
from hcdna.binding import (
    DnaHandle,
    InvalidArgument,
    hc_dna_create,
    hc_dna_create_from_json,
    hc_dna_free,
    hc_dna_get_dna_spec_version,
    hc_dna_get_name,
    hc_dna_set_name,
    hc_dna_string_free,
    hc_dna_to_json,
)


def test_serialize_and_deserialize():
    dna = hc_dna_create()
    buf = hc_dna_to_json(dna)
    hc_dna_free(dna)

    dna2 = hc_dna_create_from_json(buf)
    hc_dna_string_free(buf)

    buf = hc_dna_get_dna_spec_version(dna2)
    assert buf == "2.0"

    hc_dna_string_free(buf)
    hc_dna_free(dna2)


def test_can_get_name():
    dna = hc_dna_create_from_json('{"name":"test"}')
    assert hc_dna_get_name(dna) == "test"
    hc_dna_free(dna)


def test_can_set_name():
    dna = hc_dna_create()
    assert hc_dna_set_name(dna, "test") is True
    assert hc_dna_get_name(dna) == "test"
    assert hc_dna_get_dna_spec_version(dna) == "2.0"
    hc_dna_free(dna)


def test_accepts_bytes():
    dna = hc_dna_create_from_json(b'{"name":"bytes"}')
    assert hc_dna_get_name(dna) == "bytes"


@pytest.mark.parametrize("buf", ["not json", "[]", None, 42])
def test_create_from_json_invalid(buf):
    assert hc_dna_create_from_json(buf) is None


def test_set_name_invalid_argument():
    dna = hc_dna_create_from_json('{"name":"keep"}')
    assert hc_dna_set_name(dna, None) is False
    assert hc_dna_set_name(None, "test") is False
    assert hc_dna_get_name(dna) == "keep"


@pytest.mark.parametrize(
    "call",
    [
        hc_dna_to_json,
        hc_dna_get_name,
        hc_dna_get_dna_spec_version,
    ],
)
def test_null_handle(call):
    assert call(None) is None
    assert call("not a handle") is None


def test_use_after_free():
    dna = hc_dna_create()
    hc_dna_free(dna)
    assert dna.released
    assert hc_dna_to_json(dna) is None
    assert hc_dna_get_name(dna) is None
    assert hc_dna_get_dna_spec_version(dna) is None
    assert hc_dna_set_name(dna, "test") is False
    with pytest.raises(InvalidArgument):
        dna.dna


def test_double_free():
    dna = hc_dna_create()
    assert hc_dna_free(dna) is None
    assert hc_dna_free(dna) is None
    assert hc_dna_free(None) is None


def test_release_raises_when_released():
    dna = DnaHandle(Dna())
    dna.release()
    with pytest.raises(InvalidArgument):
        dna.release()


def test_string_free_checks_argument():
    assert hc_dna_string_free("buf") is None
    assert hc_dna_string_free(None) is None


def test_context_manager():
    with hc_dna_create() as dna:
        hc_dna_set_name(dna, "scoped")
        assert json.loads(hc_dna_to_json(dna))["name"] == "scoped"
    assert dna.released
    assert hc_dna_get_name(dna) is None


def test_context_manager_after_free():
    with hc_dna_create() as dna:
        hc_dna_free(dna)
    assert dna.released


def test_handles_are_independent():
    first = hc_dna_create()
    second = hc_dna_create_from_json(hc_dna_to_json(first))
    hc_dna_set_name(first, "first")
    hc_dna_free(first)
    assert hc_dna_get_name(second) == ""
    assert repr(first) == "<DnaHandle released>"
    assert repr(second) == "<DnaHandle ''>"


def test_set_name_unencodable():
    dna = hc_dna_create_from_json('{"name":"keep"}')
    assert hc_dna_set_name(dna, "\ud800") is False
    assert hc_dna_get_name(dna) == "keep"
    assert json.loads(hc_dna_to_json(dna))["name"] == "keep"


def test_create_from_json_unencodable():
    assert hc_dna_create_from_json('{"name": "\ud800"}') is None


def test_to_json_unencodable():
    dna = hc_dna_create()
    dna.dna.properties = {"a": "\udfff"}
    assert hc_dna_to_json(dna) is None
    assert hc_dna_get_dna_spec_version(dna) == "2.0"

from pathlib import Path

import pytest

from hcdna import Dna

TEST_DATA = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    """Return the testdata dir for this module"""
    return TEST_DATA


@pytest.fixture
def full_dna(testdata) -> Dna:
    """A DNA with zomes, properties and extra fields"""
    return Dna.from_json((testdata / "full.json").read_text())

"""
Shared pytest fixtures for tests.
"""

from io import StringIO
from typing import Generator

import pytest

from keywalk.config import set_config
from keywalk.demo import build_map, build_record, build_sequence
from keywalk.ds import AssociativeMap, Record


@pytest.fixture
def record() -> Record:
    return build_record()


@pytest.fixture
def sequence() -> list[str]:
    return build_sequence()


@pytest.fixture
def countries() -> AssociativeMap[str, str]:
    return build_map()


@pytest.fixture
def stream() -> StringIO:
    return StringIO()


@pytest.fixture(autouse=True)
def reset_config() -> Generator[None, None, None]:
    yield
    set_config()

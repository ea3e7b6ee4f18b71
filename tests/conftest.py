"""
Test bootstrap:
- Make the shared ``helpers`` package importable from every test directory
- Provide the six shared codecs as a parametrized fixture
- Provide a seeded random source so generated inputs are reproducible
"""
import pathlib
import random
import sys

import pytest

TESTS_DIR = pathlib.Path(__file__).parent.resolve()

if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from radix_codecs import BaseType  # noqa: E402


@pytest.fixture(params=list(BaseType), ids=lambda base: base.name)
def base_type(request):
    """Each supported radix in turn."""
    return request.param


@pytest.fixture
def codec(base_type):
    """Shared codec instance for the current radix."""
    return base_type.codec


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(0x5EED)

from typing import Any

import pytest

from prefixdict import RadixDictionary


@pytest.fixture
def radix() -> RadixDictionary[Any]:
    """An empty case-sensitive dictionary."""
    return RadixDictionary()


@pytest.fixture
def radix_ignore_case() -> RadixDictionary[Any]:
    """An empty case-insensitive dictionary."""
    return RadixDictionary(case_sensitive=False)
